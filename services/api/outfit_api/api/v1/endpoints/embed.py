from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from outfit_api.api.deps import get_json_body, parse_body
from outfit_api.schemas.embed import EmbeddingOut, EmbedRequest, EmbedResponse, SimilarItemOut
from outfit_api.services.embeddings import ImageEmbedder, get_image_embedder
from outfit_api.services.latency import simulate_inference_latency
from outfit_core.embeddings import find_similar_items

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/embed", response_model=EmbedResponse, response_model_exclude_none=True)
async def embed_image(
    body: dict[str, Any] = Depends(get_json_body),
    embedder: ImageEmbedder = Depends(get_image_embedder),
) -> EmbedResponse:
    req = parse_body(EmbedRequest, body)
    if not req.image:
        raise HTTPException(status_code=400, detail="No image data provided")

    try:
        logger.info("embed_request image_chars=%d find_similar=%s", len(req.image), req.find_similar)
        await simulate_inference_latency()
        result = await asyncio.to_thread(embedder.embed, req.image)
        vector = result.value.vector

        similar: list[SimilarItemOut] | None = None
        if req.find_similar:
            similar = [SimilarItemOut.model_validate(asdict(i)) for i in find_similar_items(vector, req.threshold)]

        return EmbedResponse(
            data=EmbeddingOut(
                embedding=vector,
                dimensions=result.value.dimensions,
                source=result.source,
                is_mock=result.is_mock,
                similar_items=similar,
            )
        )
    except Exception:
        logger.exception("embed_failed")
        raise HTTPException(status_code=500, detail="Failed to generate embeddings")
