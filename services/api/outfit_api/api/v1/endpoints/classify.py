from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from outfit_api.api.deps import get_json_body, parse_body
from outfit_api.schemas.classify import ClassificationOut, ClassifyResponse, GarmentAttributesOut, ImageRequest
from outfit_api.services.latency import simulate_inference_latency
from outfit_api.services.vision import GarmentClassifier, get_garment_classifier

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/classify", response_model=ClassifyResponse)
async def classify_garment(
    body: dict[str, Any] = Depends(get_json_body),
    classifier: GarmentClassifier = Depends(get_garment_classifier),
) -> ClassifyResponse:
    req = parse_body(ImageRequest, body)
    if not req.image:
        raise HTTPException(status_code=400, detail="No image data provided")

    try:
        await simulate_inference_latency()
        # Vision client blocks on HTTP; keep it off the event loop.
        result = await asyncio.to_thread(classifier.classify, req.image)
        c = result.value
        logger.info("classify_done category=%s source=%s", c.category, result.source)
        return ClassifyResponse(
            data=ClassificationOut(
                category=c.category,
                attributes=GarmentAttributesOut(
                    color=c.color,
                    pattern=c.pattern,
                    material=c.material,
                    style=c.style,
                    season=c.season,
                ),
                confidence=c.confidence,
                source=result.source,
            )
        )
    except Exception:
        logger.exception("classify_failed")
        raise HTTPException(status_code=500, detail="Failed to process image")
