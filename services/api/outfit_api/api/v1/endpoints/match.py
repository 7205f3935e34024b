from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from outfit_api.api.deps import get_catalog, get_json_body, get_scorer, parse_body
from outfit_api.core.config import settings
from outfit_api.schemas.match import MatchData, MatchRequest, MatchResponse, ScoredWardrobeItemOut
from outfit_api.services.latency import simulate_inference_latency
from outfit_core.catalog import Catalog
from outfit_core.scoring import BaseItem, CompatibilityScorer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/match", response_model=MatchResponse)
async def match_items(
    body: dict[str, Any] = Depends(get_json_body),
    catalog: Catalog = Depends(get_catalog),
    scorer: CompatibilityScorer = Depends(get_scorer),
) -> MatchResponse:
    req = parse_body(MatchRequest, body)
    if not req.base_item:
        raise HTTPException(status_code=400, detail="No base item provided")

    try:
        await simulate_inference_latency()
        base_item = BaseItem.from_payload(req.base_item)
        ranked = scorer.match_items(base_item, catalog.wardrobe, occasion=req.occasion or None)
        top = ranked[: settings.match_top_k]
        logger.info(
            "match_ranked category=%s season=%s candidates=%d returned=%d",
            base_item.category,
            base_item.season,
            len(ranked),
            len(top),
        )
        return MatchResponse(
            data=MatchData(
                base_item=req.base_item,
                matches=[ScoredWardrobeItemOut.model_validate({**asdict(s.candidate), "score": s.score}) for s in top],
            )
        )
    except Exception:
        logger.exception("match_failed")
        raise HTTPException(status_code=500, detail="Failed to find matching items")
