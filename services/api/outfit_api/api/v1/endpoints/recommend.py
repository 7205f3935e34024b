from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from outfit_api.api.deps import get_catalog, get_json_body, get_scorer, parse_body
from outfit_api.core.config import settings
from outfit_api.schemas.recommend import RecommendData, RecommendRequest, RecommendResponse, ScoredOutfitOut
from outfit_api.services.latency import simulate_inference_latency
from outfit_core.catalog import Catalog
from outfit_core.scoring import CompatibilityScorer, RecommendationFilters

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/recommend", response_model=RecommendResponse)
async def recommend_outfits(
    body: dict[str, Any] = Depends(get_json_body),
    catalog: Catalog = Depends(get_catalog),
    scorer: CompatibilityScorer = Depends(get_scorer),
) -> RecommendResponse:
    req = parse_body(RecommendRequest, body)
    if not req.user_id:
        raise HTTPException(status_code=400, detail="User ID is required for personalized recommendations")

    try:
        await simulate_inference_latency()
        user = catalog.user(req.user_id)
        if user is None:
            raise LookupError("catalog has no user profiles")

        filters = RecommendationFilters(occasion=req.occasion, season=req.season, style=req.style)
        ranked = scorer.rank_outfits(catalog.outfits, user.style_preferences, filters)
        top = ranked[: settings.recommend_top_k]
        logger.info("recommend_ranked user=%s profile=%s returned=%d", req.user_id, user.id, len(top))
        return RecommendResponse(
            data=RecommendData(
                recommendations=[
                    ScoredOutfitOut.model_validate({**asdict(s.candidate), "score": s.score}) for s in top
                ]
            )
        )
    except Exception:
        logger.exception("recommend_failed")
        raise HTTPException(status_code=500, detail="Failed to generate recommendations")
