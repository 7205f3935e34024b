from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from outfit_api.api.deps import get_catalog, get_json_body, get_scorer
from outfit_api.core.config import settings
from outfit_api.schemas.store import (
    ScoredStoreOut,
    StoreCatalogData,
    StoreCatalogResponse,
    StoreOut,
    StoreRecommendationData,
    StoreRecommendationResponse,
)
from outfit_core.catalog import Catalog
from outfit_core.config import CONFIG
from outfit_core.scoring import CompatibilityScorer

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stores", response_model=StoreCatalogResponse)
def list_stores(catalog: Catalog = Depends(get_catalog)) -> StoreCatalogResponse:
    return StoreCatalogResponse(data=StoreCatalogData(stores=[StoreOut.model_validate(asdict(s)) for s in catalog.stores]))


@router.post("/stores", response_model=StoreRecommendationResponse)
def recommend_stores(
    body: dict[str, Any] = Depends(get_json_body),
    catalog: Catalog = Depends(get_catalog),
    scorer: CompatibilityScorer = Depends(get_scorer),
) -> StoreRecommendationResponse:
    # Stores carry no discriminative signal yet; the body is only logged.
    try:
        low, high = CONFIG.store_score_band
        scored = scorer.rank_fixed_set(catalog.stores, low, high)
        logger.info("stores_scored params=%s results=%d", body, len(scored))
        return StoreRecommendationResponse(
            data=StoreRecommendationData(
                recommendations=[
                    ScoredStoreOut.model_validate({**asdict(s.candidate), "score": s.score})
                    for s in scored[: settings.stores_top_k]
                ],
                total_results=len(scored),
            )
        )
    except Exception:
        logger.exception("stores_failed")
        raise HTTPException(status_code=500, detail="Failed to get store recommendations")
