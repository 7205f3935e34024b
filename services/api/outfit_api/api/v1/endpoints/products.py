from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from outfit_api.api.deps import get_catalog, get_json_body, get_scorer, parse_body
from outfit_api.core.config import settings
from outfit_api.schemas.product import (
    ProductCatalogData,
    ProductCatalogResponse,
    ProductOut,
    ProductQuery,
    ProductRecommendationData,
    ProductRecommendationResponse,
    ProductStoreOut,
    ScoredProductOut,
)
from outfit_core.catalog import Catalog
from outfit_core.config import CONFIG
from outfit_core.scoring import CompatibilityScorer, ProductFilters, filter_products

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/products", response_model=ProductCatalogResponse)
def list_products(catalog: Catalog = Depends(get_catalog)) -> ProductCatalogResponse:
    return ProductCatalogResponse(
        data=ProductCatalogData(
            products=[ProductOut.model_validate(asdict(p)) for p in catalog.products],
            stores=[ProductStoreOut.model_validate(asdict(s)) for s in catalog.product_stores],
        )
    )


@router.post("/products", response_model=ProductRecommendationResponse)
def recommend_products(
    body: dict[str, Any] = Depends(get_json_body),
    catalog: Catalog = Depends(get_catalog),
    scorer: CompatibilityScorer = Depends(get_scorer),
) -> ProductRecommendationResponse:
    query = parse_body(ProductQuery, body)

    try:
        filters = ProductFilters(
            category=query.category,
            color=query.color,
            pattern=query.pattern,
            style=query.style,
            season=query.season,
            store_id=query.store_id,
        )
        candidates = filter_products(catalog.products, filters)
        low, high = CONFIG.product_score_band
        scored = scorer.rank_fixed_set(candidates, low, high)
        logger.info("products_scored filters=%s results=%d", query.model_dump(exclude_none=True), len(scored))
        return ProductRecommendationResponse(
            data=ProductRecommendationData(
                recommendations=[
                    ScoredProductOut.model_validate({**asdict(s.candidate), "score": s.score})
                    for s in scored[: settings.products_top_k]
                ],
                total_results=len(scored),
            )
        )
    except Exception:
        logger.exception("products_failed")
        raise HTTPException(status_code=500, detail="Failed to get product recommendations")
