from __future__ import annotations

from pydantic import BaseModel

from .base import CamelModel


class StoreOut(CamelModel):
    id: int
    name: str
    description: str
    logo_url: str | None = None
    store_url: str | None = None
    categories: list[str]
    styles: list[str]
    price_range: str | None = None


class ScoredStoreOut(StoreOut):
    score: int


class StoreCatalogData(CamelModel):
    stores: list[StoreOut]


class StoreCatalogResponse(BaseModel):
    success: bool = True
    data: StoreCatalogData


class StoreRecommendationData(CamelModel):
    recommendations: list[ScoredStoreOut]
    total_results: int


class StoreRecommendationResponse(BaseModel):
    success: bool = True
    data: StoreRecommendationData
