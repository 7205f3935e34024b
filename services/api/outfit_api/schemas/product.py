from __future__ import annotations

from pydantic import BaseModel

from .base import CamelModel


class ProductQuery(CamelModel):
    category: str | None = None
    color: str | None = None
    pattern: str | None = None
    style: str | None = None
    season: str | None = None
    store_id: int | None = None


class ProductOut(CamelModel):
    id: int
    name: str
    category: str | None = None
    color: str | None = None
    pattern: str | None = None
    material: str | None = None
    style: str | None = None
    season: str | None = None
    price: float | None = None
    currency: str | None = None
    store_id: int | None = None
    store_name: str | None = None
    store_logo_url: str | None = None
    image_url: str | None = None
    product_url: str | None = None


class ScoredProductOut(ProductOut):
    score: int


class ProductStoreOut(CamelModel):
    id: int
    name: str
    logo: str | None = None


class ProductCatalogData(CamelModel):
    products: list[ProductOut]
    stores: list[ProductStoreOut]


class ProductCatalogResponse(BaseModel):
    success: bool = True
    data: ProductCatalogData


class ProductRecommendationData(CamelModel):
    recommendations: list[ScoredProductOut]
    total_results: int


class ProductRecommendationResponse(BaseModel):
    success: bool = True
    data: ProductRecommendationData
