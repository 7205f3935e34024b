from __future__ import annotations

from pydantic import BaseModel

from .base import CamelModel


class RecommendRequest(CamelModel):
    user_id: str | None = None
    occasion: str | None = None
    season: str | None = None
    style: str | None = None


class OutfitItemOut(CamelModel):
    id: int
    type: str | None = None
    category: str | None = None
    color: str | None = None
    pattern: str | None = None
    style: str | None = None
    season: str | None = None
    image_url: str | None = None


class ScoredOutfitOut(CamelModel):
    id: int
    name: str
    occasion: str | None = None
    season: str | None = None
    style: str | None = None
    items: list[OutfitItemOut]
    score: int


class RecommendData(CamelModel):
    recommendations: list[ScoredOutfitOut]


class RecommendResponse(BaseModel):
    success: bool = True
    data: RecommendData
