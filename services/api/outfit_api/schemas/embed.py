from __future__ import annotations

from pydantic import BaseModel

from .base import CamelModel


class EmbedRequest(CamelModel):
    image: str | None = None
    find_similar: bool = False
    threshold: float | None = None


class SimilarItemOut(CamelModel):
    id: int
    similarity: float
    category: str
    color: str


class EmbeddingOut(CamelModel):
    embedding: list[float]
    dimensions: int
    source: str
    is_mock: bool
    similar_items: list[SimilarItemOut] | None = None


class EmbedResponse(BaseModel):
    success: bool = True
    data: EmbeddingOut
