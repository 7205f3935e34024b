from __future__ import annotations

from pydantic import BaseModel

from .base import CamelModel


class ImageRequest(CamelModel):
    image: str | None = None


class GarmentAttributesOut(CamelModel):
    color: str
    pattern: str
    material: str
    style: str
    season: str


class ClassificationOut(CamelModel):
    category: str
    attributes: GarmentAttributesOut
    confidence: float
    source: str


class ClassifyResponse(BaseModel):
    success: bool = True
    data: ClassificationOut
