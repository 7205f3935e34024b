from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from .base import CamelModel


class DeepFashionRequest(CamelModel):
    image: str | None = None
    find_compatible: bool = False


class DeepFashionData(CamelModel):
    analysis: dict[str, Any]
    compatible_items: list[dict[str, Any]] | None = None


class DeepFashionResponse(BaseModel):
    success: bool = True
    data: DeepFashionData
