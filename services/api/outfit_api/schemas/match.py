from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from .base import CamelModel


class MatchRequest(CamelModel):
    base_item: dict[str, Any] | None = None
    occasion: str | None = None


class ScoredWardrobeItemOut(CamelModel):
    id: int
    category: str | None = None
    color: str | None = None
    pattern: str | None = None
    material: str | None = None
    style: str | None = None
    season: str | None = None
    score: int


class MatchData(CamelModel):
    base_item: dict[str, Any]
    matches: list[ScoredWardrobeItemOut]


class MatchResponse(BaseModel):
    success: bool = True
    data: MatchData
