from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Mapping, TypeVar

import numpy as np

from .catalog import Outfit, Product, StylePreferences, WardrobeItem
from .config import CONFIG

T = TypeVar("T")

# (low, high) -> integer drawn uniformly from the inclusive range.
JitterFn = Callable[[int, int], int]

ALL_SEASON = "all-season"

CATEGORY_MATCHES: dict[str, frozenset[str]] = {
    "t-shirt": frozenset({"jeans", "shorts", "skirt", "jacket"}),
    "blouse": frozenset({"jeans", "skirt", "pants"}),
    "sweater": frozenset({"jeans", "pants", "skirt"}),
    "jacket": frozenset({"t-shirt", "blouse", "jeans", "pants", "dress"}),
    "dress": frozenset({"jacket"}),
    "pants": frozenset({"t-shirt", "blouse", "sweater", "jacket"}),
    "jeans": frozenset({"t-shirt", "blouse", "sweater", "jacket"}),
    "skirt": frozenset({"t-shirt", "blouse", "sweater", "jacket"}),
    "shorts": frozenset({"t-shirt"}),
}

# Keyed by the base item's color. Lookups go base -> candidate only.
COMPLEMENTARY_COLORS: dict[str, frozenset[str]] = {
    "black": frozenset({"white", "red", "blue", "pink"}),
    "white": frozenset({"black", "blue", "red", "navy"}),
    "blue": frozenset({"white", "beige", "gray"}),
    "red": frozenset({"black", "white", "beige"}),
    "green": frozenset({"white", "beige", "black"}),
    "yellow": frozenset({"blue", "purple", "gray"}),
    "purple": frozenset({"yellow", "white", "gray"}),
    "pink": frozenset({"black", "gray", "navy"}),
    "gray": frozenset({"blue", "pink", "red", "navy"}),
    "brown": frozenset({"beige", "blue", "white"}),
    "beige": frozenset({"blue", "brown", "black", "red"}),
    "navy": frozenset({"white", "beige", "pink"}),
}


@dataclass(frozen=True, slots=True)
class BaseItem:
    category: str | None = None
    color: str | None = None
    pattern: str | None = None
    material: str | None = None
    style: str | None = None
    season: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "BaseItem":
        payload = payload if isinstance(payload, Mapping) else {}
        attrs = payload.get("attributes")
        attrs = attrs if isinstance(attrs, Mapping) else {}

        def _str(value: Any) -> str | None:
            return value if isinstance(value, str) and value else None

        return cls(
            category=_str(payload.get("category")),
            color=_str(attrs.get("color")),
            pattern=_str(attrs.get("pattern")),
            material=_str(attrs.get("material")),
            style=_str(attrs.get("style")),
            season=_str(attrs.get("season")),
        )


@dataclass(frozen=True, slots=True)
class RecommendationFilters:
    occasion: str | None = None
    season: str | None = None
    style: str | None = None


@dataclass(frozen=True, slots=True)
class ProductFilters:
    category: str | None = None
    color: str | None = None
    pattern: str | None = None
    style: str | None = None
    season: str | None = None
    store_id: int | None = None


@dataclass(frozen=True, slots=True)
class Scored(Generic[T]):
    candidate: T
    score: int


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def seasons_compatible(candidate_season: str | None, base_season: str | None) -> bool:
    return (
        candidate_season == base_season
        or candidate_season == ALL_SEASON
        or base_season == ALL_SEASON
    )


def numpy_jitter(rng: np.random.Generator) -> JitterFn:
    def _draw(low: int, high: int) -> int:
        return int(rng.integers(low, high, endpoint=True))

    return _draw


class CompatibilityScorer:
    """Weighted-sum compatibility heuristic with a random jitter term.

    The jitter source is injectable: pass ``jitter`` to pin the random term
    (e.g. ``lambda low, high: 0``) or ``rng`` to seed the default numpy draw.
    """

    def __init__(self, rng: np.random.Generator | None = None, jitter: JitterFn | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.jitter = jitter or numpy_jitter(self.rng)

    def score_against_profile(
        self,
        outfit: Outfit,
        profile: StylePreferences,
        filters: RecommendationFilters | None = None,
    ) -> int:
        filters = filters or RecommendationFilters()
        score = 0

        if outfit.style in profile.styles:
            score += 30

        if filters.occasion and outfit.occasion == filters.occasion:
            score += 20
        elif outfit.occasion in profile.occasions:
            score += 15

        if filters.season and outfit.season == filters.season:
            score += 20
        elif outfit.season == ALL_SEASON or outfit.season in profile.seasons:
            score += 15

        score += 5 * sum(1 for item in outfit.items if item.color in profile.colors)
        score += 5 * sum(1 for item in outfit.items if item.pattern in profile.patterns)

        score += self.jitter(CONFIG.profile_jitter_low, CONFIG.profile_jitter_high)
        return clamp(score)

    def score_against_base_item(
        self,
        item: WardrobeItem,
        base_item: BaseItem,
        occasion: str | None = None,
    ) -> int:
        score = 60

        if item.color in COMPLEMENTARY_COLORS.get(base_item.color or "", frozenset()):
            score += 15

        if item.style is not None and item.style == base_item.style:
            score += 10

        if occasion and item.style == occasion:
            score += 15

        score += self.jitter(CONFIG.base_item_jitter_low, CONFIG.base_item_jitter_high)
        return min(score, 100)

    def rank_outfits(
        self,
        outfits: Iterable[Outfit],
        profile: StylePreferences,
        filters: RecommendationFilters | None = None,
    ) -> list[Scored[Outfit]]:
        scored = [Scored(o, self.score_against_profile(o, profile, filters)) for o in outfits]
        return sorted(scored, key=lambda s: s.score, reverse=True)

    def match_items(
        self,
        base_item: BaseItem,
        items: Iterable[WardrobeItem],
        occasion: str | None = None,
    ) -> list[Scored[WardrobeItem]]:
        compatible = CATEGORY_MATCHES.get(base_item.category or "", frozenset())
        survivors = [
            item
            for item in items
            if item.category in compatible and seasons_compatible(item.season, base_item.season)
        ]
        scored = [Scored(item, self.score_against_base_item(item, base_item, occasion)) for item in survivors]
        return sorted(scored, key=lambda s: s.score, reverse=True)

    def rank_fixed_set(self, candidates: Iterable[T], low: int, high: int) -> list[Scored[T]]:
        """Attach a random score in [low, high) to every candidate, keeping input order."""
        return [Scored(c, self.jitter(low, high - 1)) for c in candidates]


def filter_products(products: Iterable[Product], filters: ProductFilters) -> list[Product]:
    out: list[Product] = []
    for p in products:
        if filters.category and p.category != filters.category:
            continue
        if filters.color and p.color != filters.color:
            continue
        if filters.pattern and p.pattern != filters.pattern:
            continue
        if filters.style and p.style != filters.style:
            continue
        if filters.season and not (p.season == filters.season or p.season == ALL_SEASON):
            continue
        if filters.store_id is not None and p.store_id != filters.store_id:
            continue
        out.append(p)
    return out
