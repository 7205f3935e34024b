"""Outfit compatibility scoring and the static catalog it runs over."""

from .catalog import Catalog, get_catalog, load_catalog
from .scoring import (
    BaseItem,
    CompatibilityScorer,
    ProductFilters,
    RecommendationFilters,
    Scored,
)

__all__ = [
    "BaseItem",
    "Catalog",
    "CompatibilityScorer",
    "ProductFilters",
    "RecommendationFilters",
    "Scored",
    "get_catalog",
    "load_catalog",
]
