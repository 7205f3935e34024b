from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .config import CONFIG


@dataclass(frozen=True, slots=True)
class SimilarItem:
    id: int
    similarity: float
    category: str
    color: str


# Stand-in for a store of precomputed garment embeddings.
SIMILAR_ITEMS: tuple[SimilarItem, ...] = (
    SimilarItem(id=1, similarity=0.95, category="dress", color="blue"),
    SimilarItem(id=2, similarity=0.92, category="dress", color="black"),
    SimilarItem(id=3, similarity=0.89, category="skirt", color="blue"),
    SimilarItem(id=4, similarity=0.85, category="blouse", color="white"),
    SimilarItem(id=5, similarity=0.82, category="t-shirt", color="blue"),
)

DEFAULT_SIMILARITY_THRESHOLD = 0.8


def mock_embedding(rng: np.random.Generator, dim: int | None = None) -> list[float]:
    """Random vector with components uniform in [-1, 1)."""
    size = dim or CONFIG.embedding_dim
    return (rng.random(size) * 2.0 - 1.0).astype(np.float64).tolist()


def find_similar_items(embedding: list[float], threshold: float | None = None) -> list[SimilarItem]:
    del embedding  # similarity table is precomputed
    cutoff = DEFAULT_SIMILARITY_THRESHOLD if threshold is None else threshold
    return [item for item in SIMILAR_ITEMS if item.similarity >= cutoff]
