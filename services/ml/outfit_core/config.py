from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CATALOG_PATH = str(Path(__file__).resolve().parent / "data" / "catalog.json")


@dataclass(slots=True)
class CoreConfig:
    catalog_path: str = os.getenv("CATALOG_PATH", DEFAULT_CATALOG_PATH)
    embedding_dim: int = int(os.getenv("EMBEDDING_DIM", "512"))
    profile_jitter_low: int = -5
    profile_jitter_high: int = 4
    base_item_jitter_low: int = 0
    base_item_jitter_high: int = 9
    product_score_band: tuple[int, int] = (60, 100)
    store_score_band: tuple[int, int] = (70, 100)


CONFIG = CoreConfig()
