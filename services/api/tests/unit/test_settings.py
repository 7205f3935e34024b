from __future__ import annotations

import pytest
from pydantic import ValidationError

from outfit_api.core.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.scorer_seed is None
    assert s.simulated_latency_ms == 0
    assert (s.recommend_top_k, s.match_top_k, s.products_top_k, s.stores_top_k) == (4, 6, 8, 4)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SCORER_SEED", "42")
    monkeypatch.setenv("SIMULATED_LATENCY_MS", "1500")
    monkeypatch.setenv("GOOGLE_VISION_API_KEY", "k-env")
    s = Settings(_env_file=None)
    assert s.scorer_seed == 42
    assert s.simulated_latency_ms == 1500
    assert s.google_vision_api_key == "k-env"


def test_blank_seed_means_unseeded(monkeypatch):
    monkeypatch.setenv("SCORER_SEED", "")
    assert Settings(_env_file=None).scorer_seed is None


def test_negative_latency_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, simulated_latency_ms=-1)
