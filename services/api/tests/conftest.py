from __future__ import annotations

import numpy as np
import pytest
from fastapi.testclient import TestClient

from outfit_api.api.deps import get_scorer
from outfit_api.main import app
from outfit_api.services import embeddings as embeddings_service
from outfit_api.services import vision as vision_service
from outfit_core.catalog import Catalog, load_catalog
from outfit_core.scoring import CompatibilityScorer


def _zero_jitter(low: int, high: int) -> int:
    return 0


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    return load_catalog()


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(7)


@pytest.fixture()
def flat_scorer() -> CompatibilityScorer:
    return CompatibilityScorer(jitter=_zero_jitter)


@pytest.fixture(autouse=True)
def reset_service_clients(monkeypatch: pytest.MonkeyPatch):
    # The clients are cached per process; each test starts without API keys.
    monkeypatch.setattr(vision_service, "_classifier", None)
    monkeypatch.setattr(embeddings_service, "_embedder", None)
    monkeypatch.setattr(vision_service.settings, "google_vision_api_key", "")
    monkeypatch.setattr(embeddings_service.settings, "openai_api_key", "")
    monkeypatch.setattr(vision_service.settings, "simulated_latency_ms", 0)


@pytest.fixture()
def client():
    app.dependency_overrides[get_scorer] = lambda: CompatibilityScorer(rng=np.random.default_rng(11))
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
