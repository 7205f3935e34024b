from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx
import numpy as np

from outfit_api.core.config import settings
from outfit_api.services.fallback import (
    SOURCE_MOCK,
    SOURCE_MOCK_ERROR_FALLBACK,
    SOURCE_MOCK_FALLBACK,
    MockResult,
    RealResult,
    ServiceResult,
)
from outfit_core.config import CONFIG
from outfit_core.embeddings import mock_embedding
from outfit_core.utils import to_data_uri

logger = logging.getLogger(__name__)

CLIP_SOURCE = "openai-clip"


@dataclass(slots=True)
class Embedding:
    vector: list[float]

    @property
    def dimensions(self) -> int:
        return len(self.vector)


class ImageEmbedder:
    def embed(self, image: str) -> ServiceResult[Embedding]:
        raise NotImplementedError


class MockImageEmbedder(ImageEmbedder):
    def __init__(self, rng: np.random.Generator | None = None, dim: int | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.dim = dim or CONFIG.embedding_dim

    def embed(self, image: str) -> ServiceResult[Embedding]:
        logger.info("embedding_key_missing_use_mock")
        return MockResult(Embedding(mock_embedding(self.rng, self.dim)), reason=SOURCE_MOCK)


class OpenAIClipEmbedder(ImageEmbedder):
    def __init__(
        self,
        api_key: str,
        rng: np.random.Generator | None = None,
        model: str | None = None,
        url: str | None = None,
        timeout_sec: float | None = None,
    ) -> None:
        self.api_key = api_key
        self.rng = rng if rng is not None else np.random.default_rng()
        self.model = model or settings.openai_embedding_model
        self.url = url or settings.openai_embeddings_url
        self.timeout_sec = timeout_sec or settings.external_timeout_sec

    def embed(self, image: str) -> ServiceResult[Embedding]:
        try:
            payload = self._request(image)
        except Exception:
            logger.exception("embedding_request_failed")
            return MockResult(Embedding(mock_embedding(self.rng)), reason=SOURCE_MOCK_ERROR_FALLBACK)

        vector = vector_from_payload(payload)
        if vector is None:
            logger.warning("embedding_payload_unusable_use_mock")
            return MockResult(Embedding(mock_embedding(self.rng)), reason=SOURCE_MOCK_FALLBACK)

        logger.info("embedding_received dimensions=%d", len(vector))
        return RealResult(Embedding(vector), source=CLIP_SOURCE)

    def _request(self, image: str) -> Any:
        headers = {"Authorization": f"Bearer {self.api_key}"}
        body = {
            "input": [{"type": "image_url", "image_url": {"url": to_data_uri(image)}}],
            "model": self.model,
            "encoding_format": "float",
        }
        response = httpx.post(self.url, headers=headers, json=body, timeout=self.timeout_sec)
        response.raise_for_status()
        return response.json()


def vector_from_payload(payload: Any) -> list[float] | None:
    if not isinstance(payload, dict):
        return None
    data = payload.get("data")
    if not isinstance(data, list) or not data or not isinstance(data[0], dict):
        return None
    embedding = data[0].get("embedding")
    if not isinstance(embedding, list) or not embedding:
        return None
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in embedding):
        return None
    return [float(v) for v in embedding]


_embedder: ImageEmbedder | None = None


def get_image_embedder() -> ImageEmbedder:
    global _embedder
    if _embedder is not None:
        return _embedder

    rng = np.random.default_rng(settings.scorer_seed)
    if settings.openai_api_key:
        _embedder = OpenAIClipEmbedder(api_key=settings.openai_api_key, rng=rng)
    else:
        _embedder = MockImageEmbedder(rng=rng)
    return _embedder
