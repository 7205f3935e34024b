from __future__ import annotations

import logging
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
from outfit_core.attributes import Classification, VisionLabel, labels_to_attributes, mock_classification
from outfit_core.utils import decoded_size, strip_data_uri

logger = logging.getLogger(__name__)

VISION_SOURCE = "google-vision"
_FEATURES = [
    {"type": "LABEL_DETECTION", "maxResults": 10},
    {"type": "IMAGE_PROPERTIES", "maxResults": 5},
]


class GarmentClassifier:
    def classify(self, image: str) -> ServiceResult[Classification]:
        raise NotImplementedError


class MockGarmentClassifier(GarmentClassifier):
    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self._warned_missing_key = False

    def classify(self, image: str) -> ServiceResult[Classification]:
        if not self._warned_missing_key:
            logger.warning("vision_key_missing_use_mock")
            self._warned_missing_key = True
        return MockResult(mock_classification(self.rng), reason=SOURCE_MOCK)


class GoogleVisionClassifier(GarmentClassifier):
    def __init__(
        self,
        api_key: str,
        rng: np.random.Generator | None = None,
        url: str | None = None,
        timeout_sec: float | None = None,
    ) -> None:
        self.api_key = api_key
        self.rng = rng if rng is not None else np.random.default_rng()
        self.url = url or settings.google_vision_url
        self.timeout_sec = timeout_sec or settings.external_timeout_sec

    def classify(self, image: str) -> ServiceResult[Classification]:
        try:
            payload = self._annotate(image)
        except Exception:
            logger.exception("vision_request_failed")
            return MockResult(mock_classification(self.rng), reason=SOURCE_MOCK_ERROR_FALLBACK)

        classification = classification_from_annotation(payload, self.rng)
        if classification is None:
            logger.warning("vision_payload_unusable_use_mock")
            return MockResult(mock_classification(self.rng), reason=SOURCE_MOCK_FALLBACK)

        logger.info("vision_classified category=%s confidence=%.2f", classification.category, classification.confidence)
        return RealResult(classification, source=VISION_SOURCE)

    def _annotate(self, image: str) -> Any:
        content = strip_data_uri(image)
        logger.info("vision_request image_bytes=%d", decoded_size(content))
        body = {"requests": [{"image": {"content": content}, "features": _FEATURES}]}
        response = httpx.post(self.url, params={"key": self.api_key}, json=body, timeout=self.timeout_sec)
        response.raise_for_status()
        return response.json()


def _num(value: Any) -> float:
    return float(value) if isinstance(value, (int, float)) else 0.0


def _dominant_rgb(annotation: dict[str, Any]) -> tuple[float, float, float] | None:
    props = annotation.get("imagePropertiesAnnotation")
    if not isinstance(props, dict):
        return None
    dominant = props.get("dominantColors")
    colors = dominant.get("colors") if isinstance(dominant, dict) else None
    best: tuple[float, tuple[float, float, float]] | None = None
    for entry in colors if isinstance(colors, list) else []:
        if not isinstance(entry, dict) or not isinstance(entry.get("color"), dict):
            continue
        c = entry["color"]
        weight = _num(entry.get("pixelFraction")) or _num(entry.get("score"))
        rgb = (_num(c.get("red")), _num(c.get("green")), _num(c.get("blue")))
        if best is None or weight > best[0]:
            best = (weight, rgb)
    return best[1] if best else None


def classification_from_annotation(payload: Any, rng: np.random.Generator) -> Classification | None:
    if not isinstance(payload, dict):
        return None
    responses = payload.get("responses")
    if not isinstance(responses, list) or not responses or not isinstance(responses[0], dict):
        return None
    annotation = responses[0]
    if annotation.get("error"):
        logger.warning("vision_annotation_error error=%s", annotation.get("error"))
        return None

    labels = [
        VisionLabel(description=str(row["description"]), score=_num(row.get("score")))
        for row in annotation.get("labelAnnotations") or []
        if isinstance(row, dict) and row.get("description")
    ]
    if not labels:
        return None
    return labels_to_attributes(labels, _dominant_rgb(annotation), rng)


_classifier: GarmentClassifier | None = None


def get_garment_classifier() -> GarmentClassifier:
    global _classifier
    if _classifier is not None:
        return _classifier

    rng = np.random.default_rng(settings.scorer_seed)
    if settings.google_vision_api_key:
        _classifier = GoogleVisionClassifier(api_key=settings.google_vision_api_key, rng=rng)
    else:
        _classifier = MockGarmentClassifier(rng=rng)
    return _classifier
