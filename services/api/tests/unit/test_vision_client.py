from __future__ import annotations

from typing import Any

import httpx
import pytest

from outfit_api.services import vision as vision_service
from outfit_api.services.vision import (
    GoogleVisionClassifier,
    MockGarmentClassifier,
    classification_from_annotation,
    get_garment_classifier,
)

_GOOD_PAYLOAD = {
    "responses": [
        {
            "labelAnnotations": [
                {"description": "Leather", "score": 0.71},
                {"description": "Jacket", "score": 0.93},
            ],
            "imagePropertiesAnnotation": {
                "dominantColors": {
                    "colors": [
                        {"color": {"red": 240, "green": 240, "blue": 240}, "pixelFraction": 0.2},
                        {"color": {"red": 18, "green": 20, "blue": 22}, "pixelFraction": 0.6},
                    ]
                }
            },
        }
    ]
}


class _FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            request = httpx.Request("POST", "https://vision.test")
            raise httpx.HTTPStatusError(
                "upstream error", request=request, response=httpx.Response(self.status_code, request=request)
            )

    def json(self) -> Any:
        return self.payload


def _patch_post(monkeypatch: pytest.MonkeyPatch, response: _FakeResponse | Exception) -> list[dict[str, Any]]:
    calls: list[dict[str, Any]] = []

    def _post(url: str, **kwargs: Any) -> _FakeResponse:
        calls.append({"url": url, **kwargs})
        if isinstance(response, Exception):
            raise response
        return response

    monkeypatch.setattr(vision_service.httpx, "post", _post)
    return calls


def test_usable_annotation_is_a_real_result(monkeypatch, rng):
    calls = _patch_post(monkeypatch, _FakeResponse(_GOOD_PAYLOAD))
    classifier = GoogleVisionClassifier(api_key="k-123", rng=rng, url="https://vision.test")

    result = classifier.classify("data:image/png;base64,QUJD")

    assert not result.is_mock
    assert result.source == "google-vision"
    assert result.value.category == "jacket"
    assert result.value.color == "black"
    assert result.value.material == "leather"
    assert result.value.confidence == 0.93

    assert calls[0]["params"] == {"key": "k-123"}
    assert calls[0]["json"]["requests"][0]["image"]["content"] == "QUJD"


@pytest.mark.parametrize(
    "payload",
    [
        {"responses": [{"labelAnnotations": []}]},
        {"responses": [{"error": {"code": 3, "message": "Bad image data."}}]},
        {"responses": [{"labelAnnotations": [{"description": "Sky", "score": 0.9}]}]},
        {"unexpected": True},
        ["not", "an", "object"],
    ],
)
def test_unusable_annotation_falls_back_to_mock(monkeypatch, rng, payload):
    _patch_post(monkeypatch, _FakeResponse(payload))
    result = GoogleVisionClassifier(api_key="k", rng=rng).classify("QUJD")

    assert result.is_mock
    assert result.source == "mock-fallback"
    assert result.value.category


@pytest.mark.parametrize(
    "failure",
    [httpx.ConnectError("connection refused"), httpx.ReadTimeout("timed out")],
)
def test_transport_failure_falls_back_to_mock(monkeypatch, rng, failure):
    _patch_post(monkeypatch, failure)
    result = GoogleVisionClassifier(api_key="k", rng=rng).classify("QUJD")
    assert result.source == "mock-error-fallback"


def test_http_error_status_falls_back_to_mock(monkeypatch, rng):
    _patch_post(monkeypatch, _FakeResponse({"error": "forbidden"}, status_code=403))
    result = GoogleVisionClassifier(api_key="k", rng=rng).classify("QUJD")
    assert result.source == "mock-error-fallback"


def test_non_numeric_fields_do_not_break_parsing(rng):
    payload = {
        "responses": [
            {
                "labelAnnotations": [{"description": "Dress", "score": "high"}],
                "imagePropertiesAnnotation": {"dominantColors": {"colors": [{"color": {"red": "x"}}]}},
            }
        ]
    }
    c = classification_from_annotation(payload, rng)
    assert c is not None
    assert c.category == "dress"
    assert c.confidence == 0.0


def test_mock_classifier_tags_results(rng):
    result = MockGarmentClassifier(rng=rng).classify("QUJD")
    assert result.is_mock
    assert result.source == "mock"


def test_factory_picks_client_from_settings(monkeypatch):
    assert isinstance(get_garment_classifier(), MockGarmentClassifier)

    monkeypatch.setattr(vision_service, "_classifier", None)
    monkeypatch.setattr(vision_service.settings, "google_vision_api_key", "k-abc")
    classifier = get_garment_classifier()
    assert isinstance(classifier, GoogleVisionClassifier)
    assert classifier.api_key == "k-abc"
    assert get_garment_classifier() is classifier
