from __future__ import annotations

import asyncio
import time

import httpx
from fastapi.testclient import TestClient

from outfit_api.api.deps import get_catalog
from outfit_api.core.config import settings
from outfit_api.main import app
from outfit_api.services import vision as vision_service
from outfit_api.services.vision import GoogleVisionClassifier


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_readyz_reports_catalog_and_clients(client, monkeypatch):
    resp = client.get("/readyz")
    assert resp.json() == {
        "ready": True,
        "catalog_loaded": True,
        "vision_configured": False,
        "embeddings_configured": False,
    }

    monkeypatch.setattr(settings, "openai_api_key", "sk-live")
    assert client.get("/readyz").json()["embeddings_configured"] is True


def test_request_id_is_echoed(client):
    resp = client.get("/healthz", headers={"x-request-id": "req-42"})
    assert resp.headers["x-request-id"] == "req-42"

    resp = client.post("/v1/ai/classify", json={})
    assert resp.headers["x-request-id"]


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/v1/nowhere")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


def test_unhandled_error_keeps_request_id():
    def _broken_catalog():
        raise RuntimeError("catalog file vanished")

    app.dependency_overrides[get_catalog] = _broken_catalog
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            resp = c.get("/v1/stores", headers={"x-request-id": "req-500"})
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
    assert resp.headers["x-request-id"] == "req-500"


def test_openapi_documents_error_envelope(client):
    responses = client.get("/openapi.json").json()["paths"]["/v1/ai/classify"]["post"]["responses"]
    assert responses["400"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorOut")
    assert "500" in responses


def test_slow_vision_call_does_not_block_other_requests(monkeypatch):
    def _slow_post(url: str, **kwargs):
        time.sleep(1.0)
        raise httpx.ConnectTimeout("vision too slow")

    monkeypatch.setattr(vision_service.httpx, "post", _slow_post)
    monkeypatch.setattr(vision_service, "_classifier", GoogleVisionClassifier(api_key="k-slow"))

    async def _run() -> tuple[httpx.Response, float]:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            classify = asyncio.create_task(ac.post("/v1/ai/classify", json={"image": "QUJD"}))
            await asyncio.sleep(0.1)
            started = time.perf_counter()
            health = await ac.get("/healthz")
            health_elapsed = time.perf_counter() - started
            assert health.status_code == 200
            return await classify, health_elapsed

    classify_resp, health_elapsed = asyncio.run(_run())

    assert classify_resp.json()["data"]["source"] == "mock-error-fallback"
    assert health_elapsed < 0.5
