from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from outfit_api.api.v1.router import api_router
from outfit_api.core.config import settings
from outfit_api.core.logging import configure_logging
from outfit_api.middleware.request_context import REQUEST_ID_HEADER, RequestContextMiddleware
from outfit_core.catalog import get_catalog

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Outfit Compatibility API", version="0.1.0")
app.add_middleware(RequestContextMiddleware)
cors_origins = {
    settings.base_dashboard_url.rstrip("/"),
    "http://localhost:3000",
    "http://127.0.0.1:3000",
}
extra_origins = [
    origin.strip().rstrip("/")
    for origin in settings.cors_extra_origins.split(",")
    if origin.strip()
]
cors_origins.update(extra_origins)
app.add_middleware(
    CORSMiddleware,
    allow_origins=sorted(cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(api_router)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("http_error status=%d detail=%s", exc.status_code, exc.detail)
    else:
        logger.warning("http_error status=%d detail=%s", exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", exc_info=exc)
    rid = getattr(request.state, "request_id", None)
    headers = {REQUEST_ID_HEADER: rid} if rid else None
    return JSONResponse(status_code=500, content={"error": "Internal server error"}, headers=headers)


@app.on_event("startup")
def startup() -> None:
    get_catalog()
    logger.info("startup_complete")


@app.get("/healthz")
def healthz() -> dict:
    return {"status": "ok"}


@app.get("/readyz")
def readyz() -> dict:
    catalog_ok = False
    try:
        catalog_ok = get_catalog().is_ready()
    except Exception:
        logger.exception("readyz_catalog_unavailable")
        catalog_ok = False

    return {
        "ready": catalog_ok,
        "catalog_loaded": catalog_ok,
        "vision_configured": bool(settings.google_vision_api_key),
        "embeddings_configured": bool(settings.openai_api_key),
    }
