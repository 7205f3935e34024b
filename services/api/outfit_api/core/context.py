from __future__ import annotations

from contextvars import ContextVar
from typing import Any

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
route_ctx: ContextVar[str | None] = ContextVar("route", default=None)


def log_context() -> dict[str, Any]:
    """Request-scoped fields attached to every log line."""
    return {"request_id": request_id_ctx.get(), "route": route_ctx.get()}
