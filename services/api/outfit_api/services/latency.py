from __future__ import annotations

import asyncio

from outfit_api.core.config import settings


async def simulate_inference_latency(delay_ms: int | None = None) -> None:
    """Defer the response to mimic a hosted model. No-op unless configured."""
    ms = settings.simulated_latency_ms if delay_ms is None else delay_ms
    if ms > 0:
        await asyncio.sleep(ms / 1000.0)
