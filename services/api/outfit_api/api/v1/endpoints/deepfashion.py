from __future__ import annotations

import copy
import logging
from typing import Any

import numpy as np
from fastapi import APIRouter, Depends, HTTPException

from outfit_api.api.deps import get_json_body, get_rng, parse_body
from outfit_api.schemas.deepfashion import DeepFashionData, DeepFashionRequest, DeepFashionResponse
from outfit_api.services.latency import simulate_inference_latency
from outfit_core.attributes import DEEPFASHION_COMPATIBLE_ITEMS, simulate_deepfashion

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/deepfashion", response_model=DeepFashionResponse, response_model_exclude_none=True)
async def analyze_deepfashion(
    body: dict[str, Any] = Depends(get_json_body),
    rng: np.random.Generator = Depends(get_rng),
) -> DeepFashionResponse:
    """Simulated DeepFashion-style category and attribute analysis."""
    req = parse_body(DeepFashionRequest, body)
    if not req.image:
        raise HTTPException(status_code=400, detail="No image data provided")

    try:
        await simulate_inference_latency()
        analysis = simulate_deepfashion(rng)
        logger.info("deepfashion_simulated category=%s", analysis["category"])
        compatible = copy.deepcopy(DEEPFASHION_COMPATIBLE_ITEMS) if req.find_compatible else None
        return DeepFashionResponse(data=DeepFashionData(analysis=analysis, compatible_items=compatible))
    except Exception:
        logger.exception("deepfashion_failed")
        raise HTTPException(status_code=500, detail="Failed to analyze image with DeepFashion")
