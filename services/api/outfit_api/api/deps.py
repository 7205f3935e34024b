from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, TypeVar

import numpy as np
from fastapi import HTTPException, Request, status
from pydantic import BaseModel, ValidationError

from outfit_api.core.config import settings
from outfit_core.catalog import Catalog
from outfit_core.catalog import get_catalog as load_shared_catalog
from outfit_core.scoring import CompatibilityScorer

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


async def get_json_body(request: Request) -> dict[str, Any]:
    """Request body as a dict. Malformed JSON or a non-object body reads as {}."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("request_json_malformed_treat_as_empty")
        return {}
    if not isinstance(data, dict):
        logger.warning("request_json_not_object_treat_as_empty")
        return {}
    return data


def parse_body(model: type[M], body: dict[str, Any]) -> M:
    try:
        return model.model_validate(body)
    except ValidationError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid request body")


def get_catalog() -> Catalog:
    return load_shared_catalog()


@lru_cache(maxsize=1)
def get_rng() -> np.random.Generator:
    return np.random.default_rng(settings.scorer_seed)


def get_scorer() -> CompatibilityScorer:
    return CompatibilityScorer(rng=get_rng())
