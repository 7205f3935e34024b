from __future__ import annotations

from fastapi import APIRouter

from outfit_api.api.v1.endpoints import classify
from outfit_api.api.v1.endpoints import deepfashion
from outfit_api.api.v1.endpoints import embed
from outfit_api.api.v1.endpoints import match
from outfit_api.api.v1.endpoints import products
from outfit_api.api.v1.endpoints import recommend
from outfit_api.api.v1.endpoints import stores
from outfit_api.schemas.base import ErrorOut

_ERROR_RESPONSES = {400: {"model": ErrorOut}, 500: {"model": ErrorOut}}

api_router = APIRouter(prefix="/v1", responses=_ERROR_RESPONSES)
api_router.include_router(recommend.router, prefix="/ai", tags=["recommend"])
api_router.include_router(classify.router, prefix="/ai", tags=["classify"])
api_router.include_router(match.router, prefix="/ai", tags=["match"])
api_router.include_router(embed.router, prefix="/ai", tags=["embed"])
api_router.include_router(deepfashion.router, prefix="/ai", tags=["deepfashion"])
api_router.include_router(products.router, tags=["products"])
api_router.include_router(stores.router, tags=["stores"])
