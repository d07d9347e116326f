from fastapi import APIRouter

from asset_registry.interfaces.http.routers import assets, registry
from asset_registry.schemas import ErrorResponse

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Metadata, size or category validation failed"},
    403: {"model": ErrorResponse, "description": "Caller is not the owner or lacks read access"},
    404: {"model": ErrorResponse, "description": "Asset not found"},
    409: {"model": ErrorResponse, "description": "Registration collision"},
}


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(assets.router, prefix="/assets", tags=["assets"], responses=ERROR_RESPONSES)
    router.include_router(registry.router, prefix="/registry", tags=["registry"])
    return router


__all__ = [
    "ERROR_RESPONSES",
    "create_api_router",
]
