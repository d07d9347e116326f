import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from asset_registry import __version__
from asset_registry.core.config import Settings, get_settings
from asset_registry.core.logging import configure_logging
from asset_registry.infrastructure.database import dispose_engine, get_session, init_db
from asset_registry.interfaces.http.routers import create_api_router
from asset_registry.modules.common.exceptions import RegistryError
from asset_registry.modules.registry import RegistryService
from asset_registry.schemas import ErrorResponse

logger = logging.getLogger(__name__)


async def initialize_registry(admin_identity: str) -> None:
    """Create the tables and capture the administrator on first start."""
    await init_db()
    async for db in get_session():
        await RegistryService.with_session(db).initialize(admin_identity)


async def registry_error_handler(request: Request, exc: RegistryError) -> JSONResponse:
    logger.warning("%s %s rejected with %s: %s", request.method, request.url.path, exc.name, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.name, code=exc.code, detail=exc.message).model_dump(),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings)
        await initialize_registry(settings.admin_identity)
        yield
        await dispose_engine()

    app = FastAPI(
        title=settings.project_name,
        description="Digital asset metadata registry with ownership and read grants",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RegistryError, registry_error_handler)
    app.include_router(create_api_router(settings.api_prefix))
    return app


app = create_app()
