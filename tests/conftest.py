"""Shared fixtures: in-memory database, registry service and an HTTP client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from asset_registry.core.config import get_settings
from asset_registry.db import models  # noqa: F401
from asset_registry.infrastructure.database.base import Base
from asset_registry.modules.registry import RegistryService

from tests.factories import DEPLOYER


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session(engine):
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
async def service(session):
    service = RegistryService.with_session(session)
    await service.initialize(DEPLOYER)
    return service


@pytest.fixture
def settings_env(tmp_path, monkeypatch):
    """Point the settings at a throwaway SQLite file."""
    monkeypatch.setenv("DATABASE__URL", f"sqlite+aiosqlite:///{tmp_path / 'registry.db'}")
    monkeypatch.setenv("REGISTRY__ADMIN_IDENTITY", DEPLOYER)
    monkeypatch.setenv("SECURITY__SECRET_KEY", "registry-test-secret")
    monkeypatch.setenv("ENVIRONMENT", "test")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def client(settings_env):
    from asset_registry.main import create_app

    with TestClient(create_app(settings_env)) as client:
        yield client


@pytest.fixture
async def file_session_factory(tmp_path):
    """Session factory over a SQLite file so separate sessions use separate connections."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'registry.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        await RegistryService.with_session(session).initialize(DEPLOYER)
        await session.commit()
    yield factory
    await engine.dispose()
