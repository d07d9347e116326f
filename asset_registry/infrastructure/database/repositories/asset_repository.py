"""SQLAlchemy implementation of the asset store."""

from __future__ import annotations

import json

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from asset_registry.db.models import Asset as AssetModel
from asset_registry.modules.assets.models import AssetRecord, is_storable_id
from asset_registry.modules.assets.repository import AssetRepository
from asset_registry.modules.common.exceptions import (
    AssetNotFoundError,
    DuplicateRegistrationError,
)


class SqlAssetRepository(AssetRepository):
    """Asset repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, asset_id: int) -> AssetRecord | None:
        model = await self._get_model(asset_id)
        return self._to_domain(model) if model else None

    async def exists(self, asset_id: int) -> bool:
        if not is_storable_id(asset_id):
            return False
        stmt = select(AssetModel.id).where(AssetModel.id == asset_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def insert(self, record: AssetRecord) -> AssetRecord:
        if await self.exists(record.id):
            raise DuplicateRegistrationError(f"asset {record.id} already exists")

        model = AssetModel(
            id=record.id,
            display_name=record.display_name,
            owner=record.owner,
            size_bytes=record.size_bytes,
            registered_at_height=record.registered_at_height,
            description=record.description,
            category_tags=json.dumps(record.category_tags, ensure_ascii=False),
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise DuplicateRegistrationError(f"asset {record.id} already exists") from exc
        return self._to_domain(model)

    async def put(self, record: AssetRecord) -> AssetRecord:
        model = await self._get_model(record.id)
        if model is None:
            raise AssetNotFoundError(f"asset {record.id} does not exist")

        model.display_name = record.display_name
        model.owner = record.owner
        model.size_bytes = record.size_bytes
        model.description = record.description
        model.category_tags = json.dumps(record.category_tags, ensure_ascii=False)

        await self._session.flush()
        return self._to_domain(model)

    async def delete(self, asset_id: int) -> None:
        model = await self._get_model(asset_id)
        if model is None:
            raise AssetNotFoundError(f"asset {asset_id} does not exist")
        await self._session.delete(model)
        await self._session.flush()

    async def _get_model(self, asset_id: int) -> AssetModel | None:
        if not is_storable_id(asset_id):
            return None
        stmt = select(AssetModel).where(AssetModel.id == asset_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_domain(model: AssetModel) -> AssetRecord:
        return AssetRecord(
            id=model.id,
            display_name=model.display_name,
            owner=model.owner,
            size_bytes=model.size_bytes,
            registered_at_height=model.registered_at_height,
            description=model.description,
            category_tags=list(json.loads(model.category_tags)),
        )
