"""SQLAlchemy implementation of the permission store."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from asset_registry.db.models import AssetPermission
from asset_registry.modules.assets.models import is_storable_id
from asset_registry.modules.permissions.models import PermissionEntry
from asset_registry.modules.permissions.repository import PermissionRepository


class SqlPermissionRepository(PermissionRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, asset_id: int, identity: str) -> bool:
        if not is_storable_id(asset_id):
            return False
        stmt = select(AssetPermission.granted).where(
            AssetPermission.asset_id == asset_id,
            AssetPermission.identity == identity,
        )
        result = await self._session.execute(stmt)
        return bool(result.scalar_one_or_none())

    async def insert(self, asset_id: int, identity: str, granted: bool) -> PermissionEntry:
        model = await self._session.get(AssetPermission, (asset_id, identity))
        if model is None:
            model = AssetPermission(asset_id=asset_id, identity=identity, granted=granted)
            self._session.add(model)
        else:
            model.granted = granted
        await self._session.flush()
        return PermissionEntry(asset_id=asset_id, identity=identity, granted=granted)
