"""Registry service composing the asset and permission stores."""

from __future__ import annotations

import logging
from dataclasses import replace

from sqlalchemy.ext.asyncio import AsyncSession

from asset_registry.modules.assets.models import AssetMetadataInput, AssetRecord
from asset_registry.modules.assets.repository import AssetRepository
from asset_registry.modules.common.exceptions import (
    AssetNotFoundError,
    OwnershipVerificationError,
    VisibilityRestrictedError,
)
from asset_registry.modules.permissions.repository import PermissionRepository

from .models import AccessStatus, RegistryState, RegistryStatistics
from .repository import RegistryStateRepository
from .validation import validate_metadata

logger = logging.getLogger(__name__)


class RegistryService:
    """Encapsulates the registry use cases.

    Every method validates all of its preconditions before the first write, so
    a raised error never leaves a partial mutation behind. Commit and rollback
    belong to the caller's session.
    """

    def __init__(
        self,
        assets: AssetRepository,
        permissions: PermissionRepository,
        state: RegistryStateRepository,
    ) -> None:
        self._assets = assets
        self._permissions = permissions
        self._state = state

    @classmethod
    def with_session(cls, session: AsyncSession) -> "RegistryService":
        # Deferred to avoid a cycle: the SQL repositories import these domain models.
        from asset_registry.infrastructure.database.repositories import (
            SqlAssetRepository,
            SqlPermissionRepository,
            SqlRegistryStateRepository,
        )

        return cls(
            SqlAssetRepository(session),
            SqlPermissionRepository(session),
            SqlRegistryStateRepository(session),
        )

    async def initialize(self, admin_identity: str) -> RegistryState:
        """Create the registry state on first start; later calls keep the stored admin."""
        state = await self._state.get_state()
        if state is None:
            state = await self._state.create_state(admin_identity)
            logger.info("Registry initialised with administrator %s", admin_identity)
        elif state.admin_identity != admin_identity:
            logger.warning(
                "Configured administrator %s ignored; registry was initialised by %s",
                admin_identity,
                state.admin_identity,
            )
        return state

    async def register_asset(self, caller: str, payload: AssetMetadataInput) -> int:
        validate_metadata(payload)

        state = await self._state.advance(register=True)
        asset_id = state.total_registered
        height = state.ledger_height

        await self._assets.insert(
            AssetRecord(
                id=asset_id,
                display_name=payload.display_name,
                owner=caller,
                size_bytes=payload.size_bytes,
                registered_at_height=height,
                description=payload.description,
                category_tags=list(payload.category_tags),
            )
        )
        await self._permissions.insert(asset_id, caller, True)

        logger.info("Asset %s registered by %s at height %s", asset_id, caller, height)
        return asset_id

    async def update_asset(self, caller: str, asset_id: int, payload: AssetMetadataInput) -> AssetRecord:
        record = await self._require_asset(asset_id)
        self._ensure_owner(record, caller)
        validate_metadata(payload)

        updated = await self._assets.put(
            replace(
                record,
                display_name=payload.display_name,
                size_bytes=payload.size_bytes,
                description=payload.description,
                category_tags=list(payload.category_tags),
            )
        )
        await self._advance_height()

        logger.info("Asset %s updated by %s", asset_id, caller)
        return updated

    async def transfer_ownership(self, caller: str, asset_id: int, new_owner: str) -> AssetRecord:
        # Permission entries are left as they are: the previous owner keeps any
        # explicit entry, the new owner relies on implicit access.
        record = await self._require_asset(asset_id)
        self._ensure_owner(record, caller)

        updated = await self._assets.put(replace(record, owner=new_owner))
        await self._advance_height()

        logger.info("Asset %s transferred from %s to %s", asset_id, caller, new_owner)
        return updated

    async def remove_asset(self, caller: str, asset_id: int) -> None:
        # Permission entries for the id are not cleaned up.
        record = await self._require_asset(asset_id)
        self._ensure_owner(record, caller)

        await self._assets.delete(asset_id)
        await self._advance_height()

        logger.info("Asset %s removed by %s", asset_id, caller)

    async def get_asset_information(self, caller: str, asset_id: int) -> AssetRecord:
        record = await self._require_asset(asset_id)
        if record.owner != caller and not await self._permissions.get(asset_id, caller):
            raise VisibilityRestrictedError(f"{caller} may not read asset {asset_id}")
        return record

    async def get_registry_statistics(self) -> RegistryStatistics:
        state = await self._require_state()
        return RegistryStatistics(
            total_registered=state.total_registered,
            admin=state.admin_identity,
        )

    async def get_asset_owner(self, asset_id: int) -> str:
        record = await self._require_asset(asset_id)
        return record.owner

    async def check_user_access_status(self, asset_id: int, user: str) -> AccessStatus:
        record = await self._require_asset(asset_id)
        explicit = await self._permissions.get(asset_id, user)
        is_owner = record.owner == user
        return AccessStatus(
            has_explicit_permission=explicit,
            is_owner=is_owner,
            can_access=is_owner or explicit,
        )

    async def asset_exists(self, asset_id: int) -> bool:
        return await self._assets.exists(asset_id)

    async def _require_asset(self, asset_id: int) -> AssetRecord:
        record = await self._assets.get(asset_id)
        if record is None:
            raise AssetNotFoundError(f"asset {asset_id} does not exist")
        return record

    async def _require_state(self) -> RegistryState:
        state = await self._state.get_state()
        if state is None:
            raise RuntimeError("Registry state is not initialised")
        return state

    async def _advance_height(self) -> int:
        state = await self._state.advance()
        return state.ledger_height

    @staticmethod
    def _ensure_owner(record: AssetRecord, caller: str) -> None:
        if record.owner != caller:
            raise OwnershipVerificationError(
                f"{caller} is not the owner of asset {record.id}"
            )
