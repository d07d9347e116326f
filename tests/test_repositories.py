"""Tests for the SQL-backed stores."""

import pytest

from asset_registry.infrastructure.database.repositories import (
    SqlAssetRepository,
    SqlPermissionRepository,
    SqlRegistryStateRepository,
)
from asset_registry.modules.assets import MAX_ASSET_ID, AssetRecord
from asset_registry.modules.common.exceptions import (
    AssetNotFoundError,
    DuplicateRegistrationError,
)

pytestmark = pytest.mark.anyio


def _record(asset_id: int = 1, **overrides) -> AssetRecord:
    fields = {
        "id": asset_id,
        "display_name": "clip.mp4",
        "owner": "alice",
        "size_bytes": 4096,
        "registered_at_height": 1,
        "description": "A short clip",
        "category_tags": ["video", "draft"],
    }
    fields.update(overrides)
    return AssetRecord(**fields)


class TestSqlAssetRepository:
    """Test the asset store."""

    async def test_insert_and_get(self, session):
        repo = SqlAssetRepository(session)
        await repo.insert(_record())

        stored = await repo.get(1)
        assert stored == _record()
        assert await repo.exists(1)

    async def test_get_missing_returns_none(self, session):
        repo = SqlAssetRepository(session)
        assert await repo.get(42) is None
        assert not await repo.exists(42)

    async def test_insert_never_overwrites(self, session):
        repo = SqlAssetRepository(session)
        await repo.insert(_record())

        with pytest.raises(DuplicateRegistrationError):
            await repo.insert(_record(display_name="other"))

        stored = await repo.get(1)
        assert stored.display_name == "clip.mp4"

    async def test_put_replaces_fields(self, session):
        repo = SqlAssetRepository(session)
        await repo.insert(_record())

        await repo.put(_record(owner="bob", category_tags=["final"]))

        stored = await repo.get(1)
        assert stored.owner == "bob"
        assert stored.category_tags == ["final"]

    async def test_put_missing_raises(self, session):
        repo = SqlAssetRepository(session)
        with pytest.raises(AssetNotFoundError):
            await repo.put(_record(7))

    async def test_delete(self, session):
        repo = SqlAssetRepository(session)
        await repo.insert(_record())

        await repo.delete(1)

        assert await repo.get(1) is None
        with pytest.raises(AssetNotFoundError):
            await repo.delete(1)

    async def test_tag_order_preserved(self, session):
        repo = SqlAssetRepository(session)
        tags = ["zeta", "alpha", "mu", "ünïcode"]
        await repo.insert(_record(category_tags=tags))

        stored = await repo.get(1)
        assert stored.category_tags == tags

    @pytest.mark.parametrize("asset_id", [0, -1, MAX_ASSET_ID + 1, 2**64])
    async def test_unstorable_ids_are_absent(self, session, asset_id):
        repo = SqlAssetRepository(session)

        assert await repo.get(asset_id) is None
        assert not await repo.exists(asset_id)
        with pytest.raises(AssetNotFoundError):
            await repo.put(_record(asset_id))
        with pytest.raises(AssetNotFoundError):
            await repo.delete(asset_id)


class TestSqlPermissionRepository:
    """Test the permission store."""

    async def test_absent_entry_is_false(self, session):
        repo = SqlPermissionRepository(session)
        assert await repo.get(1, "alice") is False

    async def test_insert_and_get(self, session):
        repo = SqlPermissionRepository(session)
        entry = await repo.insert(1, "alice", True)

        assert entry.granted is True
        assert await repo.get(1, "alice") is True
        assert await repo.get(1, "bob") is False
        assert await repo.get(2, "alice") is False

    async def test_insert_overwrites_flag(self, session):
        repo = SqlPermissionRepository(session)
        await repo.insert(1, "alice", True)
        await repo.insert(1, "alice", False)

        assert await repo.get(1, "alice") is False

    async def test_unstorable_id_is_false(self, session):
        repo = SqlPermissionRepository(session)
        assert await repo.get(2**64, "alice") is False


class TestSqlRegistryStateRepository:
    """Test the registry state row."""

    async def test_missing_state(self, session):
        repo = SqlRegistryStateRepository(session)
        assert await repo.get_state() is None

    async def test_create_and_advance(self, session):
        repo = SqlRegistryStateRepository(session)
        created = await repo.create_state("deployer")
        assert created.total_registered == 0
        assert created.ledger_height == 0

        registered = await repo.advance(register=True)
        assert registered.total_registered == 1
        assert registered.ledger_height == 1

        advanced = await repo.advance()
        assert advanced.total_registered == 1
        assert advanced.ledger_height == 2

        state = await repo.get_state()
        assert state.total_registered == 1
        assert state.ledger_height == 2
        assert state.admin_identity == "deployer"

    async def test_advance_without_state_raises(self, session):
        repo = SqlRegistryStateRepository(session)
        with pytest.raises(RuntimeError):
            await repo.advance(register=True)

