"""SQLAlchemy implementation of the registry counter and logical clock."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from asset_registry.db.models import RegistryStateRow
from asset_registry.modules.registry.models import RegistryState
from asset_registry.modules.registry.repository import RegistryStateRepository

STATE_ROW_ID = 1


class SqlRegistryStateRepository(RegistryStateRepository):
    """Single-row table holding the counter, the logical height and the admin."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_state(self) -> RegistryState | None:
        stmt = (
            select(RegistryStateRow)
            .where(RegistryStateRow.id == STATE_ROW_ID)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def create_state(self, admin_identity: str) -> RegistryState:
        model = RegistryStateRow(
            id=STATE_ROW_ID,
            total_registered=0,
            ledger_height=0,
            admin_identity=admin_identity,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_domain(model)

    async def advance(self, *, register: bool = False) -> RegistryState:
        # Single UPDATE so concurrent writers queue on the row (or the SQLite
        # write lock) and each sees the previous writer's committed values.
        stmt = (
            update(RegistryStateRow)
            .where(RegistryStateRow.id == STATE_ROW_ID)
            .values(
                total_registered=RegistryStateRow.total_registered + (1 if register else 0),
                ledger_height=RegistryStateRow.ledger_height + 1,
            )
            .execution_options(synchronize_session="fetch")
            .returning(
                RegistryStateRow.total_registered,
                RegistryStateRow.ledger_height,
                RegistryStateRow.admin_identity,
            )
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        if row is None:
            raise RuntimeError("Registry state is not initialised")
        return RegistryState(
            total_registered=row.total_registered,
            ledger_height=row.ledger_height,
            admin_identity=row.admin_identity,
        )

    @staticmethod
    def _to_domain(model: RegistryStateRow) -> RegistryState:
        return RegistryState(
            total_registered=model.total_registered,
            ledger_height=model.ledger_height,
            admin_identity=model.admin_identity,
        )
