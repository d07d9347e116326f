"""Repository protocol for the asset store."""

from __future__ import annotations

from typing import Protocol

from .models import AssetRecord


class AssetRepository(Protocol):
    """Id-keyed asset storage.

    ``insert`` never overwrites: it raises ``DuplicateRegistrationError`` when
    the id is taken. ``put`` and ``delete`` raise ``AssetNotFoundError`` for
    unknown ids.
    """

    async def get(self, asset_id: int) -> AssetRecord | None:
        ...

    async def exists(self, asset_id: int) -> bool:
        ...

    async def insert(self, record: AssetRecord) -> AssetRecord:
        ...

    async def put(self, record: AssetRecord) -> AssetRecord:
        ...

    async def delete(self, asset_id: int) -> None:
        ...
