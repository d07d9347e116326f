"""Repository protocol for per-(asset, identity) grants."""

from __future__ import annotations

from typing import Protocol

from .models import PermissionEntry


class PermissionRepository(Protocol):
    async def get(self, asset_id: int, identity: str) -> bool:
        """Return the stored flag, ``False`` when no entry exists."""
        ...

    async def insert(self, asset_id: int, identity: str, granted: bool) -> PermissionEntry:
        ...
