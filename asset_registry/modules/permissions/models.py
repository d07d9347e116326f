"""Domain models for explicit read grants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PermissionEntry:
    asset_id: int
    identity: str
    granted: bool
