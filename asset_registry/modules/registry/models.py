"""Domain models for registry-wide state and query results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class RegistryState:
    total_registered: int
    ledger_height: int
    admin_identity: str


@dataclass(slots=True)
class RegistryStatistics:
    total_registered: int
    admin: str


@dataclass(slots=True)
class AccessStatus:
    has_explicit_permission: bool
    is_owner: bool
    can_access: bool
