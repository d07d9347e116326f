"""Repository protocol for the registry counter and logical clock."""

from __future__ import annotations

from typing import Protocol

from .models import RegistryState


class RegistryStateRepository(Protocol):
    async def get_state(self) -> RegistryState | None:
        ...

    async def create_state(self, admin_identity: str) -> RegistryState:
        ...

    async def advance(self, *, register: bool = False) -> RegistryState:
        """Atomically advance the logical height, and the counter when ``register``.

        Returns the state after the increment. Raises ``RuntimeError`` when the
        state row does not exist.
        """
        ...
