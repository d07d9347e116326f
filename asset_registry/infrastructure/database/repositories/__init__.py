"""SQLAlchemy-backed repository implementations."""

from .asset_repository import SqlAssetRepository
from .permission_repository import SqlPermissionRepository
from .registry_state_repository import SqlRegistryStateRepository

__all__ = [
    "SqlAssetRepository",
    "SqlPermissionRepository",
    "SqlRegistryStateRepository",
]
