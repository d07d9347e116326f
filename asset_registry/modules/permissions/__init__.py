"""Permission store domain exports."""

from .models import PermissionEntry
from .repository import PermissionRepository

__all__ = [
    "PermissionEntry",
    "PermissionRepository",
]
