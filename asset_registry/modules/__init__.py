"""Domain modules and shared exports."""

from . import assets, common, permissions, registry

__all__ = [
    "assets",
    "common",
    "permissions",
    "registry",
]
