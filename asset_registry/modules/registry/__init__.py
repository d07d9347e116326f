"""Registry service domain exports."""

from .models import AccessStatus, RegistryState, RegistryStatistics
from .service import RegistryService
from .validation import validate_metadata

__all__ = [
    "AccessStatus",
    "RegistryService",
    "RegistryState",
    "RegistryStatistics",
    "validate_metadata",
]
