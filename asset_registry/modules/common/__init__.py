"""Shared domain primitives."""

from .exceptions import (
    AccessDeniedError,
    AdminRequiredError,
    AssetNotFoundError,
    CategoryValidationError,
    DuplicateRegistrationError,
    InvalidAccessGrantError,
    MetadataValidationError,
    OwnershipVerificationError,
    PermissionAlreadyExistsError,
    RegistryError,
    SizeConstraintError,
    VisibilityRestrictedError,
)

__all__ = [
    "AccessDeniedError",
    "AdminRequiredError",
    "AssetNotFoundError",
    "CategoryValidationError",
    "DuplicateRegistrationError",
    "InvalidAccessGrantError",
    "MetadataValidationError",
    "OwnershipVerificationError",
    "PermissionAlreadyExistsError",
    "RegistryError",
    "SizeConstraintError",
    "VisibilityRestrictedError",
]
