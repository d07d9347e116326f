"""Registry domain specific exceptions.

Every error carries a symbolic ``name`` and a numeric ``code`` that stay stable
across releases so that clients and log processors can match on them, plus the
HTTP status the API layer answers with.
"""


class RegistryError(Exception):
    """Base class for registry domain errors."""

    name = "RegistryError"
    code = 0
    status_code = 400

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.name)
        self.message = message or self.name


class AdminRequiredError(RegistryError):
    """Reserved for administrator-only operations."""

    name = "AdminRequired"
    code = 100
    status_code = 403


class AssetNotFoundError(RegistryError):
    """Raised when the referenced asset id has no record."""

    name = "AssetNotFound"
    code = 101
    status_code = 404


class DuplicateRegistrationError(RegistryError):
    """Raised when inserting an asset under an id that is already taken."""

    name = "DuplicateRegistration"
    code = 102
    status_code = 409


class MetadataValidationError(RegistryError):
    """Raised when the display name or description is out of bounds."""

    name = "MetadataValidationFailure"
    code = 103
    status_code = 400


class SizeConstraintError(RegistryError):
    """Raised when the declared size is outside the accepted range."""

    name = "SizeConstraintViolation"
    code = 104
    status_code = 400


class AccessDeniedError(RegistryError):
    """Raised when the caller is neither owner nor explicitly granted."""

    name = "AccessDenied"
    code = 105
    status_code = 403


class OwnershipVerificationError(RegistryError):
    """Raised when a non-owner attempts an owner-only operation."""

    name = "OwnershipVerificationFailed"
    code = 106
    status_code = 403


class VisibilityRestrictedError(AccessDeniedError):
    """Access denial reported by the asset information read."""

    name = "VisibilityRestricted"
    code = 107
    status_code = 403


class CategoryValidationError(RegistryError):
    """Raised when the tag count or a tag length is out of bounds."""

    name = "CategoryValidationError"
    code = 108
    status_code = 400


class InvalidAccessGrantError(RegistryError):
    """Reserved for explicit permission grants."""

    name = "InvalidAccessGrant"
    code = 109
    status_code = 400


class PermissionAlreadyExistsError(RegistryError):
    """Reserved for explicit permission grants."""

    name = "PermissionAlreadyExists"
    code = 110
    status_code = 409
