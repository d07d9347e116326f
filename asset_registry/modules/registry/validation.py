"""Field bounds for asset metadata.

Checks run in a fixed order (name, size, description, tags) and stop at the
first violation.
"""

from __future__ import annotations

from asset_registry.modules.assets.models import AssetMetadataInput
from asset_registry.modules.common.exceptions import (
    CategoryValidationError,
    MetadataValidationError,
    SizeConstraintError,
)

DISPLAY_NAME_MAX_LENGTH = 64
DESCRIPTION_MAX_LENGTH = 128
MIN_SIZE_BYTES = 1
MAX_SIZE_BYTES = 999_999_999
MAX_CATEGORY_TAGS = 10
CATEGORY_TAG_MAX_LENGTH = 32


def _within(value: str, upper: int) -> bool:
    return 1 <= len(value) <= upper


def validate_metadata(payload: AssetMetadataInput) -> None:
    if not _within(payload.display_name, DISPLAY_NAME_MAX_LENGTH):
        raise MetadataValidationError(
            f"display name must be 1-{DISPLAY_NAME_MAX_LENGTH} characters"
        )
    # bool is an int subclass; reject it explicitly
    if isinstance(payload.size_bytes, bool) or not (
        MIN_SIZE_BYTES <= payload.size_bytes <= MAX_SIZE_BYTES
    ):
        raise SizeConstraintError(
            f"size must be between {MIN_SIZE_BYTES} and {MAX_SIZE_BYTES} bytes"
        )
    if not _within(payload.description, DESCRIPTION_MAX_LENGTH):
        raise MetadataValidationError(
            f"description must be 1-{DESCRIPTION_MAX_LENGTH} characters"
        )
    if not 1 <= len(payload.category_tags) <= MAX_CATEGORY_TAGS:
        raise CategoryValidationError(
            f"between 1 and {MAX_CATEGORY_TAGS} category tags are required"
        )
    for tag in payload.category_tags:
        if not _within(tag, CATEGORY_TAG_MAX_LENGTH):
            raise CategoryValidationError(
                f"category tags must be 1-{CATEGORY_TAG_MAX_LENGTH} characters"
            )


__all__ = [
    "CATEGORY_TAG_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    "DISPLAY_NAME_MAX_LENGTH",
    "MAX_CATEGORY_TAGS",
    "MAX_SIZE_BYTES",
    "MIN_SIZE_BYTES",
    "validate_metadata",
]
