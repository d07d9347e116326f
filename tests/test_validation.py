"""Tests for asset metadata bounds."""

import pytest

from asset_registry.modules.common.exceptions import (
    CategoryValidationError,
    MetadataValidationError,
    SizeConstraintError,
)
from asset_registry.modules.registry.validation import (
    CATEGORY_TAG_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    DISPLAY_NAME_MAX_LENGTH,
    MAX_CATEGORY_TAGS,
    MAX_SIZE_BYTES,
    validate_metadata,
)

from tests.factories import make_metadata


class TestValidateMetadata:
    """Test validate_metadata."""

    def test_accepts_typical_payload(self):
        validate_metadata(make_metadata())

    def test_accepts_upper_bounds(self):
        validate_metadata(
            make_metadata(
                display_name="n" * DISPLAY_NAME_MAX_LENGTH,
                size_bytes=MAX_SIZE_BYTES,
                description="d" * DESCRIPTION_MAX_LENGTH,
                category_tags=["t" * CATEGORY_TAG_MAX_LENGTH] * MAX_CATEGORY_TAGS,
            )
        )

    def test_accepts_lower_bounds(self):
        validate_metadata(make_metadata(display_name="n", size_bytes=1, description="d", category_tags=["t"]))

    @pytest.mark.parametrize("name", ["", "n" * (DISPLAY_NAME_MAX_LENGTH + 1)])
    def test_display_name_out_of_bounds(self, name):
        with pytest.raises(MetadataValidationError):
            validate_metadata(make_metadata(display_name=name))

    @pytest.mark.parametrize("size", [0, -5, MAX_SIZE_BYTES + 1])
    def test_size_out_of_bounds(self, size):
        with pytest.raises(SizeConstraintError):
            validate_metadata(make_metadata(size_bytes=size))

    @pytest.mark.parametrize("description", ["", "d" * (DESCRIPTION_MAX_LENGTH + 1)])
    def test_description_out_of_bounds(self, description):
        with pytest.raises(MetadataValidationError):
            validate_metadata(make_metadata(description=description))

    def test_no_tags(self):
        with pytest.raises(CategoryValidationError):
            validate_metadata(make_metadata(category_tags=[]))

    def test_too_many_tags(self):
        with pytest.raises(CategoryValidationError):
            validate_metadata(make_metadata(category_tags=[f"tag{i}" for i in range(11)]))

    @pytest.mark.parametrize("tag", ["", "t" * (CATEGORY_TAG_MAX_LENGTH + 1)])
    def test_tag_length_out_of_bounds(self, tag):
        with pytest.raises(CategoryValidationError):
            validate_metadata(make_metadata(category_tags=["ok", tag]))

    def test_first_violation_wins(self):
        """Name is checked before size, size before tags."""
        with pytest.raises(MetadataValidationError):
            validate_metadata(make_metadata(display_name="", size_bytes=0, category_tags=[]))
        with pytest.raises(SizeConstraintError):
            validate_metadata(make_metadata(size_bytes=0, category_tags=[]))

    def test_error_codes(self):
        with pytest.raises(SizeConstraintError) as exc_info:
            validate_metadata(make_metadata(size_bytes=1_000_000_000))
        assert exc_info.value.name == "SizeConstraintViolation"
        assert exc_info.value.code == 104
