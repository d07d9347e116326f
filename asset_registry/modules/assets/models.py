"""Domain models for registered assets."""

from __future__ import annotations

from dataclasses import dataclass, field

# Ids live in a signed 64-bit INTEGER column; anything outside 1..MAX_ASSET_ID
# can never have been allocated.
MAX_ASSET_ID = 2**63 - 1


def is_storable_id(asset_id: int) -> bool:
    return 1 <= asset_id <= MAX_ASSET_ID


@dataclass(slots=True)
class AssetRecord:
    id: int
    display_name: str
    owner: str
    size_bytes: int
    registered_at_height: int
    description: str
    category_tags: list[str] = field(default_factory=list)


@dataclass(slots=True)
class AssetMetadataInput:
    """Caller supplied fields shared by registration and update."""

    display_name: str
    size_bytes: int
    description: str
    category_tags: list[str]
