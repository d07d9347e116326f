"""Asset store domain exports."""

from .models import MAX_ASSET_ID, AssetMetadataInput, AssetRecord, is_storable_id
from .repository import AssetRepository

__all__ = [
    "MAX_ASSET_ID",
    "AssetMetadataInput",
    "AssetRecord",
    "AssetRepository",
    "is_storable_id",
]
