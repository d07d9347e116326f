"""Pydantic schemas used by the HTTP interface.

Request models only carry types. Field bounds are enforced by the registry
service so that callers receive the registry error code instead of a generic
validation response.
"""
from pydantic import BaseModel, ConfigDict, Field


class AssetMetadataRequest(BaseModel):
    display_name: str
    size_bytes: int
    description: str
    category_tags: list[str]


class AssetRegisteredResponse(BaseModel):
    asset_id: int


class TransferOwnershipRequest(BaseModel):
    new_owner: str = Field(..., min_length=1)


class AssetResponse(BaseModel):
    id: int
    display_name: str
    owner: str
    size_bytes: int
    registered_at_height: int
    description: str
    category_tags: list[str]

    model_config = ConfigDict(from_attributes=True)


class AssetOwnerResponse(BaseModel):
    asset_id: int
    owner: str


class AssetExistsResponse(BaseModel):
    asset_id: int
    exists: bool


class AccessStatusResponse(BaseModel):
    has_explicit_permission: bool
    is_owner: bool
    can_access: bool

    model_config = ConfigDict(from_attributes=True)


class RegistryStatisticsResponse(BaseModel):
    total_registered: int
    admin: str

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    error: str
    code: int
    detail: str
