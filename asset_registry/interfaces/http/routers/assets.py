"""Asset registration, mutation and query endpoints."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from asset_registry.core.security import get_current_identity
from asset_registry.interfaces.http.deps import get_db_session
from asset_registry.modules.assets import AssetMetadataInput
from asset_registry.modules.registry import RegistryService
from asset_registry.schemas import (
    AccessStatusResponse,
    AssetExistsResponse,
    AssetMetadataRequest,
    AssetOwnerResponse,
    AssetRegisteredResponse,
    AssetResponse,
    TransferOwnershipRequest,
)

router = APIRouter()


def _to_input(payload: AssetMetadataRequest) -> AssetMetadataInput:
    return AssetMetadataInput(
        display_name=payload.display_name,
        size_bytes=payload.size_bytes,
        description=payload.description,
        category_tags=list(payload.category_tags),
    )


@router.post(
    "",
    response_model=AssetRegisteredResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new asset owned by the caller",
)
async def register_asset(
    payload: AssetMetadataRequest,
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db_session),
) -> AssetRegisteredResponse:
    service = RegistryService.with_session(db)
    asset_id = await service.register_asset(identity, _to_input(payload))
    await db.commit()
    return AssetRegisteredResponse(asset_id=asset_id)


@router.put("/{asset_id}", response_model=AssetResponse, summary="Replace an asset's metadata")
async def update_asset(
    asset_id: int,
    payload: AssetMetadataRequest,
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db_session),
) -> AssetResponse:
    service = RegistryService.with_session(db)
    record = await service.update_asset(identity, asset_id, _to_input(payload))
    await db.commit()
    return AssetResponse.model_validate(record)


@router.post("/{asset_id}/transfer", response_model=AssetResponse, summary="Transfer ownership")
async def transfer_ownership(
    asset_id: int,
    payload: TransferOwnershipRequest,
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db_session),
) -> AssetResponse:
    service = RegistryService.with_session(db)
    record = await service.transfer_ownership(identity, asset_id, payload.new_owner)
    await db.commit()
    return AssetResponse.model_validate(record)


@router.delete(
    "/{asset_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Remove an asset permanently",
)
async def remove_asset(
    asset_id: int,
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    service = RegistryService.with_session(db)
    await service.remove_asset(identity, asset_id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{asset_id}", response_model=AssetResponse, summary="Read an asset as owner or grantee")
async def get_asset_information(
    asset_id: int,
    identity: str = Depends(get_current_identity),
    db: AsyncSession = Depends(get_db_session),
) -> AssetResponse:
    service = RegistryService.with_session(db)
    record = await service.get_asset_information(identity, asset_id)
    return AssetResponse.model_validate(record)


@router.get("/{asset_id}/owner", response_model=AssetOwnerResponse, summary="Look up an asset's owner")
async def get_asset_owner(asset_id: int, db: AsyncSession = Depends(get_db_session)) -> AssetOwnerResponse:
    service = RegistryService.with_session(db)
    owner = await service.get_asset_owner(asset_id)
    return AssetOwnerResponse(asset_id=asset_id, owner=owner)


@router.get("/{asset_id}/exists", response_model=AssetExistsResponse, summary="Check whether an asset exists")
async def asset_exists(asset_id: int, db: AsyncSession = Depends(get_db_session)) -> AssetExistsResponse:
    service = RegistryService.with_session(db)
    return AssetExistsResponse(asset_id=asset_id, exists=await service.asset_exists(asset_id))


@router.get(
    "/{asset_id}/access/{user}",
    response_model=AccessStatusResponse,
    summary="Report a user's access to an asset",
)
async def check_user_access_status(
    asset_id: int,
    user: str,
    db: AsyncSession = Depends(get_db_session),
) -> AccessStatusResponse:
    service = RegistryService.with_session(db)
    access = await service.check_user_access_status(asset_id, user)
    return AccessStatusResponse.model_validate(access)
