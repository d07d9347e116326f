"""Registry-wide statistics endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from asset_registry.interfaces.http.deps import get_db_session
from asset_registry.modules.registry import RegistryService
from asset_registry.schemas import RegistryStatisticsResponse

router = APIRouter()


@router.get("/statistics", response_model=RegistryStatisticsResponse, summary="Registry counters")
async def get_registry_statistics(db: AsyncSession = Depends(get_db_session)) -> RegistryStatisticsResponse:
    service = RegistryService.with_session(db)
    statistics = await service.get_registry_statistics()
    return RegistryStatisticsResponse.model_validate(statistics)
