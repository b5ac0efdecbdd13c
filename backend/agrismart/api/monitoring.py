# backend/agrismart/api/monitoring.py
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from agrismart.api.deps import get_owned_farm, get_weather_client, get_random_source
from agrismart.core.database import get_db
from agrismart.crud import monitoring as crud_monitoring
from agrismart.models.farm import Farm
from agrismart.schemas.monitoring import MonitoringReading, MonitoringReadingCreate
from agrismart.services.monitoring_service import ingest_weather_for_farm
from agrismart.services.soil_service import RandomSource
from agrismart.services.weather_service import WeatherClient

router = APIRouter(prefix="/farms/{farm_id}/monitoring", tags=["monitoring"])


@router.get("/", response_model=List[MonitoringReading])
async def monitoring_history(
    limit: int = Query(crud_monitoring.DEFAULT_HISTORY_LIMIT, ge=1, le=500),
    farm: Farm = Depends(get_owned_farm),
    db: AsyncSession = Depends(get_db),
):
    return await crud_monitoring.list_history(db, farm.id, limit)


@router.get("/latest", response_model=Optional[MonitoringReading])
async def monitoring_latest(
    farm: Farm = Depends(get_owned_farm),
    db: AsyncSession = Depends(get_db),
):
    return await crud_monitoring.get_latest_reading(db, farm.id)


@router.post("/", response_model=MonitoringReading, status_code=status.HTTP_201_CREATED)
async def add_reading(
    payload: MonitoringReadingCreate,
    farm: Farm = Depends(get_owned_farm),
    db: AsyncSession = Depends(get_db),
):
    return await crud_monitoring.append_reading(db, farm.id, payload)


@router.post("/fetch-weather", response_model=MonitoringReading, status_code=status.HTTP_201_CREATED)
async def fetch_and_store_weather(
    farm: Farm = Depends(get_owned_farm),
    db: AsyncSession = Depends(get_db),
    client: WeatherClient = Depends(get_weather_client),
    rng: RandomSource = Depends(get_random_source),
):
    return await ingest_weather_for_farm(db, client, farm, rng)
