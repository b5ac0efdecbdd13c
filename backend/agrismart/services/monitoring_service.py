# backend/agrismart/services/monitoring_service.py

from sqlalchemy.ext.asyncio import AsyncSession

from agrismart.core.logger import logger
from agrismart.crud import monitoring as crud_monitoring
from agrismart.models.farm import Farm
from agrismart.models.monitoring import MonitoringReading
from agrismart.schemas.monitoring import MonitoringReadingCreate
from agrismart.services.soil_service import RandomSource, fetch_weather_reading
from agrismart.services.weather_service import WeatherClient


async def ingest_weather_for_farm(
    db: AsyncSession,
    client: WeatherClient,
    farm: Farm,
    rng: RandomSource,
) -> MonitoringReading:
    """Fetch weather at the farm's location, derive soil values, append the reading."""
    derived = await fetch_weather_reading(client, farm.location, rng)

    reading = await crud_monitoring.append_reading(
        db,
        farm.id,
        MonitoringReadingCreate(
            temperature=derived.temperature,
            humidity=derived.humidity,
            soil_moisture=derived.soil_moisture,
            soil_ph=derived.soil_ph,
            nitrogen=derived.nitrogen,
            phosphorus=derived.phosphorus,
            potassium=derived.potassium,
            weather_condition=derived.weather_condition,
        ),
    )
    logger.info("Weather reading stored", extra={"farm_id": farm.id, "location": farm.location})
    return reading
