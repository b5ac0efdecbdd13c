# backend/agrismart/api/deps.py

import random
from typing import AsyncIterator
from uuid import UUID

import httpx
from fastapi import Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from agrismart.core.auth import get_current_user_id
from agrismart.core.config import settings
from agrismart.core.database import get_db
from agrismart.crud import farms as crud_farms
from agrismart.models.farm import Farm
from agrismart.services.ai_service import ChatCompletionClient
from agrismart.services.soil_service import RandomSource
from agrismart.services.weather_service import WeatherClient


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS) as client:
        yield client


async def get_weather_client(http: httpx.AsyncClient = Depends(get_http_client)) -> WeatherClient:
    return WeatherClient(http, api_key=settings.OPENWEATHER_API_KEY)


async def get_chat_client(http: httpx.AsyncClient = Depends(get_http_client)) -> ChatCompletionClient:
    return ChatCompletionClient(http, api_key=settings.AI_GATEWAY_API_KEY)


def get_random_source() -> RandomSource:
    return random.Random()


async def get_owned_farm(
    farm_id: UUID,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> Farm:
    farm = await crud_farms.get_farm_for_user(db, str(farm_id), user_id)
    if not farm:
        raise HTTPException(status_code=404, detail="Farm not found")
    return farm
