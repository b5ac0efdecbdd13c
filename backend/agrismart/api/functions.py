# backend/agrismart/api/functions.py

"""
Function-style endpoints consumed directly by the web client.
Each path also answers a bare OPTIONS probe with an empty 200.
"""

from fastapi import APIRouter, Depends, Response

from agrismart.api.deps import get_weather_client, get_chat_client, get_random_source
from agrismart.core.auth import get_current_user_id
from agrismart.schemas.chat import ChatRequest, ChatResponse
from agrismart.schemas.recommendation import (
    GenerateRecommendationsRequest,
    GenerateRecommendationsResponse,
)
from agrismart.schemas.weather import WeatherRequest, DerivedReading
from agrismart.services.ai_service import ChatCompletionClient
from agrismart.services.recommendation_service import synthesize_recommendations
from agrismart.services.soil_service import RandomSource, fetch_weather_reading
from agrismart.services.weather_service import WeatherClient

router = APIRouter(prefix="/functions", tags=["functions"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def _probe() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


@router.options("/fetch-weather")
async def fetch_weather_probe():
    return _probe()


@router.post("/fetch-weather", response_model=DerivedReading)
async def fetch_weather(
    payload: WeatherRequest,
    _user_id: str = Depends(get_current_user_id),
    client: WeatherClient = Depends(get_weather_client),
    rng: RandomSource = Depends(get_random_source),
):
    return await fetch_weather_reading(client, payload.location, rng)


@router.options("/generate-recommendations")
async def generate_recommendations_probe():
    return _probe()


@router.post("/generate-recommendations", response_model=GenerateRecommendationsResponse)
async def generate_recommendations(
    payload: GenerateRecommendationsRequest,
    _user_id: str = Depends(get_current_user_id),
    client: ChatCompletionClient = Depends(get_chat_client),
):
    drafts = await synthesize_recommendations(client, payload.farm, payload.monitoring)
    return GenerateRecommendationsResponse(recommendations=drafts)


@router.options("/chat")
async def chat_probe():
    return _probe()


@router.post("/chat", response_model=ChatResponse)
async def chat(
    payload: ChatRequest,
    _user_id: str = Depends(get_current_user_id),
    client: ChatCompletionClient = Depends(get_chat_client),
):
    reply = await client.complete([m.model_dump() for m in payload.messages])
    return ChatResponse(response=reply)
