# backend/agrismart/services/weather_service.py

"""
Current-weather client (OpenWeatherMap).

- One outbound GET per call, metric units
- Missing API key -> ConfigurationError (raised when the client is built)
- Transport error / non-2xx -> UpstreamUnavailable
- Payload without main.temp / main.humidity / weather[0] -> MalformedResponse
"""

from typing import Optional

import httpx
from pydantic import ValidationError

from agrismart.core.config import settings
from agrismart.core.errors import ConfigurationError, UpstreamUnavailable, MalformedResponse
from agrismart.core.logger import logger
from agrismart.core.utils_logging import error_detail
from agrismart.schemas.weather import OpenWeatherPayload, WeatherObservation


class WeatherClient:
    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        if not api_key:
            raise ConfigurationError(
                "OPENWEATHER_API_KEY is not configured",
                public_message="OpenWeatherMap API key not configured",
            )
        self.http = http
        self.api_key = api_key
        self.base_url = (base_url or settings.OPENWEATHER_BASE_URL).rstrip("/")

    async def fetch_current_weather(self, location: str) -> WeatherObservation:
        logger.info("Fetching weather data", extra={"location": location, "provider": "openweathermap"})

        try:
            resp = await self.http.get(
                f"{self.base_url}/weather",
                params={"q": location, "appid": self.api_key, "units": "metric"},
            )
        except httpx.HTTPError as exc:
            logger.error("Weather provider unreachable", extra={"location": location, **error_detail(exc)})
            raise UpstreamUnavailable(
                f"weather provider unreachable: {exc}",
                public_message="Failed to fetch weather data",
            ) from exc

        if not resp.is_success:
            logger.error(
                "Weather provider error",
                extra={"location": location, "status_code": resp.status_code, "error": resp.text[:500]},
            )
            raise UpstreamUnavailable(
                f"weather provider returned {resp.status_code}",
                public_message="Failed to fetch weather data",
            )

        try:
            payload = OpenWeatherPayload.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise MalformedResponse(
                f"unexpected weather payload: {exc}",
                public_message="Failed to fetch weather data",
            ) from exc

        condition = payload.weather[0]
        return WeatherObservation(
            temperature=payload.main.temp,
            humidity=payload.main.humidity,
            condition=condition.main,
            description=condition.description,
        )
