import random

import httpx
import pytest

from agrismart.core.errors import ConfigurationError, MalformedResponse, UpstreamUnavailable
from agrismart.services.soil_service import fetch_weather_reading
from agrismart.services.weather_service import WeatherClient

from conftest import openweather_payload


async def test_fetch_current_weather_maps_provider_fields(providers):
    providers.weather_json = openweather_payload(temp=27.3, humidity=64, main="Clouds", description="broken clouds")

    async with providers.client() as http:
        weather = await WeatherClient(http, api_key="k").fetch_current_weather("Nairobi")

    assert weather.temperature == 27.3
    assert weather.humidity == 64
    assert weather.condition == "Clouds"
    assert weather.description == "broken clouds"

    request = providers.requests[0]
    assert request.url.path == "/data/2.5/weather"
    assert request.url.params["q"] == "Nairobi"
    assert request.url.params["appid"] == "k"
    assert request.url.params["units"] == "metric"


def test_missing_api_key_is_a_configuration_error(providers):
    with pytest.raises(ConfigurationError):
        WeatherClient(providers.client(), api_key=None)
    with pytest.raises(ConfigurationError):
        WeatherClient(providers.client(), api_key="")


async def test_non_success_status_is_upstream_unavailable(providers):
    providers.weather_status = 404
    providers.weather_json = {"cod": "404", "message": "city not found"}

    async with providers.client() as http:
        with pytest.raises(UpstreamUnavailable):
            await WeatherClient(http, api_key="k").fetch_current_weather("Atlantis")


async def test_transport_failure_is_upstream_unavailable(providers):
    providers.fail_with = httpx.ConnectError("connection refused")

    async with providers.client() as http:
        with pytest.raises(UpstreamUnavailable):
            await WeatherClient(http, api_key="k").fetch_current_weather("Pune")


@pytest.mark.parametrize(
    "payload",
    [
        {"main": {"temp": 20, "humidity": 40}, "weather": []},
        {"main": {"temp": 20}, "weather": [{"main": "Rain", "description": "rain"}]},
        {"weather": [{"main": "Rain", "description": "rain"}]},
        {"main": {"temp": 20, "humidity": 140}, "weather": [{"main": "Rain", "description": "rain"}]},
    ],
)
async def test_unexpected_payload_is_malformed(providers, payload):
    providers.weather_json = payload

    async with providers.client() as http:
        with pytest.raises(MalformedResponse):
            await WeatherClient(http, api_key="k").fetch_current_weather("Pune")


async def test_fetch_weather_reading_derives_soil_values(providers):
    providers.weather_json = openweather_payload(humidity=80, main="Clear", description="clear sky")

    async with providers.client() as http:
        reading = await fetch_weather_reading(WeatherClient(http, api_key="k"), "Pune", random.Random(3))

    assert reading.weather_condition == "Clear"
    assert reading.description == "clear sky"
    assert reading.soil_moisture == pytest.approx(46.0)
    assert 25 <= reading.nitrogen <= 39
