import random

import httpx
import pytest
from httpx import ASGITransport

import agrismart.models  # noqa: F401
from agrismart.api import deps
from agrismart.core.auth import get_current_user_id
from agrismart.core.config import settings
from agrismart.core.database import Base, get_db, make_session_factory
from agrismart.crud.farms import create_farm
from agrismart.main import app
from agrismart.models.farm import SoilTypeEnum
from agrismart.schemas.farm import FarmCreate

USER_ID = "6f1c2b9e-0c4d-4d5a-9a57-2f3e1b7c8d90"
OTHER_USER_ID = "0b8e5f4a-3c2d-4e1f-8a9b-7c6d5e4f3a21"

WEATHER_HOST = "api.openweathermap.org"
AI_HOST = "ai.gateway.lovable.dev"


def openweather_payload(temp=24.0, humidity=50, main="Rain", description="light rain"):
    return {
        "coord": {"lon": 73.86, "lat": 18.52},
        "main": {"temp": temp, "humidity": humidity, "pressure": 1012},
        "weather": [{"id": 500, "main": main, "description": description}],
        "name": "Pune",
    }


def completion_payload(text):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": text}}]}


class FakeProviders:
    """Routes outbound httpx calls to canned weather / AI answers and records them."""

    def __init__(self):
        self.weather_status = 200
        self.weather_json = openweather_payload()
        self.ai_status = 200
        self.ai_json = completion_payload("Plant drought-tolerant wheat varieties.")
        self.fail_with = None
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        if request.url.host == WEATHER_HOST:
            return httpx.Response(self.weather_status, json=self.weather_json)
        if request.url.host == AI_HOST:
            return httpx.Response(self.ai_status, json=self.ai_json)
        return httpx.Response(404, json={"message": "unknown host"})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def providers():
    return FakeProviders()


@pytest.fixture
async def session_factory(tmp_path):
    engine, factory = make_session_factory(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield factory
    await engine.dispose()


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def farm(db):
    return await create_farm(
        db,
        USER_ID,
        FarmCreate(
            farm_name="Green Acres",
            location="Pune",
            area_size=12.5,
            soil_type=SoilTypeEnum.loamy,
            crop_type="wheat",
        ),
    )


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setattr(settings, "OPENWEATHER_API_KEY", "test-weather-key")
    monkeypatch.setattr(settings, "AI_GATEWAY_API_KEY", "test-ai-key")


@pytest.fixture
async def client(session_factory, providers, configured):
    async def override_db():
        async with session_factory() as session:
            yield session

    async def override_http():
        async with providers.client() as http:
            yield http

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_current_user_id] = lambda: USER_ID
    app.dependency_overrides[deps.get_http_client] = override_http
    app.dependency_overrides[deps.get_random_source] = lambda: random.Random(1234)

    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
