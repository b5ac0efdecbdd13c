import time

import jwt
import pytest
from fastapi import HTTPException

from agrismart.core.auth import get_current_user_id, verify_token
from agrismart.core.config import settings
from agrismart.core.errors import ConfigurationError
from agrismart.main import app

from conftest import USER_ID

SECRET = "test-jwt-secret-with-enough-length-1234"


@pytest.fixture(autouse=True)
def jwt_secret(monkeypatch):
    monkeypatch.setattr(settings, "SUPABASE_JWT_SECRET", SECRET)


def make_token(**claims):
    payload = {"sub": USER_ID, "aud": "authenticated", "exp": int(time.time()) + 600, **claims}
    return jwt.encode(payload, SECRET, algorithm="HS256")


def test_valid_token_returns_claims():
    assert verify_token(make_token())["sub"] == USER_ID


def test_expired_token_is_rejected():
    with pytest.raises(HTTPException) as exc:
        verify_token(make_token(exp=int(time.time()) - 10))
    assert exc.value.status_code == 401
    assert exc.value.detail == "Token expired"


def test_token_signed_with_other_secret_is_rejected():
    forged = jwt.encode({"sub": USER_ID}, "some-other-secret-of-similar-length-99", algorithm="HS256")
    with pytest.raises(HTTPException) as exc:
        verify_token(forged)
    assert exc.value.status_code == 401


def test_missing_secret_is_a_configuration_error(monkeypatch):
    monkeypatch.setattr(settings, "SUPABASE_JWT_SECRET", None)
    with pytest.raises(ConfigurationError):
        verify_token(make_token())


async def test_requests_without_bearer_token_are_rejected(client):
    app.dependency_overrides.pop(get_current_user_id)
    resp = await client.get("/farms/")
    assert resp.status_code in (401, 403)


async def test_subject_is_normalised_to_canonical_uuid():
    assert await get_current_user_id({"sub": USER_ID.upper()}) == USER_ID
    assert await get_current_user_id({"sub": USER_ID.replace("-", "")}) == USER_ID


async def test_non_uuid_subject_is_rejected():
    with pytest.raises(HTTPException) as exc:
        await get_current_user_id({"sub": "not-a-user"})
    assert exc.value.status_code == 401


async def test_uppercase_subject_still_owns_its_farms(client):
    created = await client.post(
        "/farms/", json={"farm_name": "Green Acres", "location": "Pune", "soil_type": "loamy"}
    )
    assert created.status_code == 201
    farm_id = created.json()["id"]

    app.dependency_overrides.pop(get_current_user_id)
    headers = {"Authorization": f"Bearer {make_token(sub=USER_ID.upper())}"}

    resp = await client.get(f"/farms/{farm_id}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["user_id"] == USER_ID
    assert [f["id"] for f in (await client.get("/farms/", headers=headers)).json()] == [farm_id]
