"""Liveness/readiness and access-token verification."""

import uuid
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.core.config import Settings
from app.core.security import decode_access_token
from conftest import TEST_JWT_SECRET, USER_ID, auth_headers, make_token


async def test_root(client):
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_health(client):
    data = (await client.get("/api/v1/health")).json()
    assert data["status"] == "ok"
    assert data["environment"] == "test"


async def test_readiness(client):
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "connected"}


def test_decode_valid_token():
    settings = Settings(supabase_jwt_secret=TEST_JWT_SECRET)
    user = decode_access_token(make_token(USER_ID, email="sam@example.com"), settings)
    assert user.id == USER_ID
    assert user.email == "sam@example.com"


def test_decode_expired_token():
    settings = Settings(supabase_jwt_secret=TEST_JWT_SECRET)
    token = make_token(exp=datetime.now(timezone.utc) - timedelta(minutes=1))
    with pytest.raises(jwt.ExpiredSignatureError):
        decode_access_token(token, settings)


def test_decode_without_secret_rejects_everything():
    with pytest.raises(jwt.InvalidTokenError):
        decode_access_token(make_token(), Settings(supabase_jwt_secret=""))


async def test_bad_signature_is_401(client):
    token = jwt.encode(
        {"sub": str(uuid.uuid4()), "aud": "authenticated", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "some-other-secret-that-is-long-enough!!",
        algorithm="HS256",
    )
    response = await client.get("/api/v1/workouts", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


async def test_non_uuid_subject_is_401(client):
    response = await client.get("/api/v1/workouts", headers=auth_headers(sub="not-a-uuid"))
    assert response.status_code == 401


async def test_missing_token_is_401(client):
    assert (await client.get("/api/v1/profile")).status_code == 401
