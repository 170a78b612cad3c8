"""
Tests for token verification strategies, dashboard sessions and auth endpoints.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest
from httpx import AsyncClient

from bookmyblock.core.config import Settings
from bookmyblock.infrastructure.kv_store import MemoryKeyValueStore
from bookmyblock.services.auth_service import AuthService
from bookmyblock.services.interfaces import AuthenticationError, MockTokenVerifier
from bookmyblock.services.jwt_verifier import JWTTokenVerifier
from bookmyblock.services.strategy_factory import get_token_verifier

SECRET = "test-secret"


def _token(**claims) -> str:
    return jwt.encode(claims, SECRET, algorithm="HS256")


@pytest.mark.asyncio
async def test_mock_verifier_accepts_any_token():
    identity = await MockTokenVerifier().verify("anything")
    assert identity.subject == "mock-user-id"
    assert identity.claims["email"] == "user@example.com"


@pytest.mark.asyncio
async def test_mock_verifier_rejects_empty_token():
    with pytest.raises(AuthenticationError):
        await MockTokenVerifier().verify("")


@pytest.mark.asyncio
async def test_jwt_verifier_valid_token():
    token = _token(sub="owner-7", email="owner@example.com")
    identity = await JWTTokenVerifier(SECRET).verify(token)
    assert identity.subject == "owner-7"
    assert identity.claims["email"] == "owner@example.com"


@pytest.mark.asyncio
async def test_jwt_verifier_expired_token():
    token = _token(sub="owner-7", exp=datetime.now(timezone.utc) - timedelta(minutes=1))
    with pytest.raises(AuthenticationError, match="expired"):
        await JWTTokenVerifier(SECRET).verify(token)


@pytest.mark.asyncio
async def test_jwt_verifier_wrong_secret():
    token = jwt.encode({"sub": "owner-7"}, "other-secret", algorithm="HS256")
    with pytest.raises(AuthenticationError, match="Invalid token"):
        await JWTTokenVerifier(SECRET).verify(token)


@pytest.mark.asyncio
async def test_jwt_verifier_requires_subject():
    with pytest.raises(AuthenticationError, match="subject"):
        await JWTTokenVerifier(SECRET).verify(_token(email="x@example.com"))


def test_strategy_factory():
    assert isinstance(get_token_verifier(Settings(AUTH_STRATEGY="mock")), MockTokenVerifier)
    assert isinstance(get_token_verifier(Settings(AUTH_STRATEGY="jwt", SECRET_KEY=SECRET)), JWTTokenVerifier)


@pytest.mark.asyncio
async def test_sessions_namespaced_per_dashboard():
    kv = MemoryKeyValueStore()
    auth = AuthService(MockTokenVerifier(), kv)

    await auth.authenticate("token", "owner")

    assert await auth.get_session("mock-user-id", "owner") is not None
    assert await auth.get_session("mock-user-id", "admin") is None
    assert await kv.keys() == ["owner:session:mock-user-id"]


@pytest.mark.asyncio
async def test_session_records_last_seen():
    auth = AuthService(JWTTokenVerifier(SECRET), MemoryKeyValueStore())
    await auth.authenticate(_token(sub="u1", email="u1@example.com"), "user")

    session = await auth.get_session("u1", "user")
    assert session.claims["email"] == "u1@example.com"
    assert session.last_seen is not None


# Endpoints

@pytest.mark.asyncio
async def test_create_session(client: AsyncClient, auth_headers):
    response = await client.post("/api/auth/session", headers={**auth_headers, "X-Dashboard": "admin"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["subject"] == "mock-user-id"
    assert data["dashboard"] == "admin"
    assert data["lastSeen"] is not None


@pytest.mark.asyncio
async def test_me_defaults_to_user_dashboard(client: AsyncClient, auth_headers):
    response = await client.get("/api/auth/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["data"]["dashboard"] == "user"


@pytest.mark.asyncio
async def test_missing_token(client: AsyncClient):
    response = await client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert response.json() == {"success": False, "message": "No authorization token provided"}


@pytest.mark.asyncio
async def test_non_bearer_scheme(client: AsyncClient):
    response = await client.get("/api/auth/me", headers={"Authorization": "Basic dXNlcjpwYXNz"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_unknown_dashboard(client: AsyncClient, auth_headers):
    response = await client.get("/api/auth/me", headers={**auth_headers, "X-Dashboard": "superuser"})
    assert response.status_code == 400
    assert response.json()["message"] == "Unknown dashboard 'superuser'"
