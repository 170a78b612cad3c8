"""
Pytest fixtures for stores, services and HTTP clients.

The app lifespan does not run under ASGITransport, so every app.state
dependency is overridden with fresh in-memory objects per test. The user
catalogue reaches the owner endpoints through a second client bound to the
same app.
"""

from datetime import date, timedelta
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from bookmyblock.main import app
from bookmyblock.api.deps import (
    get_auth_service, get_event_store, get_seat_layout_service, get_theater_service, get_theater_store,
)
from bookmyblock.core.config import Settings
from bookmyblock.infrastructure.kv_store import MemoryKeyValueStore, NamespacedStore
from bookmyblock.models.theater import ApplicationStatus, TheaterApplication
from bookmyblock.services.auth_service import AuthService
from bookmyblock.services.interfaces.mock_verifier import MockTokenVerifier
from bookmyblock.services.seat_layout_service import SeatLayoutService
from bookmyblock.services.theater_service import TheaterService
from bookmyblock.stores.event_store import EventStore
from bookmyblock.stores.theater_store import TheaterApplicationStore


@pytest.fixture
def settings() -> Settings:
    return Settings(PDF_EXTRACTION_ENABLED=False, REDIS_ENABLED=False)


@pytest.fixture
def event_store() -> EventStore:
    return EventStore()


@pytest.fixture
def theater_store() -> TheaterApplicationStore:
    return TheaterApplicationStore()


@pytest.fixture
def kv_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def seat_layout_service(kv_store) -> SeatLayoutService:
    return SeatLayoutService(NamespacedStore(kv_store, "seat-layouts"))


@pytest.fixture
def auth_service(kv_store) -> AuthService:
    return AuthService(MockTokenVerifier(), kv_store)


@pytest_asyncio.fixture
async def owner_client() -> AsyncGenerator[AsyncClient, None]:
    """Client the catalogue uses to call the owner endpoints of the app under test."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test/api") as ac:
        yield ac


@pytest.fixture
def theater_service(owner_client, settings) -> TheaterService:
    return TheaterService(owner_client, settings)


@pytest_asyncio.fixture(scope="function")
async def client(
    event_store, theater_store, theater_service, seat_layout_service, auth_service,
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client with every app.state dependency replaced by the test fixtures."""
    app.dependency_overrides[get_event_store] = lambda: event_store
    app.dependency_overrides[get_theater_store] = lambda: theater_store
    app.dependency_overrides[get_theater_service] = lambda: theater_service
    app.dependency_overrides[get_seat_layout_service] = lambda: seat_layout_service
    app.dependency_overrides[get_auth_service] = lambda: auth_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def event_payload() -> dict:
    """A valid event body starting tomorrow."""
    start = date.today() + timedelta(days=1)
    return {
        "theaterId": "theater_app_1",
        "movieTitle": "Kalki 2898 AD",
        "startDate": start.isoformat(),
        "endDate": (start + timedelta(days=6)).isoformat(),
        "showTimes": ["10:00", "14:00", "19:00"],
        "ticketPrice": 200,
        "description": "Sci-fi epic",
    }


@pytest.fixture
def application_payload() -> dict:
    return {
        "theaterName": "Sri Venkateswara Cinemas",
        "ownerName": "Ravi Kumar",
        "ownerEmail": "ravi@example.com",
        "ownerPhone": "98765 43210",
        "address": "Tilak Road",
        "city": "Tirupati",
        "state": "Andhra Pradesh",
        "pincode": "517501",
        "numberOfScreens": 2,
        "totalSeats": 300,
    }


@pytest.fixture
def approved_theater(theater_store) -> TheaterApplication:
    """An approved application in Tirupati with id theater_app_1."""
    application = TheaterApplication(
        id=theater_store.next_id(),
        theater_name="Sri Venkateswara Cinemas",
        owner_name="Ravi Kumar",
        owner_email="ravi@example.com",
        owner_phone="+919876543210",
        address="Tilak Road",
        city="Tirupati",
        state="Andhra Pradesh",
        pincode="517501",
        number_of_screens=2,
        total_seats=300,
        status=ApplicationStatus.APPROVED,
    )
    return theater_store.add(application)


@pytest.fixture
def auth_headers() -> dict:
    return {"Authorization": "Bearer dev-token"}
