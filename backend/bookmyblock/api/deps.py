"""
Dependency providers for stores and services held on `app.state`.
"""

from fastapi import Request

from bookmyblock.services.auth_service import AuthService
from bookmyblock.services.seat_layout_service import SeatLayoutService
from bookmyblock.services.theater_service import TheaterService
from bookmyblock.stores.event_store import EventStore
from bookmyblock.stores.theater_store import TheaterApplicationStore


def get_event_store(request: Request) -> EventStore:
    return request.app.state.event_store


def get_theater_store(request: Request) -> TheaterApplicationStore:
    return request.app.state.theater_store


def get_theater_service(request: Request) -> TheaterService:
    return request.app.state.theater_service


def get_seat_layout_service(request: Request) -> SeatLayoutService:
    return request.app.state.seat_layout_service


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service
