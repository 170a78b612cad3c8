"""
Owner event endpoints: create, list, update, cancel and delete screenings.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from bookmyblock.api.deps import get_event_store
from bookmyblock.schemas.common import ApiResponse
from bookmyblock.schemas.event import EventCancel, EventCreate, EventResponse, EventStats, EventUpdate
from bookmyblock.services.event_service import (
    cancel_event, create_event, delete_event, get_event, get_event_stats,
    get_theater_events, get_user_events, update_event,
)
from bookmyblock.stores.event_store import EventStore

router = APIRouter(prefix="/events", tags=["Events"])


def _events(events) -> list[EventResponse]:
    return [EventResponse.model_validate(e) for e in events]


@router.post("/", response_model=ApiResponse[EventResponse], status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(
    event_data: EventCreate,
    store: EventStore = Depends(get_event_store),
):
    event = create_event(store, event_data)
    return ApiResponse(message="Event created successfully", data=EventResponse.model_validate(event))


@router.get("/theater/{theater_id}", response_model=ApiResponse[list[EventResponse]])
async def list_theater_events_endpoint(
    theater_id: str,
    store: EventStore = Depends(get_event_store),
):
    events = _events(get_theater_events(store, theater_id))
    return ApiResponse(data=events, total=len(events))


@router.get("/user", response_model=ApiResponse[list[EventResponse]])
async def list_user_events_endpoint(
    user_id: Optional[str] = Query(None, alias="userId"),
    store: EventStore = Depends(get_event_store),
):
    events = _events(get_user_events(store, user_id))
    return ApiResponse(data=events, total=len(events))


@router.get("/stats", response_model=ApiResponse[EventStats])
async def event_stats_endpoint(store: EventStore = Depends(get_event_store)):
    return ApiResponse(data=get_event_stats(store))


# Declared after the fixed paths above so /user and /stats are not taken as ids
@router.get("/{event_id}", response_model=ApiResponse[EventResponse])
async def get_event_endpoint(
    event_id: str,
    store: EventStore = Depends(get_event_store),
):
    return ApiResponse(data=EventResponse.model_validate(get_event(store, event_id)))


@router.put("/{event_id}", response_model=ApiResponse[EventResponse])
async def update_event_endpoint(
    event_id: str,
    update_data: EventUpdate,
    store: EventStore = Depends(get_event_store),
):
    event = update_event(store, event_id, update_data)
    return ApiResponse(message="Event updated successfully", data=EventResponse.model_validate(event))


@router.patch("/{event_id}/cancel", response_model=ApiResponse[EventResponse])
async def cancel_event_endpoint(
    event_id: str,
    cancel_data: Optional[EventCancel] = None,
    store: EventStore = Depends(get_event_store),
):
    """Cancel a screening. The body is optional; a missing reason is recorded as 'No reason provided'."""
    reason = cancel_data.reason if cancel_data else None
    event = cancel_event(store, event_id, reason)
    return ApiResponse(message="Event cancelled successfully", data=EventResponse.model_validate(event))


@router.delete("/{event_id}", response_model=ApiResponse)
async def delete_event_endpoint(
    event_id: str,
    store: EventStore = Depends(get_event_store),
):
    delete_event(store, event_id)
    return ApiResponse(message="Event deleted successfully")
