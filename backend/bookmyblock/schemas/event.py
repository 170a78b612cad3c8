"""
Pydantic schemas for event-related request/response validation.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import Field

from bookmyblock.models.event import EventStatus
from bookmyblock.schemas.common import CamelModel


class EventCreate(CamelModel):
    theater_id: str = Field(..., min_length=1)
    movie_title: str = Field(..., min_length=1, max_length=255)
    start_date: date
    end_date: date
    show_times: list[str]
    ticket_price: int
    description: Optional[str] = Field(None, max_length=2000)
    ipfs_hash: Optional[str] = None
    ipfs_url: Optional[str] = None


class EventUpdate(CamelModel):
    """Partial update; only the fields present in the request are applied."""

    theater_id: Optional[str] = Field(None, min_length=1)
    movie_title: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    show_times: Optional[list[str]] = None
    ticket_price: Optional[int] = None
    description: Optional[str] = Field(None, max_length=2000)
    ipfs_hash: Optional[str] = None
    ipfs_url: Optional[str] = None
    status: Optional[EventStatus] = None
    available_seats: Optional[int] = Field(None, ge=0)
    total_seats: Optional[int] = Field(None, ge=0)


class EventCancel(CamelModel):
    reason: Optional[str] = None


class EventResponse(CamelModel):
    id: str
    theater_id: str
    movie_title: str
    start_date: date
    end_date: date
    show_times: list[str]
    ticket_price: int
    description: str
    ipfs_hash: Optional[str]
    ipfs_url: Optional[str]
    status: EventStatus
    available_seats: int
    total_seats: int
    cancellation_reason: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class EventStats(CamelModel):
    total_events: int
    upcoming_events: int
    ongoing_events: int
    completed_events: int
    cancelled_events: int
    total_revenue: int
    total_tickets_sold: int
