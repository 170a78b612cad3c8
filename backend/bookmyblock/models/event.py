"""
Event record held by the in-memory event store.

- `available_seats` / `total_seats` default to the configured capacity; the
  theater's real seat count is not consulted
- `status` only changes through update or cancel; dates never move it
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EventStatus(str, Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class Event:
    id: str
    theater_id: str
    movie_title: str
    start_date: date
    end_date: date
    show_times: list[str]
    ticket_price: int
    description: str = ""
    ipfs_hash: Optional[str] = None
    ipfs_url: Optional[str] = None
    status: EventStatus = EventStatus.UPCOMING
    available_seats: int = 100
    total_seats: int = 100
    cancellation_reason: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @property
    def tickets_sold(self) -> int:
        return self.total_seats - self.available_seats

    @property
    def revenue(self) -> int:
        return self.tickets_sold * self.ticket_price

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.movie_title}, available={self.available_seats}/{self.total_seats})>"
