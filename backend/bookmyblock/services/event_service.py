"""
Event service handling CRUD, cancellation and statistics over the event store.
"""

import dataclasses
from datetime import date
from typing import Optional

from fastapi import HTTPException, status

from bookmyblock.models.event import Event, EventStatus, utcnow
from bookmyblock.schemas.event import EventCreate, EventStats, EventUpdate
from bookmyblock.stores.event_store import EventStore
from bookmyblock.core.metrics import record_event_operation
from bookmyblock.core.logging import get_logger

logger = get_logger(__name__)

MIN_TICKET_PRICE = 50
MAX_TICKET_PRICE = 1000
DEFAULT_CANCELLATION_REASON = "No reason provided"


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def _validate_ticket_price(price: int) -> None:
    if price < MIN_TICKET_PRICE or price > MAX_TICKET_PRICE:
        raise _bad_request(f"Ticket price must be between ₹{MIN_TICKET_PRICE} and ₹{MAX_TICKET_PRICE}")


def _validate_date_order(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise _bad_request("End date must be after start date")


def _validate_show_times(show_times: list[str]) -> None:
    if not show_times:
        raise _bad_request("At least one show time is required")


def _validate_seat_counts(available_seats: int, total_seats: int) -> None:
    if available_seats > total_seats:
        raise _bad_request("Available seats cannot exceed total seats")


def create_event(store: EventStore, event_data: EventCreate) -> Event:
    """Validate and append a new upcoming event with full seat availability."""
    _validate_show_times(event_data.show_times)
    _validate_ticket_price(event_data.ticket_price)

    if event_data.start_date < date.today():
        raise _bad_request("Start date must be today or in the future")
    _validate_date_order(event_data.start_date, event_data.end_date)

    event = Event(
        id=store.next_id(),
        theater_id=event_data.theater_id,
        movie_title=event_data.movie_title,
        start_date=event_data.start_date,
        end_date=event_data.end_date,
        show_times=list(event_data.show_times),
        ticket_price=event_data.ticket_price,
        description=event_data.description or "",
        ipfs_hash=event_data.ipfs_hash,
        ipfs_url=event_data.ipfs_url,
        available_seats=store.default_capacity,
        total_seats=store.default_capacity,
    )
    store.add(event)
    record_event_operation("create")

    logger.info("event_created", event_id=event.id, theater_id=event.theater_id, title=event.movie_title)
    return event


def get_event(store: EventStore, event_id: str) -> Event:
    event = store.get(event_id)
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found",
        )
    return event


def get_theater_events(store: EventStore, theater_id: str) -> list[Event]:
    events = store.for_theater(theater_id)
    logger.debug("theater_events_listed", theater_id=theater_id, count=len(events))
    return events


def get_user_events(store: EventStore, user_id: Optional[str] = None) -> list[Event]:
    """
    All events. Events are not linked to owners, so user_id is only logged
    until theater ownership is tracked on the event record.
    """
    events = store.all()
    logger.debug("user_events_listed", user_id=user_id, count=len(events))
    return events


def update_event(store: EventStore, event_id: str, update_data: EventUpdate) -> Event:
    """
    Shallow-merge the supplied fields into the stored event.
    Show times, price range, date order and seat counts are re-checked on
    the merged record.
    """
    event = get_event(store, event_id)
    changes = update_data.model_dump(exclude_unset=True, exclude_none=True)

    merged = dataclasses.replace(event, **changes, updated_at=utcnow())
    _validate_show_times(merged.show_times)
    _validate_ticket_price(merged.ticket_price)
    _validate_date_order(merged.start_date, merged.end_date)
    _validate_seat_counts(merged.available_seats, merged.total_seats)

    store.replace(merged)
    record_event_operation("update")

    logger.info("event_updated", event_id=event_id, fields=sorted(changes))
    return merged


def delete_event(store: EventStore, event_id: str) -> None:
    if not store.remove(event_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found",
        )
    record_event_operation("delete")
    logger.info("event_deleted", event_id=event_id)


def cancel_event(store: EventStore, event_id: str, reason: Optional[str] = None) -> Event:
    """Mark an event cancelled. Cancelling again only replaces the reason."""
    event = get_event(store, event_id)

    cancelled = dataclasses.replace(
        event,
        status=EventStatus.CANCELLED,
        cancellation_reason=reason or DEFAULT_CANCELLATION_REASON,
        updated_at=utcnow(),
    )
    store.replace(cancelled)
    record_event_operation("cancel")

    logger.info("event_cancelled", event_id=event_id, reason=cancelled.cancellation_reason)
    return cancelled


def get_event_stats(store: EventStore, today: Optional[date] = None) -> EventStats:
    """
    Bucket counts are derived from status and calendar dates:
    an upcoming event whose run includes today counts as ongoing, and any
    event whose end date has passed counts as completed.
    """
    today = today or date.today()
    events = store.all()

    def is_upcoming(e: Event) -> bool:
        return e.status == EventStatus.UPCOMING and e.start_date > today

    def is_ongoing(e: Event) -> bool:
        if e.status == EventStatus.ONGOING:
            return True
        return e.status == EventStatus.UPCOMING and e.start_date <= today <= e.end_date

    def is_completed(e: Event) -> bool:
        return e.end_date < today or e.status == EventStatus.COMPLETED

    stats = EventStats(
        total_events=len(events),
        upcoming_events=sum(1 for e in events if is_upcoming(e)),
        ongoing_events=sum(1 for e in events if is_ongoing(e)),
        completed_events=sum(1 for e in events if is_completed(e)),
        cancelled_events=sum(1 for e in events if e.status == EventStatus.CANCELLED),
        total_revenue=sum(e.revenue for e in events),
        total_tickets_sold=sum(e.tickets_sold for e in events),
    )
    logger.debug("event_stats_calculated", **stats.model_dump())
    return stats
