"""
Tests for owner event endpoints and event statistics.
"""

from datetime import date, timedelta

import pytest
from httpx import AsyncClient

from bookmyblock.models.event import Event, EventStatus
from bookmyblock.services.event_service import get_event_stats


async def _create(client: AsyncClient, payload: dict) -> dict:
    response = await client.post("/api/events/", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.mark.asyncio
async def test_create_event(client: AsyncClient, event_payload):
    """New events start upcoming with the default capacity fully available."""
    response = await client.post("/api/events/", json=event_payload)
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Event created successfully"
    data = body["data"]
    assert data["id"] == "event_1"
    assert data["status"] == "upcoming"
    assert data["availableSeats"] == 100
    assert data["totalSeats"] == 100
    assert data["showTimes"] == ["10:00", "14:00", "19:00"]


@pytest.mark.asyncio
async def test_event_ids_are_sequential(client: AsyncClient, event_payload):
    first = await _create(client, event_payload)
    second = await _create(client, event_payload)
    assert (first["id"], second["id"]) == ("event_1", "event_2")


@pytest.mark.asyncio
@pytest.mark.parametrize("price,expected_status", [(49, 400), (50, 201), (1000, 201), (1001, 400)])
async def test_ticket_price_bounds(client: AsyncClient, event_payload, price, expected_status):
    event_payload["ticketPrice"] = price
    response = await client.post("/api/events/", json=event_payload)
    assert response.status_code == expected_status
    if expected_status == 400:
        assert response.json() == {
            "success": False,
            "message": "Ticket price must be between ₹50 and ₹1000",
        }


@pytest.mark.asyncio
async def test_end_date_before_start_date(client: AsyncClient, event_payload):
    start = date.fromisoformat(event_payload["startDate"])
    event_payload["endDate"] = (start - timedelta(days=1)).isoformat()
    response = await client.post("/api/events/", json=event_payload)
    assert response.status_code == 400
    assert response.json()["message"] == "End date must be after start date"


@pytest.mark.asyncio
async def test_single_day_event_allowed(client: AsyncClient, event_payload):
    event_payload["endDate"] = event_payload["startDate"]
    response = await client.post("/api/events/", json=event_payload)
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_start_date_in_past(client: AsyncClient, event_payload):
    event_payload["startDate"] = (date.today() - timedelta(days=1)).isoformat()
    response = await client.post("/api/events/", json=event_payload)
    assert response.status_code == 400
    assert response.json()["message"] == "Start date must be today or in the future"


@pytest.mark.asyncio
async def test_start_date_today_allowed(client: AsyncClient, event_payload):
    event_payload["startDate"] = date.today().isoformat()
    response = await client.post("/api/events/", json=event_payload)
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_empty_show_times(client: AsyncClient, event_payload):
    event_payload["showTimes"] = []
    response = await client.post("/api/events/", json=event_payload)
    assert response.status_code == 400
    assert response.json()["message"] == "At least one show time is required"


@pytest.mark.asyncio
async def test_missing_required_fields(client: AsyncClient, event_payload):
    """Schema failures use the envelope and a 400, naming the missing field."""
    del event_payload["movieTitle"]
    response = await client.post("/api/events/", json=event_payload)
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"].startswith("Validation failed")
    assert "movieTitle" in body["message"]


@pytest.mark.asyncio
async def test_get_event(client: AsyncClient, event_payload):
    created = await _create(client, event_payload)
    response = await client.get(f"/api/events/{created['id']}")
    assert response.status_code == 200
    assert response.json()["data"]["movieTitle"] == "Kalki 2898 AD"


@pytest.mark.asyncio
async def test_get_nonexistent_event(client: AsyncClient):
    response = await client.get("/api/events/event_999")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Event not found"}


@pytest.mark.asyncio
async def test_list_theater_events(client: AsyncClient, event_payload):
    await _create(client, event_payload)
    event_payload["theaterId"] = "theater_app_2"
    await _create(client, event_payload)

    response = await client.get("/api/events/theater/theater_app_1")
    body = response.json()
    assert response.status_code == 200
    assert body["total"] == 1
    assert body["data"][0]["theaterId"] == "theater_app_1"


@pytest.mark.asyncio
async def test_list_user_events_returns_all(client: AsyncClient, event_payload):
    await _create(client, event_payload)
    event_payload["theaterId"] = "blockchain_42"
    await _create(client, event_payload)

    response = await client.get("/api/events/user", params={"userId": "owner-1"})
    assert response.status_code == 200
    assert response.json()["total"] == 2


@pytest.mark.asyncio
async def test_update_event(client: AsyncClient, event_payload):
    created = await _create(client, event_payload)
    response = await client.put(
        f"/api/events/{created['id']}",
        json={"ticketPrice": 300, "availableSeats": 80},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["ticketPrice"] == 300
    assert data["availableSeats"] == 80
    assert data["movieTitle"] == created["movieTitle"]


@pytest.mark.asyncio
async def test_update_rejects_out_of_range_price(client: AsyncClient, event_payload):
    created = await _create(client, event_payload)
    response = await client.put(f"/api/events/{created['id']}", json={"ticketPrice": 5000})
    assert response.status_code == 400

    stored = (await client.get(f"/api/events/{created['id']}")).json()["data"]
    assert stored["ticketPrice"] == 200


@pytest.mark.asyncio
async def test_update_rejects_empty_show_times(client: AsyncClient, event_payload):
    created = await _create(client, event_payload)
    response = await client.put(f"/api/events/{created['id']}", json={"showTimes": []})
    assert response.status_code == 400
    assert response.json()["message"] == "At least one show time is required"

    stored = (await client.get(f"/api/events/{created['id']}")).json()["data"]
    assert len(stored["showTimes"]) == 3


@pytest.mark.asyncio
async def test_update_rejects_more_available_than_total_seats(client: AsyncClient, event_payload):
    created = await _create(client, event_payload)
    response = await client.put(f"/api/events/{created['id']}", json={"availableSeats": 500})
    assert response.status_code == 400

    stats = (await client.get("/api/events/stats")).json()["data"]
    assert stats["totalTicketsSold"] == 0
    assert stats["totalRevenue"] == 0


@pytest.mark.asyncio
async def test_update_seat_counts_together(client: AsyncClient, event_payload):
    created = await _create(client, event_payload)
    response = await client.put(
        f"/api/events/{created['id']}", json={"totalSeats": 150, "availableSeats": 120}
    )
    assert response.status_code == 200
    assert response.json()["data"]["availableSeats"] == 120


@pytest.mark.asyncio
async def test_update_nonexistent_event(client: AsyncClient):
    response = await client.put("/api/events/event_999", json={"ticketPrice": 300})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_cancel_event(client: AsyncClient, event_payload):
    created = await _create(client, event_payload)
    response = await client.patch(f"/api/events/{created['id']}/cancel", json={"reason": "Projector failure"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "cancelled"
    assert data["cancellationReason"] == "Projector failure"


@pytest.mark.asyncio
async def test_cancel_twice_replaces_reason(client: AsyncClient, event_payload):
    created = await _create(client, event_payload)
    await client.patch(f"/api/events/{created['id']}/cancel", json={"reason": "First"})
    response = await client.patch(f"/api/events/{created['id']}/cancel")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "cancelled"
    assert data["cancellationReason"] == "No reason provided"


@pytest.mark.asyncio
async def test_cancel_nonexistent_event(client: AsyncClient):
    response = await client.patch("/api/events/event_999/cancel", json={"reason": "x"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_event(client: AsyncClient, event_payload):
    created = await _create(client, event_payload)
    response = await client.delete(f"/api/events/{created['id']}")
    assert response.status_code == 200
    assert response.json()["message"] == "Event deleted successfully"

    response = await client.get(f"/api/events/{created['id']}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_nonexistent_event(client: AsyncClient):
    response = await client.delete("/api/events/event_999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_stats_endpoint(client: AsyncClient, event_payload):
    await _create(client, event_payload)
    response = await client.get("/api/events/stats")
    assert response.status_code == 200
    stats = response.json()["data"]
    assert stats["totalEvents"] == 1
    assert stats["upcomingEvents"] == 1
    assert stats["totalRevenue"] == 0


def _event(event_id: str, start: date, end: date, **overrides) -> Event:
    fields = dict(
        id=event_id,
        theater_id="t1",
        movie_title="Film",
        start_date=start,
        end_date=end,
        show_times=["19:00"],
        ticket_price=200,
    )
    fields.update(overrides)
    return Event(**fields)


def test_stats_buckets(event_store):
    """Buckets follow the calendar: a running upcoming event counts as ongoing."""
    today = date(2026, 3, 10)
    event_store.add(_event("future", date(2026, 3, 12), date(2026, 3, 14)))
    event_store.add(_event("running", date(2026, 3, 9), date(2026, 3, 11)))
    event_store.add(_event("finished", date(2026, 3, 1), date(2026, 3, 5)))
    event_store.add(_event(
        "sold", date(2026, 3, 12), date(2026, 3, 12),
        status=EventStatus.CANCELLED, available_seats=60, total_seats=100, ticket_price=150,
    ))

    stats = get_event_stats(event_store, today=today)

    assert stats.total_events == 4
    assert stats.upcoming_events == 1
    assert stats.ongoing_events == 1
    assert stats.completed_events == 1
    assert stats.cancelled_events == 1
    assert stats.total_tickets_sold == 40
    assert stats.total_revenue == 40 * 150


def test_stats_empty_store(event_store):
    stats = get_event_stats(event_store)
    assert stats.total_events == 0
    assert stats.total_revenue == 0
