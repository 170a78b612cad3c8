"""
User-facing theater catalogue, aggregated from the owner service over HTTP.

SOURCES
=======

  - GET {owner}/admin/approved-theaters   approved theater applications
  - GET {owner}/events/user               all events; theater ids prefixed
                                          "blockchain_" are theaters registered
                                          on-chain that have no application
  - GET {owner}/events/theater/{id}       events of one theater

On-chain theaters carry no location data, so every one of them is presented
as the sample Tirupati venue.

FAILURE POLICY
==============

Best effort, partial results. Each call has a fixed timeout and no retry.
  - approved-theaters fails        -> empty catalogue
  - events/user fails              -> no on-chain theaters
  - reply is not an envelope       -> treated as a failed call
  - one application is malformed   -> that theater is skipped
  - one theater's events fail      -> that theater contributes no events
Failures are logged and counted, never raised to the caller.
"""

import time
from typing import Any, Optional

import httpx
import structlog

from bookmyblock.core.config import Settings, get_settings
from bookmyblock.core.errors import UpstreamServiceError
from bookmyblock.core.metrics import record_upstream_request
from bookmyblock.schemas.theater import Theater, TheaterLocationData, UserEvent
from bookmyblock.services.pdf_service import PDFParsingService
from bookmyblock.utils.pincode import approximate_distance_km, get_pincode_from_city, is_pincode_nearby
from bookmyblock.core.logging import get_logger

logger = get_logger(__name__)

OWNER_SERVICE = "owner"
BLOCKCHAIN_PREFIX = "blockchain_"
UNKNOWN_PINCODE = "000000"
DEFAULT_SHOW_TIME = "19:00"


def blockchain_theater(theater_id: str, gateway_url: str) -> Theater:
    return Theater(
        id=theater_id,
        name="PVR Cinemas Tirupati (Blockchain)",
        location="Tirupati, Andhra Pradesh",
        pincode="517501",
        city="Tirupati",
        state="Andhra Pradesh",
        address="Kummarimitta Street, Tirupati",
        screens=1,
        total_seats=200,
        status="active",
        owner_name="Theater Owner",
        owner_email="owner@pvr.com",
        owner_phone="+91-9876543210",
        pdf_hash="blockchain_theater",
        ipfs_urls={"pdf": f"{gateway_url.rstrip('/')}/{theater_id}"},
    )


def fallback_location_data(application: dict[str, Any]) -> TheaterLocationData:
    return TheaterLocationData(
        theater_name=application.get("theaterName") or "Unknown Theater",
        pincode=application.get("pincode") or UNKNOWN_PINCODE,
        city=application.get("city") or "Unknown City",
        state=application.get("state") or "Unknown State",
        address=application.get("address") or "Unknown Address",
        total_seats=application.get("totalSeats") or 100,
        number_of_screens=application.get("numberOfScreens") or 1,
        owner_name=application.get("ownerName") or "Unknown Owner",
        owner_email=application.get("ownerEmail") or "",
        owner_phone=application.get("ownerPhone") or "",
    )


def _forwarded_headers() -> dict[str, str]:
    request_id = structlog.contextvars.get_contextvars().get("request_id")
    return {"X-Request-ID": request_id} if request_id else {}


def _user_event_status(owner_status: Optional[str]) -> str:
    return "cancelled" if owner_status == "cancelled" else "active"


def to_user_events(owner_event: dict[str, Any]) -> list[UserEvent]:
    """One user event per show time, or a single evening show when none are listed."""
    show_times = owner_event.get("showTimes") or []
    common = dict(
        title=owner_event.get("movieTitle") or "Event",
        description=owner_event.get("description") or "Theater event",
        theater_id=owner_event["theaterId"],
        date=str(owner_event.get("startDate", "")),
        ticket_price=owner_event.get("ticketPrice") or 0,
        available_seats=owner_event.get("availableSeats") or 100,
        total_seats=owner_event.get("totalSeats") or 100,
        image_url=owner_event.get("posterUrl"),
        trailer_url=owner_event.get("trailerUrl"),
        status=_user_event_status(owner_event.get("status")),
    )

    if not show_times:
        return [UserEvent(id=owner_event["id"], time=DEFAULT_SHOW_TIME, **common)]
    return [
        UserEvent(id=f"{owner_event['id']}_show_{index}", time=show_time, **common)
        for index, show_time in enumerate(show_times)
    ]


class TheaterService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: Optional[Settings] = None,
        pdf_parser: Optional[PDFParsingService] = None,
    ) -> None:
        self._client = client
        self._settings = settings or get_settings()
        self._pdf_parser = pdf_parser

    async def _get_owner_data(self, path: str, timeout: float) -> Any:
        """GET an owner endpoint and unwrap the {success, data} envelope."""
        started = time.perf_counter()
        try:
            response = await self._client.get(path, timeout=timeout, headers=_forwarded_headers())
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            record_upstream_request(OWNER_SERVICE, success=False, duration=time.perf_counter() - started)
            raise UpstreamServiceError(f"{path}: {e}") from e

        if not isinstance(payload, dict):
            record_upstream_request(OWNER_SERVICE, success=False, duration=time.perf_counter() - started)
            raise UpstreamServiceError(f"{path}: response is not an envelope object")

        if not payload.get("success"):
            record_upstream_request(OWNER_SERVICE, success=False, duration=time.perf_counter() - started)
            raise UpstreamServiceError(payload.get("message") or f"{path} reported failure")

        data = payload.get("data") or []
        if not isinstance(data, list):
            record_upstream_request(OWNER_SERVICE, success=False, duration=time.perf_counter() - started)
            raise UpstreamServiceError(f"{path}: data is not a list")

        record_upstream_request(OWNER_SERVICE, success=True, duration=time.perf_counter() - started)
        return data

    async def _blockchain_theaters(self) -> list[Theater]:
        try:
            events = await self._get_owner_data("/events/user", self._settings.OWNER_EVENTS_TIMEOUT)
        except UpstreamServiceError as e:
            logger.warning("blockchain_theater_lookup_failed", error=str(e))
            return []

        theater_ids = list(dict.fromkeys(
            event["theaterId"] for event in events
            if isinstance(event, dict) and str(event.get("theaterId", "")).startswith(BLOCKCHAIN_PREFIX)
        ))
        if theater_ids:
            logger.info("blockchain_theaters_mapped", theater_ids=theater_ids)
        return [blockchain_theater(tid, self._settings.PINATA_GATEWAY_URL) for tid in theater_ids]

    async def _location_data(self, application: dict[str, Any]) -> TheaterLocationData:
        data = None
        pdf_hash = application.get("pdfHash")
        if pdf_hash and self._settings.PDF_EXTRACTION_ENABLED and self._pdf_parser is not None:
            data = await self._pdf_parser.extract_theater_data_from_ipfs(pdf_hash)
        if data is None:
            data = fallback_location_data(application)

        if not data.pincode or data.pincode == UNKNOWN_PINCODE:
            city_pincode = get_pincode_from_city(data.city)
            if city_pincode:
                data = data.model_copy(update={"pincode": city_pincode})
        return data

    def _to_theater(self, application: dict[str, Any], data: TheaterLocationData) -> Theater:
        return Theater(
            id=application["id"],
            name=data.theater_name,
            location=f"{data.city}, {data.state}",
            pincode=data.pincode,
            city=data.city,
            state=data.state,
            address=data.address,
            screens=data.number_of_screens,
            total_seats=data.total_seats,
            status="active",
            owner_name=data.owner_name,
            owner_email=data.owner_email,
            owner_phone=data.owner_phone,
            pdf_hash=application.get("pdfHash"),
            ipfs_urls=application.get("ipfsUrls"),
        )

    async def get_all_approved_theaters(self) -> list[Theater]:
        try:
            applications = await self._get_owner_data(
                "/admin/approved-theaters", self._settings.OWNER_API_TIMEOUT
            )
        except UpstreamServiceError as e:
            logger.error("approved_theaters_fetch_failed", error=str(e))
            return []

        theaters = await self._blockchain_theaters()
        for application in applications:
            if not isinstance(application, dict):
                logger.error("theater_application_skipped", error="not an object")
                continue
            try:
                data = await self._location_data(application)
                theaters.append(self._to_theater(application, data))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.error("theater_application_skipped", application_id=application.get("id"), error=str(e))

        logger.info("approved_theaters_loaded", count=len(theaters))
        return theaters

    async def get_theaters_near_pincode(self, user_pincode: str, max_distance: int = 50) -> list[Theater]:
        """Nearby theaters with an approximate distance, closest first."""
        nearby = []
        for theater in await self.get_all_approved_theaters():
            if is_pincode_nearby(user_pincode, theater.pincode, max_distance):
                theater.distance = approximate_distance_km(user_pincode, theater.pincode)
                nearby.append(theater)

        nearby.sort(key=lambda t: t.distance or 0)
        logger.info("nearby_theaters_found", pincode=user_pincode, count=len(nearby))
        return nearby

    async def get_theaters_in_city(self, city_name: str) -> list[Theater]:
        needle = city_name.lower()
        return [
            t for t in await self.get_all_approved_theaters()
            if needle in t.city.lower() or needle in t.location.lower()
        ]

    async def search_theaters(self, query: str) -> list[Theater]:
        needle = query.lower()
        return [
            t for t in await self.get_all_approved_theaters()
            if needle in t.name.lower()
            or needle in t.city.lower()
            or needle in t.state.lower()
            or needle in t.address.lower()
            or query in t.pincode
        ]

    async def get_theater(self, theater_id: str) -> Optional[Theater]:
        return next((t for t in await self.get_all_approved_theaters() if t.id == theater_id), None)

    async def _fetch_theater_events(self, theater_id: str) -> list[UserEvent]:
        owner_events = await self._get_owner_data(
            f"/events/theater/{theater_id}", self._settings.OWNER_API_TIMEOUT
        )
        events: list[UserEvent] = []
        for owner_event in owner_events:
            if not isinstance(owner_event, dict):
                logger.error("owner_event_skipped", error="not an object")
                continue
            try:
                events.extend(to_user_events(owner_event))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.error("owner_event_skipped", event_id=owner_event.get("id"), error=str(e))
        return events

    async def get_events_for_theater(self, theater_id: str) -> list[UserEvent]:
        try:
            return await self._fetch_theater_events(theater_id)
        except UpstreamServiceError as e:
            logger.error("theater_events_fetch_failed", theater_id=theater_id, error=str(e))
            return []

    async def get_events_near_pincode(self, user_pincode: str) -> list[UserEvent]:
        events: list[UserEvent] = []
        for theater in await self.get_theaters_near_pincode(user_pincode):
            try:
                theater_events = await self._fetch_theater_events(theater.id)
            except UpstreamServiceError as e:
                logger.error("theater_dropped_from_results", theater_id=theater.id, error=str(e))
                continue

            events.extend(
                event.model_copy(update={
                    "theater_id": theater.id,
                    "theater_name": theater.name,
                    "theater_location": theater.location,
                })
                for event in theater_events
            )

        logger.info("nearby_events_found", pincode=user_pincode, count=len(events))
        return events
