"""
User theater catalogue: approved theaters, proximity search, events and seat maps.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from bookmyblock.api.deps import get_seat_layout_service, get_theater_service
from bookmyblock.core.config import get_settings
from bookmyblock.schemas.common import ApiResponse
from bookmyblock.schemas.seat_layout import TheaterSeatLayout
from bookmyblock.schemas.theater import CityPincode, Theater, UserEvent
from bookmyblock.services.seat_layout_service import SeatLayoutService
from bookmyblock.services.theater_service import TheaterService
from bookmyblock.utils.pincode import get_pincode_from_city, is_valid_pincode

settings = get_settings()
router = APIRouter(prefix="/theaters", tags=["Theaters"])


def _require_valid_pincode(pincode: str) -> None:
    if not is_valid_pincode(pincode):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid pincode format. Please provide a 6-digit pincode.",
        )


@router.get("/", response_model=ApiResponse[list[Theater]])
async def list_theaters_endpoint(service: TheaterService = Depends(get_theater_service)):
    theaters = await service.get_all_approved_theaters()
    return ApiResponse(data=theaters, total=len(theaters))


@router.get("/near/{pincode}", response_model=ApiResponse[list[Theater]])
async def theaters_near_pincode_endpoint(
    pincode: str,
    max_distance: Optional[int] = Query(None, alias="maxDistance", ge=0),
    service: TheaterService = Depends(get_theater_service),
):
    """Theaters around a pincode, closest first, each with an approximate distance in km."""
    _require_valid_pincode(pincode)
    max_distance = settings.DEFAULT_MAX_DISTANCE_KM if max_distance is None else max_distance

    theaters = await service.get_theaters_near_pincode(pincode, max_distance)
    return ApiResponse(
        data=theaters,
        total=len(theaters),
        search_criteria={"pincode": pincode, "maxDistance": max_distance},
    )


@router.get("/city/{city_name}", response_model=ApiResponse[list[Theater]])
async def theaters_in_city_endpoint(
    city_name: str,
    service: TheaterService = Depends(get_theater_service),
):
    theaters = await service.get_theaters_in_city(city_name)
    return ApiResponse(data=theaters, total=len(theaters), search_criteria={"city": city_name})


@router.get("/events/near/{pincode}", response_model=ApiResponse[list[UserEvent]])
async def events_near_pincode_endpoint(
    pincode: str,
    service: TheaterService = Depends(get_theater_service),
):
    _require_valid_pincode(pincode)
    events = await service.get_events_near_pincode(pincode)
    return ApiResponse(data=events, total=len(events), search_criteria={"pincode": pincode})


@router.get("/search", response_model=ApiResponse[list[Theater]])
async def search_theaters_endpoint(
    q: Optional[str] = Query(None),
    service: TheaterService = Depends(get_theater_service),
):
    if not q or not q.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Search query is required",
        )
    theaters = await service.search_theaters(q.strip())
    return ApiResponse(data=theaters, total=len(theaters), search_criteria={"query": q.strip()})


@router.get("/utils/pincode/{city}", response_model=ApiResponse[CityPincode])
async def city_pincode_endpoint(city: str):
    pincode = get_pincode_from_city(city)
    if pincode is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pincode not found for city: {city}",
        )
    return ApiResponse(data=CityPincode(city=city, pincode=pincode))


@router.get("/{theater_id}/events", response_model=ApiResponse[list[UserEvent]])
async def theater_events_endpoint(
    theater_id: str,
    service: TheaterService = Depends(get_theater_service),
):
    events = await service.get_events_for_theater(theater_id)
    return ApiResponse(data=events, total=len(events))


@router.get("/{theater_id}/seat-layout", response_model=ApiResponse[TheaterSeatLayout])
async def theater_seat_layout_endpoint(
    theater_id: str,
    service: TheaterService = Depends(get_theater_service),
    layouts: SeatLayoutService = Depends(get_seat_layout_service),
):
    """The saved layout for the theater, or a generated default when none was saved."""
    theater = await service.get_theater(theater_id)
    if theater is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Theater not found",
        )
    return ApiResponse(data=await layouts.get_seat_layout_for_booking(theater))
