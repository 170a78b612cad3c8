from bookmyblock.schemas.common import ApiResponse, CamelModel
from bookmyblock.schemas.event import EventCreate, EventUpdate, EventCancel, EventResponse, EventStats
from bookmyblock.schemas.theater import (
    TheaterApplicationCreate, TheaterApplicationResponse, ApplicationApprove, ApplicationReject,
    ApplicationStats, OwnerTheaterSummary, Theater, TheaterLocationData, UserEvent, CityPincode,
)
from bookmyblock.schemas.seat_layout import (
    SeatCategory, SeatInfo, SeatMapData, ScreenLayout, TheaterSeatLayout, SeatLayoutSaved,
)
from bookmyblock.schemas.auth import SessionResponse

__all__ = [
    "ApiResponse", "CamelModel",
    "EventCreate", "EventUpdate", "EventCancel", "EventResponse", "EventStats",
    "TheaterApplicationCreate", "TheaterApplicationResponse", "ApplicationApprove", "ApplicationReject",
    "ApplicationStats", "OwnerTheaterSummary", "Theater", "TheaterLocationData", "UserEvent", "CityPincode",
    "SeatCategory", "SeatInfo", "SeatMapData", "ScreenLayout", "TheaterSeatLayout", "SeatLayoutSaved",
    "SessionResponse",
]
