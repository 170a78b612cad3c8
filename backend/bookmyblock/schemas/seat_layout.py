"""
Seat layout wire format, shared by the owner layout editor, the pinned JSON
document and the user seat-selection view.
"""

from datetime import datetime
from typing import Literal, Optional
from pydantic import Field

from bookmyblock.models.event import utcnow
from bookmyblock.schemas.common import CamelModel


class SeatCategory(CamelModel):
    id: str
    name: str
    color: str
    price: int
    total_seats: int


class SeatInfo(CamelModel):
    id: str
    row: str
    number: int
    category: str
    is_available: bool = True
    is_blocked: bool = False


class SeatMapData(CamelModel):
    rows: int
    seats_per_row: int
    layout: list[list[SeatInfo]]


class ScreenLayout(CamelModel):
    screen_id: str
    screen_name: str
    screen_position: Literal["front", "center", "back"] = "center"
    total_seats: int
    categories: list[SeatCategory]
    seat_map: SeatMapData


class TheaterSeatLayout(CamelModel):
    theater_id: str = Field(..., min_length=1)
    theater_name: str
    total_screens: int
    screens: list[ScreenLayout]
    ipfs_hash: Optional[str] = None
    last_updated: datetime = Field(default_factory=utcnow)


class SeatLayoutSaved(CamelModel):
    theater_id: str
    ipfs_hash: Optional[str]
    last_updated: datetime
