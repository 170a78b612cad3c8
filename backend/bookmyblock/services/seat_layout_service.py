"""
Seat layouts: default layout synthesis, persistence and lookup for booking.

DEFAULT LAYOUT
==============

Seats are split evenly across screens (remainder dropped). Each screen gets
ceil(seats / 15) rows, and the seats are spread across those rows, filled
front to back until the screen's seat count is reached.

Row bands set the category and price:

  rows 0-1   recliner  350
  rows 2-3   vip       250
  rows 4-5   platinum  200
  rows 6-7   gold      150
  rows 8+    silver    100

Availability is a random draw per seat (85% available). A generated layout
is a preview for theaters that never saved one; it is not inventory.

STORED LAYOUTS
==============

Owners save layouts from the layout editor. The JSON is pinned to IPFS when
credentials are configured and kept in the "seat-layouts" key-value
namespace either way. Reads prefer the pinned copy and fall back to the
stored one.
"""

import math
import random
from dataclasses import dataclass
from typing import Optional

from bookmyblock.core.errors import PinningError
from bookmyblock.core.metrics import seat_layouts_generated
from bookmyblock.infrastructure.kv_store import NamespacedStore
from bookmyblock.infrastructure.pinning_client import PinningClient
from bookmyblock.models.event import utcnow
from bookmyblock.schemas.seat_layout import (
    ScreenLayout, SeatCategory, SeatInfo, SeatMapData, TheaterSeatLayout,
)
from bookmyblock.schemas.theater import Theater
from bookmyblock.core.logging import get_logger

logger = get_logger(__name__)

SEATS_PER_ROW_TARGET = 15
AVAILABILITY_THRESHOLD = 0.15
DEFAULT_TOTAL_SEATS = 100


@dataclass(frozen=True)
class CategoryTier:
    id: str
    name: str
    color: str
    price: int
    share: float  # fraction of a screen's seats reported for the category
    last_row: Optional[int]  # exclusive row bound, None for the back band


CATEGORY_TIERS = (
    CategoryTier("recliner", "Recliner", "#8B5CF6", 350, 0.1, 2),
    CategoryTier("vip", "VIP", "#F59E0B", 250, 0.2, 4),
    CategoryTier("platinum", "Platinum", "#10B981", 200, 0.2, 6),
    CategoryTier("gold", "Gold", "#EF4444", 150, 0.3, 8),
    CategoryTier("silver", "Silver", "#6B7280", 100, 0.2, None),
)


def category_for_row(row_index: int) -> CategoryTier:
    for tier in CATEGORY_TIERS:
        if tier.last_row is None or row_index < tier.last_row:
            return tier
    return CATEGORY_TIERS[-1]


def row_label(row_index: int) -> str:
    """A..Z, then AA, AB, ..."""
    label = ""
    n = row_index + 1
    while n:
        n, remainder = divmod(n - 1, 26)
        label = chr(65 + remainder) + label
    return label


def _generate_screen(
    theater_id: str, screen_number: int, seats_per_screen: int, rng: random.Random
) -> ScreenLayout:
    rows = math.ceil(seats_per_screen / SEATS_PER_ROW_TARGET)
    seats_per_row = math.ceil(seats_per_screen / rows) if rows else 0

    layout: list[list[SeatInfo]] = []
    placed = 0
    for row in range(rows):
        letter = row_label(row)
        tier = category_for_row(row)
        row_seats = []
        for seat in range(1, seats_per_row + 1):
            if placed >= seats_per_screen:
                break
            row_seats.append(SeatInfo(
                id=f"{theater_id}-screen{screen_number}-{letter}{seat}",
                row=letter,
                number=seat,
                category=tier.id,
                is_available=rng.random() > AVAILABILITY_THRESHOLD,
                is_blocked=False,
            ))
            placed += 1
        if row_seats:
            layout.append(row_seats)

    return ScreenLayout(
        screen_id=f"screen-{screen_number}",
        screen_name=f"Screen {screen_number}",
        screen_position="center",
        total_seats=seats_per_screen,
        categories=[
            SeatCategory(
                id=tier.id,
                name=tier.name,
                color=tier.color,
                price=tier.price,
                total_seats=math.floor(seats_per_screen * tier.share),
            )
            for tier in CATEGORY_TIERS
        ],
        seat_map=SeatMapData(rows=rows, seats_per_row=seats_per_row, layout=layout),
    )


def generate_default_seat_layout(theater: Theater, rng: Optional[random.Random] = None) -> TheaterSeatLayout:
    rng = rng or random.Random()
    total_screens = max(theater.screens or 1, 1)
    total_seats = theater.total_seats if theater.total_seats and theater.total_seats > 0 else DEFAULT_TOTAL_SEATS
    seats_per_screen = total_seats // total_screens

    screens = [
        _generate_screen(theater.id, number, seats_per_screen, rng)
        for number in range(1, total_screens + 1)
    ]
    seat_layouts_generated.inc()

    logger.info(
        "default_seat_layout_generated",
        theater_id=theater.id,
        screens=total_screens,
        seats_per_screen=seats_per_screen,
    )
    return TheaterSeatLayout(
        theater_id=theater.id,
        theater_name=theater.name,
        total_screens=total_screens,
        screens=screens,
        last_updated=utcnow(),
    )


class SeatLayoutService:
    def __init__(self, layouts: NamespacedStore, pinning: Optional[PinningClient] = None) -> None:
        self._layouts = layouts
        self._pinning = pinning

    async def _pin(self, layout: TheaterSeatLayout) -> Optional[str]:
        if self._pinning is None:
            return None

        content = layout.model_dump(mode="json", by_alias=True, exclude={"ipfs_hash"})
        content["metadata"] = {
            "name": f"Seat Layout - {layout.theater_name}",
            "description": f"Seat layout configuration for {layout.theater_name}",
            "theaterId": layout.theater_id,
            "uploadedAt": utcnow().isoformat(),
        }
        try:
            return await self._pinning.pin_json(
                content,
                name=f"seat-layout-{layout.theater_id}-{int(utcnow().timestamp() * 1000)}.json",
                keyvalues={"theaterId": layout.theater_id, "type": "seat-layout", "version": "1.0"},
            )
        except PinningError as e:
            logger.warning("seat_layout_pin_failed", theater_id=layout.theater_id, error=str(e))
            return None

    async def save_seat_layout(self, layout: TheaterSeatLayout) -> TheaterSeatLayout:
        """Pin (best effort) and store; an existing layout for the theater is replaced."""
        ipfs_hash = await self._pin(layout)
        saved = layout.model_copy(update={
            "ipfs_hash": ipfs_hash or layout.ipfs_hash,
            "last_updated": utcnow(),
        })
        await self._layouts.set(saved.theater_id, saved.model_dump_json(by_alias=True))

        logger.info("seat_layout_saved", theater_id=saved.theater_id, ipfs_hash=saved.ipfs_hash)
        return saved

    async def get_seat_layout(self, theater_id: str) -> Optional[TheaterSeatLayout]:
        raw = await self._layouts.get(theater_id)
        if raw is None:
            return None
        stored = TheaterSeatLayout.model_validate_json(raw)

        if stored.ipfs_hash and self._pinning is not None:
            try:
                pinned = await self._pinning.fetch_json(stored.ipfs_hash)
                layout = TheaterSeatLayout.model_validate(pinned)
                return layout.model_copy(update={"ipfs_hash": stored.ipfs_hash})
            except (PinningError, ValueError) as e:
                logger.warning("seat_layout_gateway_fallback", theater_id=theater_id, error=str(e))
        return stored

    async def get_seat_layout_for_booking(self, theater: Theater) -> TheaterSeatLayout:
        layout = await self.get_seat_layout(theater.id)
        if layout is not None:
            return layout
        logger.info("seat_layout_not_found", theater_id=theater.id)
        return generate_default_seat_layout(theater)
