"""
Theater details from application documents.

Owners upload a generated PDF whose text layer is a list of "Label: value"
lines. Extraction is regex based; binary PDF parsing is not attempted, the
downloaded bytes are decoded as text and scanned for the labels.
"""

import re
from typing import Optional

from bookmyblock.core.errors import PinningError
from bookmyblock.infrastructure.pinning_client import PinningClient
from bookmyblock.schemas.theater import TheaterLocationData
from bookmyblock.core.logging import get_logger

logger = get_logger(__name__)


def _line(label: str) -> re.Pattern:
    return re.compile(rf"{label}:[ \t]*(.+?)[ \t]*(?:\r?\n|$)", re.IGNORECASE | re.MULTILINE)


def _number(label: str, digits: str = r"\d+") -> re.Pattern:
    return re.compile(rf"{label}:\s*({digits})", re.IGNORECASE)


PATTERNS = {
    "theater_name": _line("Theater Name"),
    "pincode": _number("Pincode", r"\d{6}"),
    "city": _line("City"),
    "state": _line("State"),
    "address": _line("Address"),
    "total_seats": _number("Total Seats"),
    "number_of_screens": _number("Number of Screens"),
    "owner_name": _line("Full Name"),
    "owner_email": _line("Email"),
    "owner_phone": _line("Phone"),
}

REQUIRED_FIELDS = ("theater_name", "pincode", "city", "state")


def extract_theater_data_from_text(text: str) -> Optional[TheaterLocationData]:
    """Return the labelled fields, or None if name, pincode, city or state is missing."""
    matches = {}
    for field_name, pattern in PATTERNS.items():
        match = pattern.search(text or "")
        if match:
            matches[field_name] = match.group(1).strip()

    missing = [f for f in REQUIRED_FIELDS if not matches.get(f)]
    if missing:
        logger.warning("theater_document_incomplete", missing=missing)
        return None

    data = TheaterLocationData(
        theater_name=matches["theater_name"],
        pincode=matches["pincode"],
        city=matches["city"],
        state=matches["state"],
        address=matches.get("address", ""),
        total_seats=int(matches.get("total_seats", 0)),
        number_of_screens=int(matches.get("number_of_screens", 1)),
        owner_name=matches.get("owner_name", ""),
        owner_email=matches.get("owner_email", ""),
        owner_phone=matches.get("owner_phone", ""),
    )
    logger.info("theater_document_parsed", name=data.theater_name, pincode=data.pincode, city=data.city)
    return data


class PDFParsingService:
    def __init__(self, pinning: PinningClient) -> None:
        self._pinning = pinning

    async def extract_theater_data_from_ipfs(self, ipfs_hash: str) -> Optional[TheaterLocationData]:
        """Try each gateway in turn; the first document that parses wins."""
        for gateway in self._pinning.gateways:
            try:
                content = await self._pinning.fetch_bytes(ipfs_hash, gateway)
            except PinningError as e:
                logger.warning("gateway_failed", gateway=gateway, ipfs_hash=ipfs_hash, error=str(e))
                continue

            logger.debug("theater_document_downloaded", ipfs_hash=ipfs_hash, size=len(content))
            data = extract_theater_data_from_text(content.decode("utf-8", errors="replace"))
            if data:
                return data

        logger.error("theater_document_unavailable", ipfs_hash=ipfs_hash)
        return None
