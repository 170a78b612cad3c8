"""
Tests for theater document extraction, from text and through IPFS gateways.
"""

import httpx
import pytest

from bookmyblock.core.config import Settings
from bookmyblock.infrastructure.pinning_client import PinningClient
from bookmyblock.services.pdf_service import PDFParsingService, extract_theater_data_from_text

DOCUMENT = """THEATER REGISTRATION APPLICATION
Full Name: Ravi Kumar
Email: ravi@example.com
Phone: +91 98765 43210
Theater Name: Sri Venkateswara Cinemas
Address: 12 Tilak Road
City: Tirupati
State: Andhra Pradesh
Pincode: 517501
Number of Screens: 3
Total Seats: 450
"""


def test_extract_all_fields():
    data = extract_theater_data_from_text(DOCUMENT)
    assert data is not None
    assert data.theater_name == "Sri Venkateswara Cinemas"
    assert data.pincode == "517501"
    assert data.city == "Tirupati"
    assert data.state == "Andhra Pradesh"
    assert data.address == "12 Tilak Road"
    assert data.number_of_screens == 3
    assert data.total_seats == 450
    assert data.owner_name == "Ravi Kumar"
    assert data.owner_email == "ravi@example.com"


def test_optional_fields_default():
    text = "Theater Name: Mini Screen\nCity: Pune\nState: Maharashtra\nPincode: 411001\n"
    data = extract_theater_data_from_text(text)
    assert data is not None
    assert data.total_seats == 0
    assert data.number_of_screens == 1
    assert data.address == ""


@pytest.mark.parametrize("missing", ["Theater Name", "Pincode", "City", "State"])
def test_missing_required_field_returns_none(missing):
    text = "\n".join(line for line in DOCUMENT.splitlines() if not line.startswith(missing))
    assert extract_theater_data_from_text(text) is None


def test_short_pincode_not_accepted():
    text = DOCUMENT.replace("Pincode: 517501", "Pincode: 5175")
    assert extract_theater_data_from_text(text) is None


def _parser(handler) -> PDFParsingService:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    settings = Settings(
        PINATA_GATEWAY_URL="https://primary.test/ipfs",
        IPFS_FALLBACK_GATEWAYS=["https://fallback.test/ipfs"],
    )
    return PDFParsingService(PinningClient(client, settings))


@pytest.mark.asyncio
async def test_extract_from_ipfs_falls_back_to_next_gateway():
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url.host)
        if request.url.host == "primary.test":
            return httpx.Response(504)
        return httpx.Response(200, content=DOCUMENT.encode())

    data = await _parser(handler).extract_theater_data_from_ipfs("bafydoc")

    assert data is not None
    assert data.city == "Tirupati"
    assert requested == ["primary.test", "fallback.test"]


@pytest.mark.asyncio
async def test_extract_from_ipfs_all_gateways_fail():
    data = await _parser(lambda request: httpx.Response(404)).extract_theater_data_from_ipfs("bafydoc")
    assert data is None


@pytest.mark.asyncio
async def test_extract_from_ipfs_unparseable_document():
    data = await _parser(lambda request: httpx.Response(200, content=b"%PDF-1.4 binary")).extract_theater_data_from_ipfs("x")
    assert data is None
