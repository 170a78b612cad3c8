"""
Pydantic schemas for theater applications and the user-facing theater catalogue.
"""

from datetime import datetime
from typing import Literal, Optional
from pydantic import EmailStr, Field

from bookmyblock.models.theater import ApplicationStatus
from bookmyblock.schemas.common import CamelModel


# Owner / admin side

class TheaterApplicationCreate(CamelModel):
    theater_name: str = Field(..., min_length=1, max_length=255)
    owner_name: str = Field(..., min_length=1, max_length=255)
    owner_email: EmailStr
    owner_phone: str
    address: str = ""
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    pincode: str = Field(..., pattern=r"^\d{6}$")
    number_of_screens: int = Field(1, ge=1, le=50)
    total_seats: int = Field(100, ge=1, le=20000)
    pdf_hash: Optional[str] = None
    ipfs_urls: dict[str, str] = Field(default_factory=dict)


class ApplicationApprove(CamelModel):
    admin_notes: Optional[str] = None


class ApplicationReject(CamelModel):
    rejection_reason: Optional[str] = None
    admin_notes: Optional[str] = None


class AdminActionResponse(CamelModel):
    action: ApplicationStatus
    admin_notes: str
    rejection_reason: Optional[str]
    admin_id: str
    action_date: datetime


class TheaterApplicationResponse(CamelModel):
    id: str
    theater_name: str
    owner_name: str
    owner_email: str
    owner_phone: str
    address: str
    city: str
    state: str
    pincode: str
    number_of_screens: int
    total_seats: int
    pdf_hash: Optional[str]
    ipfs_urls: dict[str, str]
    status: ApplicationStatus
    admin_action: Optional[AdminActionResponse]
    submitted_at: datetime
    updated_at: datetime


class ApplicationStats(CamelModel):
    total_applications: int
    pending_applications: int
    approved_applications: int
    rejected_applications: int
    recent_applications: list[TheaterApplicationResponse]


class OwnerTheaterSummary(CamelModel):
    id: str
    name: str
    screens: int
    total_seats: int
    location: str
    owner_email: str


# User side (aggregated catalogue)

class TheaterLocationData(CamelModel):
    """Theater details recovered from an application document or its fallback fields."""

    theater_name: str
    pincode: str
    city: str
    state: str
    address: str = ""
    total_seats: int = 0
    number_of_screens: int = 1
    owner_name: str = ""
    owner_email: str = ""
    owner_phone: str = ""


class Theater(CamelModel):
    id: str
    name: str
    location: str = ""
    pincode: str = ""
    city: str = ""
    state: str = ""
    address: str = ""
    screens: int = 1
    total_seats: int = 100
    status: Literal["active", "pending", "inactive", "rejected"] = "active"
    owner_name: str = ""
    owner_email: str = ""
    owner_phone: str = ""
    pdf_hash: Optional[str] = None
    ipfs_urls: Optional[dict[str, str]] = None
    distance: Optional[int] = None  # km, only set by proximity queries


class UserEvent(CamelModel):
    """One bookable show: an owner event expanded per show time."""

    id: str
    title: str
    description: str
    theater_id: str
    theater_name: str = ""
    theater_location: str = ""
    date: str
    time: str
    duration: int = 120
    ticket_price: int
    available_seats: int
    total_seats: int
    category: str = "Movie"
    image_url: Optional[str] = None
    trailer_url: Optional[str] = None
    status: Literal["active", "cancelled", "completed"] = "active"


class CityPincode(CamelModel):
    city: str
    pincode: str
