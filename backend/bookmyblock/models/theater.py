"""
Theater application submitted by an owner and reviewed by an admin.
Only approved applications are visible to the user theater catalogue.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from bookmyblock.models.event import utcnow


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class AdminAction:
    action: ApplicationStatus
    admin_notes: str = ""
    rejection_reason: Optional[str] = None
    admin_id: str = "admin-1"
    action_date: datetime = field(default_factory=utcnow)


@dataclass
class TheaterApplication:
    id: str
    theater_name: str
    owner_name: str
    owner_email: str
    owner_phone: str
    address: str
    city: str
    state: str
    pincode: str
    number_of_screens: int = 1
    total_seats: int = 100
    pdf_hash: Optional[str] = None
    ipfs_urls: dict[str, str] = field(default_factory=dict)
    status: ApplicationStatus = ApplicationStatus.PENDING
    admin_action: Optional[AdminAction] = None
    submitted_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    def __repr__(self) -> str:
        return f"<TheaterApplication(id={self.id}, name={self.theater_name}, status={self.status.value})>"
