"""
Pydantic schemas for authenticated sessions.
"""

from datetime import datetime
from typing import Any, Optional

from bookmyblock.schemas.common import CamelModel


class SessionResponse(CamelModel):
    subject: str
    dashboard: str
    claims: dict[str, Any]
    last_seen: Optional[datetime] = None
