"""
Indian mobile number helpers.

Every function accepts free-form input ("+91 98765-43210", "09876543210",
"9876543210") and works on the cleaned digit string.
"""

import re
from dataclasses import dataclass
from typing import Optional

COUNTRY_CODE = "91"
NUMBER_LENGTH = 10
MOBILE_PREFIXES = ("6", "7", "8", "9")

_NON_DIGITS = re.compile(r"\D")


@dataclass(frozen=True)
class PhoneNumber:
    raw: str
    cleaned: str
    formatted: str  # XXXXX XXXXX
    international: str  # +91XXXXXXXXXX
    is_valid: bool


def clean_phone_number(value: str) -> str:
    """Digits only, with a leading 91 dropped when it is a country code."""
    if not value:
        return ""

    cleaned = _NON_DIGITS.sub("", value)
    if cleaned.startswith(COUNTRY_CODE) and len(cleaned) == NUMBER_LENGTH + len(COUNTRY_CODE):
        cleaned = cleaned[len(COUNTRY_CODE):]
    return cleaned


def format_for_display(value: str) -> str:
    cleaned = clean_phone_number(value)
    if len(cleaned) != NUMBER_LENGTH:
        return cleaned
    return f"{cleaned[:5]} {cleaned[5:]}"


def format_for_submission(value: str) -> str:
    cleaned = clean_phone_number(value)
    if len(cleaned) != NUMBER_LENGTH:
        return cleaned
    return f"+{COUNTRY_CODE}{cleaned}"


def is_valid_indian_number(value: str) -> bool:
    cleaned = clean_phone_number(value)
    return len(cleaned) == NUMBER_LENGTH and cleaned[0] in MOBILE_PREFIXES


def process_phone_number(value: str) -> PhoneNumber:
    return PhoneNumber(
        raw=value,
        cleaned=clean_phone_number(value),
        formatted=format_for_display(value),
        international=format_for_submission(value),
        is_valid=is_valid_indian_number(value),
    )


def get_validation_error(value: Optional[str]) -> Optional[str]:
    """Return a user-facing message for an invalid number, or None if valid."""
    if not value or not value.strip():
        return "Mobile number is required"

    cleaned = clean_phone_number(value)
    if not cleaned:
        return "Please enter a valid mobile number"
    if len(cleaned) < NUMBER_LENGTH:
        return "Mobile number must be 10 digits"
    if len(cleaned) > NUMBER_LENGTH:
        return "Mobile number must be exactly 10 digits"
    if cleaned[0] not in MOBILE_PREFIXES:
        return "Please enter a valid Indian mobile number"
    return None
