"""Shared validation utilities"""

import re
from datetime import date
from typing import Optional

TIME_SLOT_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

# One fixed hourly slot from 07:00 to 21:00, every service takes exactly one
DAILY_SLOTS = [f"{hour:02d}:00" for hour in range(7, 22)]


def validate_phone(phone: Optional[str]) -> Optional[str]:
    """
    Validate an international phone number and normalize its spacing.

    Accepts digits, spaces, dashes, dots and parentheses with an optional
    leading "+". The number must contain between 6 and 15 digits (E.164 limit).

    Raises:
        ValueError: If the phone number is invalid
    """
    if not phone:
        return phone

    cleaned = phone.strip()
    if not re.fullmatch(r"\+?[\d\s().-]+", cleaned):
        raise ValueError("Phone number contains invalid characters")

    digits = re.sub(r"\D", "", cleaned)
    if not 6 <= len(digits) <= 15:
        raise ValueError("Phone number must contain between 6 and 15 digits")

    return re.sub(r"\s+", " ", cleaned)


def validate_time_slot(value: str) -> str:
    """Validate a 24h "HH:MM" time string that is one of the daily slots"""
    if not TIME_SLOT_PATTERN.match(value or ""):
        raise ValueError("Time must use the HH:MM 24-hour format")
    if value not in DAILY_SLOTS:
        raise ValueError(f"Time must be one of the hourly slots {DAILY_SLOTS[0]}-{DAILY_SLOTS[-1]}")
    return value


def parse_iso_date(value: str) -> date:
    """Parse a YYYY-MM-DD date string"""
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD") from e


def reject_null(value):
    """Partial updates may omit a required field but never clear it"""
    if value is None:
        raise ValueError("Field cannot be null")
    return value
