"""
Promotion pricing helpers.

Discounts are presentation-only: they are quoted to the client while booking
and never stored on the appointment.
"""

from datetime import date
from typing import Any, Iterable, Optional


def _field(event: Any, snake: str, camel: str):
    # Accept ORM rows, pydantic models and raw JSON dicts alike
    if isinstance(event, dict):
        return event.get(camel, event.get(snake))
    return getattr(event, snake, None)


def _as_date(value) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    return date.fromisoformat(value)


def is_event_active(event: Any, today: date) -> bool:
    """An event is active when enabled and today falls in [startDate, endDate or +inf]"""
    if _field(event, "is_active", "isActive") is False:
        return False

    start = _as_date(_field(event, "start_date", "startDate"))
    end = _as_date(_field(event, "end_date", "endDate"))
    if start is None or today < start:
        return False
    return end is None or today <= end


def best_discount(events: Iterable[Any], today: date) -> int:
    """Highest discountPercent among active events, 0 when there is none"""
    best = 0
    for event in events:
        percent = _field(event, "discount_percent", "discountPercent")
        if percent and is_event_active(event, today) and percent > best:
            best = percent
    return best


def discounted_price(price: int, discount: int) -> int:
    """Price after a percentage discount, rounded down to a whole unit"""
    if discount <= 0:
        return price
    # Integer arithmetic keeps e.g. 100 at 7% from flooring to 92
    return price * (100 - discount) // 100
