"""
Unit tests for promotion pricing.
"""

from datetime import date
from types import SimpleNamespace

import pytest

from salon.shared.pricing import best_discount, discounted_price, is_event_active

TODAY = date(2026, 1, 19)


def _event(percent, start="2026-01-01", end="2026-01-31", active=True):
    return {"discountPercent": percent, "startDate": start, "endDate": end, "isActive": active}


def test_best_discount_takes_highest_active_percentage():
    events = [_event(10), _event(20), _event(None)]

    assert best_discount(events, TODAY) == 20


def test_best_discount_is_zero_without_active_events():
    events = [_event(50, start="2026-02-01", end="2026-02-28"), _event(30, active=False)]

    assert best_discount(events, TODAY) == 0
    assert best_discount([], TODAY) == 0


def test_no_discount_leaves_price_unchanged():
    assert discounted_price(25, 0) == 25


@pytest.mark.parametrize(
    "price,discount,expected",
    [
        (100, 20, 80),
        (10, 15, 8),  # 8.5 floors to 8
        (3, 10, 2),  # 2.7 floors to 2
        (100, 7, 93),
        (40, 100, 0),
    ],
)
def test_discounted_price_is_floored(price, discount, expected):
    assert discounted_price(price, discount) == expected


@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("2026-01-19", "2026-01-19", True),
        ("2026-01-01", None, True),
        ("2026-01-20", None, False),
        ("2026-01-01", "2026-01-18", False),
    ],
)
def test_event_window_is_inclusive(start, end, expected):
    assert is_event_active(_event(10, start=start, end=end), TODAY) is expected


def test_orm_style_events_are_supported():
    event = SimpleNamespace(discount_percent=15, start_date=date(2026, 1, 18), end_date=None, is_active=True)

    assert best_discount([event], TODAY) == 15
