"""
Unit tests for shared validators.
"""

from datetime import date

import pytest

from salon.shared.validators import parse_iso_date, validate_phone, validate_time_slot


@pytest.mark.parametrize("phone", ["+243 976527237", "(01) 23-45-67", "0812345678"])
def test_valid_phones(phone):
    assert validate_phone(phone)


def test_phone_spacing_is_normalized():
    assert validate_phone("  +243   994 155 412 ") == "+243 994 155 412"


@pytest.mark.parametrize("phone", ["12345", "+243 abc", "1" * 16])
def test_invalid_phones(phone):
    with pytest.raises(ValueError):
        validate_phone(phone)


@pytest.mark.parametrize("value", ["07:00", "13:00", "21:00"])
def test_valid_time_slots(value):
    assert validate_time_slot(value) == value


@pytest.mark.parametrize("value", ["7:00", "24:00", "10h", "", "07:30", "06:00", "22:00"])
def test_invalid_time_slots(value):
    with pytest.raises(ValueError):
        validate_time_slot(value)


def test_parse_iso_date():
    assert parse_iso_date("2026-01-19") == date(2026, 1, 19)

    with pytest.raises(ValueError):
        parse_iso_date("19/01/2026")
