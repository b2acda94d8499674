"""
Display formatters
"""
from datetime import date, datetime, timezone

import pytest

from utils.formatters import format_currency, format_date, format_percent, format_room_type


@pytest.mark.parametrize("value,expected", [
    (10000, "₹10,000"),
    (3400.4, "₹3,400"),
    ("2500", "₹2,500"),
    (None, "₹0"),
    (0, "₹0"),
    ("n/a", "n/a"),
])
def test_format_currency(value, expected):
    assert format_currency(value) == expected


class TestFormatDate:
    def test_datetime(self):
        assert format_date(datetime(2024, 3, 5, tzinfo=timezone.utc)) == "05 Mar 2024"

    def test_date_and_custom_format(self):
        assert format_date(date(2024, 3, 5), "%Y-%m-%d") == "2024-03-05"

    def test_iso_string(self):
        assert format_date("2024-03-05T10:00:00Z") == "05 Mar 2024"

    def test_empty(self):
        assert format_date(None) == "-"
        assert format_date("") == "-"

    def test_unparsable_string_returned(self):
        assert format_date("someday") == "someday"


def test_format_percent():
    assert format_percent(66.6) == "67%"
    assert format_percent(0) == "0%"


def test_format_room_type():
    assert format_room_type("double", True) == "Double · AC"
    assert format_room_type("single", False) == "Single · Non-AC"
