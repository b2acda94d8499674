"""
Form validators
"""
import pytest

from schemas import Room
from utils.validators import (
    validate_email,
    validate_login,
    validate_password,
    validate_payment_entry,
    validate_room_count,
    validate_room_number,
    validate_tenant_selected,
)


class TestLoginFields:
    def test_email(self):
        assert validate_email("admin@rentease.com") == (True, None)
        assert validate_email("") == (False, "Please enter your email")
        assert validate_email("   ") == (False, "Please enter your email")
        assert validate_email("not-an-email") == (False, "Please enter a valid email address")

    def test_password(self):
        assert validate_password("x") == (True, None)
        assert validate_password("") == (False, "Please enter your password")

    @pytest.mark.parametrize("email,password", [("", "x"), ("a@b.com", ""), ("  ", "x"), (None, "x")])
    def test_login_requires_both(self, email, password):
        assert validate_login(email, password) == (False, "Please enter email and password")

    def test_login_ok(self):
        assert validate_login("a@b.com", "x") == (True, None)


class TestRoomCount:
    @pytest.mark.parametrize("value", [1, 20, 500, "25", 30.0])
    def test_valid(self, value):
        assert validate_room_count(value) == (True, None)

    @pytest.mark.parametrize("value", [0, 501, -3, 2.5, "abc", "", None])
    def test_invalid(self, value):
        valid, error = validate_room_count(value)
        assert not valid
        assert error == "Please enter a number between 1 and 500"


class TestPaymentEntry:
    def test_requires_tenant_and_month(self):
        assert validate_payment_entry(None, "January", 0, 10) == (False, "Please select tenant and month")
        assert validate_payment_entry("tenant_1", None, 0, 10) == (False, "Please select tenant and month")

    def test_reading_cannot_go_back(self):
        assert validate_payment_entry("tenant_1", "January", 150, 100) == (
            False,
            "Current reading cannot be less than previous reading",
        )

    def test_equal_readings_allowed(self):
        assert validate_payment_entry("tenant_1", "January", 100, 100) == (True, None)


def test_tenant_selected():
    assert validate_tenant_selected("tenant_1") == (True, None)
    assert validate_tenant_selected(None) == (False, "Please select a tenant")


class TestRoomNumber:
    @pytest.fixture
    def rooms(self):
        return [Room(id="room_1", room_number=101, rent=3000), Room(id="room_2", room_number=102, rent=3000)]

    def test_unique(self, rooms):
        assert validate_room_number(103, rooms) == (True, None)

    def test_duplicate(self, rooms):
        assert validate_room_number(101, rooms) == (False, "Room #101 already exists")

    def test_excluding_self(self, rooms):
        assert validate_room_number(101, rooms, exclude_room_id="room_1") == (True, None)

    @pytest.mark.parametrize("value", [None, 0, -1])
    def test_invalid(self, rooms, value):
        assert validate_room_number(value, rooms) == (False, "Please enter a valid room number")
