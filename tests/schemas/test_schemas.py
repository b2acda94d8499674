"""
Pydantic schema rules
"""
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from schemas import (
    Document,
    Payment,
    PaymentUpdate,
    RentRates,
    Room,
    Settings,
    SettingsUpdate,
    Tenant,
    TenantHistory,
    User,
)

JOINED = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestRoom:
    def test_defaults_and_capacity(self):
        room = Room(id="room_1", room_number=101, rent=3000)
        assert room.type == "single"
        assert not room.is_ac
        assert room.tenants == []
        assert room.capacity == 1
        assert Room(id="r", room_number=1, type="triple", rent=0).capacity == 3

    def test_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            Room(id="room_1", room_number=101, type="suite", rent=3000)

    def test_rejects_negative_rent(self):
        with pytest.raises(ValidationError):
            Room(id="room_1", room_number=101, rent=-1)


class TestTenant:
    def test_name_and_email(self):
        tenant = Tenant(id="t", first_name="Priya", email="  priya@gmail.com ", room_number=102, join_date=JOINED)
        assert tenant.name == "Priya"
        assert tenant.email == "priya@gmail.com"
        assert tenant.token_money == 3000
        assert tenant.is_active

    def test_requires_first_name(self):
        with pytest.raises(ValidationError):
            Tenant(id="t", first_name="", room_number=102, join_date=JOINED)

    def test_document_type(self):
        doc = Document(id="doc_1", type="id_proof", name="Aadhaar.pdf", uploaded_at=JOINED)
        assert doc.url == "#"
        assert not doc.verified
        with pytest.raises(ValidationError):
            Document(id="doc_1", type="passport", name="x", uploaded_at=JOINED)


class TestPayment:
    def payload(self, **overrides):
        data = {
            "id": "payment_1", "tenant_id": "t", "tenant_name": "Rahul", "room_number": 101,
            "month": "January", "year": 2024, "total_amount": 3400,
        }
        data.update(overrides)
        return data

    def test_defaults(self):
        payment = Payment(**self.payload())
        assert payment.status == "pending"
        assert payment.electricity_rate == 8
        assert payment.paid_date is None
        assert not payment.reminder_sent

    @pytest.mark.parametrize("field,value", [("month", "Jan"), ("status", "overdue"), ("year", 1999)])
    def test_rejects(self, field, value):
        with pytest.raises(ValidationError):
            Payment(**self.payload(**{field: value}))

    def test_update_tracks_set_fields(self):
        update = PaymentUpdate(status="paid")
        assert update.model_fields_set == {"status"}


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.total_rooms == 20
        assert settings.electricity_rate == 8
        assert settings.rent_rates == RentRates()
        assert settings.rent_rates.triple_ac == 14000

    def test_update_nested_rates_fill_defaults(self):
        update = SettingsUpdate.model_validate({"rent_rates": {"single_ac": 4500}})
        assert update.rent_rates.single_ac == 4500
        assert update.rent_rates.single_non_ac == 3000


def test_history_is_frozen():
    entry = TenantHistory(
        id="history_1", tenant_name="Rahul", room_number=101, room_type="single",
        is_ac=False, join_date=JOINED, leave_date=JOINED,
    )
    with pytest.raises(ValidationError):
        entry.total_rent_paid = 10


def test_user_role():
    assert User(id="1", email="a@b.com", name="A", role="admin").is_admin
    with pytest.raises(ValidationError):
        User(id="1", email="a@b.com", name="A", role="owner")
