"""
Report aggregations (pandas)
"""
from datetime import datetime, timezone

import pytest

from schemas import Payment, Room, Tenant, TenantHistory
from services.report_service import (
    dashboard_stats,
    history_total,
    monthly_revenue,
    occupancy_summary,
    payment_years,
    payments_frame,
    records_frame,
    revenue_summary,
    tenant_payment_summary,
    tenant_summary,
    to_csv,
    yearly_revenue,
)

JOINED = datetime(2024, 1, 1, tzinfo=timezone.utc)


def payment(amount, status="paid", month="January", year=2024, electricity=0, pid=None):
    return Payment(
        id=pid or f"payment_{month}_{year}_{amount}_{status}",
        tenant_id="tenant_1",
        tenant_name="Rahul Sharma",
        room_number=101,
        month=month,
        year=year,
        electricity_amount=electricity,
        rent=amount - electricity,
        total_amount=amount,
        status=status,
    )


def room(number, occupied, rent=3000):
    return Room(id=f"room_{number}", room_number=number, rent=rent, is_occupied=occupied)


def tenant(tid, verified=False, active=True):
    return Tenant(
        id=tid,
        first_name=tid,
        room_number=101,
        documents_verified=verified,
        is_active=active,
        join_date=JOINED,
    )


@pytest.fixture
def payments():
    return [
        payment(5000, "paid", "January", electricity=400),
        payment(6000, "paid", "February", electricity=500),
        payment(7000, "pending", "February", electricity=600),
        payment(4000, "paid", "January", year=2023),
    ]


class TestMonthlyRevenue:
    def test_all_years(self, payments):
        df = monthly_revenue(payments)
        assert len(df) == 12
        assert list(df["month"][:3]) == ["Jan", "Feb", "Mar"]
        assert df.loc[0, "revenue"] == 9000
        assert df.loc[0, "expected"] == 9000
        assert df.loc[1, "revenue"] == 6000
        assert df.loc[1, "expected"] == 13000
        assert df.loc[2, "revenue"] == 0

    def test_single_year(self, payments):
        df = monthly_revenue(payments, year=2023)
        assert df.loc[0, "revenue"] == 4000
        assert df["revenue"].sum() == 4000

    def test_empty(self):
        df = monthly_revenue([])
        assert len(df) == 12
        assert df["revenue"].sum() == 0
        assert df["expected"].sum() == 0


class TestRevenueSummary:
    def test_totals(self, payments):
        summary = revenue_summary(payments)
        assert summary["total_revenue"] == 15000
        assert summary["total_expected"] == 22000
        assert summary["outstanding"] == 7000
        assert summary["collection_rate"] == pytest.approx(15000 / 22000 * 100)
        assert summary["paid_count"] == 3
        assert summary["pending_count"] == 1

    def test_average_over_months_with_revenue(self, payments):
        # Jan 2024, Feb 2024, Jan 2023
        assert revenue_summary(payments)["average_monthly_revenue"] == 5000

    def test_empty(self):
        summary = revenue_summary([])
        assert summary["total_revenue"] == 0
        assert summary["collection_rate"] == 0
        assert summary["average_monthly_revenue"] == 0
        assert summary["paid_count"] == 0


class TestSummaries:
    def test_occupancy(self):
        rooms = [room(101, True), room(102, True), room(103, False)]
        summary = occupancy_summary(rooms)
        assert summary == {"total_rooms": 3, "occupied": 2, "available": 1, "occupancy_rate": 67}

    def test_occupancy_empty(self):
        assert occupancy_summary([])["occupancy_rate"] == 0

    def test_tenants(self):
        tenants = [tenant("a", True), tenant("b"), tenant("c", active=False)]
        assert tenant_summary(tenants) == {"active": 2, "verified": 1, "pending_verification": 1}

    def test_dashboard(self, payments):
        rooms = [room(101, True, 3000), room(102, True, 6000), room(103, False, 9000)]
        stats = dashboard_stats(rooms, [tenant("a"), tenant("b")], payments, "January", 2024)
        assert stats["occupied"] == 2
        assert stats["active_tenants"] == 2
        assert stats["monthly_revenue"] == 5000
        assert stats["monthly_electricity"] == 400
        assert stats["expected_revenue"] == 9000
        assert stats["pending_amount"] == 7000
        assert stats["pending_count"] == 1

    def test_tenant_payments(self, payments):
        summary = tenant_payment_summary(payments)
        assert summary["total_paid"] == 15000
        assert summary["total_pending"] == 7000
        assert summary["total_electricity"] == 1500
        assert summary["paid_count"] == 3
        assert summary["pending_count"] == 1

    def test_history_total(self):
        entries = [
            TenantHistory(
                id=f"history_{i}", tenant_name="x", room_number=101, room_type="single",
                is_ac=False, join_date=JOINED, leave_date=JOINED, total_rent_paid=amount,
            )
            for i, amount in enumerate([1000, 2500])
        ]
        assert history_total(entries) == 3500
        assert history_total([]) == 0


class TestYears:
    def test_payment_years(self, payments):
        assert payment_years(payments) == [2024, 2023]

    def test_yearly_revenue(self, payments):
        df = yearly_revenue(payments)
        assert list(df["year"]) == ["2023", "2024"]
        assert list(df["revenue"]) == [4000, 11000]

    def test_yearly_revenue_empty(self):
        assert yearly_revenue([]).empty


class TestFrames:
    def test_payments_frame_keeps_columns_when_empty(self):
        df = payments_frame([])
        assert df.empty
        assert "total_amount" in df.columns

    def test_records_frame_excludes_nested(self):
        rooms = [room(101, True), room(102, False)]
        df = records_frame(rooms, {"tenants"})
        assert "tenants" not in df.columns
        assert list(df["room_number"]) == [101, 102]

    def test_csv(self):
        csv = to_csv(records_frame([room(101, True)], {"tenants"}))
        header = csv.splitlines()[0]
        assert "room_number" in header
        assert "101" in csv.splitlines()[1]
