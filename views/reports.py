"""
報表與分析 (Reports & Analytics)
✅ 月營收 vs 應收長條圖（可選年度）
✅ 年度實收趨勢
✅ 房間 / 房客 / 帳單摘要
"""
import streamlit as st

from components.cards import metric_card, section_header
from services.auth_service import AuthService
from services.data_store import DataStore
from services.report_service import (
    monthly_revenue,
    occupancy_summary,
    payment_years,
    revenue_summary,
    tenant_summary,
    yearly_revenue,
)
from utils.formatters import format_currency, format_percent


def render_summary_block(title, rows):
    with st.container(border=True):
        st.markdown(f"**{title}**")
        for label, value in rows:
            col1, col2 = st.columns([2, 1])
            col1.caption(label)
            col2.markdown(f"**{value}**")


def render(store: DataStore, auth: AuthService):
    """渲染報表頁"""
    st.title("📈 Reports & Analytics")
    st.caption("Financial overview and revenue analytics")

    payments = store.payments
    summary = revenue_summary(payments)

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        metric_card("Total Revenue", format_currency(summary["total_revenue"]), "All time collected", "💰")
    with col2:
        metric_card("Expected Revenue", format_currency(summary["total_expected"]), "Total billable", "📈")
    with col3:
        metric_card("Avg Monthly", format_currency(summary["average_monthly_revenue"]), "Per billed month", "📅")
    with col4:
        metric_card("Collection Rate", format_percent(summary["collection_rate"]), "Paid vs expected", "📊")

    col1, col2 = st.columns(2)
    with col1:
        years = payment_years(payments)
        year = st.selectbox("Year", years, key="ui_reports_year") if years else None
        section_header(f"Monthly Revenue ({year})" if year else "Monthly Revenue", "📊", divider=False)
        df = monthly_revenue(payments, year)
        st.bar_chart(
            df,
            x="month",
            y=["revenue", "expected"],
            stack=False,
            x_label="Month",
            y_label="Amount (₹)",
            sort=False,
        )
    with col2:
        section_header("Yearly Revenue", "📈", divider=False)
        yearly = yearly_revenue(payments)
        if yearly.empty:
            st.caption("No payments recorded yet.")
        else:
            st.line_chart(yearly, x="year", y="revenue", x_label="Year", y_label="Amount (₹)")

    occupancy = occupancy_summary(store.rooms)
    tenants = tenant_summary(store.tenants)

    col1, col2, col3 = st.columns(3)
    with col1:
        render_summary_block("Room Breakdown", [
            ("Total Rooms", occupancy["total_rooms"]),
            ("Occupied", occupancy["occupied"]),
            ("Available", occupancy["available"]),
            ("Occupancy Rate", format_percent(occupancy["occupancy_rate"])),
        ])
    with col2:
        render_summary_block("Tenant Stats", [
            ("Active Tenants", tenants["active"]),
            ("Documents Verified", tenants["verified"]),
            ("Pending Verification", tenants["pending_verification"]),
        ])
    with col3:
        render_summary_block("Payment Stats", [
            ("Total Payments", len(payments)),
            ("Paid", summary["paid_count"]),
            ("Pending", summary["pending_count"]),
            ("Outstanding", format_currency(summary["outstanding"])),
        ])
