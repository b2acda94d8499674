"""
租金 + 電費管理 - v2.0
✅ 每度電價設定
✅ 新增帳單（即時試算）
✅ 標記已繳 / WhatsApp 催繳
✅ 房客姓名搜尋 + 狀態篩選
"""

import logging
from datetime import datetime

import streamlit as st

from components.cards import empty_state, metric_card, section_header, status_badge
from config.constants import BILLING
from schemas import Payment
from services.auth_service import AuthService
from services.billing import build_payment, calculate_bill
from services.data_store import DataStore
from services.notification_service import build_payment_reminder
from services.report_service import revenue_summary
from utils.filters import filter_payments
from utils.formatters import format_currency, format_date
from utils.session_manager import session_manager
from utils.validators import validate_payment_entry

logger = logging.getLogger(__name__)

REMINDER_LINKS = "ui_reminder_links"


# ============== 電價設定 ==============

def render_rate_section(store: DataStore):
    with st.expander("⚡ Electricity rate", expanded=False):
        col1, col2 = st.columns([2, 1])
        with col1:
            rate = st.number_input(
                "Rate per unit (₹)",
                min_value=0.0,
                value=float(store.settings.electricity_rate),
                step=0.5,
                key="ui_payments_rate",
            )
        with col2:
            st.markdown("<br>", unsafe_allow_html=True)
            if st.button("💾 Update rate", width="stretch"):
                store.update_settings({"electricity_rate": rate})
                session_manager.flash(f"Electricity rate set to {format_currency(rate)}/unit")
                st.rerun()


def render_stats(payments):
    summary = revenue_summary(payments)
    col1, col2, col3 = st.columns(3)
    with col1:
        metric_card("Total Collected", format_currency(summary["total_revenue"]), icon="💰")
    with col2:
        metric_card("Paid", summary["paid_count"], icon="✅")
    with col3:
        metric_card("Pending", summary["pending_count"], icon="⏳")


# ============== 新增帳單 ==============

def render_add_payment(store: DataStore):
    """不使用 form，讓試算即時更新"""
    with st.expander("➕ Add Payment Entry", expanded=False):
        tenants = store.active_tenants()
        tenant_ids = [t.id for t in tenants]
        labels = {t.id: f"{t.name} (Room #{t.room_number})" for t in tenants}

        col1, col2, col3 = st.columns(3)
        with col1:
            tenant_id = st.selectbox(
                "Tenant",
                tenant_ids,
                index=None,
                format_func=lambda tid: labels.get(tid, tid),
                placeholder="Select tenant",
                key="ui_payment_tenant",
            )
        with col2:
            month = st.selectbox(
                "Month", BILLING.MONTHS, index=None, placeholder="Select month", key="ui_payment_month"
            )
        with col3:
            now = datetime.now()
            years = list(range(now.year - 2, now.year + 2))
            year = st.selectbox("Year", years, index=years.index(now.year), key="ui_payment_year")

        col1, col2 = st.columns(2)
        with col1:
            previous = st.number_input("Previous Reading", min_value=0.0, step=1.0, key="ui_payment_prev")
        with col2:
            current = st.number_input("Current Reading", min_value=0.0, step=1.0, key="ui_payment_curr")

        tenant = store.get_tenant(tenant_id) if tenant_id else None
        room = store.get_room_by_number(tenant.room_number) if tenant else None
        rate = store.settings.electricity_rate
        bill = calculate_bill(previous, current, rate, room.rent if room else 0)

        with st.container(border=True):
            st.caption("Bill preview")
            col1, col2, col3, col4 = st.columns(4)
            col1.metric("Units", f"{bill.units_used:g}")
            col2.metric("Electricity", format_currency(bill.electricity_amount))
            col3.metric("Rent", format_currency(bill.rent))
            col4.metric("Total", format_currency(bill.total_amount))

        if st.button("💾 Add Payment", type="primary"):
            valid, error = validate_payment_entry(tenant_id, month, previous, current)
            if not valid:
                logger.warning(f"⚠️ 帳單資料無效: {error}")
                st.error(f"❌ {error}")
                return

            store.add_payment(build_payment(tenant, room, month, year, previous, current, rate))
            session_manager.flash("Payment record added")
            for key in ("ui_payment_tenant", "ui_payment_month", "ui_payment_prev", "ui_payment_curr"):
                st.session_state.pop(key, None)
            st.rerun()


# ============== 帳單列表 ==============

def render_payment_row(store: DataStore, payment: Payment):
    links = st.session_state.setdefault(REMINDER_LINKS, {})

    with st.container(border=True):
        col1, col2, col3 = st.columns([3, 2, 2])
        with col1:
            st.markdown(f"**{payment.tenant_name}** · Room #{payment.room_number}")
            st.caption(
                f"{payment.month} {payment.year} · {payment.units_used:g} units × "
                f"{format_currency(payment.electricity_rate)}"
            )
        with col2:
            st.markdown(f"**{format_currency(payment.total_amount)}**")
            st.caption(
                f"Rent {format_currency(payment.rent)} + "
                f"Electricity {format_currency(payment.electricity_amount)}"
            )
        with col3:
            st.markdown(status_badge(payment.status))
            if payment.status == "paid":
                st.caption(f"Paid on {format_date(payment.paid_date)}")
            elif payment.reminder_sent:
                st.caption("🔔 Reminder sent")

        if payment.status == "pending":
            col1, col2, col3 = st.columns(3)
            with col1:
                if st.button("✅ Mark Paid", key=f"ui_pay_{payment.id}", width="stretch"):
                    store.mark_payment_paid(payment.id)
                    session_manager.flash("Payment marked as paid")
                    st.rerun()
            with col2:
                tenant = store.get_tenant(payment.tenant_id)
                if st.button(
                    "🔔 Send Reminder",
                    key=f"ui_remind_{payment.id}",
                    width="stretch",
                    disabled=tenant is None or not tenant.phone,
                ):
                    store.send_payment_reminder(payment.id)
                    links[payment.id] = build_payment_reminder(payment, tenant.phone)
                    logger.info(f"🔔 催繳: {payment.tenant_name} {payment.month} {payment.year}")
                    st.toast(f"Payment reminder ready for {payment.tenant_name}", icon="🔔")
            with col3:
                if payment.id in links:
                    st.link_button("📱 Open WhatsApp", links[payment.id], width="stretch")


def render(store: DataStore, auth: AuthService):
    """渲染帳單頁"""
    st.title("💰 Payments & Electricity")
    st.caption("Manage rent and electricity billing for all tenants")

    payments = store.payments
    render_stats(payments)
    render_rate_section(store)
    render_add_payment(store)

    section_header("Payment Records", "📋")
    col1, col2 = st.columns([2, 1])
    with col1:
        query = st.text_input("🔍 Search by tenant name", key="ui_payments_query")
    with col2:
        status = st.radio(
            "Status",
            ["all", "paid", "pending"],
            format_func=str.capitalize,
            horizontal=True,
            key="ui_payments_status",
        )

    filtered = filter_payments(payments, query, status)
    if not filtered:
        empty_state("No payment records found", "🔍", "Try adjusting your search or filters")
        return

    for payment in reversed(filtered):
        render_payment_row(store, payment)
