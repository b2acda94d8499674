"""
房客帳單 (My Payments)
已繳 / 待繳 / 電費合計，以及每月明細
"""
import streamlit as st

from components.cards import empty_state, metric_card, status_badge
from services.auth_service import AuthService
from services.data_store import DataStore
from services.report_service import tenant_payment_summary
from utils.formatters import format_currency, format_date


def render(store: DataStore, auth: AuthService):
    st.title("💳 My Payments")
    st.caption("Your rent and electricity bills")

    tenant = store.find_tenant_for_user(auth.current_user)
    if tenant is None:
        empty_state("Tenant data not found", "🔍", "Please contact admin for assistance")
        return

    payments = store.payments_for_tenant(tenant.id)
    summary = tenant_payment_summary(payments)

    col1, col2, col3 = st.columns(3)
    with col1:
        metric_card("Total Paid", format_currency(summary["total_paid"]), f"{summary['paid_count']} bills", "✅")
    with col2:
        metric_card(
            "Pending",
            format_currency(summary["total_pending"]),
            f"{summary['pending_count']} bills",
            "⏳",
            color="off",
        )
    with col3:
        metric_card("Electricity", format_currency(summary["total_electricity"]), icon="⚡")

    if not payments:
        empty_state("No payments yet")
        return

    for payment in reversed(payments):
        with st.container(border=True):
            col1, col2, col3 = st.columns([2, 2, 1])
            with col1:
                st.markdown(f"**{payment.month} {payment.year}**")
                st.caption(
                    f"Meter {payment.previous_reading:g} → {payment.current_reading:g} "
                    f"({payment.units_used:g} units)"
                )
            with col2:
                st.markdown(f"**{format_currency(payment.total_amount)}**")
                st.caption(
                    f"Rent {format_currency(payment.rent)} + "
                    f"Electricity {format_currency(payment.electricity_amount)}"
                )
            with col3:
                st.markdown(status_badge(payment.status))
                if payment.paid_date:
                    st.caption(format_date(payment.paid_date))
