"""
房客首頁 (My Room) - v2.0
✅ 個人資料與文件狀態
✅ 房租 / 已繳 / 待繳
✅ 房間設施與押金
"""
import streamlit as st

from components.cards import empty_state, metric_card, section_header, status_badge
from services.auth_service import AuthService
from services.data_store import DataStore
from services.report_service import tenant_payment_summary
from utils.formatters import format_currency, format_date, format_room_type


def render(store: DataStore, auth: AuthService):
    """渲染房客首頁"""
    tenant = store.find_tenant_for_user(auth.current_user)
    room = store.get_room_by_number(tenant.room_number) if tenant else None

    if tenant is None or room is None:
        empty_state("Tenant data not found", "🔍", "Please contact admin for assistance")
        return

    st.title(f"👋 Welcome, {tenant.first_name}!")
    st.caption("View your room details and rental information")

    with st.container(border=True):
        col1, col2 = st.columns([2, 1])
        with col1:
            st.markdown(f"### {tenant.name}")
            st.caption(f"Room #{tenant.room_number}")
        with col2:
            st.markdown(status_badge("verified" if tenant.documents_verified else "unverified"))

        col1, col2, col3 = st.columns(3)
        col1.caption("📧 Email")
        col1.write(tenant.email or "-")
        col2.caption("📞 Phone")
        col2.write(tenant.phone or "-")
        col3.caption("📍 Address")
        address = ", ".join(p for p in [tenant.landmark, tenant.city, tenant.state] if p)
        col3.write(f"{address} - {tenant.pincode}" if tenant.pincode else address or "-")

    summary = tenant_payment_summary(store.payments_for_tenant(tenant.id))
    col1, col2, col3 = st.columns(3)
    with col1:
        metric_card("Monthly Rent", format_currency(room.rent), icon="🏠")
    with col2:
        metric_card("Total Paid", format_currency(summary["total_paid"]), icon="✅")
    with col3:
        metric_card("Pending Amount", format_currency(summary["total_pending"]), icon="⏳")

    col1, col2 = st.columns(2)
    with col1:
        section_header("Room Details", "🚪", divider=False)
        with st.container(border=True):
            st.write(f"**Room #{room.room_number}** · {format_room_type(room.type, room.is_ac)}")
            st.caption(f"🛏️ {len(room.tenants)}/{room.capacity} beds occupied")
            st.caption(f"📅 Joined {format_date(tenant.join_date)}")
    with col2:
        section_header("Security Deposit", "🛡️", divider=False)
        with st.container(border=True):
            st.write(f"**{format_currency(tenant.token_money)}**")
            st.caption(f"ID: {tenant.id_number or '-'}")
