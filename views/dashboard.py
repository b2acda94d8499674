"""
管理員儀表板 - v5.0
特性:
- 房間 / 房客 / 營收關鍵指標
- 月份與年份可選
- 快速設定房間數量（1 - 500）
- 待審核文件與最近入住房客
"""

import logging
from datetime import datetime

import pandas as pd
import streamlit as st

from components.cards import empty_state, metric_card, section_header
from config.constants import BILLING, ROOMS
from services.auth_service import AuthService
from services.data_store import DataStore
from services.report_service import dashboard_stats
from utils.formatters import format_currency, format_date
from utils.session_manager import session_manager
from utils.validators import validate_room_count

logger = logging.getLogger(__name__)

RECENT_TENANTS = 5


def render_period_selector():
    """月份 / 年份（預設本月）"""
    now = datetime.now()
    col1, col2 = st.columns(2)
    with col1:
        month = st.selectbox(
            "Month",
            BILLING.MONTHS,
            index=now.month - 1,
            key="ui_dashboard_month",
        )
    with col2:
        years = list(range(now.year - 2, now.year + 2))
        year = st.selectbox("Year", years, index=years.index(now.year), key="ui_dashboard_year")
    return month, year


def render_kpi_section(stats):
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        metric_card("Total Rooms", stats["total_rooms"], icon="🏢")
    with col2:
        metric_card(
            "Occupied",
            stats["occupied"],
            delta=f"{stats['occupancy_rate']}% occupancy",
            icon="🔒",
        )
    with col3:
        metric_card("Available", stats["available"], icon="🔓")
    with col4:
        metric_card("Active Tenants", stats["active_tenants"], icon="👥")

    col1, col2, col3 = st.columns(3)
    with col1:
        metric_card("Revenue (selected month)", format_currency(stats["monthly_revenue"]), icon="💰")
    with col2:
        metric_card("Expected Monthly Rent", format_currency(stats["expected_revenue"]), icon="📅")
    with col3:
        metric_card(
            "Pending Amount",
            format_currency(stats["pending_amount"]),
            delta=f"{stats['pending_count']} bills",
            icon="⏳",
            color="off",
        )


def render_room_setup(store: DataStore):
    """快速設定房間數量（會以空房取代所有房間）"""
    with st.expander("🛠️ Quick room setup", expanded=not store.rooms):
        st.caption(
            "Replaces every room with empty single non-AC rooms. "
            "Existing tenants and payments are kept as they are."
        )
        with st.form("ui_dashboard_room_setup"):
            count = st.number_input(
                "Number of rooms",
                min_value=0,
                max_value=ROOMS.MAX_COUNT * 2,
                value=store.settings.total_rooms,
                step=1,
            )
            submitted = st.form_submit_button("Initialize rooms", type="primary")

        if submitted:
            valid, error = validate_room_count(count)
            if not valid:
                logger.warning(f"⚠️ 房間數量無效: {count}")
                st.error(f"❌ {error}")
                return
            store.initialize_rooms(int(count))
            session_manager.flash(f"{int(count)} rooms initialized")
            st.rerun()


def render_pending_verifications(store: DataStore):
    section_header("Pending Verifications", "📄")
    pending = [t for t in store.active_tenants() if not t.documents_verified]

    if not pending:
        empty_state("All documents are verified", "🎉")
        return

    for tenant in pending:
        with st.container(border=True):
            col1, col2 = st.columns([3, 1])
            with col1:
                st.markdown(f"**{tenant.name}** · Room #{tenant.room_number}")
                unverified = sum(1 for d in tenant.documents if not d.verified)
                st.caption(f"{unverified} document(s) awaiting review")
            with col2:
                if st.button("Verify all", key=f"ui_dash_verify_{tenant.id}", width="stretch"):
                    store.verify_all_documents(tenant.id)
                    session_manager.flash(f"Documents verified for {tenant.name}")
                    st.rerun()


def render_recent_tenants(store: DataStore):
    section_header("Recent Tenants", "🆕")
    tenants = sorted(store.active_tenants(), key=lambda t: t.join_date, reverse=True)[:RECENT_TENANTS]

    if not tenants:
        empty_state("No tenants yet")
        return

    df = pd.DataFrame([
        {
            "Name": t.name,
            "Room": t.room_number,
            "Phone": t.phone,
            "Joined": format_date(t.join_date),
            "Documents": "Verified" if t.documents_verified else "Pending",
        }
        for t in tenants
    ])
    st.dataframe(df, hide_index=True, width="stretch")


def render(store: DataStore, auth: AuthService):
    """渲染儀表板"""
    user = auth.current_user
    st.title("📊 Dashboard")
    st.caption(f"Welcome back, {user.name if user else 'Admin'}")

    month, year = render_period_selector()
    stats = dashboard_stats(store.rooms, store.tenants, store.payments, month, year)
    render_kpi_section(stats)

    render_room_setup(store)

    col1, col2 = st.columns(2)
    with col1:
        render_pending_verifications(store)
    with col2:
        render_recent_tenants(store)
