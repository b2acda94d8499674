"""
房客歷史紀錄 (Tenant History)
退租：建立歷史快照並釋出床位；歷史紀錄建立後不再變動
"""
import pandas as pd
import streamlit as st

from components.cards import empty_state, metric_card
from services.auth_service import AuthService
from services.data_store import DataStore
from services.report_service import history_total
from utils.filters import filter_history
from utils.formatters import format_currency, format_date, format_room_type
from utils.session_manager import session_manager
from utils.validators import validate_tenant_selected


def render_move_tenant(store: DataStore):
    with st.expander("📦 Move Tenant to History", expanded=False):
        st.caption(
            "Select a tenant to move to history. This removes them from active tenants "
            "and frees up their bed."
        )
        tenants = store.active_tenants()
        labels = {t.id: f"{t.name} - Room #{t.room_number}" for t in tenants}

        tenant_id = st.selectbox(
            "Tenant",
            list(labels),
            index=None,
            format_func=lambda tid: labels.get(tid, tid),
            placeholder="Select tenant...",
            key="ui_history_tenant",
        )

        if st.button("Move to History", type="primary"):
            valid, error = validate_tenant_selected(tenant_id)
            if not valid:
                st.error(f"❌ {error}")
                return

            entry = store.move_tenant_to_history(tenant_id)
            if entry is None:
                st.error("❌ The tenant's room could not be found")
                return

            session_manager.flash(f"{entry.tenant_name} has been moved to history records")
            st.session_state.pop("ui_history_tenant", None)
            st.rerun()


def render(store: DataStore, auth: AuthService):
    """渲染歷史紀錄頁"""
    st.title("📦 Tenant History")
    st.caption("Records of all previous tenants")

    render_move_tenant(store)

    history = store.tenant_history
    col1, col2, col3 = st.columns(3)
    with col1:
        metric_card("Past Tenants", len(history), icon="📦")
    with col2:
        metric_card("Total Collected", format_currency(history_total(history)), icon="💰")
    with col3:
        metric_card("Active Tenants", len(store.active_tenants()), icon="👥")

    query = st.text_input("🔍 Search by tenant name", key="ui_history_query")
    entries = filter_history(history, query)

    if not entries:
        empty_state("No history records found", "📭")
        return

    df = pd.DataFrame([
        {
            "Tenant": e.tenant_name,
            "Room": e.room_number,
            "Type": format_room_type(e.room_type, e.is_ac),
            "Joined": format_date(e.join_date),
            "Left": format_date(e.leave_date),
            "Total Paid": format_currency(e.total_rent_paid),
            "Facilities": ", ".join(e.facilities),
        }
        for e in reversed(entries)
    ])
    st.dataframe(df, hide_index=True, width="stretch")
