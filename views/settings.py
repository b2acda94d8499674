"""
系統設定 - v4.0
✅ 租金表（房型 × 冷氣）與每度電價
✅ 回復預設值（需再按儲存）
✅ 重新初始化房間（1 - 500）
✅ 資料匯出 CSV
✅ 系統資訊
"""

import logging
from datetime import datetime

import streamlit as st

from components.cards import info_card, metric_card, section_header
from config.app_config import APP_CONFIG
from config.constants import BILLING, ROOMS
from schemas import RentRates
from services.auth_service import AuthService
from services.data_store import DataStore
from services.report_service import records_frame, to_csv
from utils.session_manager import session_manager
from utils.validators import validate_room_count

logger = logging.getLogger(__name__)

RATE_FIELDS = [
    ("single_non_ac", "Single · Non-AC"),
    ("single_ac", "Single · AC"),
    ("double_non_ac", "Double · Non-AC"),
    ("double_ac", "Double · AC"),
    ("triple_non_ac", "Triple · Non-AC"),
    ("triple_ac", "Triple · AC"),
]


def _seed(key, value):
    if key not in st.session_state:
        st.session_state[key] = value


# ============== Tab 1: 租金與電價 ==============

def reset_rate_fields():
    """只重設表單欄位，按下儲存才寫入"""
    defaults = RentRates()
    for field, _ in RATE_FIELDS:
        st.session_state[f"ui_rate_{field}"] = float(getattr(defaults, field))
    st.session_state["ui_rate_electricity"] = float(BILLING.ELECTRICITY_RATE)
    session_manager.flash("Settings have been reset to default values. Save to apply.", "↩️")


def render_rates_tab(store: DataStore):
    """租金表與電價"""
    settings = store.settings
    section_header("Rent Rates", "💰")

    for field, _ in RATE_FIELDS:
        _seed(f"ui_rate_{field}", float(getattr(settings.rent_rates, field)))
    _seed("ui_rate_electricity", float(settings.electricity_rate))

    columns = st.columns(2)
    rates = {}
    for index, (field, label) in enumerate(RATE_FIELDS):
        with columns[index % 2]:
            rates[field] = st.number_input(
                f"{label} (₹/month)", min_value=0.0, step=500.0, key=f"ui_rate_{field}"
            )

    section_header("Electricity", "⚡")
    electricity_rate = st.number_input(
        "Rate per unit (₹)", min_value=0.0, step=0.5, key="ui_rate_electricity"
    )

    col1, col2 = st.columns(2)
    with col1:
        st.button("↩️ Reset to Defaults", width="stretch", on_click=reset_rate_fields)
    with col2:
        if st.button("💾 Save Settings", type="primary", width="stretch"):
            store.update_settings({
                "electricity_rate": electricity_rate,
                "rent_rates": RentRates(**rates),
            })
            session_manager.flash("Your settings have been updated successfully")
            st.rerun()


# ============== Tab 2: 房間初始化 ==============

def render_rooms_tab(store: DataStore):
    section_header("Room Setup", "🏢")
    info_card(
        "Initializing rooms replaces all existing rooms",
        "Every room becomes an empty single non-AC room. Tenants, payments and history "
        "are not changed, so tenants may point at rooms that no longer match.",
        "⚠️",
        "warning",
    )

    with st.form("ui_settings_rooms"):
        count = st.number_input(
            f"Total rooms ({ROOMS.MIN_COUNT}-{ROOMS.MAX_COUNT})",
            min_value=0,
            max_value=ROOMS.MAX_COUNT * 2,
            value=store.settings.total_rooms,
            step=1,
        )
        submitted = st.form_submit_button("🏗️ Initialize Rooms")

    if submitted:
        valid, error = validate_room_count(count)
        if not valid:
            logger.warning(f"⚠️ 房間數量無效: {count}")
            st.error(f"❌ Invalid room count. {error}")
            return
        store.initialize_rooms(int(count))
        session_manager.flash(f"{int(count)} rooms have been created")
        st.rerun()


# ============== Tab 3: 資料匯出 ==============

def render_export_tab(store: DataStore):
    """資料匯出"""
    section_header("Data Export", "📥")
    st.caption("Download data as CSV for backup or spreadsheet analysis.")

    today = datetime.now().strftime('%Y%m%d')
    exports = [
        ("🚪 Rooms", "rooms", store.rooms, {"tenants"}),
        ("👥 Tenants", "tenants", store.tenants, {"documents"}),
        ("💰 Payments", "payments", store.payments, None),
        ("📦 Tenant History", "history", store.tenant_history, None),
    ]

    for label, name, records, exclude in exports:
        col1, col2 = st.columns([3, 1])
        with col1:
            st.write(f"**{label}** · {len(records)} records")
        with col2:
            st.download_button(
                "💾 CSV",
                to_csv(records_frame(records, exclude)) if records else "",
                f"{name}_{today}.csv",
                "text/csv",
                key=f"ui_export_{name}",
                disabled=not records,
                width="stretch",
            )


# ============== Tab 4: 系統資訊 ==============

def render_info_tab(store: DataStore):
    """系統資訊"""
    section_header("System Info", "ℹ️")

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        metric_card("Rooms", len(store.rooms), icon="🚪")
    with col2:
        metric_card("Tenants", len(store.tenants), icon="👥")
    with col3:
        metric_card("Payments", len(store.payments), icon="💰")
    with col4:
        metric_card("History", len(store.tenant_history), icon="📦")

    st.caption(f"Version: {APP_CONFIG['version']} · Environment: {APP_CONFIG['environment']}")
    st.caption(f"Data directory: `{APP_CONFIG['data_dir']}`")


# ============== 主函數 ==============

def render(store: DataStore, auth: AuthService):
    """主渲染函數（供 main.py 動態載入使用）"""
    st.title("⚙️ Settings")

    tab1, tab2, tab3, tab4 = st.tabs([
        "💰 Rates",
        "🏢 Rooms",
        "📥 Export",
        "ℹ️ System",
    ])

    with tab1:
        render_rates_tab(store)

    with tab2:
        render_rooms_tab(store)

    with tab3:
        render_export_tab(store)

    with tab4:
        render_info_tab(store)
