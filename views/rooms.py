"""
房間管理頁面 (Rooms Management)
房號搜尋 / 空房篩選 / 房間卡片
新增與編輯共用四步驟精靈：Room Details → Tenant Details → Documents → Confirm
"""
from typing import Optional

import streamlit as st

from components.cards import empty_state, metric_card, status_badge
from config.constants import ROOMS
from schemas import Room
from services.auth_service import AuthService
from services.data_store import DataStore
from services.room_wizard import (
    STEPS,
    RoomDraft,
    TenantDraft,
    draft_from_room,
    new_room_draft,
    open_slots,
    save_room,
)
from utils.filters import filter_rooms
from utils.formatters import format_currency, format_room_type
from utils.session_manager import session_manager
from utils.validators import validate_room_number

WIZARD_OPEN = "ui_wizard_open"
WIZARD_ROOM_ID = "ui_wizard_room_id"
WIZARD_STEP = "ui_wizard_step"
WIZARD_DRAFT = "ui_wizard_draft"

TENANT_FIELDS = [
    ("first_name", "First Name *", "Enter first name"),
    ("last_name", "Last Name", "Enter last name"),
    ("email", "Email *", "tenant@email.com"),
    ("phone", "Phone Number", "XXXXX XXXXX"),
    ("landmark", "Landmark", "Near main market..."),
    ("city", "City", "City name"),
    ("state", "State", "State name"),
    ("pincode", "Pincode", "6 digit pincode"),
    ("id_number", "Aadhaar Number", "XXXX XXXX XXXX"),
]


def render(store: DataStore, auth: AuthService):
    """渲染房間管理頁面"""
    col1, col2 = st.columns([3, 1])
    with col1:
        st.title("🚪 Rooms")
        st.caption("Manage rooms and their tenants")
    with col2:
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("➕ Add Room", type="primary", width="stretch"):
            open_wizard(store, None)

    if st.session_state.get(WIZARD_OPEN):
        render_wizard(store)
        return

    rooms = store.rooms
    render_room_stats(rooms)
    st.divider()

    col1, col2 = st.columns([2, 1])
    with col1:
        query = st.text_input("🔍 Search by room number", key="ui_rooms_query")
    with col2:
        status = st.radio(
            "Filter",
            ["all", "available", "occupied"],
            format_func=str.capitalize,
            horizontal=True,
            key="ui_rooms_filter",
        )

    filtered = filter_rooms(rooms, query, status)
    if not filtered:
        empty_state("No rooms found", "🔍", "Try adjusting your search or filters")
        return

    columns = st.columns(3)
    for index, room in enumerate(filtered):
        with columns[index % 3]:
            render_room_card(store, room)


def render_room_stats(rooms):
    """
    渲染房間統計卡片

    Args:
        rooms: List[Room]
    """
    col1, col2, col3 = st.columns(3)
    occupied = sum(1 for r in rooms if r.is_occupied)

    with col1:
        metric_card("Total Rooms", len(rooms), icon="🏢")
    with col2:
        metric_card("Available", len(rooms) - occupied, icon="🔓")
    with col3:
        metric_card("Occupied", occupied, icon="🔒")


def render_room_card(store: DataStore, room: Room):
    with st.container(border=True):
        st.markdown(f"### Room #{room.room_number}")
        st.markdown(status_badge("occupied" if room.is_occupied else "available"))
        st.caption(format_room_type(room.type, room.is_ac))
        st.write(f"💰 {format_currency(room.rent)} / month")
        st.caption(f"🛏️ {len(room.tenants)}/{room.capacity} beds")

        for tenant in room.tenants:
            st.write(f"👤 {tenant.name}")

        if st.button("Manage", key=f"ui_room_manage_{room.id}", width="stretch"):
            open_wizard(store, room)


# ==================== 精靈 ====================

def open_wizard(store: DataStore, room: Optional[Room]):
    session_manager.reset_ui_state()
    st.session_state[WIZARD_OPEN] = True
    st.session_state[WIZARD_ROOM_ID] = room.id if room else None
    st.session_state[WIZARD_STEP] = 0
    st.session_state[WIZARD_DRAFT] = draft_from_room(room) if room else new_room_draft(store)
    st.rerun()


def close_wizard():
    session_manager.reset_ui_state()
    st.rerun()


def _seed(key: str, value):
    """widget 的初始值只從草稿寫入一次"""
    if key not in st.session_state:
        st.session_state[key] = value


def render_wizard(store: DataStore):
    room_id = st.session_state.get(WIZARD_ROOM_ID)
    existing = store.get_room(room_id) if room_id else None
    step = st.session_state.get(WIZARD_STEP, 0)
    draft: RoomDraft = st.session_state[WIZARD_DRAFT]

    title = f"Edit Room #{existing.room_number}" if existing else "Add New Room"
    st.subheader(f"🛠️ {title}")
    st.progress((step + 1) / len(STEPS), text=f"Step {step + 1} of {len(STEPS)}: {STEPS[step]}")

    if step == 0:
        draft = render_room_step(store, draft, existing)
    elif step == 1:
        draft = render_tenant_step(draft, existing)
    elif step == 2:
        draft = render_documents_step(draft, existing)
    else:
        render_confirm_step(draft, existing)

    st.session_state[WIZARD_DRAFT] = draft
    render_wizard_buttons(store, draft, existing, step)


def render_room_step(store: DataStore, draft: RoomDraft, existing: Optional[Room]) -> RoomDraft:
    _seed("ui_wiz_room_number", draft.room_number)
    _seed("ui_wiz_type", draft.type)
    _seed("ui_wiz_ac", draft.is_ac)
    _seed("ui_wiz_rent", float(draft.rent))

    col1, col2 = st.columns(2)
    with col1:
        room_number = st.number_input(
            "Room Number",
            min_value=1,
            step=1,
            disabled=existing is not None,
            key="ui_wiz_room_number",
        )
        room_type = st.selectbox(
            "Room Type",
            ROOMS.TYPES,
            format_func=lambda t: f"{t.capitalize()} ({ROOMS.CAPACITY[t]} bed)",
            key="ui_wiz_type",
        )
    with col2:
        is_ac = st.toggle("Air Conditioned", key="ui_wiz_ac")

        # 房型或冷氣變動時，租金回到租金表的預設值
        if (room_type, is_ac) != (draft.type, draft.is_ac):
            st.session_state["ui_wiz_rent"] = float(store.get_rent(room_type, is_ac))

        rent = st.number_input("Monthly Rent (₹)", min_value=0.0, step=500.0, key="ui_wiz_rent")

    return draft.model_copy(update={
        "room_number": int(room_number),
        "type": room_type,
        "is_ac": is_ac,
        "rent": rent,
    })


def render_tenant_step(draft: RoomDraft, existing: Optional[Room]) -> RoomDraft:
    if existing and existing.tenants:
        st.markdown("**Current tenants**")
        for tenant in existing.tenants:
            st.caption(f"👤 {tenant.name} · {tenant.email}")

    slots = open_slots(existing, draft.type)
    if slots == 0:
        st.info("ℹ️ This room is full. Move a tenant to history to free a bed.")
        return draft

    st.caption("Fill in first name and email to add a tenant. Leave a slot empty to skip it.")
    tenants = list(draft.tenants)
    for i in range(slots):
        with st.expander(f"👤 Tenant {i + 1}", expanded=i == 0):
            tenants[i] = render_tenant_fields(i, tenants[i])

    return draft.model_copy(update={"tenants": tenants})


def render_tenant_fields(index: int, tenant: TenantDraft) -> TenantDraft:
    values = {}
    col1, col2 = st.columns(2)
    for n, (field, label, placeholder) in enumerate(TENANT_FIELDS):
        key = f"ui_wiz_t{index}_{field}"
        _seed(key, getattr(tenant, field))
        with (col1 if n % 2 == 0 else col2):
            values[field] = st.text_input(label, placeholder=placeholder, key=key)

    token_key = f"ui_wiz_t{index}_token_money"
    _seed(token_key, float(tenant.token_money))
    values["token_money"] = st.number_input(
        "Token / Security Money (₹)", min_value=0.0, step=500.0, key=token_key
    )
    return tenant.model_copy(update=values)


def render_documents_step(draft: RoomDraft, existing: Optional[Room]) -> RoomDraft:
    """只記錄檔名，檔案本身不保存"""
    filled = [
        (i, t) for i, t in enumerate(draft.tenants[:open_slots(existing, draft.type)]) if t.is_filled
    ]
    if not filled:
        st.info("ℹ️ No new tenants to upload documents for.")
        return draft

    tenants = list(draft.tenants)
    for i, tenant in filled:
        st.markdown(f"**📄 Documents for {tenant.first_name} {tenant.last_name}**".strip())
        col1, col2 = st.columns(2)
        updates = {}
        with col1:
            upload = st.file_uploader(
                "Address Proof", type=["pdf", "jpg", "jpeg", "png"], key=f"ui_wiz_t{i}_address"
            )
            if upload is not None:
                updates["address_proof_name"] = upload.name
            if tenant.address_proof_name or upload is not None:
                st.caption(f"📎 {updates.get('address_proof_name', tenant.address_proof_name)}")
        with col2:
            upload = st.file_uploader(
                "ID Proof", type=["pdf", "jpg", "jpeg", "png"], key=f"ui_wiz_t{i}_id"
            )
            if upload is not None:
                updates["id_proof_name"] = upload.name
            if tenant.id_proof_name or upload is not None:
                st.caption(f"📎 {updates.get('id_proof_name', tenant.id_proof_name)}")
        tenants[i] = tenant.model_copy(update=updates)

    return draft.model_copy(update={"tenants": tenants})


def render_confirm_step(draft: RoomDraft, existing: Optional[Room]):
    with st.container(border=True):
        st.markdown(f"**Room #{draft.room_number}** · {format_room_type(draft.type, draft.is_ac)}")
        st.write(f"💰 Rent: {format_currency(draft.rent)} / month")

        new_tenants = draft.filled_tenants(open_slots(existing, draft.type))
        current = existing.tenants if existing else []
        st.write(f"🛏️ Beds: {len(current) + len(new_tenants)}/{draft.capacity}")

        for tenant in new_tenants:
            st.write(f"➕ {tenant.first_name} {tenant.last_name} · {tenant.email}")
            st.caption(
                f"Token money {format_currency(tenant.token_money)} · "
                f"Address proof: {tenant.address_proof_name or 'Address Proof'} · "
                f"ID proof: {tenant.id_proof_name or 'ID Proof'}"
            )
        if not new_tenants:
            st.caption("No new tenants will be added.")


def render_wizard_buttons(store: DataStore, draft: RoomDraft, existing: Optional[Room], step: int):
    col1, col2, col3 = st.columns(3)

    with col1:
        if st.button("✖ Cancel", width="stretch"):
            close_wizard()

    with col2:
        if step > 0 and st.button("⬅ Back", width="stretch"):
            st.session_state[WIZARD_STEP] = step - 1
            st.rerun()

    with col3:
        if step < len(STEPS) - 1:
            if st.button("Next ➡", type="primary", width="stretch"):
                if step == 0 and existing is None:
                    valid, error = validate_room_number(draft.room_number, store.rooms)
                    if not valid:
                        st.error(f"❌ {error}")
                        return
                st.session_state[WIZARD_STEP] = step + 1
                st.rerun()
        elif st.button("💾 Save Room", type="primary", width="stretch"):
            room = save_room(store, draft, existing.id if existing else None)
            if room:
                session_manager.flash(f"Room #{room.room_number} saved successfully!")
            close_wizard()
