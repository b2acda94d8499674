"""
房客文件 (My Documents)
只顯示審核狀態；文件由管理員審核
"""
import streamlit as st

from components.cards import empty_state, info_card, status_badge
from services.auth_service import AuthService
from services.data_store import DataStore
from utils.formatters import format_date


def render(store: DataStore, auth: AuthService):
    st.title("📄 My Documents")
    st.caption("Verification status of your submitted documents")

    tenant = store.find_tenant_for_user(auth.current_user)
    if tenant is None:
        empty_state("Tenant data not found", "🔍", "Please contact admin for assistance")
        return

    if tenant.documents_verified:
        info_card("All documents verified", "No further action is needed.", "✅", "success")
    else:
        info_card("Verification pending", "The admin is reviewing your documents.", "⏳", "warning")

    if not tenant.documents:
        empty_state("No documents submitted")
        return

    for doc in tenant.documents:
        with st.container(border=True):
            col1, col2 = st.columns([3, 1])
            with col1:
                st.markdown(f"**{doc.type.replace('_', ' ').title()}**")
                st.caption(f"{doc.name} · uploaded {format_date(doc.uploaded_at)}")
            with col2:
                st.markdown(status_badge("verified" if doc.verified else "unverified"))
