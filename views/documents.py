"""
文件審核 (Document Verification)
在住房客的地址證明 / 身分證明，單筆或整批審核
"""
import streamlit as st

from components.cards import empty_state, metric_card, status_badge
from schemas import Tenant
from services.auth_service import AuthService
from services.data_store import DataStore
from utils.filters import filter_document_tenants
from utils.formatters import format_date
from utils.session_manager import session_manager


def render_tenant_documents(store: DataStore, tenant: Tenant):
    with st.container(border=True):
        col1, col2 = st.columns([3, 1])
        with col1:
            st.markdown(f"**{tenant.name}**")
            st.caption(f"Room #{tenant.room_number} · {tenant.email}")
        with col2:
            st.markdown(status_badge("verified" if tenant.documents_verified else "unverified"))
            if not tenant.documents_verified:
                if st.button("✅ Verify All", key=f"ui_doc_all_{tenant.id}", width="stretch"):
                    store.verify_all_documents(tenant.id)
                    session_manager.flash("All tenant documents have been verified")
                    st.rerun()

        columns = st.columns(2)
        for index, doc in enumerate(tenant.documents):
            with columns[index % 2]:
                st.markdown(f"📄 **{doc.type.replace('_', ' ').title()}**")
                st.caption(f"{doc.name} · uploaded {format_date(doc.uploaded_at)}")
                if doc.verified:
                    st.markdown(status_badge("verified"))
                elif st.button("Verify", key=f"ui_doc_{tenant.id}_{doc.id}"):
                    store.verify_document(tenant.id, doc.id)
                    session_manager.flash("Document has been marked as verified")
                    st.rerun()


def render(store: DataStore, auth: AuthService):
    """渲染文件審核頁"""
    st.title("📄 Document Verification")
    st.caption("Review and verify tenant documents")

    active = store.active_tenants()
    verified = sum(1 for t in active if t.documents_verified)

    col1, col2, col3 = st.columns(3)
    with col1:
        metric_card("Total Tenants", len(active), icon="👥")
    with col2:
        metric_card("Verified", verified, icon="✅")
    with col3:
        metric_card("Pending", len(active) - verified, icon="⏳")

    col1, col2 = st.columns([2, 1])
    with col1:
        query = st.text_input("🔍 Search by tenant name", key="ui_docs_query")
    with col2:
        status = st.radio(
            "Filter",
            ["all", "pending", "verified"],
            format_func=str.capitalize,
            horizontal=True,
            key="ui_docs_filter",
        )

    tenants = filter_document_tenants(store.tenants, query, status)
    if not tenants:
        empty_state("No tenants found", "🔍", "Try adjusting your search or filters")
        return

    for tenant in tenants:
        render_tenant_documents(store, tenant)
