"""
登入頁面視圖 - v3.0
✅ Email / 密碼登入
✅ 提示性表單驗證
✅ 示範帳號提示
✅ 登入後轉向角色首頁
"""
import streamlit as st

from config.app_config import APP_CONFIG
from config.constants import AUTH
from services.auth_service import AuthService
from services.data_store import DataStore
from utils.session_manager import session_manager
from utils.validators import validate_login


# ==================== 登入處理 ====================

def handle_login(auth: AuthService, email: str, password: str):
    """
    處理登入邏輯

    Args:
        auth: 認證服務
        email: Email
        password: 密碼
    """
    valid, error = validate_login(email, password)
    if not valid:
        st.error(f"❌ {error}")
        return

    with st.spinner("🔄 Signing in..."):
        success = auth.login(email.strip(), password)

    if success:
        user = auth.current_user
        session_manager.flash(f"Welcome back, {user.name}!", "👋")
        session_manager.navigate(auth.home_path())
    else:
        st.error("❌ Invalid email or password")


# ==================== 主渲染函數 ====================

def render(store: DataStore, auth: AuthService):
    """渲染登入頁面"""
    col1, col2, col3 = st.columns([1, 2, 1])

    with col2:
        st.markdown("<br>", unsafe_allow_html=True)
        st.markdown(
            f"""
            <div style="text-align: center;">
                <h1 style="margin-bottom: 0;">🏠 {APP_CONFIG['title']}</h1>
                <p style="color: #888;">Paying guest &amp; rental management</p>
            </div>
            """,
            unsafe_allow_html=True
        )

        st.markdown("---")
        render_login_form(auth)
        st.markdown("---")
        render_demo_account_hint()


def render_login_form(auth: AuthService):
    """渲染登入表單"""
    with st.form("ui_login_form", clear_on_submit=False):
        st.markdown("### 👋 Welcome back")

        email = st.text_input(
            "📧 Email",
            placeholder="you@example.com",
            key="ui_login_email"
        )

        password = st.text_input(
            "🔐 Password",
            type="password",
            placeholder="••••••••",
            key="ui_login_password"
        )

        submitted = st.form_submit_button(
            "🚀 Sign in",
            width="stretch",
            type="primary"
        )

    if submitted:
        handle_login(auth, email, password)


# ==================== 示範帳號提示 ====================

def render_demo_account_hint():
    with st.expander("🔑 Demo accounts", expanded=True):
        for account in AUTH.BUILTIN_USERS:
            role = "Admin" if account["role"] == "admin" else "Tenant"
            st.caption(f"**{role}**: `{account['email']}` / `{account['password']}`")
        st.caption("Registered tenants can also sign in with their email.")
