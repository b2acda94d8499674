"""
RentEase - 出租房 / 分租管理系統
v1.0 (Local Storage + Role Gatekeeper)
✅ 動態載入頁面模組
✅ 登入守門員機制（路由 + 角色）
✅ 每個瀏覽器 Session 一組資料中心
✅ 完整錯誤處理
"""

import importlib
import os

import streamlit as st

from config.app_config import APP_CONFIG

# ============================================
# 1. Page Config - 必須是第一個 Streamlit 命令
# ============================================
st.set_page_config(
    page_title=APP_CONFIG["title"],
    page_icon="🏠",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ============================================
# 2. Logging
# ============================================

from services.logger import logger  # noqa: E402

logger.info(f"啟動應用程式: {APP_CONFIG['title']} {APP_CONFIG['version']}")

# ============================================
# 3. Load CSS
# ============================================


def load_css(filename: str) -> None:
    """載入外部 CSS 檔案。"""
    try:
        with open(filename, encoding="utf-8") as f:
            css = f.read()
        st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)
    except FileNotFoundError:
        logger.warning(f"CSS 檔案不存在: {filename}")


load_css(os.path.join("assets", "style.css"))

# ============================================
# 4. Session Manager & Navigation
# ============================================

from utils.navigation import ROUTES, menu_for, resolve_route  # noqa: E402
from utils.session_manager import session_manager  # noqa: E402


# ============================================
# 5. Main Function (Gatekeeper Pattern)
# ============================================


def main() -> None:
    """主程式進入點 - 含登入守門員邏輯"""

    # ✅ 初始化本 Session 的 store
    session_manager.init()
    auth = session_manager.auth

    # ✅ 守門員：依登入狀態與角色決定頁面
    requested = session_manager.current_path()
    resolution = resolve_route(requested, auth.current_user)

    if resolution.redirected:
        logger.info(f"↪️ 轉址: {requested} → {resolution.path}")
        st.query_params["page"] = resolution.path

    session_manager.track_page(resolution.path)
    session_manager.show_flash()

    if auth.is_authenticated:
        render_sidebar(resolution.path)

    load_page_module(resolution.module)


# ============================================
# 6. Sidebar
# ============================================


def render_sidebar(current_path: str) -> None:
    """渲染側邊欄"""
    with st.sidebar:
        st.title(f"🏠 {APP_CONFIG['title']}")
        st.caption(APP_CONFIG["version"])

        if APP_CONFIG["dev_mode"]:
            st.caption("🔧 開發模式")

        st.divider()
        render_user_card()
        st.divider()
        render_menu(current_path)

        if APP_CONFIG["dev_mode"]:
            render_dev_tools()


def render_user_card() -> None:
    """渲染用戶資訊卡片"""
    user = session_manager.get_user()

    with st.container(border=True):
        st.markdown(f"**👤 {user.name}**")
        st.caption(f"📧 {user.email}")

        if user.is_admin:
            st.caption("🏷️ Admin")
        else:
            st.caption(f"🏷️ Tenant · Room #{user.room_number}" if user.room_number else "🏷️ Tenant")

        if st.button("🚪 Logout", width="stretch", type="secondary"):
            handle_logout()


def handle_logout() -> None:
    """處理登出流程"""
    session_manager.logout()
    session_manager.flash("You have been logged out", "👋")
    session_manager.navigate(ROUTES["/login"].path)


def render_menu(current_path: str) -> None:
    """渲染功能選單"""
    for route in menu_for(session_manager.get_user()):
        if st.button(
            f"{route.icon} {route.title}",
            key=f"nav_{route.path}",
            width="stretch",
            type="primary" if route.path == current_path else "tertiary",
        ):
            session_manager.navigate(route.path)


def render_dev_tools() -> None:
    st.divider()
    session_manager.debug_session_info()

    if st.button("🔄 重新載入資料", width="stretch"):
        session_manager.store.load()
        st.rerun()


# ============================================
# 7. Page Loader
# ============================================


def load_page_module(page_module: str) -> None:
    """
    動態載入頁面模組

    Args:
        page_module: views/ 下的模組名稱
    """
    store = session_manager.store
    auth = session_manager.auth

    try:
        module = importlib.import_module(f"views.{page_module}")
        logger.debug(f"載入頁面: {page_module} (用戶: {auth.current_user.email if auth.current_user else '-'})")
        module.render(store, auth)

    except ImportError as e:
        st.error(f"❌ 無法載入頁面模組: {page_module}")
        logger.error(f"載入模組失敗: {page_module} - {e}", exc_info=True)

        if APP_CONFIG["dev_mode"]:
            st.exception(e)

    except Exception as e:
        st.error("❌ Something went wrong while loading this page")
        logger.error(f"頁面渲染失敗: {page_module} - {e}", exc_info=True)

        if APP_CONFIG["dev_mode"]:
            st.exception(e)
        else:
            st.info("💡 Please try again, or contact the administrator")

        if st.button("🔙 Back to home"):
            session_manager.navigate(auth.home_path())


# ============================================
# 8. Entry Point
# ============================================

if __name__ == "__main__":
    main()
