"""
Session 管理工具 - v2.0
✅ 每個瀏覽器 Session 一組 DataStore / AuthService
✅ 共用同一個 LocalStorage 目錄（st.cache_resource）
✅ 登入狀態以網址上的 sid 區分瀏覽器，重新整理後仍保留
✅ 換頁時清除 ui_ 開頭的暫存狀態
✅ 跨 rerun 的提示訊息（toast）
"""
import logging
from typing import Optional

import streamlit as st

from config.app_config import APP_CONFIG
from schemas import User
from services.auth_service import AuthService
from services.data_store import DataStore
from services.storage import LocalStorage

logger = logging.getLogger(__name__)


@st.cache_resource
def get_storage(data_dir: str) -> LocalStorage:
    """所有 Session 共用的 storage（同一目錄，無協調，後寫者為準）"""
    logger.info(f"✅ LocalStorage 初始化: {data_dir}")
    return LocalStorage(data_dir)


class SessionManager:
    """Session 管理器"""

    # Session Key 常量
    STORE_KEY = "data_store"
    AUTH_KEY = "auth_service"
    PAGE_KEY = "current_page"
    FLASH_KEY = "flash_messages"
    SESSION_PARAM = "sid"
    UI_PREFIX = "ui_"

    def init(self):
        """初始化本 Session 的 store 物件（已存在則略過）"""
        if self.STORE_KEY in st.session_state and self.AUTH_KEY in st.session_state:
            return

        storage = get_storage(APP_CONFIG["data_dir"])
        st.session_state[self.STORE_KEY] = DataStore(storage, seed_demo_data=APP_CONFIG["seed_demo_data"])
        st.session_state[self.AUTH_KEY] = self._restore_auth(storage)
        st.session_state[self.FLASH_KEY] = []
        logger.info("✅ Session 已建立")

    def _restore_auth(self, storage: LocalStorage) -> AuthService:
        """依網址的 sid 還原本瀏覽器的登入；沒有或無效時發新的 sid"""
        sid = st.query_params.get(self.SESSION_PARAM)
        auth = AuthService(storage, sid)
        if auth.session_id != sid:
            st.query_params[self.SESSION_PARAM] = auth.session_id
        return auth

    # ==================== Store 存取 ====================

    @property
    def store(self) -> DataStore:
        return st.session_state[self.STORE_KEY]

    @property
    def auth(self) -> AuthService:
        return st.session_state[self.AUTH_KEY]

    def get_user(self) -> Optional[User]:
        return self.auth.current_user

    def is_authenticated(self) -> bool:
        return self.auth.is_authenticated

    def logout(self):
        self.auth.logout()
        self.reset_ui_state()
        logger.info("✅ Session 已登出")

    # ==================== 頁面 / UI 狀態 ====================

    def reset_ui_state(self):
        """清除所有 ui_ 開頭的暫存（表單、精靈步驟、篩選條件）"""
        for key in [k for k in st.session_state.keys() if str(k).startswith(self.UI_PREFIX)]:
            del st.session_state[key]

    def track_page(self, path: str):
        """切換到不同頁面時重置 UI 狀態"""
        if st.session_state.get(self.PAGE_KEY) != path:
            self.reset_ui_state()
            st.session_state[self.PAGE_KEY] = path

    def current_path(self) -> str:
        return st.query_params.get("page", "/")

    def navigate(self, path: str):
        """
        切換頁面

        Args:
            path: 路由路徑，例如 /admin/rooms
        """
        st.query_params["page"] = path
        self.track_page(path)
        st.rerun()

    # ==================== 提示訊息 ====================

    def flash(self, message: str, icon: str = "✅"):
        """下一次 rerun 時以 toast 顯示"""
        st.session_state.setdefault(self.FLASH_KEY, []).append((message, icon))

    def show_flash(self):
        for message, icon in st.session_state.get(self.FLASH_KEY, []):
            st.toast(message, icon=icon)
        st.session_state[self.FLASH_KEY] = []

    # ==================== Debug 工具 ====================

    def is_dev_mode(self) -> bool:
        return APP_CONFIG["dev_mode"]

    def debug_session_info(self):
        """顯示 Session 除錯資訊（僅開發環境使用）"""
        user = self.get_user()

        with st.sidebar.expander("🔍 Session Debug", expanded=False):
            st.json({
                "user": user.model_dump() if user else None,
                "page": st.session_state.get(self.PAGE_KEY),
                "data_dir": APP_CONFIG["data_dir"],
                "ui_keys": sorted(
                    str(k) for k in st.session_state.keys() if str(k).startswith(self.UI_PREFIX)
                ),
            })


# ============================================
# 全域 Session Manager 實例
# ============================================
session_manager = SessionManager()
