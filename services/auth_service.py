"""
認證服務 - v1.0
✅ 內建帳號（admin / 示範房客）
✅ 已登記房客以 Email 登入（無密碼檢查）
✅ Session 依瀏覽器 session id 持久化於 local storage，重新整理後仍保留
✅ 不同瀏覽器（不同 session id）不共用登入狀態
"""
import re
import uuid
from typing import Optional

from pydantic import ValidationError

from config.constants import AUTH, STORAGE
from schemas import Tenant, User
from services.base_store import BaseStoreService
from services.logger import logger, log_user_action
from services.storage import LocalStorage


SESSION_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def new_session_id() -> str:
    return uuid.uuid4().hex


def is_valid_session_id(session_id: Optional[str]) -> bool:
    """只接受 32 碼 hex，避免任意字串成為 storage key"""
    return bool(session_id) and SESSION_ID_PATTERN.match(session_id) is not None


class AuthService(BaseStoreService):
    """本機認證（示範用途，不具安全性）"""

    def __init__(self, storage: LocalStorage, session_id: Optional[str] = None):
        """
        Args:
            storage: 共用的 LocalStorage
            session_id: 瀏覽器 session id；未提供或格式不符時產生新的（即未登入）
        """
        super().__init__(storage)
        self.session_id = session_id if is_valid_session_id(session_id) else new_session_id()
        self._user: Optional[User] = self._restore_session()

    @property
    def session_key(self) -> str:
        return f"{STORAGE.USER}_{self.session_id}"

    def _restore_session(self) -> Optional[User]:
        try:
            user = self.read_record(self.session_key, User)
        except ValidationError:
            logger.warning("⚠️ Session 資料損毀，視為未登入")
            return None

        if user:
            logger.info(f"✅ 恢復 Session: {user.email} ({user.role})")
        return user

    # ==================== 登入 / 登出 ====================

    def login(self, email: str, password: str) -> bool:
        """
        用戶登入

        Args:
            email: 電子郵件
            password: 密碼（只對內建帳號檢查）

        Returns:
            bool: True=登入成功
        """
        user = self._match_builtin(email, password) or self._match_tenant(email)
        if user is None:
            logger.warning(f"❌ 登入失敗: {email}")
            return False

        self._user = user
        self.write_record(self.session_key, user)
        log_user_action("LOGIN", f"{user.email} ({user.role})")
        return True

    def logout(self) -> None:
        if self._user:
            log_user_action("LOGOUT", self._user.email)
        self._user = None
        self.remove_record(self.session_key)

    def _match_builtin(self, email: str, password: str) -> Optional[User]:
        for account in AUTH.BUILTIN_USERS:
            if account["email"] == email and account["password"] == password:
                fields = {k: v for k, v in account.items() if k != "password"}
                return User(**fields)
        return None

    def _match_tenant(self, email: str) -> Optional[User]:
        """直接讀 storage 中的房客集合，第一位 email 相符者即通過"""
        tenants = self.read_collection(STORAGE.TENANTS, Tenant) or []
        tenant = next((t for t in tenants if t.email == email), None)
        if tenant is None:
            return None

        logger.warning(f"⚠️ 房客 {email} 以 Email 登入，未檢查密碼")
        return User(
            id=tenant.id,
            email=tenant.email,
            name=tenant.name,
            role="tenant",
            room_number=tenant.room_number,
        )

    # ==================== 狀態 ====================

    @property
    def current_user(self) -> Optional[User]:
        return self._user.model_copy() if self._user else None

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def home_path(self) -> str:
        """角色首頁；未登入返回 /login"""
        if self._user is None:
            return AUTH.LOGIN_PATH
        return AUTH.HOME_PATHS.get(self._user.role, AUTH.LOGIN_PATH)
