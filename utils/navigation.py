"""
路由表與守門員 (Navigation) - v1.0
✅ 路徑 → 頁面模組（views.<module>）
✅ 未登入 → /login；角色不符 → 角色首頁
✅ 未知路徑 → not_found
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

from config.constants import AUTH
from schemas import User

INDEX_PATH = "/"
NOT_FOUND_MODULE = "not_found"


@dataclass(frozen=True)
class Route:
    path: str
    module: str
    title: str
    icon: str
    role: Optional[str] = None  # None = 公開頁面


ROUTES: Dict[str, Route] = {
    route.path: route
    for route in [
        Route("/login", "login_view", "Login", "🔐"),
        Route("/admin", "dashboard", "Dashboard", "📊", "admin"),
        Route("/admin/rooms", "rooms", "Rooms", "🚪", "admin"),
        Route("/admin/payments", "payments", "Payments & Electricity", "💰", "admin"),
        Route("/admin/documents", "documents", "Documents", "📄", "admin"),
        Route("/admin/reports", "reports", "Reports", "📈", "admin"),
        Route("/admin/history", "history", "Tenant History", "📦", "admin"),
        Route("/admin/settings", "settings", "Settings", "⚙️", "admin"),
        Route("/tenant", "tenant_dashboard", "My Room", "🏠", "tenant"),
        Route("/tenant/payments", "tenant_payments", "My Payments", "💳", "tenant"),
        Route("/tenant/documents", "tenant_documents", "My Documents", "📄", "tenant"),
    ]
}

MENUS: Dict[str, List[str]] = {
    "admin": [
        "/admin", "/admin/rooms", "/admin/payments", "/admin/documents",
        "/admin/reports", "/admin/history", "/admin/settings",
    ],
    "tenant": ["/tenant", "/tenant/payments", "/tenant/documents"],
}


@dataclass(frozen=True)
class Resolution:
    """守門員判定結果"""
    path: str
    module: str
    redirected: bool = False

    @property
    def is_not_found(self) -> bool:
        return self.module == NOT_FOUND_MODULE


def normalize_path(path: Optional[str]) -> str:
    """空值視為 /，去除結尾斜線"""
    path = (path or "").strip()
    if not path:
        return INDEX_PATH
    if not path.startswith("/"):
        path = f"/{path}"
    if len(path) > 1:
        path = path.rstrip("/") or INDEX_PATH
    return path


def home_path_for(user: Optional[User]) -> str:
    if user is None:
        return AUTH.LOGIN_PATH
    return AUTH.HOME_PATHS.get(user.role, AUTH.LOGIN_PATH)


def resolve_route(path: Optional[str], user: Optional[User]) -> Resolution:
    """
    判定實際要顯示的頁面

    Args:
        path: 請求路徑（query param `page`）
        user: 目前登入者（未登入為 None）

    Returns:
        Resolution（path 為最終路徑，redirected 表示有轉址）
    """
    requested = normalize_path(path)
    target = requested

    if requested == INDEX_PATH:
        target = home_path_for(user)
    elif requested not in ROUTES:
        return Resolution(requested, NOT_FOUND_MODULE)
    else:
        route = ROUTES[requested]
        if route.role is None:
            if requested == AUTH.LOGIN_PATH and user is not None:
                target = home_path_for(user)
        elif user is None:
            target = AUTH.LOGIN_PATH
        elif user.role != route.role:
            target = home_path_for(user)

    return Resolution(target, ROUTES[target].module, redirected=target != requested)


def menu_for(user: Optional[User]) -> List[Route]:
    if user is None:
        return []
    return [ROUTES[path] for path in MENUS.get(user.role, [])]
