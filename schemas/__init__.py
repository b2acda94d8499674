"""
Pydantic Schemas 統一匯出
"""

from .tenant import (
    Document,
    Tenant,
    TenantCreate,
    TenantUpdate,
)

from .room import (
    Room,
    RoomCreate,
    RoomUpdate,
)

from .payment import (
    Payment,
    PaymentCreate,
    PaymentUpdate,
)

from .history import TenantHistory
from .settings import RentRates, Settings, SettingsUpdate
from .user import User

__all__ = [
    # Tenant schemas
    "Document",
    "Tenant",
    "TenantCreate",
    "TenantUpdate",

    # Room schemas
    "Room",
    "RoomCreate",
    "RoomUpdate",

    # Payment schemas
    "Payment",
    "PaymentCreate",
    "PaymentUpdate",

    "TenantHistory",
    "RentRates",
    "Settings",
    "SettingsUpdate",
    "User",
]
