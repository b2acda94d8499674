"""
表單驗證工具
所有驗證皆為提示性質：返回 (是否有效, 錯誤訊息)，由頁面以 toast / error 顯示
"""
import re
from typing import Optional, Sequence, Tuple, Union

from config.constants import ROOMS
from schemas import Room

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'

ValidationResult = Tuple[bool, Optional[str]]


def validate_email(email: str) -> ValidationResult:
    """
    驗證 Email 格式

    Args:
        email: Email 地址

    Returns:
        (是否有效, 錯誤訊息)
    """
    if not email or not email.strip():
        return False, "Please enter your email"

    if not re.match(EMAIL_PATTERN, email.strip()):
        return False, "Please enter a valid email address"

    return True, None


def validate_password(password: str) -> ValidationResult:
    if not password:
        return False, "Please enter your password"
    return True, None


def validate_login(email: str, password: str) -> ValidationResult:
    """登入表單：兩欄都必填"""
    if not (email or "").strip() or not password:
        return False, "Please enter email and password"
    return True, None


def validate_room_count(value: Union[str, int, float, None]) -> ValidationResult:
    """
    驗證房間數量（1 - 500）

    Args:
        value: 使用者輸入（可能是字串）

    Returns:
        (是否有效, 錯誤訊息)
    """
    message = f"Please enter a number between {ROOMS.MIN_COUNT} and {ROOMS.MAX_COUNT}"
    try:
        count = float(value)
    except (TypeError, ValueError):
        return False, message

    if not count.is_integer() or not ROOMS.MIN_COUNT <= count <= ROOMS.MAX_COUNT:
        return False, message

    return True, None


def validate_payment_entry(
    tenant_id: Optional[str],
    month: Optional[str],
    previous_reading: float,
    current_reading: float,
) -> ValidationResult:
    """新增帳單：必須選房客 + 月份，本期讀數不可小於上期"""
    if not tenant_id or not month:
        return False, "Please select tenant and month"

    if current_reading < previous_reading:
        return False, "Current reading cannot be less than previous reading"

    return True, None


def validate_tenant_selected(tenant_id: Optional[str]) -> ValidationResult:
    if not tenant_id:
        return False, "Please select a tenant"
    return True, None


def validate_room_number(
    room_number: int,
    rooms: Sequence[Room],
    exclude_room_id: Optional[str] = None,
) -> ValidationResult:
    """
    房號不可重複

    Args:
        room_number: 欲使用的房號
        rooms: 現有房間
        exclude_room_id: 編輯中的房間（不與自己比較）
    """
    if room_number is None or room_number <= 0:
        return False, "Please enter a valid room number"

    for room in rooms:
        if room.room_number == room_number and room.id != exclude_room_id:
            return False, f"Room #{room_number} already exists"

    return True, None
