"""
顯示格式化工具
"""
from datetime import date, datetime
from typing import Optional, Union

from config.constants import BILLING


def format_currency(value):
    """
    格式化金額

    Args:
        value: 數值或字串

    Returns:
        str: 格式化後的金額字串 (例: ₹10,000)
    """
    if value is None:
        return f"{BILLING.CURRENCY_SYMBOL}0"
    try:
        if isinstance(value, str):
            value = float(value)
        return f"{BILLING.CURRENCY_SYMBOL}{int(round(value)):,}"
    except (ValueError, TypeError):
        return str(value)


def format_date(value: Optional[Union[date, datetime, str]], fmt: str = "%d %b %Y") -> str:
    """日期 → 顯示字串（None 顯示為 -）"""
    if value is None or value == "":
        return "-"
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    return value.strftime(fmt)


def format_percent(value: float) -> str:
    return f"{value:.0f}%"


def format_room_type(room_type: str, is_ac: bool) -> str:
    """例: Double · AC"""
    return f"{room_type.capitalize()} · {'AC' if is_ac else 'Non-AC'}"
