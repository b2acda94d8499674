"""
催繳通知 (Notification)
✅ 產生催繳訊息範本
✅ 產生 WhatsApp 連結交由外部 App 發送
⚠️ 本系統不發送訊息、不確認送達
"""

from urllib.parse import quote

from config.constants import BILLING, MESSAGING
from schemas import Payment
from services.logger import logger


def format_amount(amount: float) -> str:
    """帳單金額：整數不帶小數點"""
    return f"{amount:.0f}" if float(amount).is_integer() else f"{amount:.2f}"


def build_reminder_message(tenant_name: str, room_number: int, month: str, amount: float) -> str:
    """
    產生催繳訊息

    Args:
        tenant_name: 房客姓名
        room_number: 房號
        month: 帳單月份
        amount: 應繳總額

    Returns:
        訊息文字
    """
    return (
        f"Hello {tenant_name},\n"
        f"\n"
        f"Your rent payment for Room #{room_number} ({month}) is pending.\n"
        f"\n"
        f"Total Amount: {BILLING.CURRENCY_SYMBOL}{format_amount(amount)}\n"
        f"\n"
        f"Please make the payment at the earliest.\n"
        f"Thank you."
    )


def normalize_phone(phone: str) -> str:
    return "".join(ch for ch in phone if ch.isdigit())


def local_number(phone: str, country_code: str = MESSAGING.COUNTRY_CODE) -> str:
    """去掉已存的國碼 (+91 / 91) 或開頭的 0，只留本地號碼"""
    digits = normalize_phone(phone)
    if len(digits) > MESSAGING.LOCAL_NUMBER_LENGTH and digits.startswith(country_code):
        digits = digits[len(country_code):]
    if len(digits) > MESSAGING.LOCAL_NUMBER_LENGTH and digits.startswith("0"):
        digits = digits.lstrip("0")
    return digits


def build_whatsapp_url(phone: str, message: str, country_code: str = MESSAGING.COUNTRY_CODE) -> str:
    """wa.me 連結：國碼 + 本地號碼，訊息做 URL encode"""
    number = local_number(phone, country_code)
    return f"{MESSAGING.WHATSAPP_BASE_URL}{country_code}{number}?text={quote(message, safe='')}"


def build_payment_reminder(payment: Payment, phone: str) -> str:
    """以帳單快照產生催繳連結"""
    message = build_reminder_message(
        payment.tenant_name,
        payment.room_number,
        payment.month,
        payment.total_amount,
    )
    url = build_whatsapp_url(phone, message)
    logger.info(f"📱 催繳連結已產生: {payment.tenant_name} #{payment.room_number} {payment.month}")
    return url
