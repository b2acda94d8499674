"""
帳單計算 (Billing)
電費 = 用電度數 × 每度電價；總額 = 房租 + 電費
"""

from dataclasses import dataclass
from typing import Optional

from schemas import PaymentCreate, Room, Tenant


@dataclass
class BillBreakdown:
    """單月帳單明細"""
    units_used: float
    electricity_rate: float
    electricity_amount: float
    rent: float
    total_amount: float


def calculate_bill(
    previous_reading: float,
    current_reading: float,
    electricity_rate: float,
    rent: float,
) -> BillBreakdown:
    """
    計算單月帳單

    Args:
        previous_reading: 上期電表讀數
        current_reading: 本期電表讀數
        electricity_rate: 每度電價
        rent: 房租

    Returns:
        BillBreakdown（讀數倒退時度數為負，由呼叫端先行驗證）
    """
    units = current_reading - previous_reading
    electricity = units * electricity_rate
    return BillBreakdown(
        units_used=units,
        electricity_rate=electricity_rate,
        electricity_amount=electricity,
        rent=rent,
        total_amount=rent + electricity,
    )


def build_payment(
    tenant: Tenant,
    room: Optional[Room],
    month: str,
    year: int,
    previous_reading: float,
    current_reading: float,
    electricity_rate: float,
) -> PaymentCreate:
    """以房客與房間當下的資料建立 pending 帳單（姓名 / 房號為快照）"""
    bill = calculate_bill(
        previous_reading,
        current_reading,
        electricity_rate,
        room.rent if room else 0,
    )
    return PaymentCreate(
        tenant_id=tenant.id,
        tenant_name=tenant.name,
        room_number=tenant.room_number,
        month=month,
        year=year,
        previous_reading=previous_reading,
        current_reading=current_reading,
        units_used=bill.units_used,
        electricity_rate=bill.electricity_rate,
        electricity_amount=bill.electricity_amount,
        rent=bill.rent,
        total_amount=bill.total_amount,
        status="pending",
        reminder_sent=False,
    )
