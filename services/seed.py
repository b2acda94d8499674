"""
示範資料 (Seed)
首次啟動時建立 20 間房、前 12 間有房客、每位房客 6 個月帳單
"""

import random
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from config.constants import BILLING, ROOMS
from schemas import Document, Payment, Room, Settings, Tenant

FIRST_NAMES = ["Rahul", "Priya", "Amit", "Sneha", "Vikram", "Kavita",
               "Raj", "Meera", "Arjun", "Neha", "Sanjay", "Pooja"]
LAST_NAMES = ["Sharma", "Patel", "Kumar", "Singh", "Verma", "Gupta",
              "Yadav", "Joshi", "Mehta", "Reddy", "Das", "Nair"]
TOKEN_MONEY = {"single": 3000, "double": 5000, "triple": 7000}

SEED_ROOMS = 20
OCCUPIED_ROOMS = 12
SEED_MONTHS = BILLING.MONTHS[:6]
PAID_MONTHS = 4


def _seed_room_type(i: int) -> str:
    return ["single", "double", "triple"][i % 3]


def generate_initial_data(
    settings: Settings,
    year: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[List[Room], List[Tenant], List[Payment]]:
    """
    產生示範資料

    Args:
        settings: 用於推算租金與電價
        year: 帳單年份（預設為今年）
        rng: 亂數來源（測試時可固定）

    Returns:
        (rooms, tenants, payments)
    """
    rng = rng or random.Random()
    year = year or datetime.now(timezone.utc).year
    rates = settings.rent_rates
    rate_table = {
        ("single", False): rates.single_non_ac,
        ("single", True): rates.single_ac,
        ("double", False): rates.double_non_ac,
        ("double", True): rates.double_ac,
        ("triple", False): rates.triple_non_ac,
        ("triple", True): rates.triple_ac,
    }

    rooms: List[Room] = []
    tenants: List[Tenant] = []
    payments: List[Payment] = []

    for i in range(1, SEED_ROOMS + 1):
        room_type = _seed_room_type(i)
        is_ac = i % 4 == 0
        room_number = ROOMS.NUMBER_OFFSET + i
        rent = rate_table[(room_type, is_ac)]
        occupied = i <= OCCUPIED_ROOMS

        room_tenants: List[Tenant] = []
        if occupied:
            uploaded_at = datetime(year, 1, 15 + i, tzinfo=timezone.utc)
            verified = i % 2 == 0
            tenant = Tenant(
                id=f"tenant_{i}",
                first_name=FIRST_NAMES[i - 1],
                last_name=LAST_NAMES[i - 1],
                email=f"tenant{i}@gmail.com",
                phone=f"98765{i:05d}",
                landmark="Near Main Market",
                city="Mumbai",
                state="Maharashtra",
                pincode="400001",
                id_number=f"{i:04d} {i:04d} {i:04d}",
                token_money=TOKEN_MONEY[room_type],
                room_number=room_number,
                documents=[
                    Document(id=f"doc_{i}_1", type="address_proof", name="Electricity Bill.pdf",
                             verified=verified, uploaded_at=uploaded_at),
                    Document(id=f"doc_{i}_2", type="id_proof", name="Aadhaar Card.pdf",
                             verified=verified, uploaded_at=uploaded_at),
                ],
                documents_verified=verified,
                join_date=datetime(year - 1, rng.randint(1, 12), rng.randint(1, 28), tzinfo=timezone.utc),
                is_active=True,
            )
            tenants.append(tenant)
            room_tenants = [tenant.model_copy(deep=True)]

            for idx, month in enumerate(SEED_MONTHS):
                previous = 100 + idx * 50
                current = previous + 30 + rng.randint(0, 39)
                units = current - previous
                electricity = units * settings.electricity_rate
                paid = idx < PAID_MONTHS
                payments.append(Payment(
                    id=f"payment_{i}_{idx}",
                    tenant_id=tenant.id,
                    tenant_name=tenant.name,
                    room_number=room_number,
                    month=month,
                    year=year,
                    previous_reading=previous,
                    current_reading=current,
                    units_used=units,
                    electricity_rate=settings.electricity_rate,
                    electricity_amount=electricity,
                    rent=rent,
                    total_amount=rent + electricity,
                    status="paid" if paid else "pending",
                    paid_date=datetime(year, idx + 1, 5, tzinfo=timezone.utc) if paid else None,
                    reminder_sent=False,
                ))

        rooms.append(Room(
            id=f"room_{i}",
            room_number=room_number,
            type=room_type,
            is_ac=is_ac,
            rent=rent,
            is_occupied=occupied,
            tenants=room_tenants,
        ))

    return rooms, tenants, payments
