"""
租金 + 電費帳單 Pydantic Schema
✅ 房客姓名 / 房號為建立當下的快照，不隨房客資料更新
✅ 狀態只有 paid / pending
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.constants import BILLING

STATUS_PATTERN = "^(paid|pending)$"


class PaymentBase(BaseModel):
    """帳單基本資料"""
    tenant_id: str
    tenant_name: str = Field(..., description="房客姓名（快照）", examples=["Rahul Sharma"])
    room_number: int = Field(..., description="房號（快照）", examples=[101])
    month: str = Field(..., description="帳單月份", examples=["January"])
    year: int = Field(..., ge=2000, le=2100, examples=[2024])
    previous_reading: float = Field(default=0, ge=0, description="上期電表讀數")
    current_reading: float = Field(default=0, ge=0, description="本期電表讀數")
    units_used: float = Field(default=0, description="用電度數")
    electricity_rate: float = Field(default=BILLING.ELECTRICITY_RATE, ge=0, description="每度電價")
    electricity_amount: float = Field(default=0, description="電費")
    rent: float = Field(default=0, ge=0, description="房租")
    total_amount: float = Field(..., description="應繳總額")
    status: str = Field(default="pending", pattern=STATUS_PATTERN)
    paid_date: Optional[datetime] = None
    reminder_sent: bool = False

    @field_validator('month')
    @classmethod
    def validate_month(cls, v):
        """月份必須是英文月份全名"""
        if v not in BILLING.MONTHS:
            raise ValueError(f'Unknown month: {v}')
        return v


class PaymentCreate(PaymentBase):
    """新增帳單"""
    pass


class Payment(PaymentBase):
    """完整帳單"""
    model_config = ConfigDict(from_attributes=True)

    id: str


class PaymentUpdate(BaseModel):
    """更新帳單"""
    status: Optional[str] = Field(None, pattern=STATUS_PATTERN)
    paid_date: Optional[datetime] = None
    reminder_sent: Optional[bool] = None
    previous_reading: Optional[float] = Field(None, ge=0)
    current_reading: Optional[float] = Field(None, ge=0)
    units_used: Optional[float] = None
    electricity_rate: Optional[float] = Field(None, ge=0)
    electricity_amount: Optional[float] = None
    rent: Optional[float] = Field(None, ge=0)
    total_amount: Optional[float] = None
