"""
系統設定 (Settings)
房型 × 冷氣 的租金表 + 每度電價
"""
from typing import Optional

from pydantic import BaseModel, Field

from config.constants import BILLING


class RentRates(BaseModel):
    """租金表"""
    single_non_ac: float = Field(default=BILLING.RENT_RATES["single_non_ac"], ge=0)
    single_ac: float = Field(default=BILLING.RENT_RATES["single_ac"], ge=0)
    double_non_ac: float = Field(default=BILLING.RENT_RATES["double_non_ac"], ge=0)
    double_ac: float = Field(default=BILLING.RENT_RATES["double_ac"], ge=0)
    triple_non_ac: float = Field(default=BILLING.RENT_RATES["triple_non_ac"], ge=0)
    triple_ac: float = Field(default=BILLING.RENT_RATES["triple_ac"], ge=0)


class Settings(BaseModel):
    total_rooms: int = Field(default=BILLING.TOTAL_ROOMS, ge=0)
    electricity_rate: float = Field(default=BILLING.ELECTRICITY_RATE, ge=0, description="每度電價")
    rent_rates: RentRates = Field(default_factory=RentRates)


class SettingsUpdate(BaseModel):
    """淺層合併：提供 rent_rates 時整張表替換"""
    total_rooms: Optional[int] = Field(None, ge=0)
    electricity_rate: Optional[float] = Field(None, ge=0)
    rent_rates: Optional[RentRates] = None
