"""
退租歷史紀錄 - 建立後不再修改
"""
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TenantHistory(BaseModel):
    """退租房客快照"""
    model_config = ConfigDict(frozen=True)

    id: str
    tenant_name: str
    room_number: int
    room_type: str = Field(..., pattern="^(single|double|triple)$")
    is_ac: bool
    join_date: datetime
    leave_date: datetime
    total_rent_paid: float = Field(default=0, description="已繳帳單總額")
    facilities: List[str] = Field(default_factory=list, examples=[["AC", "Single Bed"]])
