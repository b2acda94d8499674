"""
房間 (Room) 資料模型
房間內嵌房客副本（非參照），由 DataStore 負責同步
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from config.constants import ROOMS

from schemas.tenant import Tenant

ROOM_TYPE_PATTERN = "^(single|double|triple)$"


class RoomBase(BaseModel):
    """房間基礎模型"""
    room_number: int = Field(..., description="房號", examples=[101])
    type: str = Field(default="single", pattern=ROOM_TYPE_PATTERN, description="single/double/triple")
    is_ac: bool = Field(default=False, description="是否有冷氣")
    rent: float = Field(..., ge=0, description="月租金")
    is_occupied: bool = Field(default=False, description="是否已出租")
    tenants: List[Tenant] = Field(default_factory=list, description="內嵌房客副本")


class RoomCreate(RoomBase):
    """建立房間時使用的模型"""
    pass


class RoomUpdate(BaseModel):
    """更新房間時使用的模型"""
    room_number: Optional[int] = None
    type: Optional[str] = Field(None, pattern=ROOM_TYPE_PATTERN)
    is_ac: Optional[bool] = None
    rent: Optional[float] = Field(None, ge=0)
    is_occupied: Optional[bool] = None
    tenants: Optional[List[Tenant]] = None


class Room(RoomBase):
    """完整房間模型"""
    model_config = ConfigDict(from_attributes=True)

    id: str

    @property
    def capacity(self) -> int:
        return ROOMS.CAPACITY.get(self.type, 1)
