"""
登入用戶 (Session)
"""
from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    id: str
    email: str
    name: str
    role: str = Field(..., pattern="^(admin|tenant)$")
    room_number: Optional[int] = None

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
