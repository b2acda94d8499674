"""
房客 / 文件 Pydantic Schema
✅ 房客資料（含嵌入的文件列表）
✅ 文件只記錄檔名，不儲存檔案內容
✅ 房號以「值」參照房間（room_number）
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.constants import BILLING, DOCUMENTS


class Document(BaseModel):
    """房客上傳的證明文件（僅檔名）"""
    id: str
    type: str = Field(
        ...,
        pattern="^(address_proof|id_proof)$",
        description="文件種類",
        examples=["address_proof"]
    )
    name: str = Field(..., description="顯示名稱（檔名）", examples=["Electricity Bill.pdf"])
    url: str = Field(default=DOCUMENTS.PLACEHOLDER_URL, description="佔位 URL")
    verified: bool = False
    uploaded_at: datetime


class TenantBase(BaseModel):
    """房客基本資料"""
    first_name: str = Field(..., min_length=1, max_length=100, examples=["Rahul"])
    last_name: str = Field(default="", max_length=100, examples=["Sharma"])
    email: str = Field(default="", max_length=200, examples=["tenant1@gmail.com"])
    phone: str = Field(default="", max_length=20, examples=["9876500001"])
    landmark: str = Field(default="", max_length=200, examples=["Near Main Market"])
    city: str = Field(default="", max_length=100, examples=["Mumbai"])
    state: str = Field(default="", max_length=100, examples=["Maharashtra"])
    pincode: str = Field(default="", max_length=10, examples=["400001"])
    id_number: str = Field(
        default="",
        max_length=20,
        description="身分證號（Aadhaar）",
        examples=["0001 0001 0001"]
    )
    token_money: float = Field(
        default=BILLING.TOKEN_MONEY,
        ge=0,
        description="押金 / token money",
        examples=[3000.0]
    )
    room_number: int = Field(..., description="房號", examples=[101])
    documents: List[Document] = Field(default_factory=list)
    documents_verified: bool = False
    join_date: datetime
    is_active: bool = True

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        """去除前後空白"""
        return v.strip()

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class TenantCreate(TenantBase):
    """新增房客"""
    pass


class Tenant(TenantBase):
    """完整房客資料（含 ID）"""
    model_config = ConfigDict(from_attributes=True)

    id: str


class TenantUpdate(BaseModel):
    """更新房客（所有欄位可選）"""
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=20)
    landmark: Optional[str] = Field(None, max_length=200)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    pincode: Optional[str] = Field(None, max_length=10)
    id_number: Optional[str] = Field(None, max_length=20)
    token_money: Optional[float] = Field(None, ge=0)
    room_number: Optional[int] = None
    documents: Optional[List[Document]] = None
    documents_verified: Optional[bool] = None
    join_date: Optional[datetime] = None
    is_active: Optional[bool] = None
