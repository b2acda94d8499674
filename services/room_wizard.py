"""
房間精靈 (Room Wizard) - v1.0
✅ 四步驟草稿：房間資料 → 房客資料 → 文件 → 確認
✅ 新房 / 既有房共用同一份草稿模型
✅ 只新增填寫完整（名 + Email）的房客，且不超過房型容量
✅ is_occupied 與實際房客一致
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from config.constants import BILLING, DOCUMENTS, ROOMS
from schemas import Document, Room, RoomCreate, RoomUpdate, TenantCreate
from services.base_store import new_id, utc_now
from services.data_store import DataStore
from services.logger import logger

STEPS = ["Room Details", "Tenant Details", "Documents", "Confirm"]


class TenantDraft(BaseModel):
    """精靈中的單一房客欄位（文件只記檔名）"""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    landmark: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""
    id_number: str = ""
    token_money: float = Field(default=BILLING.TOKEN_MONEY, ge=0)
    address_proof_name: str = ""
    id_proof_name: str = ""

    @property
    def is_filled(self) -> bool:
        return bool(self.first_name.strip() and self.email.strip())


class RoomDraft(BaseModel):
    room_number: int
    type: str = Field(default="single", pattern="^(single|double|triple)$")
    is_ac: bool = False
    rent: float = Field(default=0, ge=0)
    tenants: List[TenantDraft] = Field(
        default_factory=lambda: [TenantDraft() for _ in range(max(ROOMS.CAPACITY.values()))]
    )

    @property
    def capacity(self) -> int:
        return ROOMS.CAPACITY.get(self.type, 1)

    def filled_tenants(self, open_slots: Optional[int] = None) -> List[TenantDraft]:
        """容量內、已填寫的房客"""
        slots = self.capacity if open_slots is None else min(open_slots, self.capacity)
        return [t for t in self.tenants[:max(slots, 0)] if t.is_filled]


# ==================== 建立草稿 ====================

def new_room_draft(store: DataStore) -> RoomDraft:
    """新房：下一個房號、single / 無冷氣、租金依租金表"""
    return RoomDraft(
        room_number=store.next_room_number(),
        type="single",
        is_ac=False,
        rent=store.get_rent("single", False),
    )


def draft_from_room(room: Room) -> RoomDraft:
    """既有房：帶入房間設定，房客欄位全部留空（已入住者不重複新增）"""
    return RoomDraft(
        room_number=room.room_number,
        type=room.type,
        is_ac=room.is_ac,
        rent=room.rent,
    )


def open_slots(room: Optional[Room], room_type: str) -> int:
    """還能新增幾位房客"""
    capacity = ROOMS.CAPACITY.get(room_type, 1)
    occupied = len(room.tenants) if room else 0
    return max(capacity - occupied, 0)


def build_tenant(draft: TenantDraft, room_number: int, now: Optional[datetime] = None) -> TenantCreate:
    """
    草稿 → TenantCreate

    Args:
        draft: 房客草稿
        room_number: 所屬房號
        now: 入住 / 上傳時間（預設為現在）

    Returns:
        兩份未審核文件的新房客
    """
    now = now or utc_now()
    names = {
        "address_proof": draft.address_proof_name.strip() or DOCUMENTS.DEFAULT_NAMES["address_proof"],
        "id_proof": draft.id_proof_name.strip() or DOCUMENTS.DEFAULT_NAMES["id_proof"],
    }
    fields = draft.model_dump(exclude={"address_proof_name", "id_proof_name"})
    return TenantCreate(
        **fields,
        room_number=room_number,
        documents=[
            Document(id=new_id("doc"), type=doc_type, name=names[doc_type], verified=False, uploaded_at=now)
            for doc_type in DOCUMENTS.TYPES
        ],
        documents_verified=False,
        join_date=now,
        is_active=True,
    )


# ==================== 儲存 ====================

def save_room(store: DataStore, draft: RoomDraft, existing_room_id: Optional[str] = None) -> Optional[Room]:
    """
    儲存精靈結果

    新房先建立空房，再逐一 add_tenant（由 DataStore 同步內嵌副本與 is_occupied）。
    既有房更新房型 / 冷氣 / 租金，房號不變，只補上空床位的新房客。

    Args:
        store: 資料中心
        draft: 精靈草稿
        existing_room_id: 編輯既有房間時的 ID

    Returns:
        儲存後的房間；既有房 ID 不存在時返回 None
    """
    existing = store.get_room(existing_room_id) if existing_room_id else None
    if existing_room_id and existing is None:
        logger.warning(f"⚠️ 找不到房間 ID: {existing_room_id}")
        return None

    now = utc_now()

    if existing is None:
        room = store.add_room(RoomCreate(
            room_number=draft.room_number,
            type=draft.type,
            is_ac=draft.is_ac,
            rent=draft.rent,
            is_occupied=False,
            tenants=[],
        ))
        new_tenants = draft.filled_tenants()
    else:
        room = existing
        store.update_room(room.id, RoomUpdate(
            type=draft.type,
            is_ac=draft.is_ac,
            rent=draft.rent,
            is_occupied=bool(existing.tenants),
        ))
        new_tenants = draft.filled_tenants(open_slots(existing, draft.type))

    for tenant in new_tenants:
        store.add_tenant(build_tenant(tenant, room.room_number, now))

    logger.info(f"✅ 房間 #{room.room_number} 已儲存（新增 {len(new_tenants)} 位房客）")
    return store.get_room(room.id)
