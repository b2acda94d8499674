"""
資料中心 (DataStore) - v1.0
✅ rooms / tenants / payments / tenant_history / settings 單一權威
✅ 依房型 × 冷氣 推算預設租金
✅ 每次異動即整筆寫回 local storage
✅ 找不到 ID 時靜默略過（只記 warning）

注意：房間內嵌的房客是「副本」，只有 add_tenant / remove_tenant 會同步，
update_tenant、verify_document 等只改扁平的 tenants 集合。
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from config.constants import ROOMS, STORAGE
from schemas import (
    Payment,
    PaymentCreate,
    PaymentUpdate,
    Room,
    RoomCreate,
    RoomUpdate,
    Settings,
    SettingsUpdate,
    Tenant,
    TenantCreate,
    TenantHistory,
    TenantUpdate,
    User,
)
from services.base_store import (
    BaseStoreService,
    coerce_payload,
    merge_fields,
    new_id,
    utc_now,
)
from services.logger import logger
from services.storage import LocalStorage

Payload = Union[Dict[str, Any], Any]


class DataStore(BaseStoreService):
    """租屋業務資料中心"""

    def __init__(self, storage: LocalStorage, seed_demo_data: bool = True):
        super().__init__(storage)
        self.seed_demo_data = seed_demo_data

        self._rooms: List[Room] = []
        self._tenants: List[Tenant] = []
        self._payments: List[Payment] = []
        self._history: List[TenantHistory] = []
        self._settings = Settings()

        self.load()

    # ==================== 載入 / 寫回 ====================

    def load(self) -> None:
        """
        從 storage 載入

        rooms / tenants / payments 任一存在即視為既有資料，缺少的集合補空；
        三者皆無才是首次啟動（依 seed_demo_data 決定是否產生示範資料）。
        """
        rooms = self.read_collection(STORAGE.ROOMS, Room)
        tenants = self.read_collection(STORAGE.TENANTS, Tenant)
        payments = self.read_collection(STORAGE.PAYMENTS, Payment)

        if rooms is not None or tenants is not None or payments is not None:
            self._rooms = rooms or []
            self._tenants = tenants or []
            self._payments = payments or []
            self._history = self.read_collection(STORAGE.HISTORY, TenantHistory) or []
            self._settings = self.read_record(STORAGE.SETTINGS, Settings) or Settings()
            if rooms is None or tenants is None or payments is None:
                logger.warning("⚠️ Storage 缺少部分集合，以空集合補齊")
                self._save_all_collections()
            logger.info(
                f"✅ 載入資料: {len(self._rooms)} rooms, {len(self._tenants)} tenants, "
                f"{len(self._payments)} payments, {len(self._history)} history"
            )
            return

        if self.seed_demo_data:
            from services.seed import generate_initial_data

            self._rooms, self._tenants, self._payments = generate_initial_data(self._settings)
            logger.info(f"🌱 已建立示範資料: {len(self._rooms)} rooms")
        else:
            logger.info("📭 Storage 為空，未載入示範資料")

        # 空集合也寫入，下次啟動即不再視為首次
        self._save_all_collections()

    def _save_all_collections(self) -> None:
        self._save_rooms()
        self._save_tenants()
        self._save_payments()

    def _save_rooms(self) -> None:
        self.write_collection(STORAGE.ROOMS, self._rooms)

    def _save_tenants(self) -> None:
        self.write_collection(STORAGE.TENANTS, self._tenants)

    def _save_payments(self) -> None:
        self.write_collection(STORAGE.PAYMENTS, self._payments)

    def _save_history(self) -> None:
        self.write_collection(STORAGE.HISTORY, self._history)

    def _save_settings(self) -> None:
        self.write_record(STORAGE.SETTINGS, self._settings)

    # ==================== 讀取 (snapshots) ====================

    @property
    def rooms(self) -> List[Room]:
        return [room.model_copy(deep=True) for room in self._rooms]

    @property
    def tenants(self) -> List[Tenant]:
        return [tenant.model_copy(deep=True) for tenant in self._tenants]

    @property
    def payments(self) -> List[Payment]:
        return [payment.model_copy(deep=True) for payment in self._payments]

    @property
    def tenant_history(self) -> List[TenantHistory]:
        return [entry.model_copy(deep=True) for entry in self._history]

    @property
    def settings(self) -> Settings:
        return self._settings.model_copy(deep=True)

    def get_room(self, room_id: str) -> Optional[Room]:
        room = next((r for r in self._rooms if r.id == room_id), None)
        return room.model_copy(deep=True) if room else None

    def get_room_by_number(self, room_number: int) -> Optional[Room]:
        room = next((r for r in self._rooms if r.room_number == room_number), None)
        return room.model_copy(deep=True) if room else None

    def get_tenant(self, tenant_id: str) -> Optional[Tenant]:
        tenant = next((t for t in self._tenants if t.id == tenant_id), None)
        return tenant.model_copy(deep=True) if tenant else None

    def get_payment(self, payment_id: str) -> Optional[Payment]:
        payment = next((p for p in self._payments if p.id == payment_id), None)
        return payment.model_copy(deep=True) if payment else None

    def active_tenants(self) -> List[Tenant]:
        return [t.model_copy(deep=True) for t in self._tenants if t.is_active]

    def tenants_in_room(self, room_number: int) -> List[Tenant]:
        """由扁平集合查詢某房間的房客（不依賴內嵌副本）"""
        return [t.model_copy(deep=True) for t in self._tenants if t.room_number == room_number]

    def payments_for_tenant(self, tenant_id: str) -> List[Payment]:
        return [p.model_copy(deep=True) for p in self._payments if p.tenant_id == tenant_id]

    def find_tenant_for_user(self, user: Optional[User]) -> Optional[Tenant]:
        """房客入口：先比對 email，再比對房號"""
        if user is None:
            return None
        tenant = next((t for t in self._tenants if t.email == user.email), None)
        if tenant is None and user.room_number is not None:
            tenant = next((t for t in self._tenants if t.room_number == user.room_number), None)
        return tenant.model_copy(deep=True) if tenant else None

    def next_room_number(self) -> int:
        if not self._rooms:
            return ROOMS.NUMBER_OFFSET + 1
        return max(r.room_number for r in self._rooms) + 1

    # ==================== 租金 / 設定 ====================

    def get_rent(self, room_type: str, is_ac: bool) -> float:
        """依房型與冷氣查租金表（single / double 以外一律視為 triple）"""
        rates = self._settings.rent_rates
        if room_type == "single":
            return rates.single_ac if is_ac else rates.single_non_ac
        if room_type == "double":
            return rates.double_ac if is_ac else rates.double_non_ac
        return rates.triple_ac if is_ac else rates.triple_non_ac

    def update_settings(self, updates: Union[SettingsUpdate, Dict[str, Any]]) -> None:
        """淺層合併設定"""
        updates = coerce_payload(updates, SettingsUpdate)
        self._settings = merge_fields(self._settings, updates)
        self._save_settings()
        logger.info(f"⚙️ 設定已更新: {sorted(updates.model_fields_set)}")

    # ==================== 房間 ====================

    def initialize_rooms(self, count: int) -> None:
        """
        以 count 間全新空房取代整個房間集合

        不會處理既有房客與帳單，房客的 room_number 可能因此失去對應房間。
        """
        rent = self._settings.rent_rates.single_non_ac
        self._rooms = [
            Room(
                id=f"room_{i}",
                room_number=ROOMS.NUMBER_OFFSET + i,
                type="single",
                is_ac=False,
                rent=rent,
                is_occupied=False,
                tenants=[],
            )
            for i in range(1, count + 1)
        ]
        self._settings = self._settings.model_copy(update={"total_rooms": count})
        self._save_rooms()
        self._save_settings()
        logger.warning(f"⚠️ 房間已重新初始化為 {count} 間（房客 / 帳單未變動）")

    def add_room(self, room: Union[RoomCreate, Dict[str, Any]]) -> Room:
        room = coerce_payload(room, RoomCreate)
        new_room = Room(id=new_id("room"), **dict(room))
        self._rooms.append(new_room)
        self._save_rooms()
        logger.info(f"✅ 新增房間 #{new_room.room_number} ({new_room.type}, AC={new_room.is_ac})")
        return new_room.model_copy(deep=True)

    def update_room(self, room_id: str, updates: Union[RoomUpdate, Dict[str, Any]]) -> None:
        updates = coerce_payload(updates, RoomUpdate)
        index = next((i for i, r in enumerate(self._rooms) if r.id == room_id), None)
        if index is None:
            logger.warning(f"⚠️ 找不到房間 ID: {room_id}")
            return

        self._rooms[index] = merge_fields(self._rooms[index], updates)
        self._save_rooms()

    # ==================== 房客 ====================

    def add_tenant(self, tenant: Union[TenantCreate, Dict[str, Any]]) -> Tenant:
        """
        新增房客並放入對應房號的房間

        Args:
            tenant: 房客資料（room_number 決定所屬房間）

        Returns:
            建立的房客；找不到房間時只寫入扁平集合
        """
        tenant = coerce_payload(tenant, TenantCreate)
        new_tenant = Tenant(id=new_id("tenant"), **dict(tenant))
        self._tenants.append(new_tenant)

        matched = False
        for i, room in enumerate(self._rooms):
            if room.room_number == new_tenant.room_number:
                self._rooms[i] = room.model_copy(update={
                    "is_occupied": True,
                    "tenants": [*room.tenants, new_tenant.model_copy(deep=True)],
                })
                matched = True

        self._save_tenants()
        self._save_rooms()

        if matched:
            logger.info(f"✅ 新增房客 {new_tenant.name} → 房間 #{new_tenant.room_number}")
        else:
            logger.warning(f"⚠️ 房客 {new_tenant.name} 的房號 #{new_tenant.room_number} 不存在")
        return new_tenant.model_copy(deep=True)

    def update_tenant(self, tenant_id: str, updates: Union[TenantUpdate, Dict[str, Any]]) -> None:
        """只更新扁平集合，房間內嵌副本不變"""
        updates = coerce_payload(updates, TenantUpdate)
        index = next((i for i, t in enumerate(self._tenants) if t.id == tenant_id), None)
        if index is None:
            logger.warning(f"⚠️ 找不到房客 ID: {tenant_id}")
            return

        self._tenants[index] = merge_fields(self._tenants[index], updates)
        self._save_tenants()

    def remove_tenant(self, tenant_id: str) -> None:
        """
        移除房客（扁平集合 + 房間內嵌副本）

        房間的 is_occupied 設為「剩餘房客數 > 1」。
        """
        tenant = next((t for t in self._tenants if t.id == tenant_id), None)
        if tenant is None:
            logger.warning(f"⚠️ 找不到房客 ID: {tenant_id}")
            return

        self._tenants = [t for t in self._tenants if t.id != tenant_id]

        for i, room in enumerate(self._rooms):
            if room.room_number == tenant.room_number:
                remaining = [t for t in room.tenants if t.id != tenant_id]
                self._rooms[i] = room.model_copy(update={
                    "is_occupied": len(remaining) > 1,
                    "tenants": remaining,
                })

        self._save_tenants()
        self._save_rooms()
        logger.info(f"🚪 移除房客 {tenant.name} (房間 #{tenant.room_number})")

    # ==================== 帳單 ====================

    def add_payment(self, payment: Union[PaymentCreate, Dict[str, Any]]) -> Payment:
        payment = coerce_payload(payment, PaymentCreate)
        new_payment = Payment(id=new_id("payment"), **dict(payment))
        self._payments.append(new_payment)
        self._save_payments()
        logger.info(
            f"✅ 新增帳單 {new_payment.tenant_name} {new_payment.month} {new_payment.year}: "
            f"{new_payment.total_amount:,.0f}"
        )
        return new_payment.model_copy(deep=True)

    def update_payment(self, payment_id: str, updates: Union[PaymentUpdate, Dict[str, Any]]) -> None:
        updates = coerce_payload(updates, PaymentUpdate)
        index = next((i for i, p in enumerate(self._payments) if p.id == payment_id), None)
        if index is None:
            logger.warning(f"⚠️ 找不到帳單 ID: {payment_id}")
            return

        self._payments[index] = merge_fields(self._payments[index], updates)
        self._save_payments()

    def mark_payment_paid(self, payment_id: str, paid_date: Optional[datetime] = None) -> None:
        self.update_payment(
            payment_id,
            PaymentUpdate(status="paid", paid_date=paid_date or utc_now()),
        )

    def send_payment_reminder(self, payment_id: str) -> None:
        """只標記 reminder_sent，實際發送由外部訊息連結負責"""
        self.update_payment(payment_id, PaymentUpdate(reminder_sent=True))

    # ==================== 文件審核 ====================

    def verify_document(self, tenant_id: str, doc_id: str) -> None:
        index = next((i for i, t in enumerate(self._tenants) if t.id == tenant_id), None)
        if index is None:
            logger.warning(f"⚠️ 找不到房客 ID: {tenant_id}")
            return

        tenant = self._tenants[index]
        documents = [
            doc.model_copy(update={"verified": True}) if doc.id == doc_id else doc
            for doc in tenant.documents
        ]
        self._tenants[index] = tenant.model_copy(update={
            "documents": documents,
            "documents_verified": all(doc.verified for doc in documents),
        })
        self._save_tenants()

    def verify_all_documents(self, tenant_id: str) -> None:
        index = next((i for i, t in enumerate(self._tenants) if t.id == tenant_id), None)
        if index is None:
            logger.warning(f"⚠️ 找不到房客 ID: {tenant_id}")
            return

        tenant = self._tenants[index]
        self._tenants[index] = tenant.model_copy(update={
            "documents": [doc.model_copy(update={"verified": True}) for doc in tenant.documents],
            "documents_verified": True,
        })
        self._save_tenants()

    # ==================== 退租 ====================

    def move_tenant_to_history(self, tenant_id: str) -> Optional[TenantHistory]:
        """
        房客退租：建立歷史快照後移除

        Returns:
            歷史紀錄；找不到房客或房間時返回 None（不建立紀錄）
        """
        tenant = next((t for t in self._tenants if t.id == tenant_id), None)
        room = (
            next((r for r in self._rooms if r.room_number == tenant.room_number), None)
            if tenant else None
        )
        if tenant is None or room is None:
            logger.warning(f"⚠️ 無法退租，房客或房間不存在: {tenant_id}")
            return None

        total_paid = sum(
            p.total_amount for p in self._payments
            if p.tenant_id == tenant_id and p.status == "paid"
        )

        entry = TenantHistory(
            id=new_id("history"),
            tenant_name=tenant.name,
            room_number=tenant.room_number,
            room_type=room.type,
            is_ac=room.is_ac,
            join_date=tenant.join_date,
            leave_date=utc_now(),
            total_rent_paid=total_paid,
            facilities=[
                "AC" if room.is_ac else "Non-AC",
                ROOMS.BED_LABELS.get(room.type, ROOMS.BED_LABELS["single"]),
            ],
        )
        self._history.append(entry)
        self._save_history()

        self.remove_tenant(tenant_id)
        logger.info(f"📦 {tenant.name} 已移至歷史紀錄（累計繳納 {total_paid:,.0f}）")
        return entry.model_copy(deep=True)
