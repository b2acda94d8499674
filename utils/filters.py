"""
列表搜尋 / 篩選
各管理頁共用；搜尋字串不分大小寫
"""
from typing import List, Sequence

from schemas import Payment, Room, Tenant, TenantHistory


def _matches(text: str, query: str) -> bool:
    return query.strip().lower() in text.lower()


def filter_rooms(rooms: Sequence[Room], query: str = "", status: str = "all") -> List[Room]:
    """
    房間：房號子字串 + 狀態（all / available / occupied）
    """
    result = []
    for room in rooms:
        if query and query.strip() not in str(room.room_number):
            continue
        if status == "available" and room.is_occupied:
            continue
        if status == "occupied" and not room.is_occupied:
            continue
        result.append(room)
    return result


def filter_payments(payments: Sequence[Payment], query: str = "", status: str = "all") -> List[Payment]:
    """帳單：房客姓名 + 狀態（all / paid / pending）"""
    return [
        p for p in payments
        if (not query or _matches(p.tenant_name, query))
        and (status == "all" or p.status == status)
    ]


def filter_document_tenants(tenants: Sequence[Tenant], query: str = "", status: str = "all") -> List[Tenant]:
    """文件審核：只列在住房客，狀態 all / pending / verified"""
    result = []
    for tenant in tenants:
        if not tenant.is_active:
            continue
        if query and not _matches(tenant.name, query):
            continue
        if status == "verified" and not tenant.documents_verified:
            continue
        if status == "pending" and tenant.documents_verified:
            continue
        result.append(tenant)
    return result


def filter_history(entries: Sequence[TenantHistory], query: str = "") -> List[TenantHistory]:
    return [e for e in entries if not query or _matches(e.tenant_name, query)]
