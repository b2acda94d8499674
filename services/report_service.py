"""
報表服務 - v1.0
✅ 月營收 vs 應收（pandas）
✅ 入住率 / 房客 / 帳單摘要
✅ 儀表板與房客頁統計
"""

from typing import Dict, List, Optional, Sequence

import pandas as pd
from pydantic import BaseModel

from config.constants import BILLING
from schemas import Payment, Room, Tenant

PAYMENT_COLUMNS = [
    "id", "tenant_id", "tenant_name", "room_number", "month", "year",
    "units_used", "electricity_amount", "rent", "total_amount", "status",
    "paid_date", "reminder_sent",
]


def payments_frame(payments: Sequence[Payment]) -> pd.DataFrame:
    """帳單 → DataFrame（空列表也保留欄位）"""
    if not payments:
        return pd.DataFrame(columns=PAYMENT_COLUMNS)
    return pd.DataFrame([p.model_dump() for p in payments])[PAYMENT_COLUMNS]


def _paid_total(df: pd.DataFrame) -> float:
    if df.empty:
        return 0.0
    return float(df.loc[df["status"] == "paid", "total_amount"].sum())


def monthly_revenue(payments: Sequence[Payment], year: Optional[int] = None) -> pd.DataFrame:
    """
    各月實收與應收

    Args:
        payments: 帳單
        year: 只統計該年度（None = 全部年度合併）

    Returns:
        12 列 DataFrame，欄位 month（縮寫）/ revenue / expected
    """
    df = payments_frame(payments)
    months = BILLING.MONTHS

    if df.empty:
        expected = pd.Series(0.0, index=months)
        revenue = pd.Series(0.0, index=months)
    else:
        df = df[df["month"].isin(months)]
        if year is not None:
            df = df[df["year"] == year]
        expected = df.groupby("month")["total_amount"].sum().reindex(months, fill_value=0.0)
        revenue = (
            df[df["status"] == "paid"]
            .groupby("month")["total_amount"].sum()
            .reindex(months, fill_value=0.0)
        )

    return pd.DataFrame({
        "month": [m[:3] for m in months],
        "revenue": revenue.astype(float).to_numpy(),
        "expected": expected.astype(float).to_numpy(),
    })


def revenue_summary(payments: Sequence[Payment]) -> Dict[str, float]:
    df = payments_frame(payments)
    total_revenue = _paid_total(df)
    total_expected = float(df["total_amount"].sum()) if not df.empty else 0.0

    # 以 (年, 月) 計算有實收的月份數
    months_with_revenue = 0
    if not df.empty:
        paid = df[df["status"] == "paid"].groupby(["year", "month"])["total_amount"].sum()
        months_with_revenue = int((paid > 0).sum())

    return {
        "total_revenue": total_revenue,
        "total_expected": total_expected,
        "outstanding": total_expected - total_revenue,
        "collection_rate": (total_revenue / total_expected * 100) if total_expected else 0.0,
        "average_monthly_revenue": (total_revenue / months_with_revenue) if months_with_revenue else 0.0,
        "paid_count": int((df["status"] == "paid").sum()) if not df.empty else 0,
        "pending_count": int((df["status"] == "pending").sum()) if not df.empty else 0,
    }


def occupancy_summary(rooms: Sequence[Room]) -> Dict[str, float]:
    total = len(rooms)
    occupied = sum(1 for r in rooms if r.is_occupied)
    return {
        "total_rooms": total,
        "occupied": occupied,
        "available": total - occupied,
        "occupancy_rate": round(occupied / total * 100) if total else 0,
    }


def tenant_summary(tenants: Sequence[Tenant]) -> Dict[str, int]:
    return {
        "active": sum(1 for t in tenants if t.is_active),
        "verified": sum(1 for t in tenants if t.documents_verified),
        "pending_verification": sum(1 for t in tenants if t.is_active and not t.documents_verified),
    }


def dashboard_stats(
    rooms: Sequence[Room],
    tenants: Sequence[Tenant],
    payments: Sequence[Payment],
    month: str,
    year: int,
) -> Dict[str, float]:
    """管理員儀表板數字（指定月份的實收）"""
    occupancy = occupancy_summary(rooms)
    paid_this_month = [
        p for p in payments
        if p.status == "paid" and p.month == month and p.year == year
    ]
    return {
        **occupancy,
        "active_tenants": sum(1 for t in tenants if t.is_active),
        "monthly_revenue": sum(p.total_amount for p in paid_this_month),
        "monthly_electricity": sum(p.electricity_amount for p in paid_this_month),
        "expected_revenue": sum(r.rent for r in rooms if r.is_occupied),
        "pending_amount": sum(p.total_amount for p in payments if p.status == "pending"),
        "pending_count": sum(1 for p in payments if p.status == "pending"),
    }


def tenant_payment_summary(payments: Sequence[Payment]) -> Dict[str, float]:
    """房客頁：已繳 / 待繳 / 電費合計"""
    paid = [p for p in payments if p.status == "paid"]
    pending = [p for p in payments if p.status == "pending"]
    return {
        "total_paid": sum(p.total_amount for p in paid),
        "total_pending": sum(p.total_amount for p in pending),
        "total_electricity": sum(p.electricity_amount for p in payments),
        "paid_count": len(paid),
        "pending_count": len(pending),
    }


def history_total(entries: List) -> float:
    return sum(entry.total_rent_paid for entry in entries)


def payment_years(payments: Sequence[Payment]) -> List[int]:
    """帳單涵蓋的年度（新到舊）"""
    return sorted({p.year for p in payments}, reverse=True)


def yearly_revenue(payments: Sequence[Payment]) -> pd.DataFrame:
    """各年度實收（由舊到新）"""
    df = payments_frame(payments)
    if df.empty:
        return pd.DataFrame({"year": pd.Series(dtype=str), "revenue": pd.Series(dtype=float)})

    totals = df[df["status"] == "paid"].groupby("year")["total_amount"].sum()
    totals = totals.reindex(sorted(df["year"].unique()), fill_value=0.0)
    return pd.DataFrame({
        "year": [str(y) for y in totals.index],
        "revenue": totals.astype(float).to_numpy(),
    })


def records_frame(records: Sequence[BaseModel], exclude: Optional[set] = None) -> pd.DataFrame:
    """
    任意模型列表 → DataFrame（匯出 CSV 用）

    Args:
        records: pydantic 模型列表
        exclude: 不匯出的欄位（例如巢狀的 tenants / documents）
    """
    return pd.DataFrame([r.model_dump(mode="json", exclude=exclude) for r in records])


def to_csv(df: pd.DataFrame) -> str:
    return df.to_csv(index=False)
