"""
共用 UI 元件
各頁面的標題、指標卡、空狀態、提示卡、狀態標籤
"""
import streamlit as st

STATUS_STYLES = {
    "paid": ("✅", "Paid", "green"),
    "pending": ("⏳", "Pending", "orange"),
    "verified": ("✅", "Verified", "green"),
    "unverified": ("⏳", "Pending", "orange"),
    "occupied": ("🔒", "Occupied", "blue"),
    "available": ("🔓", "Available", "green"),
}


def section_header(title, icon="", divider=True):
    st.markdown(f"### {icon} {title}".strip())
    if divider:
        st.divider()


def metric_card(label, value, delta="", icon="", color="normal"):
    """
    指標卡片

    Args:
        label: 標題
        value: 顯示值
        delta: 變化說明（可空）
        icon: 圖示
        color: normal / inverse / off
    """
    with st.container(border=True):
        st.metric(
            f"{icon} {label}".strip(),
            value,
            delta=delta or None,
            delta_color=color,
        )


def empty_state(msg, icon="📭", desc=""):
    st.info(f"{icon} {msg}")
    if desc:
        st.caption(desc)


def info_card(title, content, icon="", type="info"):
    text = f"**{icon} {title}**\n\n{content}".strip()
    if type == "success":
        st.success(text)
    elif type == "warning":
        st.warning(text)
    elif type == "error":
        st.error(text)
    else:
        st.info(text)


def status_badge(status: str) -> str:
    """回傳可放進 markdown 的彩色標籤"""
    icon, label, color = STATUS_STYLES.get(status, ("•", status.capitalize(), "gray"))
    return f":{color}[{icon} {label}]"
