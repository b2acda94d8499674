"""
應用程式設定 (App Config)
統一從 os.environ / .env / st.secrets 讀取
"""

import os
from typing import Optional

from dotenv import load_dotenv
import streamlit as st

# 載入 .env（本機開發用）
load_dotenv()


def _read_secret(var: str) -> Optional[str]:
    """Read a value from Streamlit secrets (root level, then the [rentease] table)."""
    try:
        secrets = st.secrets
        if var in secrets:
            return secrets[var]
        section = secrets.get("rentease", {})
        return section.get(var)
    except FileNotFoundError:
        # no secrets.toml configured
        return None


def get_env(var: str, default: Optional[str] = None) -> Optional[str]:
    """統一從 os.environ、st.secrets root 和 st.secrets['rentease'] 讀環境變數。"""
    value = os.getenv(var)
    if value:
        return value

    value = _read_secret(var)
    if value:
        return str(value)

    return default


def get_bool_env(var: str, default: bool = False) -> bool:
    value = get_env(var)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


APP_CONFIG = {
    "title": get_env("APP_TITLE", "RentEase"),
    "version": get_env("APP_VERSION", "v1.0"),
    "environment": get_env("ENVIRONMENT", "production"),
    "log_level": get_env("LOG_LEVEL", "INFO"),
    "dev_mode": get_bool_env("DEV_MODE", False),
    "data_dir": get_env("RENTEASE_DATA_DIR", ".rentease"),
    "seed_demo_data": get_bool_env("SEED_DEMO_DATA", True),
}
