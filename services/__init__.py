"""
Services Package
統一管理所有服務層邏輯
"""

from services.logger import logger
from services.storage import LocalStorage
from services.base_store import BaseStoreService
from services.data_store import DataStore
from services.auth_service import AuthService

__all__ = [
    'logger',
    'LocalStorage',
    'BaseStoreService',
    'DataStore',
    'AuthService',
]
