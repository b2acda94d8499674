"""
基礎儲存服務 - v1.0
✅ Typed collection / record 讀寫（pydantic）
✅ 整筆覆寫，不做增量寫入
✅ 統一的錯誤記錄：失敗時記錄後拋出
"""

import copy
import json
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from services.logger import logger, log_storage_operation
from services.storage import LocalStorage

ModelT = TypeVar("ModelT", bound=BaseModel)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id(prefix: str) -> str:
    """產生 `<prefix>_<hex>` 格式的 ID"""
    return f"{prefix}_{uuid.uuid4().hex}"


def merge_fields(record: ModelT, updates: BaseModel) -> ModelT:
    """
    將 update payload 中「有明確設定」的欄位合併進 record

    Args:
        record: 原始資料
        updates: 全部欄位可選的 update 模型

    Returns:
        合併後的新物件（原物件不變，也不與 updates 共用巢狀物件）
    """
    changes = {name: copy.deepcopy(getattr(updates, name)) for name in updates.model_fields_set}
    return record.model_copy(update=changes)


def coerce_payload(payload: Union[BaseModel, Dict[str, Any]], model: Type[ModelT]) -> ModelT:
    """dict → pydantic 模型；一律返回深拷貝，呼叫端之後修改 payload 不影響結果"""
    if isinstance(payload, model):
        return payload.model_copy(deep=True)
    if isinstance(payload, BaseModel):
        return model.model_validate(payload.model_dump(exclude_unset=True))
    return model.model_validate(payload).model_copy(deep=True)


class BaseStoreService:
    """基礎儲存服務 - 所有 store 的父類"""

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    # ==================== Collections ====================

    def read_collection(self, key: str, model: Type[ModelT]) -> Optional[List[ModelT]]:
        """
        讀取整個 collection

        Args:
            key: storage key
            model: 元素的 pydantic 模型

        Returns:
            模型列表；key 不存在時返回 None
        """
        raw = self.storage.get_item(key)
        if raw is None:
            return None

        try:
            items = TypeAdapter(List[model]).validate_json(raw)
        except ValidationError as e:
            log_storage_operation("READ", key, False, error=str(e))
            logger.error(f"❌ 無法解析 {key}: {e.error_count()} 個錯誤")
            raise

        log_storage_operation("READ", key, True, len(items))
        return items

    def write_collection(self, key: str, items: Sequence[BaseModel]) -> None:
        """整筆覆寫 collection"""
        payload = json.dumps(
            [item.model_dump(mode="json") for item in items],
            ensure_ascii=False,
        )
        try:
            self.storage.set_item(key, payload)
        except OSError as e:
            log_storage_operation("WRITE", key, False, error=str(e))
            raise

        log_storage_operation("WRITE", key, True, len(items))

    # ==================== Single records ====================

    def read_record(self, key: str, model: Type[ModelT]) -> Optional[ModelT]:
        raw = self.storage.get_item(key)
        if raw is None:
            return None

        try:
            record = model.model_validate_json(raw)
        except ValidationError as e:
            log_storage_operation("READ", key, False, error=str(e))
            logger.error(f"❌ 無法解析 {key}: {e.error_count()} 個錯誤")
            raise

        log_storage_operation("READ", key, True, 1)
        return record

    def write_record(self, key: str, record: BaseModel) -> None:
        try:
            self.storage.set_item(key, record.model_dump_json())
        except OSError as e:
            log_storage_operation("WRITE", key, False, error=str(e))
            raise

        log_storage_operation("WRITE", key, True, 1)

    def remove_record(self, key: str) -> None:
        self.storage.remove_item(key)
        log_storage_operation("DELETE", key, True)
