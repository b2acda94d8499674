"""
Local storage - v1.0
✅ Key → JSON text, one file per key
✅ Whole-value replacement on every write
✅ No locking: concurrent writers are last-writer-wins
"""

import os
from pathlib import Path
from typing import List, Optional, Union

from services.logger import logger


class LocalStorage:
    """Directory-backed key/value store mirroring the browser localStorage API"""

    SUFFIX = ".json"

    def __init__(self, data_dir: Union[str, os.PathLike]):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"LocalStorage ready at {self.data_dir}")

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.data_dir / f"{key}{self.SUFFIX}"

    def get_item(self, key: str) -> Optional[str]:
        """
        讀取 key 的內容

        Returns:
            JSON 字串，key 不存在時返回 None
        """
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        """整筆覆寫 key 的內容"""
        self._path(key).write_text(value, encoding="utf-8")

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()

    def keys(self) -> List[str]:
        return sorted(p.stem for p in self.data_dir.glob(f"*{self.SUFFIX}"))

    def clear(self) -> None:
        for key in self.keys():
            self.remove_item(key)
        logger.info(f"🧹 LocalStorage cleared: {self.data_dir}")
