"""JSON 文件文档存储

所有集合保存在同一个 JSON 文件中：

    {"version": 1, "articles": {id: record}, "authors": {...}, ...}

每次写入都先写临时文件，再用 os.replace 原子覆盖。
path 为 None 时只保存在内存中（用于测试）。
"""

from __future__ import annotations

import copy
import json
import os
import threading
from pathlib import Path
from typing import Any

from loguru import logger

from ....shared.exceptions import DataCorruptionError, StorageReadError, StorageWriteError

FORMAT_VERSION = 1
COLLECTIONS = ("articles", "authors", "categories", "comments")

Record = dict[str, Any]


class JsonDocumentStore:
    """线程安全的 JSON 文档存储"""

    def __init__(self, path: str | Path | None = None):
        self._path = Path(path) if path else None
        self._lock = threading.RLock()
        self._data: dict[str, dict[str, Record]] = {name: {} for name in COLLECTIONS}
        if self._path is not None:
            self._load()

    @property
    def path(self) -> Path | None:
        return self._path

    def get(self, collection: str, key: str) -> Record | None:
        with self._lock:
            record = self._collection(collection).get(key)
            return copy.deepcopy(record) if record is not None else None

    def values(self, collection: str) -> list[Record]:
        with self._lock:
            return copy.deepcopy(list(self._collection(collection).values()))

    def put(self, collection: str, key: str, record: Record) -> None:
        with self._lock:
            self._collection(collection)[key] = copy.deepcopy(record)
            self._persist()

    def delete(self, collection: str, key: str) -> bool:
        with self._lock:
            removed = self._collection(collection).pop(key, None) is not None
            if removed:
                self._persist()
            return removed

    def delete_where(self, collection: str, field: str, value: Any) -> int:
        """删除 field 等于 value 的全部记录，返回删除数量"""
        with self._lock:
            items = self._collection(collection)
            keys = [key for key, record in items.items() if record.get(field) == value]
            for key in keys:
                del items[key]
            if keys:
                self._persist()
            return len(keys)

    def stats(self) -> dict[str, int]:
        """各集合的记录数"""
        with self._lock:
            return {name: len(items) for name, items in self._data.items()}

    # ---------------- internal ----------------

    def _collection(self, name: str) -> dict[str, Record]:
        if name not in self._data:
            raise KeyError(f"未知集合: {name}")
        return self._data[name]

    def _load(self) -> None:
        assert self._path is not None
        if not self._path.exists():
            logger.debug(f"数据文件不存在，将在首次写入时创建: {self._path}")
            return

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise DataCorruptionError(f"数据文件不是有效的 JSON: {self._path}", cause=e) from e
        except OSError as e:
            raise StorageReadError(f"读取数据文件失败: {e}", cause=e) from e

        if not isinstance(raw, dict):
            raise DataCorruptionError(f"数据文件格式无效: {self._path}")

        for name in COLLECTIONS:
            items = raw.get(name, {})
            if not isinstance(items, dict):
                raise DataCorruptionError(f"数据文件中的 {name} 不是对象")
            self._data[name] = items

        logger.debug(f"已加载数据文件: {self._path} {self.stats()}")

    def _persist(self) -> None:
        if self._path is None:
            return

        payload = {"version": FORMAT_VERSION, **self._data}
        tmp_path = self._path.with_name(f".{self._path.name}.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageWriteError(f"写入数据文件失败: {e}", cause=e) from e
