"""Key-value stores backing dimension rows."""
# 说明：维度行数据的键值存储抽象与内存实现。
# 职责：
# - KeyValueStore：统一的 get / put / remove / keys 接口
# - MapStore：基于 dict 的进程内实现，可选用初始条目初始化

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple


class KeyValueStore(ABC):
    """Abstract key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the value stored under `key` or None."""

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """Store `value` under `key`, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete `key` if present."""

    @abstractmethod
    def keys(self) -> Tuple[str, ...]:
        """Return every stored key."""

    def put_all(self, entries: Mapping[str, Any]) -> None:
        for key, value in entries.items():
            self.put(key, value)

    def items(self) -> Iterator[Tuple[str, Any]]:
        for key in self.keys():
            yield key, self.get(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __len__(self) -> int:
        return len(self.keys())


class MapStore(KeyValueStore):
    """Dictionary-backed key-value store."""

    def __init__(self, name: str, initial: Optional[Mapping[str, Any]] = None) -> None:
        self.name = name
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def put(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._data)

    def __repr__(self) -> str:
        return f"MapStore(name={self.name!r}, size={len(self._data)})"
