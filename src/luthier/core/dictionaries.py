"""
Resource dictionaries: per-concept memoisation of built entities.

Responsibilities:
    * hold one name -> entity dictionary per concept type
    * provide an atomic get-or-build so each (concept, name) is built at most once
    * expose read-only views to the serving layer
"""
# 说明：资源字典，按概念类型保存“实体名 → 已构建实体”的缓存，并保证同一键只构建一次。
# 职责：
# - get_or_build：双重检查 + 按键加锁，保证并发请求同一未构建实体时只执行一次工厂调用；键锁在无人使用后回收
# - register：显式登记实体，已存在的名称绝不替换
# - *_dictionary 属性：向服务层暴露只读视图（维度、指标、逻辑表、物理表等）
# 约定：
# - 构建失败时不写入任何内容，异常原样抛出
# - 指标字典与逻辑表字典由服务层填充，本模块只负责暴露

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, TypeVar

from .concepts import ConceptType, normalize_concept
from .exceptions import LuthierError
from .utils.param_validation import ensure_name

T = TypeVar("T")

Key = Tuple[ConceptType, str]


class ResourceDictionaries:
    """Per-concept caches of built configuration entities."""

    def __init__(self) -> None:
        self._entities: Dict[ConceptType, Dict[str, Any]] = {concept: {} for concept in ConceptType}
        self._metrics: Dict[str, Any] = {}
        self._logical_tables: Dict[str, Any] = {}
        self._lock = threading.Lock()
        # 键 → [可重入锁, 当前使用者数]
        self._key_locks: Dict[Key, List[Any]] = {}

    # ------------------------------------------------------------------ lookup
    def get(self, concept: ConceptType, name: str) -> Optional[Any]:
        return self._entities[normalize_concept(concept)].get(name)

    def contains(self, concept: ConceptType, name: str) -> bool:
        return name in self._entities[normalize_concept(concept)]

    def names(self, concept: ConceptType) -> Tuple[str, ...]:
        return tuple(self._entities[normalize_concept(concept)])

    # ------------------------------------------------------------------ insert
    def get_or_build(self, concept: ConceptType, name: str, builder: Callable[[], T]) -> T:
        """Return the entity stored under (concept, name), building it once if absent."""
        concept = normalize_concept(concept)
        store = self._entities[concept]
        # 快路径：已构建则直接返回，不获取任何锁
        if name in store:
            return store[name]

        # 慢路径：先在全局锁下取得该键专属的可重入锁并登记使用者，再在键锁内二次检查
        key = (concept, name)
        with self._lock:
            entry = self._key_locks.get(key)
            if entry is None:
                entry = self._key_locks[key] = [threading.RLock(), 0]
            entry[1] += 1
        try:
            with entry[0]:
                if name in store:
                    return store[name]
                entity = builder()
                store[name] = entity
                return entity
        finally:
            # 最后一个使用者离开时回收键锁，无论构建成功与否
            with self._lock:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._key_locks[key]

    def register(self, concept: ConceptType, name: str, entity: Any) -> Any:
        """Store `entity` under `name`; an existing entry is never replaced."""
        concept = normalize_concept(concept)
        ensure_name(name)
        with self._lock:
            store = self._entities[concept]
            if name in store and store[name] is not entity:
                raise LuthierError(f"{concept.value} '{name}' is already registered")
            store[name] = entity
        return entity

    def add_metric(self, name: str, metric: Any) -> None:
        _add_once(self._metrics, ensure_name(name), metric, "metric")

    def add_logical_table(self, name: str, table: Any) -> None:
        _add_once(self._logical_tables, ensure_name(name), table, "logical table")

    # ------------------------------------------------------------------ views
    def view(self, concept: ConceptType) -> Mapping[str, Any]:
        return MappingProxyType(self._entities[normalize_concept(concept)])

    @property
    def dimension_dictionary(self) -> Mapping[str, Any]:
        return self.view(ConceptType.DIMENSION)

    @property
    def search_provider_dictionary(self) -> Mapping[str, Any]:
        return self.view(ConceptType.SEARCH_PROVIDER)

    @property
    def key_value_store_dictionary(self) -> Mapping[str, Any]:
        return self.view(ConceptType.KEY_VALUE_STORE)

    @property
    def metric_maker_dictionary(self) -> Mapping[str, Any]:
        return self.view(ConceptType.METRIC_MAKER)

    @property
    def physical_table_dictionary(self) -> Mapping[str, Any]:
        return self.view(ConceptType.PHYSICAL_TABLE)

    @property
    def metric_dictionary(self) -> Mapping[str, Any]:
        return MappingProxyType(self._metrics)

    @property
    def logical_table_dictionary(self) -> Mapping[str, Any]:
        return MappingProxyType(self._logical_tables)

    def snapshot(self) -> Dict[str, list]:
        """Sorted names of every built entity, keyed by concept value."""
        data = {concept.value: sorted(store) for concept, store in self._entities.items()}
        data["metric"] = sorted(self._metrics)
        data["logicalTable"] = sorted(self._logical_tables)
        return data


def _add_once(store: Dict[str, Any], name: str, value: Any, label: str) -> None:
    if name in store and store[name] is not value:
        raise LuthierError(f"{label} '{name}' is already registered")
    store[name] = value
