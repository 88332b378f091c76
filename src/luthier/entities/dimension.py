"""Dimensions resolved from the dimension configuration section."""
# 说明：维度实体。维度持有键值存储与搜索提供者，两者均由 IndustrialPark 按名称解析并注入。
# 职责：
# - Dimension：维度的公共属性（api_name、描述、字段、键字段等）与行读写接口
# - KeyValueStoreDimension：行数据存放在 KeyValueStore 中，并在构造时把自身绑定到搜索提供者

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, Tuple

from luthier.core.utils.param_validation import ParamValidationError, ensure_name

from .key_value_store import KeyValueStore
from .search_provider import SearchProvider


class Dimension:
    """Common dimension attributes."""

    def __init__(
        self,
        api_name: str,
        *,
        description: str = "",
        long_name: Optional[str] = None,
        category: str = "General",
        fields: Sequence[str] = ("id", "desc"),
        key_field: Optional[str] = None,
        is_aggregatable: bool = True,
    ) -> None:
        self.api_name = ensure_name(api_name, label="api_name")
        self.description = description
        self.long_name = long_name or api_name
        self.category = category
        self.fields: Tuple[str, ...] = tuple(fields)
        if not self.fields:
            raise ParamValidationError(f"dimension '{api_name}' must declare at least one field")
        self.key_field = key_field or self.fields[0]
        if self.key_field not in self.fields:
            raise ParamValidationError(f"key field '{self.key_field}' is not a field of dimension '{api_name}'")
        self.is_aggregatable = bool(is_aggregatable)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_name={self.api_name!r})"


class KeyValueStoreDimension(Dimension):
    """Dimension whose rows live in a key-value store."""

    def __init__(
        self,
        api_name: str,
        key_value_store: KeyValueStore,
        search_provider: SearchProvider,
        **kwargs: Any,
    ) -> None:
        super().__init__(api_name, **kwargs)
        self.key_value_store = key_value_store
        self.search_provider = search_provider
        search_provider.bind(self)

    def add_dimension_row(self, row: Mapping[str, Any]) -> None:
        # 行必须包含键字段；未知字段直接拒绝
        unknown = set(row) - set(self.fields)
        if unknown:
            raise ParamValidationError(f"unknown field(s) {sorted(unknown)} for dimension '{self.api_name}'")
        if self.key_field not in row:
            raise ParamValidationError(f"row for dimension '{self.api_name}' is missing key '{self.key_field}'")
        self.key_value_store.put(str(row[self.key_field]), dict(row))

    def find_dimension_row(self, key: str) -> Optional[Mapping[str, Any]]:
        return self.key_value_store.get(key)

    def search(self, term: str) -> List[Mapping[str, Any]]:
        return self.search_provider.find_rows(term)
