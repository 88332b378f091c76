"""
Search providers answering dimension value lookups.

Responsibilities
  - Define the SearchProvider contract used by dimensions.
  - Provide a no-op provider that echoes requested keys.
  - Provide a scanning provider that filters rows held in a key-value store.

Limitations
  - No indexed backend ships in-process; indexed search is an unsupported backend.
"""
# 说明：维度取值搜索提供者。
# 职责：
# - SearchProvider：绑定维度后对外提供 find_rows / find_all_rows 查询接口
# - NoOpSearchProvider：不做任何校验，直接按请求的键构造行
# - ScanSearchProvider：遍历维度键值存储中的全部行，按子串匹配过滤，并受 query_weight_limit 限制

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from luthier.core.utils.param_validation import ParamValidationError

if TYPE_CHECKING:
    from .dimension import Dimension

Row = Mapping[str, Any]


class SearchProvider(ABC):
    """Base class for dimension search providers."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        self._dimension: Optional["Dimension"] = None

    def bind(self, dimension: "Dimension") -> None:
        # 维度构造时回调绑定；同一 domain 的提供者可被多个维度共享，以最后一次绑定为准
        self._dimension = dimension

    @property
    def dimension(self) -> Optional["Dimension"]:
        return self._dimension

    @abstractmethod
    def find_rows(self, term: str) -> List[Row]:
        """Return the rows matching `term`."""

    def find_all_rows(self) -> List[Row]:
        return []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(domain={self.domain!r})"


class NoOpSearchProvider(SearchProvider):
    """Provider that fabricates a row for any requested key."""

    def find_rows(self, term: str) -> List[Row]:
        key_field = self._dimension.key_field if self._dimension is not None else "id"
        return [{key_field: term}]


class ScanSearchProvider(SearchProvider):
    """Provider that scans every row of the bound dimension's key-value store."""

    def __init__(self, domain: str, query_weight_limit: int = 100000) -> None:
        super().__init__(domain)
        if query_weight_limit <= 0:
            raise ParamValidationError("query_weight_limit must be > 0")
        self.query_weight_limit = int(query_weight_limit)

    def _rows(self) -> List[Dict[str, Any]]:
        if self._dimension is None:
            return []
        store = self._dimension.key_value_store
        if len(store) > self.query_weight_limit:
            raise ParamValidationError(
                f"scan over '{self.domain}' exceeds query weight limit {self.query_weight_limit}"
            )
        return [dict(value) for _, value in store.items() if isinstance(value, Mapping)]

    def find_rows(self, term: str) -> List[Row]:
        # 对任一字段做大小写不敏感的子串匹配
        needle = term.lower()
        return [row for row in self._rows() if any(needle in str(v).lower() for v in row.values())]

    def find_all_rows(self) -> List[Row]:
        return self._rows()
