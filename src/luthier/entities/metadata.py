"""
Data source metadata service holding per-column availability.

Responsibilities:
    * store availability intervals keyed by physical table and physical column
    * answer availability queries for physical tables
"""
# 说明：数据源元数据服务，按“物理表名 → 物理列名 → 可用区间”的结构保存数据可用性。
# 职责：
# - update(...)：写入或替换某张表若干列的可用区间
# - get_availability(...)：查询单列可用性，未知表或列返回空集合
# - get_table_availability(...)：导出某张表全部列的可用性快照

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Tuple, Union

from luthier.core.utils.param_validation import ensure_name

from .availability import IntervalLike, IntervalSet

AvailabilityInput = Union[IntervalSet, Iterable[IntervalLike]]


class DataSourceMetadataService:
    """In-process store of column availability for physical tables."""

    def __init__(self) -> None:
        self._availability: Dict[str, Dict[str, IntervalSet]] = {}

    def update(self, table_name: str, columns: Mapping[str, AvailabilityInput]) -> None:
        """Replace the availability of the given columns of `table_name`."""
        # 对每列输入统一规范化为 IntervalSet；未出现在 columns 中的列保持原值
        ensure_name(table_name, label="table_name")
        table = self._availability.setdefault(table_name, {})
        for column, intervals in columns.items():
            table[ensure_name(column, label="column")] = IntervalSet(intervals)

    def get_availability(self, table_name: str, column_name: str) -> IntervalSet:
        return self._availability.get(table_name, {}).get(column_name, IntervalSet.empty())

    def get_table_availability(self, table_name: str) -> Dict[str, IntervalSet]:
        return dict(self._availability.get(table_name, {}))

    def tables(self) -> Tuple[str, ...]:
        return tuple(sorted(self._availability))

    def __contains__(self, table_name: object) -> bool:
        return table_name in self._availability
