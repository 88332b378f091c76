"""
Physical tables built from the physical table configuration section.

Responsibilities
  - Hold the shared table parameters (name, grain, columns, column mapping).
  - Look up per-column availability from the metadata service.
  - Combine dimension availability strictly (all) or permissively (any).

Usage Context
  - Built by StrictPhysicalTableFactory and PermissivePhysicalTableFactory.
  - Queried by the serving layer to decide whether a request is satisfiable.

Limitations
  - A table with no dimension columns has empty default availability.
  - Metric columns only count when selected explicitly by name.
"""
# 说明：物理表实体及其可用性组合策略。
# 职责：
# - Column / DimensionColumn / MetricColumn：物理表列描述
# - ConfigPhysicalTable：共享构造参数、逻辑列名到物理列名的映射、逐列可用性查询
# - StrictPhysicalTable：所有维度列的可用区间取交集（逻辑 AND）
# - PermissivePhysicalTable：所有维度列的可用区间取并集（逻辑 OR）

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from luthier.core.utils.param_validation import ParamValidationError, ensure_name

from .availability import IntervalSet
from .dimension import Dimension
from .metadata import DataSourceMetadataService
from .time_grain import TimeGrain


@dataclass(frozen=True)
class Column:
    """Logical column of a physical table."""

    name: str


@dataclass(frozen=True)
class DimensionColumn(Column):
    dimension: Optional[Dimension] = None

    @classmethod
    def of(cls, dimension: Dimension) -> "DimensionColumn":
        return cls(name=dimension.api_name, dimension=dimension)


@dataclass(frozen=True)
class MetricColumn(Column):
    pass


class ConfigPhysicalTable(ABC):
    """Physical table whose availability is derived from its columns."""

    def __init__(
        self,
        name: str,
        time_grain: TimeGrain,
        columns: Iterable[Column],
        logical_to_physical_column_names: Mapping[str, str],
        metadata_service: DataSourceMetadataService,
    ) -> None:
        self.name = ensure_name(name, label="table name")
        self.time_grain = time_grain
        self.columns: Tuple[Column, ...] = tuple(columns)
        names = [c.name for c in self.columns]
        if len(set(names)) != len(names):
            raise ParamValidationError(f"duplicate column names in physical table '{name}'")
        self.logical_to_physical_column_names = MappingProxyType(dict(logical_to_physical_column_names))
        self.metadata_service = metadata_service

    @property
    def dimensions(self) -> Tuple[Dimension, ...]:
        return tuple(c.dimension for c in self.columns if isinstance(c, DimensionColumn) and c.dimension is not None)

    def get_column(self, name: str) -> Optional[Column]:
        for column in self.columns:
            if column.name == name:
                return column
        return None

    def get_physical_column_name(self, logical_name: str) -> str:
        return self.logical_to_physical_column_names.get(logical_name, logical_name)

    def get_column_availability(self, column: Column) -> IntervalSet:
        # 可用性按物理表名与物理列名登记在元数据服务中
        return self.metadata_service.get_availability(self.name, self.get_physical_column_name(column.name))

    def get_availability(self, column_names: Optional[Sequence[str]] = None) -> IntervalSet:
        """Combined availability of the dimension columns, or only of `column_names`."""
        if column_names is None:
            # 默认只看维度列，指标列需显式指定
            selected = [c for c in self.columns if isinstance(c, DimensionColumn)]
        else:
            selected = []
            for name in column_names:
                column = self.get_column(name)
                if column is None:
                    raise ParamValidationError(f"column '{name}' is not part of physical table '{self.name}'")
                selected.append(column)
        return self.combine([self.get_column_availability(c) for c in selected])

    def is_available(self, start: float, end: float, column_names: Optional[Sequence[str]] = None) -> bool:
        return self.get_availability(column_names).covers(start, end)

    @abstractmethod
    def combine(self, availabilities: Sequence[IntervalSet]) -> IntervalSet:
        """Merge per-column availability into table availability."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, grain={self.time_grain.value}, columns={len(self.columns)})"


class StrictPhysicalTable(ConfigPhysicalTable):
    """Available only where every dimension is available."""

    def combine(self, availabilities: Sequence[IntervalSet]) -> IntervalSet:
        return IntervalSet.intersect_all(availabilities)


class PermissivePhysicalTable(ConfigPhysicalTable):
    """Available wherever at least one dimension is available."""

    def combine(self, availabilities: Sequence[IntervalSet]) -> IntervalSet:
        return IntervalSet.union_all(availabilities)
