"""
Physical table factories: strict and permissive variants.

Responsibilities
  - Extract the shared table parameters from a configuration node.
  - Resolve every referenced dimension through the park.
  - Instantiate the variant selected by the factory.

Usage Context
  - Registered under "strict"/"strictPhysicalTable" and
    "permissive"/"permissivePhysicalTable" by default.

Limitations
  - Only single data source tables are supported.
"""
# 说明：物理表工厂。严格与宽松两种变体共享同一套参数解析逻辑，只在实例化的表类型上不同。
# 职责：
# - PhysicalTableParams：解析后的表参数（表名、时间粒度、列、逻辑到物理列名映射、元数据服务）
# - SingleDataSourcePhysicalTableFactory.build_params：解析配置并递归解析维度依赖
# - StrictPhysicalTableFactory / PermissivePhysicalTableFactory：选择 StrictPhysicalTable / PermissivePhysicalTable
# 约定：
# - tableName 缺省为实体名称；granularity 缺省为 day

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Mapping, Tuple, Type

from luthier.core.factory import Factory
from luthier.core.utils.param_validation import ParamValidationError
from luthier.entities import (
    Column,
    ConfigPhysicalTable,
    DataSourceMetadataService,
    DimensionColumn,
    MetricColumn,
    PermissivePhysicalTable,
    StrictPhysicalTable,
    TimeGrain,
)

from ._fields import get_field, get_string_list

if TYPE_CHECKING:
    from luthier.core.industrial_park import IndustrialPark


@dataclass(frozen=True)
class PhysicalTableParams:
    """Constructor parameters shared by every physical table variant."""

    table_name: str
    time_grain: TimeGrain
    columns: Tuple[Column, ...]
    logical_to_physical_column_names: Dict[str, str]
    metadata_service: DataSourceMetadataService


class SingleDataSourcePhysicalTableFactory(Factory[ConfigPhysicalTable]):
    """Base factory for tables backed by a single data source."""

    table_class: Type[ConfigPhysicalTable] = StrictPhysicalTable

    def build_params(self, name: str, config: Mapping[str, Any], park: "IndustrialPark") -> PhysicalTableParams:
        # 维度列通过 park.get_dimension 解析，尚未构建的维度会在此处被递归构建
        grain = TimeGrain.from_str(get_field(config, "granularity", "day", expected=(str,), entity=name))
        mapping = get_field(config, "logicalToPhysicalColumnNames", {}, expected=(Mapping,), entity=name)
        if not all(isinstance(k, str) and isinstance(v, str) for k, v in mapping.items()):
            raise ParamValidationError(f"'{name}' logicalToPhysicalColumnNames must map strings to strings")

        columns = [DimensionColumn.of(park.get_dimension(dim)) for dim in get_string_list(
            config, "dimensions", [], entity=name)]
        columns.extend(MetricColumn(metric) for metric in get_string_list(config, "metrics", [], entity=name))

        return PhysicalTableParams(
            table_name=get_field(config, "tableName", name, expected=(str,), entity=name),
            time_grain=grain,
            columns=tuple(columns),
            logical_to_physical_column_names=dict(mapping),
            metadata_service=park.get_metadata_service(),
        )

    def build(self, name: str, config: Mapping[str, Any], park: "IndustrialPark") -> ConfigPhysicalTable:
        params = self.build_params(name, config, park)
        return self.table_class(
            params.table_name,
            params.time_grain,
            params.columns,
            params.logical_to_physical_column_names,
            params.metadata_service,
        )


class StrictPhysicalTableFactory(SingleDataSourcePhysicalTableFactory):
    """
    Builds StrictPhysicalTable instances.

    A table is "strict" when a query is satisfiable for an interval only if every
    column's availability covers it, in contrast to the permissive table where one
    column's availability is enough.
    """

    table_class = StrictPhysicalTable


class PermissivePhysicalTableFactory(SingleDataSourcePhysicalTableFactory):
    """Builds PermissivePhysicalTable instances."""

    table_class = PermissivePhysicalTable
