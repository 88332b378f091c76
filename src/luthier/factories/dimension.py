"""Dimension factories."""
# 说明：维度工厂。KeyValueStoreDimensionFactory 在构建维度时通过 park 按名称解析键值存储与搜索提供者。
# 约定：
# - domain 缺省为维度名称；keyValueStore / searchProvider 缺省为 domain
# - fields 缺省为 ["id", "desc"]，keyField 缺省为第一个字段

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from luthier.core.factory import Factory
from luthier.entities import Dimension, KeyValueStoreDimension

from ._fields import get_field, get_string_list

if TYPE_CHECKING:
    from luthier.core.industrial_park import IndustrialPark


class KeyValueStoreDimensionFactory(Factory[Dimension]):
    """Builds KeyValueStoreDimension instances."""

    def build(self, name: str, config: Mapping[str, Any], park: "IndustrialPark") -> Dimension:
        domain = get_field(config, "domain", name, expected=(str,), entity=name)
        key_value_store = park.get_key_value_store(
            get_field(config, "keyValueStore", domain, expected=(str,), entity=name)
        )
        search_provider = park.get_search_provider(
            get_field(config, "searchProvider", domain, expected=(str,), entity=name)
        )
        return KeyValueStoreDimension(
            name,
            key_value_store,
            search_provider,
            description=get_field(config, "description", "", expected=(str,), entity=name),
            long_name=get_field(config, "longName", None, expected=(str,), entity=name),
            category=get_field(config, "category", "General", expected=(str,), entity=name),
            fields=get_string_list(config, "fields", ["id", "desc"], entity=name),
            key_field=get_field(config, "keyField", None, expected=(str,), entity=name),
            is_aggregatable=get_field(config, "isAggregatable", True, expected=(bool,), entity=name),
        )
