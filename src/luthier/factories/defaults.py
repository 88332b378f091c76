"""
Built-in factory maps seeded into every IndustrialPark builder.

Aliases are plain extra keys pointing at the same factory instance.
"""
# 说明：构建器的默认工厂注册表。每个概念类型返回一份新的“判别字段取值 → 工厂”映射，别名指向同一工厂实例。
# 职责：
# - default_*_factories：按概念类型给出内置工厂及其别名
# - default_factories：聚合全部概念类型（指标构造器为空映射）

from __future__ import annotations

from typing import Dict

from luthier.core.concepts import ConceptType
from luthier.core.factory import Factory, UnsupportedFactory

from .dimension import KeyValueStoreDimensionFactory
from .key_value_store import MapKeyValueStoreFactory
from .physical_table import PermissivePhysicalTableFactory, StrictPhysicalTableFactory
from .search_provider import NoOpSearchProviderFactory, ScanSearchProviderFactory

FactoryMap = Dict[str, Factory]


def _aliased(*groups: tuple) -> FactoryMap:
    # groups: (factory, alias1, alias2, ...)，保持声明顺序
    factories: FactoryMap = {}
    for factory, *aliases in groups:
        for alias in aliases:
            factories[alias] = factory
    return factories


def default_dimension_factories() -> FactoryMap:
    return _aliased((KeyValueStoreDimensionFactory(), "KeyValueStoreDimension", "keyValueStoreDimension"))


def default_search_provider_factories() -> FactoryMap:
    # 进程内不提供索引型搜索后端，lucene 别名映射到“不支持”工厂
    return _aliased(
        (UnsupportedFactory(ConceptType.SEARCH_PROVIDER, "lucene"), "lucene", "LuceneSearchProvider"),
        (NoOpSearchProviderFactory(), "noOp", "NoOpSearchProvider"),
        (ScanSearchProviderFactory(), "memory", "scan", "ScanSearchProvider"),
    )


def default_key_value_store_factories() -> FactoryMap:
    # 远程 redis 后端在本部署中被刻意禁用
    return _aliased(
        (MapKeyValueStoreFactory(), "memory", "map", "mapStore", "MapStore"),
        (UnsupportedFactory(ConceptType.KEY_VALUE_STORE, "redis"), "redis", "redisStore", "RedisStore"),
    )


def default_physical_table_factories() -> FactoryMap:
    return _aliased(
        (StrictPhysicalTableFactory(), "strictPhysicalTable", "strict"),
        (PermissivePhysicalTableFactory(), "permissivePhysicalTable", "permissive"),
    )


def default_factories() -> Dict[ConceptType, FactoryMap]:
    """Fresh default factory maps for every concept type."""
    return {
        ConceptType.DIMENSION: default_dimension_factories(),
        ConceptType.SEARCH_PROVIDER: default_search_provider_factories(),
        ConceptType.KEY_VALUE_STORE: default_key_value_store_factories(),
        ConceptType.METRIC_MAKER: {},
        ConceptType.PHYSICAL_TABLE: default_physical_table_factories(),
    }
