"""
Concept types: the closed set of buildable configuration categories.

The module centralises:
- The supported concept identifiers (dimension, search provider, ...).
- The configuration section each concept is read from.
- The Python type each concept's factories must produce.
"""
# 说明：可构建配置实体的概念类型注册表，集中维护概念标识、配置段名称与目标类型之间的映射。
# 职责：
# - ConceptType：统一表示维度、搜索提供者、键值存储、指标构造器、物理表五类概念，并支持字符串构造
# - CONCEPT_RESOURCE_NAMES：声明每类概念读取的配置段名称
# - CONCEPT_TARGET_TYPES：声明每类概念的工厂必须产出的实体类型
# - normalize_concept / concepts_snapshot：供构建器与外部工具进行规范化与查询

from __future__ import annotations

import enum
from typing import Dict, Type, Union

from luthier.core.utils.param_validation import ParamValidationError
from luthier.entities.dimension import Dimension
from luthier.entities.key_value_store import KeyValueStore
from luthier.entities.metric_maker import MetricMaker
from luthier.entities.physical_table import ConfigPhysicalTable
from luthier.entities.search_provider import SearchProvider


class ConceptType(enum.Enum):
    """Supported configuration concepts."""
    # 枚举 value 与配置中常用的驼峰写法保持一致

    DIMENSION = "dimension"
    SEARCH_PROVIDER = "searchProvider"
    KEY_VALUE_STORE = "keyValueStore"
    METRIC_MAKER = "metricMaker"
    PHYSICAL_TABLE = "physicalTable"

    @property
    def resource_name(self) -> str:
        """Name of the configuration section this concept is read from."""
        return CONCEPT_RESOURCE_NAMES[self]

    @property
    def target_type(self) -> Type:
        """Type every entity of this concept must be an instance of."""
        return CONCEPT_TARGET_TYPES[self]

    @classmethod
    def from_str(cls, name: str) -> "ConceptType":
        # 接受 value（dimension）、成员名（DIMENSION / dimension）或配置段名（DimensionConfig），大小写不敏感
        normalized = str(name).strip().replace("-", "_").lower()
        for concept in cls:
            candidates = {
                concept.value.lower(),
                concept.name.lower(),
                concept.resource_name.lower(),
            }
            if normalized in candidates or normalized.replace("_", "") in candidates:
                return concept
        raise ParamValidationError(f"unknown concept type '{name}'")


# 每类概念对应的配置段名称
CONCEPT_RESOURCE_NAMES: Dict[ConceptType, str] = {
    ConceptType.DIMENSION: "DimensionConfig",
    ConceptType.SEARCH_PROVIDER: "SearchProviderConfig",
    ConceptType.KEY_VALUE_STORE: "KeyValueStoreConfig",
    ConceptType.METRIC_MAKER: "MetricMakerConfig",
    ConceptType.PHYSICAL_TABLE: "PhysicalTableConfig",
}

# 每类概念的工厂产出必须满足的实体类型
CONCEPT_TARGET_TYPES: Dict[ConceptType, Type] = {
    ConceptType.DIMENSION: Dimension,
    ConceptType.SEARCH_PROVIDER: SearchProvider,
    ConceptType.KEY_VALUE_STORE: KeyValueStore,
    ConceptType.METRIC_MAKER: MetricMaker,
    ConceptType.PHYSICAL_TABLE: ConfigPhysicalTable,
}


def normalize_concept(concept: Union[str, ConceptType]) -> ConceptType:
    """Coerce string or enum to ConceptType, raising on unknown identifiers."""
    if isinstance(concept, ConceptType):
        return concept
    return ConceptType.from_str(concept)


def concepts_snapshot() -> Dict[str, Dict[str, str]]:
    """Snapshot of concept sections and target types for tooling or docs."""
    return {
        concept.value: {"section": concept.resource_name, "target": concept.target_type.__name__}
        for concept in ConceptType
    }
