"""
IndustrialPark: lazy, memoised resolution of configuration entities.

Responsibilities
  - Hold one FactoryPark per concept type and one set of resource dictionaries.
  - Provide get-or-build accessors so each (concept, name) is built at most once.
  - Let factories resolve their dependencies recursively through the park.
  - Detect dependency cycles instead of recursing without bound.
  - Eagerly load every declared dimension and physical table.

Usage Context
  - Assembled with IndustrialPark.Builder, then used as a ConfigurationLoader.

Limitations
  - Metric resolution is not supported yet; get_metric always returns None.
  - Cycles spanning several threads are not detected; bootstrap is expected to be
    single threaded or to request disjoint dependency graphs.
"""
# 说明：配置实体的依赖注入容器（“工业园区”），按名称惰性构建并缓存各概念类型的实体。
# 职责：
# - get_dimension / get_search_provider / get_key_value_store / get_metric_maker / get_physical_table：
#   先查资源字典，未命中时交给对应 FactoryPark 构建并写入字典
# - 工厂通过 park 反向引用按名称递归解析依赖；同一线程内的解析链用于检测循环依赖
# - load：批量构建配置中声明的全部维度与物理表，其余概念按需构建
# - Builder：默认工厂 + 调用方覆盖/追加，build() 时校验完整性并冻结注册表
# 约定：
# - 任一实体构建失败即向调用方抛出，不做重试，也不写入字典

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from luthier.entities import (
    ConfigPhysicalTable,
    DataSourceMetadataService,
    Dimension,
    KeyValueStore,
    MetricMaker,
    SearchProvider,
)
from luthier.factories.defaults import default_factories

from .concepts import ConceptType, normalize_concept
from .dictionaries import ResourceDictionaries
from .exceptions import (
    BuilderError,
    CyclicDependencyError,
    EntityTypeError,
    IncompleteRegistrationError,
    RegistrationError,
)
from .factory import Factory
from .factory_park import FactoryPark
from .loader import ConfigurationLoader
from .resources import ConfigSource, ResourceNodeSupplier, config_source_from
from .utils.config import get_config
from .utils.logging import get_logger
from .utils.param_validation import ensure_mapping, ensure_name, ensure_type
from .utils.serialization import serialize_to_json

logger = get_logger(__name__)

ConceptLike = Union[str, ConceptType]
ConfigLike = Union[None, ConfigSource, Mapping[str, Any], str, Any]


class IndustrialPark(ConfigurationLoader):
    """Dependency injection container for configuration entities."""

    def __init__(
        self,
        resource_dictionaries: ResourceDictionaries,
        concept_factories: Mapping[ConceptType, Mapping[str, Factory]],
        *,
        config_source: Optional[ConfigSource] = None,
        metadata_service: Optional[DataSourceMetadataService] = None,
    ) -> None:
        runtime = get_config()
        self._dictionaries = resource_dictionaries
        self._config_source = config_source if config_source is not None else config_source_from(None)
        self._metadata_service = metadata_service or DataSourceMetadataService()
        self._detect_cycles = runtime.detect_cycles
        self._strict_validation = runtime.strict_validation
        self._resolution = threading.local()
        self._factory_parks: Dict[ConceptType, FactoryPark] = {
            concept: FactoryPark(
                concept,
                ResourceNodeSupplier(self._config_source, concept.resource_name),
                concept_factories[concept],
                discriminator_field=runtime.discriminator_field,
            )
            for concept in ConceptType
        }

    # ------------------------------------------------------------------ resolution
    def _chain(self) -> List[Tuple[ConceptType, str]]:
        # 每个线程独立维护“正在构建”的键链
        chain = getattr(self._resolution, "chain", None)
        if chain is None:
            chain = self._resolution.chain = []
        return chain

    def _build(self, concept: ConceptType, name: str) -> Any:
        key = (concept, name)
        chain = self._chain()
        if self._detect_cycles and key in chain:
            raise CyclicDependencyError(chain[chain.index(key):] + [key])
        chain.append(key)
        try:
            entity = self._factory_parks[concept].build_entity(name, self)
        finally:
            chain.pop()
        if self._strict_validation and not isinstance(entity, concept.target_type):
            raise EntityTypeError(
                f"{concept.value} '{name}' factory produced {type(entity).__name__}, "
                f"expected {concept.target_type.__name__}"
            )
        logger.debug("built %s '%s' -> %r", concept.value, name, entity)
        return entity

    def get(self, concept: ConceptLike, name: str) -> Any:
        """Retrieve or build the entity of `concept` named `name`."""
        concept = normalize_concept(concept)
        ensure_name(name)
        if self._dictionaries.contains(concept, name):
            logger.debug("cache hit for %s '%s'", concept.value, name)
        return self._dictionaries.get_or_build(concept, name, lambda: self._build(concept, name))

    def get_dimension(self, dimension_name: str) -> Dimension:
        """Retrieve or build a dimension."""
        return self.get(ConceptType.DIMENSION, dimension_name)

    def get_search_provider(self, domain: str) -> SearchProvider:
        """
        Retrieve or build a search provider.

        `domain` is usually the dimension name unless several dimensions share
        one provider.
        """
        return self.get(ConceptType.SEARCH_PROVIDER, domain)

    def get_key_value_store(self, domain: str) -> KeyValueStore:
        """Retrieve or build a key-value store; unsupported backends raise UnsupportedConceptError."""
        return self.get(ConceptType.KEY_VALUE_STORE, domain)

    def get_metric_maker(self, metric_maker_name: str) -> MetricMaker:
        return self.get(ConceptType.METRIC_MAKER, metric_maker_name)

    def get_physical_table(self, table_name: str) -> ConfigPhysicalTable:
        return self.get(ConceptType.PHYSICAL_TABLE, table_name)

    def get_metric(self, metric_name: str) -> None:
        # TODO: resolve logical metrics once metric makers have built-in factories
        logger.debug("metric resolution is not supported yet; '%s' not resolved", metric_name)
        return None

    def get_metadata_service(self) -> DataSourceMetadataService:
        return self._metadata_service

    def get_factory_park(self, concept: ConceptLike) -> FactoryPark:
        return self._factory_parks[normalize_concept(concept)]

    # ------------------------------------------------------------------ loader
    def load(self) -> None:
        """Build every declared dimension, then every declared physical table."""
        for concept in (ConceptType.DIMENSION, ConceptType.PHYSICAL_TABLE):
            for name in self._factory_parks[concept].names():
                try:
                    self.get(concept, name)
                except Exception:
                    logger.error("failed to load %s '%s'", concept.value, name)
                    raise
        logger.info(
            "loaded %d dimensions and %d physical tables",
            len(self._dictionaries.names(ConceptType.DIMENSION)),
            len(self._dictionaries.names(ConceptType.PHYSICAL_TABLE)),
        )

    def get_dimension_dictionary(self) -> Mapping[str, Dimension]:
        return self._dictionaries.dimension_dictionary

    def get_metric_dictionary(self) -> Mapping[str, Any]:
        return self._dictionaries.metric_dictionary

    def get_logical_table_dictionary(self) -> Mapping[str, Any]:
        return self._dictionaries.logical_table_dictionary

    def get_physical_table_dictionary(self) -> Mapping[str, ConfigPhysicalTable]:
        return self._dictionaries.physical_table_dictionary

    def get_dictionaries(self) -> ResourceDictionaries:
        return self._dictionaries

    # ------------------------------------------------------------------ tooling
    def snapshot(self) -> Dict[str, Any]:
        """Registered discriminators and built entity names, for tooling or docs."""
        return {
            "factories": {c.value: sorted(p.discriminators()) for c, p in self._factory_parks.items()},
            "built": self._dictionaries.snapshot(),
        }

    def snapshot_json(self, indent: Optional[int] = None) -> str:
        return serialize_to_json(self.snapshot(), indent=indent)

    def __repr__(self) -> str:
        return f"IndustrialPark(source={self._config_source!r})"

    # ------------------------------------------------------------------ builder
    class Builder:
        """Accumulates factory registrations and builds an IndustrialPark exactly once."""

        def __init__(
            self,
            resource_dictionaries: Optional[ResourceDictionaries] = None,
            *,
            config: ConfigLike = None,
            metadata_service: Optional[DataSourceMetadataService] = None,
            use_defaults: bool = True,
        ) -> None:
            self._resource_dictionaries = resource_dictionaries or ResourceDictionaries()
            self._config = config
            self._metadata_service = metadata_service
            self._concept_factories: Dict[ConceptType, Dict[str, Factory]] = (
                default_factories() if use_defaults else {}
            )
            self._built = False

        def _ensure_open(self) -> None:
            if self._built:
                raise BuilderError("builder has already been consumed by build()")

        @staticmethod
        def _validated(factories: Mapping[str, Factory]) -> Dict[str, Factory]:
            ensure_mapping(factories, label="factories")
            for name, factory in factories.items():
                ensure_name(name, label="factory name")
                ensure_type(factory, (Factory,), label=f"factory '{name}'")
            return dict(factories)

        # -------------------------------------------------------------- sources
        def with_config(self, config: ConfigLike) -> "IndustrialPark.Builder":
            self._ensure_open()
            self._config = config
            return self

        def with_metadata_service(self, service: DataSourceMetadataService) -> "IndustrialPark.Builder":
            self._ensure_open()
            ensure_type(service, (DataSourceMetadataService,), label="metadata_service")
            self._metadata_service = service
            return self

        def with_resource_dictionaries(self, dictionaries: ResourceDictionaries) -> "IndustrialPark.Builder":
            self._ensure_open()
            ensure_type(dictionaries, (ResourceDictionaries,), label="resource_dictionaries")
            self._resource_dictionaries = dictionaries
            return self

        # -------------------------------------------------------------- factories
        def with_factories(self, concept: ConceptLike, factories: Mapping[str, Factory]) -> "IndustrialPark.Builder":
            """Replace every factory registered for `concept`."""
            self._ensure_open()
            self._concept_factories[normalize_concept(concept)] = self._validated(factories)
            return self

        def add_factories(self, concept: ConceptLike, factories: Mapping[str, Factory]) -> "IndustrialPark.Builder":
            """Merge `factories` into the concept's map, overwriting equal keys."""
            self._ensure_open()
            validated = self._validated(factories)
            self._concept_factories.setdefault(normalize_concept(concept), {}).update(validated)
            return self

        def add_factory(self, concept: ConceptLike, name: str, factory: Factory) -> "IndustrialPark.Builder":
            """Register one factory; the concept must already have a factory map."""
            self._ensure_open()
            concept = normalize_concept(concept)
            if concept not in self._concept_factories:
                raise RegistrationError(
                    f"no factory map for concept '{concept.value}'; use with_factories or add_factories first"
                )
            self._concept_factories[concept].update(self._validated({name: factory}))
            return self

        def with_dimension_factories(self, factories: Mapping[str, Factory]) -> "IndustrialPark.Builder":
            return self.with_factories(ConceptType.DIMENSION, factories)

        def with_search_provider_factories(self, factories: Mapping[str, Factory]) -> "IndustrialPark.Builder":
            return self.with_factories(ConceptType.SEARCH_PROVIDER, factories)

        def with_key_value_store_factories(self, factories: Mapping[str, Factory]) -> "IndustrialPark.Builder":
            return self.with_factories(ConceptType.KEY_VALUE_STORE, factories)

        def with_physical_table_factories(self, factories: Mapping[str, Factory]) -> "IndustrialPark.Builder":
            return self.with_factories(ConceptType.PHYSICAL_TABLE, factories)

        def with_search_provider_factory(self, name: str, factory: Factory) -> "IndustrialPark.Builder":
            return self.add_factory(ConceptType.SEARCH_PROVIDER, name, factory)

        def factories(self, concept: ConceptLike) -> Mapping[str, Factory]:
            """Snapshot of the factories currently registered for `concept`."""
            return MappingProxyType(dict(self._concept_factories.get(normalize_concept(concept), {})))

        # -------------------------------------------------------------- build
        def build(self) -> "IndustrialPark":
            """Validate the registrations and build the park; the builder is consumed."""
            self._ensure_open()
            missing = [concept for concept in ConceptType if concept not in self._concept_factories]
            if missing:
                raise IncompleteRegistrationError(missing)
            self._built = True
            park = IndustrialPark(
                self._resource_dictionaries,
                {concept: dict(factories) for concept, factories in self._concept_factories.items()},
                config_source=config_source_from(self._config),
                metadata_service=self._metadata_service,
            )
            logger.debug("built %r with %s", park, {c.value: len(f) for c, f in self._concept_factories.items()})
            return park


IndustrialParkBuilder = IndustrialPark.Builder
