"""
Per-concept factory registry scoped to one configuration section.

Responsibilities
  - Pair a section supplier with a discriminator -> Factory mapping.
  - Look up an entity's node by name and dispatch on its discriminator.
  - Report missing entities and unregistered discriminators distinctly.

Usage Context
  - Owned by IndustrialPark, one instance per ConceptType.

Limitations
  - No caching: every call to build_entity constructs a new entity.
"""
# 说明：单个概念类型的工厂园区。负责从对应配置段中取出实体节点，读取判别字段并分发给已注册工厂。
# 职责：
# - fetch_config：返回该概念的整个配置段，供 IndustrialPark 枚举声明的实体名做批量加载
# - build_entity：按名称查找节点 → 读取判别字段 → 调用匹配工厂；本身不做缓存
# - discriminators / factory_for / names：注册表与配置段的只读查询

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Generic, Mapping, Optional, Tuple, TypeVar

from .concepts import ConceptType
from .exceptions import EntityNotFoundError, UnregisteredDiscriminatorError
from .factory import Factory
from .resources import ResourceNodeSupplier
from .utils.config import get_config
from .utils.logging import get_logger
from .utils.param_validation import ParamValidationError

if TYPE_CHECKING:
    from .industrial_park import IndustrialPark

T = TypeVar("T")

logger = get_logger(__name__)


class FactoryPark(Generic[T]):
    """Discriminator-dispatching registry for one concept type."""

    def __init__(
        self,
        concept: ConceptType,
        supplier: ResourceNodeSupplier,
        factories: Mapping[str, Factory[T]],
        *,
        discriminator_field: Optional[str] = None,
    ) -> None:
        self.concept = concept
        self._supplier = supplier
        # 注册表在构造时冻结，之后不可修改
        self._factories: Mapping[str, Factory[T]] = MappingProxyType(dict(factories))
        self.discriminator_field = discriminator_field or get_config().discriminator_field

    # ------------------------------------------------------------------ queries
    def fetch_config(self) -> Mapping[str, Any]:
        """Return this concept's configuration section (entity name -> node)."""
        return self._supplier.get()

    def names(self) -> Tuple[str, ...]:
        return tuple(self.fetch_config().keys())

    def discriminators(self) -> Tuple[str, ...]:
        return tuple(self._factories.keys())

    def factory_for(self, discriminator: str) -> Optional[Factory[T]]:
        return self._factories.get(discriminator)

    def __contains__(self, name: object) -> bool:
        return name in self.fetch_config()

    # ------------------------------------------------------------------ build
    def build_entity(self, name: str, park: "IndustrialPark") -> T:
        """Build a fresh entity named `name`; callers are responsible for caching."""
        section = self.fetch_config()
        if name not in section:
            raise EntityNotFoundError(self.concept, name, section=self.concept.resource_name)
        node = section[name]
        if not isinstance(node, Mapping):
            raise ParamValidationError(
                f"{self.concept.value} '{name}' configuration must be a mapping, got {type(node).__name__}"
            )

        discriminator = node.get(self.discriminator_field)
        factory = self._factories.get(discriminator) if isinstance(discriminator, str) else None
        if factory is None:
            raise UnregisteredDiscriminatorError(
                self.concept,
                name,
                None if discriminator is None else str(discriminator),
                field=self.discriminator_field,
                known=self.discriminators(),
            )

        logger.debug("building %s '%s' with %r (%s=%s)", self.concept.value, name, factory,
                     self.discriminator_field, discriminator, extra={"config": dict(node)})
        return factory.build(name, node, park)

    def __repr__(self) -> str:
        return f"FactoryPark({self.concept.value}, discriminators={len(self._factories)})"
