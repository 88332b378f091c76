"""
Error hierarchy for the configuration registry.

Responsibilities
  - Define shared exception types for entity resolution and builder failures.
  - Keep "not found", "unregistered discriminator" and "unsupported" distinct.
  - Carry the concept, entity name and discriminator for diagnostics.

Usage Context
  - Raised by FactoryPark lookups, IndustrialPark resolution and the Builder.

Limitations
  - Exceptions only carry message text and optional context attributes.
"""
# 说明：配置注册表的异常体系，统一实体解析、工厂分发与构建器误用时的错误类型。
# 职责：
# - LuthierError：注册表统一基类异常
# - EntityNotFoundError / UnregisteredDiscriminatorError：配置查找与判别字段分发失败
# - UnsupportedConceptError：部署中刻意不提供的后端，与“未找到”区分
# - CyclicDependencyError：递归解析时重新进入正在构建的实体
# - BuilderError 及其子类：构建器注册与完整性校验失败

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple


class LuthierError(RuntimeError):
    """
    Base error type for registry failures.

    - Behavior
      - Serves as the common ancestor for registry-specific exceptions.

    - Usage Notes
      - Catch to handle resolution errors without mixing with argument errors.
    """


class EntityNotFoundError(LuthierError, LookupError):
    """Raised when a requested entity name is absent from its configuration section."""

    def __init__(self, concept: Any, name: str, *, section: Optional[str] = None) -> None:
        # 记录概念类型与实体名称，消息中同时给出配置段名称便于定位
        where = f" in section '{section}'" if section else ""
        super().__init__(f"{_label(concept)} '{name}' not found{where}")
        self.concept = concept
        self.name = name
        self.section = section


class UnregisteredDiscriminatorError(LuthierError, LookupError):
    """
    Raised when a configuration node selects a factory that is not registered.

    - Configuration
      - concept: The concept type whose factory park was consulted.
      - name: The entity being built.
      - discriminator: The unresolved discriminator value (None when the field is missing).
      - known: Registered discriminators for the concept.
    """

    def __init__(
        self,
        concept: Any,
        name: str,
        discriminator: Optional[str],
        *,
        field: str = "type",
        known: Sequence[str] = (),
    ) -> None:
        if discriminator is None:
            message = f"{_label(concept)} '{name}' has no '{field}' field to select a factory"
        else:
            message = f"no {_label(concept)} factory registered for {field}='{discriminator}' (entity '{name}')"
        if known:
            message += f"; known: [{', '.join(sorted(known))}]"
        super().__init__(message)
        self.concept = concept
        self.name = name
        self.discriminator = discriminator
        self.field = field
        self.known: Tuple[str, ...] = tuple(sorted(known))


class UnsupportedConceptError(LuthierError, NotImplementedError):
    """Raised when a backend is deliberately not offered in this deployment."""

    def __init__(self, concept: Any, backend: str, *, name: Optional[str] = None) -> None:
        # 与“未找到”区分：配置正确但该后端被刻意禁用
        target = f" for '{name}'" if name else ""
        super().__init__(f"{_label(concept)} backend '{backend}' is not supported{target}")
        self.concept = concept
        self.backend = backend
        self.name = name


class CyclicDependencyError(LuthierError):
    """Raised when resolving an entity re-enters a key that is still being built."""

    def __init__(self, chain: Sequence[Tuple[Any, str]]) -> None:
        # chain 为从最外层到重新进入的键的完整解析路径
        path = " -> ".join(f"{_label(concept)}:{name}" for concept, name in chain)
        super().__init__(f"cyclic dependency detected: {path}")
        self.chain: Tuple[Tuple[Any, str], ...] = tuple(chain)


class EntityTypeError(LuthierError, TypeError):
    """Raised when a factory produces an object of the wrong target type."""


class ConfigSourceError(LuthierError):
    """Raised when a configuration section cannot be read or parsed."""


class BuilderError(LuthierError):
    """Raised when the park builder is misused (e.g. built twice)."""


class RegistrationError(BuilderError):
    """Raised when a factory cannot be registered for a concept."""


class IncompleteRegistrationError(BuilderError):
    """Raised at build time when concept types have no factory map at all."""

    def __init__(self, missing: Sequence[Any]) -> None:
        labels = ", ".join(_label(concept) for concept in missing)
        super().__init__(f"no factory map registered for concept(s): {labels}")
        self.missing: Tuple[Any, ...] = tuple(missing)


def _label(concept: Any) -> str:
    # 概念类型以其 value（如 "dimension"）展示，其余对象退化为 str
    return str(getattr(concept, "value", concept))
