"""
Factory contract for building one configuration entity.

Responsibilities
  - Define the strategy interface `build(name, config, park)`.
  - Wrap plain callables as factories for explicit, closure-based registration.
  - Provide a factory that reports a deliberately unsupported backend.

Usage Context
  - Registered per discriminator through IndustrialPark.Builder.
  - Invoked by FactoryPark.build_entity with the owning park for dependency lookups.

Limitations
  - Factories must be synchronous; resolution is blocking.
"""
# 说明：实体工厂协议。每种构造方式对应一个工厂，工厂可借助 park 按名称递归解析依赖实体。
# 职责：
# - Factory：抽象基类，子类实现 build(name, config, park)
# - FunctionFactory：将普通可调用对象包装为工厂，便于以闭包方式显式注册
# - UnsupportedFactory：占位工厂，构建时抛出 UnsupportedConceptError 以区分“刻意不支持”与“未注册”

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, Mapping, TypeVar

from .exceptions import UnsupportedConceptError

if TYPE_CHECKING:
    from .concepts import ConceptType
    from .industrial_park import IndustrialPark

T = TypeVar("T")

BuildFunction = Callable[[str, Mapping[str, Any], "IndustrialPark"], Any]


class Factory(ABC, Generic[T]):
    """Builds one entity from its name and configuration node."""

    @abstractmethod
    def build(self, name: str, config: Mapping[str, Any], park: "IndustrialPark") -> T:
        """
        Build a new entity.

        Args:
            name: The entity name (key of the node in its configuration section).
            config: The raw configuration node for this entity.
            park: The owning IndustrialPark, used to resolve dependencies by name.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FunctionFactory(Factory[Any]):
    """Factory delegating to a plain callable."""

    def __init__(self, func: BuildFunction, *, label: str = "") -> None:
        if not callable(func):
            raise TypeError("func must be callable")
        self._func = func
        self._label = label or getattr(func, "__name__", "function")

    def build(self, name: str, config: Mapping[str, Any], park: "IndustrialPark") -> Any:
        return self._func(name, config, park)

    def __repr__(self) -> str:
        return f"FunctionFactory({self._label})"


class UnsupportedFactory(Factory[Any]):
    """Factory for a backend that this deployment deliberately does not offer."""

    def __init__(self, concept: "ConceptType", backend: str) -> None:
        self.concept = concept
        self.backend = backend

    def build(self, name: str, config: Mapping[str, Any], park: "IndustrialPark") -> Any:
        raise UnsupportedConceptError(self.concept, self.backend, name=name)

    def __repr__(self) -> str:
        return f"UnsupportedFactory({self.concept.value}:{self.backend})"
