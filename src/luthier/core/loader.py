"""Configuration loader contract consumed by the serving layer."""
# 说明：配置加载器协议。服务层只依赖本接口：调用 load() 完成引导，再通过只读字典访问实体。

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from .dictionaries import ResourceDictionaries


class ConfigurationLoader(ABC):
    """Loads configuration entities and exposes the resulting dictionaries."""

    @abstractmethod
    def load(self) -> None:
        """Realise every eagerly loaded entity (at least dimensions and physical tables)."""

    @abstractmethod
    def get_dimension_dictionary(self) -> Mapping[str, Any]:
        ...

    @abstractmethod
    def get_metric_dictionary(self) -> Mapping[str, Any]:
        ...

    @abstractmethod
    def get_logical_table_dictionary(self) -> Mapping[str, Any]:
        ...

    @abstractmethod
    def get_physical_table_dictionary(self) -> Mapping[str, Any]:
        ...

    @abstractmethod
    def get_dictionaries(self) -> ResourceDictionaries:
        ...
