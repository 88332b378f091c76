"""
Configuration sources supplying one section of the configuration tree per concept.

Responsibilities
  - Abstract where configuration sections come from (memory or disk).
  - Lazily read and cache `<Section>.json` files from a directory.
  - Hand each FactoryPark a supplier bound to its concept's section.

Usage Context
  - Passed to IndustrialPark.Builder via `with_config(...)`.

Limitations
  - Sections are read once; later changes on disk are not observed.
"""
# 说明：配置来源。配置树按“配置段 → 实体名 → 配置节点”组织，每类概念读取其中一个配置段。
# 职责：
# - ConfigSource：抽象接口，section(name) 返回某个配置段（缺失时为空映射）
# - MappingConfigSource：内存字典来源，构造时深拷贝以隔离调用方后续修改
# - DirectoryConfigSource：目录来源，按需读取 <Section>.json 并缓存解析结果
# - ResourceNodeSupplier：绑定到单个配置段的只读访问器，供 FactoryPark 使用
# - config_source_from(...)：将映射、路径或已有来源统一转换为 ConfigSource

from __future__ import annotations

import copy
import json
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from .exceptions import ConfigSourceError
from .utils.config import get_config
from .utils.logging import get_logger
from .utils.param_validation import ParamValidationError, ensure_mapping
from .utils.serialization import read_json_file

logger = get_logger(__name__)

_EMPTY: Mapping[str, Any] = MappingProxyType({})


class ConfigSource(ABC):
    """Source of configuration sections."""

    @abstractmethod
    def section(self, resource_name: str) -> Mapping[str, Any]:
        """Return the section mapping (entity name -> node); empty when absent."""


class MappingConfigSource(ConfigSource):
    """In-memory configuration tree keyed by section name."""

    def __init__(self, tree: Optional[Mapping[str, Any]] = None) -> None:
        tree = ensure_mapping(tree or {}, label="configuration tree")
        self._tree: Dict[str, Mapping[str, Any]] = {}
        for resource_name, section in tree.items():
            section = ensure_mapping(section, label=f"section '{resource_name}'")
            self._tree[str(resource_name)] = MappingProxyType(copy.deepcopy(dict(section)))

    def section(self, resource_name: str) -> Mapping[str, Any]:
        return self._tree.get(resource_name, _EMPTY)

    def __repr__(self) -> str:
        return f"MappingConfigSource(sections={sorted(self._tree)})"


class DirectoryConfigSource(ConfigSource):
    """Directory holding one `<Section>.json` file per section."""

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)
        if not self.directory.is_dir():
            raise ConfigSourceError(f"configuration directory '{self.directory}' does not exist")
        self._cache: Dict[str, Mapping[str, Any]] = {}
        self._lock = threading.Lock()

    def section(self, resource_name: str) -> Mapping[str, Any]:
        # 双重检查：读取与解析只发生一次
        cached = self._cache.get(resource_name)
        if cached is not None:
            return cached
        with self._lock:
            if resource_name not in self._cache:
                self._cache[resource_name] = self._read(resource_name)
            return self._cache[resource_name]

    def _read(self, resource_name: str) -> Mapping[str, Any]:
        path = self.directory / f"{resource_name}.json"
        try:
            data = read_json_file(path, default={})
            data = ensure_mapping(data, label=f"section '{resource_name}'")
        except (OSError, json.JSONDecodeError, ParamValidationError) as exc:
            raise ConfigSourceError(f"cannot read configuration section '{path}': {exc}") from exc
        logger.debug("read section %s (%d entities) from %s", resource_name, len(data), path)
        return MappingProxyType(dict(data))

    def __repr__(self) -> str:
        return f"DirectoryConfigSource({str(self.directory)!r})"


class ResourceNodeSupplier:
    """Read-only accessor bound to one configuration section."""

    def __init__(self, source: ConfigSource, resource_name: str) -> None:
        self.source = source
        self.resource_name = resource_name

    def get(self) -> Mapping[str, Any]:
        return self.source.section(self.resource_name)

    def __call__(self) -> Mapping[str, Any]:
        return self.get()

    def __repr__(self) -> str:
        return f"ResourceNodeSupplier({self.resource_name!r})"


def config_source_from(value: Union[None, ConfigSource, Mapping[str, Any], str, Path]) -> ConfigSource:
    """Coerce a mapping, directory path or source into a ConfigSource."""
    # None 时退回到运行时配置中的 config_dir；仍未设置则使用空配置树
    if isinstance(value, ConfigSource):
        return value
    if value is None:
        config_dir = get_config().config_dir
        return DirectoryConfigSource(config_dir) if config_dir else MappingConfigSource()
    if isinstance(value, (str, Path)):
        return DirectoryConfigSource(value)
    if isinstance(value, Mapping):
        return MappingConfigSource(value)
    raise ParamValidationError(f"unsupported configuration source {type(value).__name__}")
