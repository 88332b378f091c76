"""
Serialization helpers for configuration trees and registry snapshots.

Provides JSON helpers shared by the directory-backed configuration source
and the park snapshot export.
"""
# 说明：序列化辅助工具，统一 JSON 编解码行为。
# 职责：
# - serialize_to_json / deserialize_from_json：提供 JSON 序列化/反序列化接口
# - 内部 _prepare：支持 dataclass、枚举、集合与自定义对象（实现 to_dict）的统一前处理
# - read_json_file：读取磁盘上的 JSON 配置文件，文件缺失时返回调用方提供的默认值

from __future__ import annotations

import enum
import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Optional


def _prepare(obj: Any) -> Any:
    # 将 dataclass、枚举、集合或实现了 to_dict 的对象转换为可 JSON 序列化的基础结构
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return obj


def serialize_to_json(obj: Any, *, indent: Optional[int] = None) -> str:
    # 将对象序列化为 JSON 字符串，键顺序稳定以便快照比对
    return json.dumps(_prepare(obj), default=_prepare, ensure_ascii=False, indent=indent, sort_keys=True)


def deserialize_from_json(text: str) -> Any:
    # 简单 JSON 反序列化包装，返回原始 Python 结构
    return json.loads(text)


def read_json_file(path: Path, default: Any = None) -> Any:
    # 读取 JSON 文件；文件不存在时返回 default，解析失败时由 json 模块抛出 JSONDecodeError
    if not path.exists():
        return default
    return deserialize_from_json(path.read_text(encoding="utf-8"))
