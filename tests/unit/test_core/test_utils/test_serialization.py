"""
Unit tests for serialization utilities.
"""
# 说明：JSON 序列化辅助工具的单元测试。
# 覆盖：
# - serialize_to_json：dataclass、枚举、集合与实现 to_dict 的对象的统一处理，键顺序稳定
# - read_json_file：文件缺失返回默认值，格式错误时抛出 JSONDecodeError

import dataclasses
import json

import pytest

from luthier.core.concepts import ConceptType
from luthier.core.utils import deserialize_from_json, read_json_file, serialize_to_json
from luthier.entities import IntervalSet


@dataclasses.dataclass
class Sample:
    name: str
    size: int


def test_serialize_dataclass_and_enum() -> None:
    text = serialize_to_json({"sample": Sample("a", 2), "concept": ConceptType.PHYSICAL_TABLE})
    data = deserialize_from_json(text)
    assert data == {"concept": "physicalTable", "sample": {"name": "a", "size": 2}}


def test_serialize_sorts_keys_and_sets() -> None:
    text = serialize_to_json({"b": {"y", "x"}, "a": 1})
    assert text == '{"a": 1, "b": ["x", "y"]}'


def test_serialize_uses_to_dict() -> None:
    data = deserialize_from_json(serialize_to_json(IntervalSet([(0, 5)])))
    assert data == {"intervals": [[0.0, 5.0]]}


def test_read_json_file_missing_returns_default(tmp_path) -> None:
    assert read_json_file(tmp_path / "absent.json", default={}) == {}


def test_read_json_file_malformed(tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        read_json_file(path)
