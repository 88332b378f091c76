"""
Unit tests for dimensions, key-value stores and search providers.
"""
# 说明：维度实体及其键值存储、搜索提供者的单元测试。
# 覆盖：
# - Dimension 字段与键字段校验
# - KeyValueStoreDimension 行写入与查找、搜索提供者绑定
# - NoOpSearchProvider 与 ScanSearchProvider 的查询行为及 query_weight_limit

import pytest

from luthier.core.utils.param_validation import ParamValidationError
from luthier.entities import (
    Dimension,
    KeyValueStoreDimension,
    MapStore,
    NoOpSearchProvider,
    ScanSearchProvider,
)


def test_dimension_defaults_and_validation() -> None:
    dim = Dimension("country")
    assert dim.long_name == "country"
    assert dim.key_field == "id"
    with pytest.raises(ParamValidationError):
        Dimension("country", fields=())
    with pytest.raises(ParamValidationError):
        Dimension("country", fields=("id",), key_field="code")


def test_rows_round_through_store() -> None:
    store = MapStore("country")
    dim = KeyValueStoreDimension("country", store, ScanSearchProvider("country"))
    dim.add_dimension_row({"id": "us", "desc": "United States"})
    dim.add_dimension_row({"id": "fr", "desc": "France"})
    assert dim.find_dimension_row("us") == {"id": "us", "desc": "United States"}
    assert "fr" in store and len(store) == 2
    assert dim.search("states") == [{"id": "us", "desc": "United States"}]
    assert len(dim.search_provider.find_all_rows()) == 2


def test_add_row_validation() -> None:
    dim = KeyValueStoreDimension("country", MapStore("country"), NoOpSearchProvider("country"))
    with pytest.raises(ParamValidationError):
        dim.add_dimension_row({"desc": "no key"})
    with pytest.raises(ParamValidationError):
        dim.add_dimension_row({"id": "x", "population": 3})


def test_noop_provider_uses_bound_key_field() -> None:
    provider = NoOpSearchProvider("country")
    assert provider.find_rows("x") == [{"id": "x"}]
    KeyValueStoreDimension("country", MapStore("c"), provider, fields=("code", "desc"))
    assert provider.dimension is not None
    assert provider.find_rows("us") == [{"code": "us"}]


def test_scan_provider_weight_limit() -> None:
    provider = ScanSearchProvider("country", query_weight_limit=1)
    store = MapStore("country", {"a": {"id": "a"}, "b": {"id": "b"}})
    KeyValueStoreDimension("country", store, provider)
    with pytest.raises(ParamValidationError):
        provider.find_rows("a")
    with pytest.raises(ParamValidationError):
        ScanSearchProvider("x", query_weight_limit=0)


def test_map_store_operations() -> None:
    store = MapStore("s", {"a": 1})
    store.put_all({"b": 2})
    store.remove("a")
    store.remove("missing")
    assert store.keys() == ("b",)
    assert list(store.items()) == [("b", 2)]
    assert store.get("a") is None
