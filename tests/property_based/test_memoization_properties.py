"""
Property-based tests for memoised entity resolution.
"""
# 说明：实体缓存语义的属性测试。
# 覆盖：
# - 任意请求序列下，每个名称的工厂只被调用一次，且重复请求返回同一实例
# - load() 之后字典中的维度名称恰为配置中声明的名称

from hypothesis import given, strategies as st

from luthier.core.factory import FunctionFactory
from luthier.core.industrial_park import IndustrialPark
from luthier.entities import MapStore

from strategies import entity_names, name_lists


@given(st.lists(entity_names(), min_size=1, max_size=30))
def test_each_name_built_once(requests):
    calls = []

    def counting(name, config, park):
        calls.append(name)
        return MapStore(name)

    tree = {"KeyValueStoreConfig": {name: {"type": "counting"} for name in set(requests)}}
    park = IndustrialPark.Builder(config=tree).add_factory(
        "keyValueStore", "counting", FunctionFactory(counting)).build()

    first_seen = {}
    for name in requests:
        store = park.get_key_value_store(name)
        assert first_seen.setdefault(name, store) is store
    assert sorted(calls) == sorted(set(requests))


@given(name_lists())
def test_load_builds_exactly_declared_dimensions(names):
    tree = {
        "DimensionConfig": {name: {"type": "KeyValueStoreDimension", "domain": "shared"} for name in names},
        "KeyValueStoreConfig": {"shared": {"type": "memory"}, "unused": {"type": "memory"}},
        "SearchProviderConfig": {"shared": {"type": "noOp"}},
    }
    park = IndustrialPark.Builder(config=tree).build()
    park.load()
    dicts = park.get_dictionaries()
    assert set(park.get_dimension_dictionary()) == set(names)
    # 依赖只按需构建，未被引用的存储不会出现在字典中
    assert set(dicts.key_value_store_dictionary) == {"shared"}
    assert all(d.key_value_store is dicts.key_value_store_dictionary["shared"]
               for d in park.get_dimension_dictionary().values())
