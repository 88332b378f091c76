"""
Unit tests for resource dictionaries.
"""
# 说明：ResourceDictionaries（资源字典）的单元测试。
# 覆盖：
# - get_or_build：命中时不调用构建函数；失败时不写入
# - 多线程并发请求同一键时构建函数只执行一次，键锁在构建结束后回收
# - register / add_metric / add_logical_table：已存在名称不会被替换
# - 只读视图与快照

import threading
import time

import pytest

from luthier.core.concepts import ConceptType
from luthier.core.dictionaries import ResourceDictionaries
from luthier.core.exceptions import LuthierError


def test_get_or_build_memoizes() -> None:
    dicts = ResourceDictionaries()
    calls = []

    def build():
        calls.append(1)
        return object()

    first = dicts.get_or_build(ConceptType.DIMENSION, "country", build)
    second = dicts.get_or_build("dimension", "country", build)
    assert first is second
    assert len(calls) == 1
    assert dicts.get(ConceptType.DIMENSION, "country") is first
    assert dicts.contains(ConceptType.DIMENSION, "country")
    assert dicts.names(ConceptType.DIMENSION) == ("country",)


def test_failed_build_stores_nothing() -> None:
    dicts = ResourceDictionaries()

    def boom():
        raise RuntimeError("factory failed")

    with pytest.raises(RuntimeError):
        dicts.get_or_build(ConceptType.PHYSICAL_TABLE, "t", boom)
    assert not dicts.contains(ConceptType.PHYSICAL_TABLE, "t")
    assert dicts.get_or_build(ConceptType.PHYSICAL_TABLE, "t", lambda: "ok") == "ok"


def test_concurrent_requests_build_once() -> None:
    # 多个线程同时请求同一未构建键时，只有一次构建调用完成，所有线程拿到同一对象
    dicts = ResourceDictionaries()
    calls = []
    lock = threading.Lock()
    results = []
    barrier = threading.Barrier(8)

    def build():
        with lock:
            calls.append(1)
        time.sleep(0.05)
        return object()

    def worker():
        barrier.wait()
        results.append(dicts.get_or_build(ConceptType.KEY_VALUE_STORE, "shared", build))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(calls) == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)
    assert dicts._key_locks == {}


def test_key_locks_released_after_builds() -> None:
    dicts = ResourceDictionaries()

    def missing():
        raise LookupError("no such entity")

    for i in range(1000):
        with pytest.raises(LookupError):
            dicts.get_or_build(ConceptType.DIMENSION, f"unknown_{i}", missing)
    assert dicts._key_locks == {}

    dicts.get_or_build(ConceptType.DIMENSION, "country", object)
    assert dicts._key_locks == {}

    # 同一线程在构建过程中再次请求同一键（循环依赖场景）
    def reenter():
        return dicts.get_or_build(ConceptType.DIMENSION, "loop", missing)

    with pytest.raises(LookupError):
        dicts.get_or_build(ConceptType.DIMENSION, "loop", reenter)
    assert dicts._key_locks == {}
    assert dicts.names(ConceptType.DIMENSION) == ("country",)


def test_register_never_replaces() -> None:
    dicts = ResourceDictionaries()
    entity = object()
    dicts.register(ConceptType.SEARCH_PROVIDER, "s", entity)
    dicts.register(ConceptType.SEARCH_PROVIDER, "s", entity)
    with pytest.raises(LuthierError):
        dicts.register(ConceptType.SEARCH_PROVIDER, "s", object())
    assert dicts.get(ConceptType.SEARCH_PROVIDER, "s") is entity


def test_metric_and_logical_table_dictionaries() -> None:
    dicts = ResourceDictionaries()
    metric = object()
    dicts.add_metric("visits", metric)
    dicts.add_logical_table("visits_table", "table")
    assert dicts.metric_dictionary["visits"] is metric
    assert dict(dicts.logical_table_dictionary) == {"visits_table": "table"}
    with pytest.raises(LuthierError):
        dicts.add_metric("visits", object())


def test_views_are_read_only_and_live() -> None:
    dicts = ResourceDictionaries()
    view = dicts.dimension_dictionary
    with pytest.raises(TypeError):
        view["x"] = 1  # type: ignore[index]
    dicts.register(ConceptType.DIMENSION, "x", "dim")
    assert view["x"] == "dim"
    assert dict(dicts.physical_table_dictionary) == {}
    assert dict(dicts.metric_maker_dictionary) == {}
    assert dict(dicts.search_provider_dictionary) == {}
    assert dict(dicts.key_value_store_dictionary) == {}


def test_snapshot_lists_sorted_names() -> None:
    dicts = ResourceDictionaries()
    dicts.register(ConceptType.DIMENSION, "b", 1)
    dicts.register(ConceptType.DIMENSION, "a", 2)
    snap = dicts.snapshot()
    assert snap["dimension"] == ["a", "b"]
    assert snap["metric"] == [] and snap["logicalTable"] == []
    assert set(snap) == {c.value for c in ConceptType} | {"metric", "logicalTable"}
