"""
Unit tests for the per-concept factory park.
"""
# 说明：FactoryPark（单概念工厂园区）的单元测试。
# 覆盖：
# - fetch_config / names / discriminators / factory_for / __contains__ 查询接口
# - build_entity：按判别字段分发、实体不存在、判别字段缺失或未注册、节点类型错误
# - 自定义判别字段名
# - build_entity 本身不做缓存
# - 构建日志携带配置节点，并按运行时配置脱敏

import pytest

from luthier.core.concepts import ConceptType
from luthier.core.exceptions import EntityNotFoundError, UnregisteredDiscriminatorError
from luthier.core.factory import FunctionFactory
from luthier.core.factory_park import FactoryPark
from luthier.core.resources import MappingConfigSource, ResourceNodeSupplier
from luthier.core.utils import configure
from luthier.core.utils.param_validation import ParamValidationError


def _park(section, factories, **kwargs) -> FactoryPark:
    source = MappingConfigSource({"MetricMakerConfig": section})
    supplier = ResourceNodeSupplier(source, ConceptType.METRIC_MAKER.resource_name)
    return FactoryPark(ConceptType.METRIC_MAKER, supplier, factories, **kwargs)


def _echo(name, config, park):
    return {"name": name, "config": dict(config), "park": park}


def test_queries_reflect_section_and_registry() -> None:
    factory = FunctionFactory(_echo)
    park = _park({"a": {"type": "echo"}, "b": {"type": "echo"}}, {"echo": factory})
    assert park.names() == ("a", "b")
    assert park.discriminators() == ("echo",)
    assert park.factory_for("echo") is factory
    assert park.factory_for("missing") is None
    assert "a" in park and "z" not in park
    assert set(park.fetch_config()) == {"a", "b"}


def test_build_entity_dispatches_with_node_and_park() -> None:
    park = _park({"a": {"type": "echo", "x": 1}}, {"echo": FunctionFactory(_echo)})
    owner = object()
    built = park.build_entity("a", owner)
    assert built == {"name": "a", "config": {"type": "echo", "x": 1}, "park": owner}


def test_build_entity_is_not_cached() -> None:
    park = _park({"a": {"type": "echo"}}, {"echo": FunctionFactory(_echo)})
    assert park.build_entity("a", None) is not park.build_entity("a", None)


def test_missing_entity_raises_not_found() -> None:
    park = _park({}, {"echo": FunctionFactory(_echo)})
    with pytest.raises(EntityNotFoundError, match="metricMaker 'ghost'") as info:
        park.build_entity("ghost", None)
    assert isinstance(info.value, LookupError)
    assert info.value.section == "MetricMakerConfig"


def test_unregistered_discriminator_names_concept_and_value() -> None:
    park = _park({"a": {"type": "bogus"}}, {"echo": FunctionFactory(_echo)})
    with pytest.raises(UnregisteredDiscriminatorError) as info:
        park.build_entity("a", None)
    err = info.value
    assert err.concept is ConceptType.METRIC_MAKER
    assert err.discriminator == "bogus"
    assert err.known == ("echo",)
    assert "metricMaker" in str(err) and "bogus" in str(err)


@pytest.mark.parametrize("node", [{}, {"type": None}, {"type": 7}])
def test_missing_or_non_string_discriminator(node) -> None:
    park = _park({"a": node}, {"echo": FunctionFactory(_echo)})
    with pytest.raises(UnregisteredDiscriminatorError):
        park.build_entity("a", None)


def test_non_mapping_node_is_rejected() -> None:
    park = _park({"a": "echo"}, {"echo": FunctionFactory(_echo)})
    with pytest.raises(ParamValidationError):
        park.build_entity("a", None)


def test_custom_discriminator_field() -> None:
    park = _park({"a": {"kind": "echo"}}, {"echo": FunctionFactory(_echo)}, discriminator_field="kind")
    assert park.build_entity("a", None)["name"] == "a"


def test_discriminator_field_defaults_to_runtime_config() -> None:
    configure(discriminator_field="builder")
    park = _park({"a": {"builder": "echo"}}, {"echo": FunctionFactory(_echo)})
    assert park.discriminator_field == "builder"
    assert park.build_entity("a", None)["name"] == "a"


def test_registry_is_frozen_copy() -> None:
    factories = {"echo": FunctionFactory(_echo)}
    park = _park({"a": {"type": "other"}}, factories)
    factories["other"] = FunctionFactory(_echo)
    with pytest.raises(UnregisteredDiscriminatorError):
        park.build_entity("a", None)


def _build_records(caplog, park):
    with caplog.at_level("DEBUG", logger="luthier.core.factory_park"):
        park.build_entity("a", None)
    return [r for r in caplog.records if r.name == "luthier.core.factory_park" and "building" in r.getMessage()]


def test_build_log_masks_config_node(caplog) -> None:
    park = _park({"a": {"type": "echo", "password": "secret"}}, {"echo": FunctionFactory(_echo)})
    records = _build_records(caplog, park)
    assert len(records) == 1
    assert records[0].config == "***"
    assert "secret" not in caplog.text


def test_build_log_keeps_config_node_when_masking_disabled(caplog) -> None:
    configure(mask_sensitive_fields=False)
    park = _park({"a": {"type": "echo", "password": "secret"}}, {"echo": FunctionFactory(_echo)})
    records = _build_records(caplog, park)
    assert len(records) == 1
    assert records[0].config == {"type": "echo", "password": "secret"}
