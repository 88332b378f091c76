"""
Unit tests for parameter validation helpers.
"""
# 说明：参数校验辅助函数的单元测试。
# 覆盖：
# - ensure / ensure_type：条件与类型断言
# - ensure_mapping：配置节点必须为映射
# - ensure_name：名称必须为非空字符串

import pytest

from luthier.core.utils.param_validation import (
    ParamValidationError,
    ensure,
    ensure_mapping,
    ensure_name,
    ensure_type,
)


def test_ensure_raises_on_false() -> None:
    ensure(True, "ok")
    with pytest.raises(ParamValidationError):
        ensure(False, "bad")


def test_ensure_supports_custom_error() -> None:
    with pytest.raises(KeyError):
        ensure(False, "missing", error=KeyError)


def test_ensure_type_message_contains_label() -> None:
    with pytest.raises(ParamValidationError, match="factory"):
        ensure_type("x", (int,), label="factory")


def test_ensure_mapping_returns_value() -> None:
    node = {"type": "strict"}
    assert ensure_mapping(node) is node
    with pytest.raises(ParamValidationError):
        ensure_mapping(["type"])


@pytest.mark.parametrize("bad", ["", "   ", None, 3])
def test_ensure_name_rejects_blank_and_non_strings(bad) -> None:
    with pytest.raises(ParamValidationError):
        ensure_name(bad)


def test_ensure_name_is_a_value_error() -> None:
    # ParamValidationError 继承 ValueError，调用方可按标准异常捕获
    with pytest.raises(ValueError):
        ensure_name("")
    assert ensure_name("country") == "country"
