"""Typed field access for configuration nodes."""
# 说明：从配置节点中按类型读取字段的小工具，字段类型不符时抛出带实体名的参数校验错误。

from __future__ import annotations

from typing import Any, Mapping, Tuple

from luthier.core.utils.param_validation import ParamValidationError

_MISSING = object()


def get_field(
    config: Mapping[str, Any],
    key: str,
    default: Any = _MISSING,
    *,
    expected: Tuple[type, ...] = (),
    entity: str = "",
) -> Any:
    # 缺失字段返回 default；未提供 default 时视为必填字段
    value = config.get(key, _MISSING)
    if value is _MISSING or value is None:
        if default is _MISSING:
            raise ParamValidationError(f"'{entity}' configuration requires field '{key}'")
        return default
    if expected and not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise ParamValidationError(f"'{entity}' field '{key}' must be instance of {names}")
    return value


def get_string_list(config: Mapping[str, Any], key: str, default: Any = _MISSING, *, entity: str = "") -> list:
    # 字符串列表字段：必须是 list/tuple 且元素均为字符串
    values = get_field(config, key, default, expected=(list, tuple), entity=entity)
    if not all(isinstance(v, str) for v in values):
        raise ParamValidationError(f"'{entity}' field '{key}' must contain only strings")
    return list(values)
