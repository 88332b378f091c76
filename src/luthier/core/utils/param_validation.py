"""
Reusable validation helpers shared by the registry layers.
"""
# 说明：参数校验辅助函数，用于在注册表、构建器与工厂内部统一进行轻量级参数检查。
# 职责：
# - ParamValidationError：专门用于参数校验失败的异常类型
# - ensure：基于布尔条件触发参数校验错误的轻量断言工具
# - ensure_type：检查参数是否属于指定类型集合，并在失败时给出带 label 的错误提示
# - ensure_mapping / ensure_name：针对配置节点与实体名称的常用组合校验

from __future__ import annotations

from typing import Any, Mapping, Tuple, Type


class ParamValidationError(ValueError):
    """Raised when parameter validation fails."""


def ensure(condition: bool, message: str, *, error: Type[Exception] = ParamValidationError) -> None:
    # 条件不满足时抛出指定的异常类型（默认使用 ParamValidationError）
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    # 检查 value 是否为 expected 集合中的任意类型，否则抛出带字段标签的 ParamValidationError
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise ParamValidationError(f"{label} must be instance of {names}")


def ensure_mapping(value: Any, *, label: str = "value") -> Mapping[str, Any]:
    # 校验配置节点必须为映射类型，并原样返回便于链式使用
    if not isinstance(value, Mapping):
        raise ParamValidationError(f"{label} must be a mapping, got {type(value).__name__}")
    return value


def ensure_name(value: Any, *, label: str = "name") -> str:
    # 实体名称与判别字段取值必须为非空字符串
    ensure_type(value, (str,), label=label)
    ensure(value.strip() != "", f"{label} must be non-empty")
    return value
