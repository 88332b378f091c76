"""Time grains recognised by physical table configuration."""
# 说明：物理表配置中 granularity 字段可用的时间粒度枚举，负责名称规范化。

from __future__ import annotations

import enum

from luthier.core.utils.param_validation import ParamValidationError


class TimeGrain(enum.Enum):
    """Supported time grains."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    ALL = "all"

    @classmethod
    def from_str(cls, name: str) -> "TimeGrain":
        # 大小写不敏感；接受 "hourly"/"daily" 等常见形容词别名
        try:
            normalized = str(name).strip().lower()
            aliases = {"hourly": "hour", "daily": "day", "weekly": "week", "monthly": "month", "yearly": "year"}
            return cls(aliases.get(normalized, normalized))
        except Exception as exc:
            raise ParamValidationError(f"unknown time grain '{name}'") from exc
