"""Metric maker contract."""
# 说明：指标构造器抽象。库内不提供默认实现，部署方需通过 Builder 自行注册对应工厂。

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence


class MetricMaker(ABC):
    """Builds logical metrics from dependent metric names."""

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def make(self, metric_name: str, dependent_metrics: Sequence[str]) -> Any:
        """Return a logical metric named `metric_name`."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
