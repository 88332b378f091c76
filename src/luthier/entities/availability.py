"""
Availability interval sets backed by numpy.

Responsibilities
  - Represent data availability as sorted, merged half-open intervals.
  - Provide vectorised union and intersection used by physical tables.
  - Answer coverage queries for a requested interval.

Usage Context
  - Stored per table and column by DataSourceMetadataService.
  - Combined by StrictPhysicalTable (intersection) and PermissivePhysicalTable (union).

Limitations
  - Interval endpoints are plain floats (e.g. epoch seconds); no timezone handling.
  - Pairwise intersection is O(n*m) which is fine for availability segment counts.
"""
# 说明：基于 numpy 的可用性区间集合，统一以排序、合并后的半开区间 [start, end) 表示数据可用时间段。
# 职责：
# - IntervalSet：规范化输入区间（剔除空区间、排序、合并重叠或相邻区间）
# - union / intersection：向量化实现区间并集与交集，供严格/宽松物理表组合可用性
# - covers：判断某个请求区间是否被完整覆盖
# 约定：
# - 区间为半开区间，[0, 5) 与 [5, 10) 视为相邻并合并为 [0, 10)

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple, Union

import numpy as np

from luthier.core.utils.param_validation import ParamValidationError

IntervalLike = Union[Sequence[float], Tuple[float, float]]


def _as_array(intervals: Union["IntervalSet", np.ndarray, Iterable[IntervalLike]]) -> np.ndarray:
    # 将多种输入形式统一转换为 (n, 2) 的 float64 数组
    if isinstance(intervals, IntervalSet):
        return intervals.array
    arr = np.asarray(list(intervals) if not isinstance(intervals, np.ndarray) else intervals, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ParamValidationError("intervals must be a sequence of (start, end) pairs")
    if np.isnan(arr).any():
        raise ParamValidationError("interval endpoints must not be NaN")
    return arr


def _normalize(arr: np.ndarray) -> np.ndarray:
    # 剔除空区间后按起点排序，再利用结束点的累计最大值识别需要合并的连续分组
    arr = arr[arr[:, 0] < arr[:, 1]]
    if arr.shape[0] == 0:
        return np.empty((0, 2), dtype=np.float64)
    arr = arr[np.argsort(arr[:, 0], kind="stable")]
    running_end = np.maximum.accumulate(arr[:, 1])
    # 当前起点严格大于此前所有区间的最大结束点时开启新分组（相邻区间被合并）
    new_group = np.ones(arr.shape[0], dtype=bool)
    new_group[1:] = arr[1:, 0] > running_end[:-1]
    starts = np.flatnonzero(new_group)
    merged = np.empty((starts.size, 2), dtype=np.float64)
    merged[:, 0] = arr[starts, 0]
    merged[:, 1] = np.maximum.reduceat(arr[:, 1], starts)
    return merged


class IntervalSet:
    """Immutable set of merged half-open intervals."""
    # 不可变的区间集合，内部数组只读，所有运算均返回新实例

    __slots__ = ("_array",)

    def __init__(self, intervals: Union["IntervalSet", np.ndarray, Iterable[IntervalLike]] = ()) -> None:
        if isinstance(intervals, IntervalSet):
            self._array = intervals._array
            return
        merged = _normalize(_as_array(intervals))
        merged.setflags(write=False)
        self._array = merged

    @classmethod
    def empty(cls) -> "IntervalSet":
        return cls()

    @classmethod
    def union_all(cls, sets: Iterable["IntervalSet"]) -> "IntervalSet":
        """Union of every set; empty when no sets are given."""
        # 拼接所有区间后统一规范化即可得到并集
        arrays = [IntervalSet(s).array for s in sets]
        if not arrays:
            return cls()
        return cls(np.vstack(arrays))

    @classmethod
    def intersect_all(cls, sets: Iterable["IntervalSet"]) -> "IntervalSet":
        """Intersection of every set; empty when no sets are given."""
        # 没有任何输入时返回空集合，而不是“全时间轴”
        result = None
        for item in sets:
            current = IntervalSet(item)
            result = current if result is None else result.intersection(current)
            if result.is_empty():
                break
        return result if result is not None else cls()

    @property
    def array(self) -> np.ndarray:
        return self._array

    def union(self, other: Union["IntervalSet", Iterable[IntervalLike]]) -> "IntervalSet":
        return IntervalSet(np.vstack([self._array, _as_array(other)]))

    def intersection(self, other: Union["IntervalSet", Iterable[IntervalLike]]) -> "IntervalSet":
        # 通过广播计算两两区间的重叠部分，保留 lo < hi 的非空片段
        rhs = IntervalSet(other).array
        if self._array.shape[0] == 0 or rhs.shape[0] == 0:
            return IntervalSet()
        lo = np.maximum(self._array[:, None, 0], rhs[None, :, 0])
        hi = np.minimum(self._array[:, None, 1], rhs[None, :, 1])
        mask = lo < hi
        return IntervalSet(np.column_stack([lo[mask], hi[mask]]))

    def covers(self, start: float, end: float) -> bool:
        """True when [start, end) lies entirely inside one merged interval."""
        if end <= start:
            return True
        arr = self._array
        return bool(np.any((arr[:, 0] <= start) & (arr[:, 1] >= end)))

    def total_length(self) -> float:
        return float(np.sum(self._array[:, 1] - self._array[:, 0]))

    def is_empty(self) -> bool:
        return self._array.shape[0] == 0

    def to_list(self) -> List[Tuple[float, float]]:
        return [(float(s), float(e)) for s, e in self._array]

    def to_dict(self) -> dict:
        return {"intervals": [list(pair) for pair in self.to_list()]}

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return int(self._array.shape[0])

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IntervalSet):
            return np.array_equal(self._array, other._array)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._array.tobytes())

    def __or__(self, other: "IntervalSet") -> "IntervalSet":
        return self.union(other)

    def __and__(self, other: "IntervalSet") -> "IntervalSet":
        return self.intersection(other)

    def __repr__(self) -> str:
        body = ", ".join(f"[{s:g}, {e:g})" for s, e in self.to_list())
        return f"IntervalSet({body})"
