"""
Unweighted descriptive statistics over plain numeric sequences.

Responsibilities
  - Compute bounds, sum, mean and sample standard deviation of a sequence.
  - Report whether a sequence is already in ascending order.

Usage Context
  - Building blocks that ``Sample`` falls back to when it carries no weights.
  - Accept Python sequences and one-dimensional numpy arrays alike.

Limitations
  - Empty input is signalled with NaN, never with an exception.
  - Accumulation is strictly left-to-right; no pairwise or compensated summation.
"""
# 说明：面向纯数值序列的无权描述统计工具。
# 职责：
# - bounds / summation / mean / stddev：最值、求和、增量均值、Welford 样本标准差
# - is_ascending：按 numpy 排序约定（NaN 排在最后）判断序列是否已升序
# 约定：
# - 空输入统一返回 NaN，而不是抛出异常
# - 求和严格从左到右累加，不重排元素，避免改变浮点舍入结果

from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]

NAN = math.nan


def bounds(xs: ArrayLike) -> Tuple[float, float]:
    """Return ``(min, max)`` of ``xs``, or ``(nan, nan)`` when empty.

    NaN entries never win a comparison, so they are skipped unless the first
    element is NaN, in which case both bounds stay NaN.
    """
    if len(xs) == 0:
        return NAN, NAN
    lo = hi = float(xs[0])
    for x in xs:
        if x < lo:
            lo = float(x)
        if x > hi:
            hi = float(x)
    return lo, hi


def summation(xs: ArrayLike) -> float:
    """Return the left-to-right sum of ``xs``."""
    total = 0.0
    for x in xs:
        total += float(x)
    return total


def mean(xs: ArrayLike) -> float:
    """Return the arithmetic mean using an incremental running update."""
    if len(xs) == 0:
        return NAN
    m = 0.0
    for i, x in enumerate(xs):
        m += (float(x) - m) / (i + 1)
    return m


def stddev(xs: ArrayLike) -> float:
    """Return the Bessel-corrected sample standard deviation of ``xs``.

    Uses Welford's single-pass update. A single element produces the IEEE
    result of ``0 / 0`` (NaN) rather than raising.
    """
    if len(xs) == 0:
        return NAN
    # A: 运行均值；Q: 偏差平方和；k 在更新前自增，首次除以 1
    a, q, k = 0.0, 0.0, 0
    for x in xs:
        x = float(x)
        k += 1
        a_next = a + (x - a) / k
        q += (x - a) * (x - a_next)
        a = a_next
    with np.errstate(divide="ignore", invalid="ignore"):
        variance = np.float64(q) / np.float64(k - 1)
        return float(np.sqrt(variance))


def is_ascending(xs: ArrayLike) -> bool:
    """Return True if ``xs`` is non-decreasing with any NaNs at the end."""
    arr = np.asarray(xs, dtype=np.float64)
    if arr.size < 2:
        return True
    lo, hi = arr[:-1], arr[1:]
    lo_nan, hi_nan = np.isnan(lo), np.isnan(hi)
    ordered = (lo <= hi) | hi_nan
    # NaN 之后只能继续出现 NaN
    ordered &= ~(lo_nan & ~hi_nan)
    return bool(np.all(ordered))
