"""
Cumulative-weight index for repeated percentile queries.

Responsibilities
  - Snapshot a sorted copy of a sample together with its cumulative weights.
  - Answer percentile queries in O(log n) via binary search.

Usage Context
  - Use when many percentiles are read from the same weighted sample; a single
    query is just as well served by ``Sample.percentile``.

Limitations
  - The index is a snapshot: later changes to the source sample are not seen.
  - Agrees with the linear scan of ``Sample.percentile`` whenever the running
    weight sums are exact (e.g. integer weights); with arbitrary floats the two
    may pick neighbouring values at exact cumulative ties.
"""
# 说明：面向重复分位数查询的累积权重索引。
# 职责：
# - from_sample(...)：基于样本的有序副本构建索引，加权样本预先计算 numpy.cumsum 累积权重
# - percentile(...)：与 Sample.percentile 相同的截断 / NaN 约定，加权查询使用 searchsorted 二分查找
# - percentiles(...)：批量查询多个分位点

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional

import numpy as np

from samplestats.core.utils.param_validation import as_real, validate_arguments

if TYPE_CHECKING:
    from .sample import Sample

NAN = math.nan


def _pctile(value: object) -> float:
    return as_real(value, label="pctile")


@dataclass(frozen=True, eq=False)
class QuantileIndex:
    """
    Immutable percentile lookup table built from a sample.

    - Configuration
      - values: Ascending sample values.
      - cumulative: Running weight totals, or ``None`` for unweighted samples.
      - total: Total weight of the sample.
      - lo / hi: Bounds of the sample, ignoring zero weights.
    """

    values: np.ndarray
    cumulative: Optional[np.ndarray]
    total: float
    lo: float
    hi: float

    @classmethod
    def from_sample(cls, sample: "Sample") -> "QuantileIndex":
        # 从不在调用方样本上排序：未排序时先复制再排序
        s = sample if sample.sorted else sample.copy().sort()
        lo, hi = s.bounds()
        values = np.array(s.values, dtype=np.float64)
        if not s.is_weighted:
            return cls(values=values, cumulative=None, total=float(values.size), lo=lo, hi=hi)
        weights = np.array(list(s.weights), dtype=np.float64)
        # np.cumsum 按顺序逐项累加，与 WeightVector.total() 的左到右求和一致
        cumulative = np.cumsum(weights)
        total = float(cumulative[-1]) if cumulative.size else 0.0
        return cls(values=values, cumulative=cumulative, total=total, lo=lo, hi=hi)

    def __len__(self) -> int:
        return int(self.values.size)

    @validate_arguments({"pctile": _pctile})
    def percentile(self, pctile: float) -> float:
        n = self.values.size
        if n == 0 or math.isnan(pctile):
            return NAN
        if pctile <= 0:
            return self.lo
        if pctile >= 1:
            return self.hi
        if self.cumulative is None:
            return float(self.values[int(pctile * (n - 1))])
        if self.total == 0:
            return NAN
        # 第一个累积权重严格大于 target 的位置
        i = int(np.searchsorted(self.cumulative, self.total * pctile, side="right"))
        if i >= n:
            return self.hi
        return float(self.values[i])

    def percentiles(self, pctiles: Iterable[float]) -> List[float]:
        return [self.percentile(p) for p in pctiles]
