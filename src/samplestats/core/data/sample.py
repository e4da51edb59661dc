"""
Possibly weighted collections of real-valued observations.

Responsibilities
  - Hold sample values, optional per-value weights and a sortedness claim.
  - Compute bounds, sum, total weight, mean, standard deviation, percentiles
    and the interquartile range, honouring zero-weight exclusions.
  - Sort values and weights jointly in place, and produce independent copies.

Usage Context
  - Callers build a ``Sample`` directly, optionally ``sort()`` it once, then
    issue any number of read-only queries.

Limitations
  - ``sorted=True`` is trusted without re-scanning; mutating ``values`` behind
    the flag's back gives undefined results (enable ``verify_sorted`` in the
    runtime config to check the claim while debugging).
  - Weighted standard deviation is not implemented and raises.
  - No internal locking; hand out ``copy()`` results to concurrent sorters.
"""
# 说明：可带权重的样本数据模型及其统计运算。
# 职责：
# - Sample：保存样本取值、可选权重（NoWeights / WeightVector 和类型）以及“已升序”标记
# - bounds / sum / weight / mean / stddev / percentile / iqr：零权重条目不参与最值、求和、均值与分位数
# - sort：基于单次稳定 argsort 置换同时重排取值与权重，保持二者一一对应
# - copy：深拷贝取值与权重序列，返回与原样本互不共享存储的新样本
# 约定：
# - 空样本或总权重为 0 时通过 NaN 返回，而不是抛出异常
# - sorted 标记由调用方声明或由 sort() 设置，读取时默认不再重复校验

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from . import statistics
from .quantile_index import QuantileIndex
from .summary import SampleSummary, describe
from .weights import NO_WEIGHTS, NoWeights, WeightSpec, WeightVector, as_weight_spec
from samplestats.core.utils.config import get_config
from samplestats.core.utils.logging import get_logger
from samplestats.core.utils.param_validation import as_real, ensure, validate_arguments

logger = get_logger(__name__)

NAN = math.nan


class SampleError(RuntimeError):
    """Base class for failures raised by sample operations."""


class UnsortedSampleError(SampleError):
    """Raised when a sample flagged as sorted turns out not to be ascending."""
    # 仅在开启 verify_sorted 调试校验时抛出


class WeightedStdDevNotImplemented(SampleError, NotImplementedError):
    """Raised by ``Sample.stddev`` for weighted samples."""


def _as_values(values: Any) -> List[float]:
    # list 保留原对象（不复制）但就地转换元素为 float；其它序列或 numpy 数组转换为新的 float 列表
    if isinstance(values, list):
        values[:] = [float(x) for x in values]
        return values
    if isinstance(values, np.ndarray):
        return values.astype(np.float64).ravel().tolist()
    return [float(x) for x in values]


def _pctile(value: Any) -> float:
    return as_real(value, label="pctile")


@dataclass
class Sample:
    """
    A collection of possibly weighted real-valued observations.

    - Configuration
      - values: Observations; a list is kept as the same object with its
        elements converted to float in place, other sequences and numpy arrays
        are converted to a new list of floats. A weight list is handled the
        same way, so ``sort()`` reorders the caller's values and weights together.
      - weights: ``None``/``NO_WEIGHTS`` for an unweighted sample, otherwise a
        sequence (or ``WeightVector``) of non-negative weights, one per value.
      - sorted: Caller's claim that ``values`` is already ascending.

    - Behavior
      - Zero-weighted values stay in the sequence but never contribute to
        ``bounds``, ``sum``, ``mean`` or ``percentile``.
      - Every accessor except ``sort`` is read-only; order-dependent queries on
        an unsorted sample work on a sorted copy.

    - Usage Notes
      - With ``strict_validation`` enabled (the default) construction rejects
        mismatched weight lengths and negative or NaN weights with
        ``ParamValidationError``.
    """

    values: List[float] = field(default_factory=list)
    weights: WeightSpec = NO_WEIGHTS
    sorted: bool = False

    def __post_init__(self) -> None:
        self.values = _as_values(self.values)
        self.weights = as_weight_spec(self.weights)
        if get_config().strict_validation:
            self.validate()

    def __len__(self) -> int:
        return len(self.values)

    @property
    def is_weighted(self) -> bool:
        return isinstance(self.weights, WeightVector)

    def validate(self) -> None:
        """Check the weight invariants, raising ``ParamValidationError``."""
        if isinstance(self.weights, NoWeights):
            return
        ensure(
            len(self.weights) == len(self.values),
            f"weights length {len(self.weights)} does not match values length {len(self.values)}",
        )
        for i, w in enumerate(self.weights):
            # NaN 权重同样不满足 w >= 0
            ensure(w >= 0, f"weights[{i}] must be non-negative, got {w!r}")

    def _check_sorted_claim(self) -> None:
        if not (self.sorted and get_config().verify_sorted):
            return
        if not statistics.is_ascending(self.values):
            logger.warning("Sample of %d values is flagged sorted but is not ascending.", len(self.values))
            raise UnsortedSampleError("sample is flagged as sorted but its values are not ascending")

    def bounds(self) -> Tuple[float, float]:
        """Return ``(min, max)``, ignoring zero-weighted values.

        Constant time when the sample is sorted and has no leading or trailing
        zero weights.
        """
        if not self.values or (not self.sorted and not self.is_weighted):
            return statistics.bounds(self.values)

        if self.sorted:
            self._check_sorted_claim()
            if isinstance(self.weights, NoWeights):
                return self.values[0], self.values[-1]
            return self._sorted_weighted_bounds()

        lo: Optional[float] = None
        hi: Optional[float] = None
        for x, w in zip(self.values, self.weights):
            if w == 0:
                continue
            if lo is None or hi is None:
                lo = hi = x
                continue
            if x < lo:
                lo = x
            if x > hi:
                hi = x
        if lo is None or hi is None:
            return NAN, NAN
        return lo, hi

    def _sorted_weighted_bounds(self) -> Tuple[float, float]:
        weights = self.weights.data  # type: ignore[union-attr]
        n = len(self.values)
        first = next((i for i in range(n) if weights[i] != 0), None)
        if first is None:
            return NAN, NAN
        last = next(i for i in range(n - 1, first - 1, -1) if weights[i] != 0)
        return self.values[first], self.values[last]

    def sum(self) -> float:
        """Return the (possibly weighted) sum of the sample."""
        if isinstance(self.weights, NoWeights):
            return statistics.summation(self.values)
        total = 0.0
        for x, w in zip(self.values, self.weights):
            total += x * w
        return total

    def weight(self) -> float:
        """Return the total weight: the value count when unweighted."""
        if isinstance(self.weights, NoWeights):
            return float(len(self.values))
        return self.weights.total()

    def mean(self) -> float:
        """Return the (possibly weighted) arithmetic mean.

        NaN for an empty sample or one whose weights are all zero.
        """
        if not self.values or isinstance(self.weights, NoWeights):
            return statistics.mean(self.values)

        # 加权增量均值：m_i = m_(i-1) + (x_i - m_(i-1)) * w_i / wsum_i
        # 零权重条目直接跳过，避免前缀总权重为 0 时出现 0/0
        m, wsum = 0.0, 0.0
        for x, w in zip(self.values, self.weights):
            if w == 0:
                continue
            wsum += w
            m += (x - m) * w / wsum
        if wsum == 0:
            return NAN
        return m

    def stddev(self) -> float:
        """Return the sample standard deviation (unweighted samples only)."""
        if not self.values or isinstance(self.weights, NoWeights):
            return statistics.stddev(self.values)
        raise WeightedStdDevNotImplemented("weighted standard deviation is not implemented")

    @validate_arguments({"pctile": _pctile})
    def percentile(self, pctile: float) -> float:
        """Return the ``pctile``-th value of the sample.

        ``pctile`` is clamped to [0, 1]. Returns NaN for an empty sample, a NaN
        ``pctile`` or a weighted sample whose weights are all zero.
        """
        if not self.values or math.isnan(pctile):
            return NAN
        if pctile <= 0:
            return self.bounds()[0]
        if pctile >= 1:
            return self.bounds()[1]

        total = self.weight()
        if total == 0:
            return NAN

        if self.sorted:
            self._check_sorted_claim()
            s = self
        else:
            s = self.copy().sort()

        if isinstance(s.weights, NoWeights):
            return s.values[int(pctile * (len(s.values) - 1))]

        # 线性扫描：逐个减去权重，target 首次变为负数处即为所求
        target = total * pctile
        last = NAN
        for x, w in zip(s.values, s.weights):
            if w == 0:
                continue
            target -= w
            last = x
            if target < 0:
                return x
        return last

    def iqr(self) -> float:
        """Return the interquartile range of the sample."""
        s = self if self.sorted else self.copy().sort()
        return s.percentile(0.75) - s.percentile(0.25)

    def sort(self) -> "Sample":
        """Sort the sample in place, keeping weights paired, and return it."""
        if self.sorted or statistics.is_ascending(self.values):
            self.sorted = True
            return self

        order = np.argsort(np.asarray(self.values, dtype=np.float64), kind="stable").tolist()
        self.values[:] = [self.values[i] for i in order]
        if isinstance(self.weights, WeightVector):
            data = self.weights.data
            data[:] = [data[i] for i in order]
        logger.debug("Sorted %d values (weighted=%s).", len(self.values), self.is_weighted)
        self.sorted = True
        return self

    def copy(self) -> "Sample":
        """Return a copy sharing no storage with this sample."""
        weights = self.weights.copy() if isinstance(self.weights, WeightVector) else NO_WEIGHTS
        return Sample(list(self.values), weights, self.sorted)

    def quantile_index(self) -> QuantileIndex:
        """Precompute a cumulative-weight index for repeated percentile queries."""
        return QuantileIndex.from_sample(self)

    def describe(self) -> SampleSummary:
        return describe(self)

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[float, float]], *, sorted: bool = False) -> "Sample":
        """Build a weighted sample from ``(value, weight)`` pairs."""
        values = [float(x) for x, _ in pairs]
        weights = [float(w) for _, w in pairs]
        return cls(values, weights, sorted)
