"""
Optional per-value weights expressed as an explicit sum type.

Responsibilities
  - Distinguish "no weights" from "weights present" without a nullable array.
  - Normalise caller-supplied weight inputs into one of the two variants.

Usage Context
  - Stored on ``Sample.weights``; statistics dispatch on the variant.

Limitations
  - ``NoWeights`` means every value has implicit weight 1; it is not the same
    as a stored vector of ones, which takes the weighted code paths.
"""
# 说明：可选权重的显式和类型（sum type）表示。
# 职责：
# - NoWeights / NO_WEIGHTS：无权重变体，所有取值隐式权重为 1，走无权快速路径
# - WeightVector：显式权重向量变体，与 Sample.values 逐位置对应
# - as_weight_spec(...)：将 None / 序列 / numpy 数组 / 已有变体统一规范化

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Union

import numpy as np


@dataclass(frozen=True)
class NoWeights:
    """Marker variant: the sample is unweighted."""

    def __repr__(self) -> str:
        return "NO_WEIGHTS"


NO_WEIGHTS = NoWeights()


@dataclass
class WeightVector:
    """
    Explicit per-value weights.

    - Configuration
      - data: Mutable list of non-negative floats, parallel to the sample values.

    - Behavior
      - Behaves like a read-only sequence for iteration and indexing.
      - ``total()`` sums the weights left to right.

    - Usage Notes
      - ``Sample.sort`` rewrites ``data`` in place to keep the value pairing.
    """

    data: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    def __getitem__(self, index: int) -> float:
        return self.data[index]

    def total(self) -> float:
        total = 0.0
        for w in self.data:
            total += w
        return total

    def copy(self) -> "WeightVector":
        return WeightVector(list(self.data))


WeightSpec = Union[NoWeights, WeightVector]


def as_weight_spec(weights: Any) -> WeightSpec:
    """Normalise ``weights`` into ``NO_WEIGHTS`` or a ``WeightVector``."""
    if weights is None or isinstance(weights, NoWeights):
        return NO_WEIGHTS
    if isinstance(weights, WeightVector):
        return weights
    if isinstance(weights, np.ndarray):
        return WeightVector(weights.astype(np.float64).ravel().tolist())
    # 与 Sample.values 一致：list 保留原对象，sort() 时调用方的取值与权重同步重排
    if isinstance(weights, list):
        weights[:] = [float(w) for w in weights]
        return WeightVector(weights)
    return WeightVector([float(w) for w in weights])
