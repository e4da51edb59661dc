"""
One-shot descriptive summary of a sample.
"""
# 说明：样本描述性统计汇总。
# 职责：
# - SampleSummary：汇总数量、总权重、求和、均值、标准差、最值、四分位数与 IQR
# - describe(...)：在同一个有序副本上计算全部字段，不修改调用方样本
# 约定：
# - 加权样本不支持标准差，stddev 字段记为 None

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

from samplestats.core.utils.logging import get_logger

if TYPE_CHECKING:
    from .sample import Sample

logger = get_logger(__name__)


@dataclass
class SampleSummary:
    count: int
    weight: float
    sum: float
    mean: float
    stddev: Optional[float]
    min: float
    max: float
    p25: float
    median: float
    p75: float
    iqr: float

    def to_dict(self) -> Dict[str, Any]:
        # 转换为基础类型字典，便于序列化与下游消费
        return {
            "count": int(self.count),
            "weight": float(self.weight),
            "sum": float(self.sum),
            "mean": float(self.mean),
            "stddev": None if self.stddev is None else float(self.stddev),
            "min": float(self.min),
            "max": float(self.max),
            "p25": float(self.p25),
            "median": float(self.median),
            "p75": float(self.p75),
            "iqr": float(self.iqr),
        }


def describe(sample: "Sample") -> SampleSummary:
    """Summarise ``sample`` using a single sorted copy."""
    s = sample if sample.sorted else sample.copy().sort()
    lo, hi = s.bounds()
    p25 = s.percentile(0.25)
    p75 = s.percentile(0.75)
    logger.debug("Describing sample of %d values (weighted=%s).", len(s.values), s.is_weighted)
    return SampleSummary(
        count=len(s.values),
        weight=s.weight(),
        sum=s.sum(),
        mean=s.mean(),
        stddev=None if s.is_weighted else s.stddev(),
        min=lo,
        max=hi,
        p25=p25,
        median=s.percentile(0.5),
        p75=p75,
        iqr=p75 - p25,
    )
