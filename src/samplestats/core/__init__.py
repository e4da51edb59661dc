"""Entry point for the core library components."""

from __future__ import annotations

from .data import (
    NO_WEIGHTS,
    NoWeights,
    QuantileIndex,
    Sample,
    SampleError,
    SampleSummary,
    UnsortedSampleError,
    WeightVector,
    WeightedStdDevNotImplemented,
    bounds,
    describe,
    is_ascending,
    mean,
    stddev,
    summation,
)
from .utils import (
    ParamValidationError,
    RuntimeConfig,
    configure,
    get_config,
    get_logger,
)

__all__ = [
    "NO_WEIGHTS",
    "NoWeights",
    "QuantileIndex",
    "Sample",
    "SampleError",
    "SampleSummary",
    "UnsortedSampleError",
    "WeightVector",
    "WeightedStdDevNotImplemented",
    "bounds",
    "describe",
    "is_ascending",
    "mean",
    "stddev",
    "summation",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
