"""Sample model and descriptive statistics."""

from .statistics import (
    ArrayLike,
    bounds,
    summation,
    mean,
    stddev,
    is_ascending,
)
from .weights import (
    NO_WEIGHTS,
    NoWeights,
    WeightVector,
    WeightSpec,
    as_weight_spec,
)
from .quantile_index import QuantileIndex
from .summary import SampleSummary, describe
from .sample import (
    Sample,
    SampleError,
    UnsortedSampleError,
    WeightedStdDevNotImplemented,
)

__all__ = [
    "ArrayLike",
    "bounds",
    "summation",
    "mean",
    "stddev",
    "is_ascending",
    "NO_WEIGHTS",
    "NoWeights",
    "WeightVector",
    "WeightSpec",
    "as_weight_spec",
    "QuantileIndex",
    "SampleSummary",
    "describe",
    "Sample",
    "SampleError",
    "UnsortedSampleError",
    "WeightedStdDevNotImplemented",
]
