"""
Property-based tests for the Sample model and unweighted statistics.
"""
# 说明：基于 Hypothesis 的样本统计属性测试。
# 覆盖：
# - 增量均值与两遍求和均值在浮点容差内一致；bounds 与内置 min/max 一致
# - 移除全部零权重条目不会改变 bounds / sum / mean / percentile 结果
# - percentile(0) / percentile(1) 与 bounds 端点一致；IQR 非负
# - sort 幂等且保持取值-权重配对；copy 后排序不影响原样本
# - QuantileIndex 对整数权重与线性扫描结果完全一致

import math

import numpy as np
import pytest
from hypothesis import given, strategies as st

from samplestats.core.data import Sample, bounds, mean, stddev


# ------------------------------------------------------------------ Strategies
finite_floats = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)
rank = st.floats(min_value=-0.5, max_value=1.5, allow_nan=False)


@st.composite
def weighted_lists(draw, min_size=0, max_size=30):
    # 生成取值与等长的小整数权重（含 0），保证累积权重的浮点运算是精确的
    values = draw(st.lists(finite_floats, min_size=min_size, max_size=max_size))
    weights = draw(
        st.lists(st.integers(min_value=0, max_value=10).map(float),
                 min_size=len(values),
                 max_size=len(values)))
    return values, weights


def _same(a: float, b: float) -> bool:
    # NaN 感知的相等比较
    return (math.isnan(a) and math.isnan(b)) or a == b


# ------------------------------------------------------------------ Unweighted
@given(st.lists(finite_floats, min_size=1, max_size=50))
def test_incremental_mean_matches_two_pass(values):
    assert mean(values) == pytest.approx(sum(values) / len(values), rel=1e-9, abs=1e-6)


@given(st.lists(finite_floats, min_size=1, max_size=50))
def test_bounds_match_builtins(values):
    assert bounds(values) == (min(values), max(values))
    assert Sample(list(values)).bounds() == (min(values), max(values))


@given(st.lists(finite_floats, min_size=2, max_size=50))
def test_stddev_matches_numpy(values):
    assert stddev(values) == pytest.approx(float(np.std(values, ddof=1)), rel=1e-6, abs=1e-6)


@given(finite_floats, st.integers(min_value=2, max_value=20))
def test_stddev_of_constant_sequence_is_zero(value, n):
    assert stddev([value] * n) == 0.0


@given(finite_floats)
def test_stddev_of_single_value_is_not_finite(value):
    assert not math.isfinite(stddev([value]))


# ------------------------------------------------------------------ Weighted
@given(weighted_lists(), rank)
def test_zero_weights_never_matter(data, p):
    values, weights = data
    full = Sample(list(values), list(weights))
    kept = [(x, w) for x, w in zip(values, weights) if w != 0]
    trimmed = Sample([x for x, _ in kept], [w for _, w in kept])

    for a, b in zip(full.bounds(), trimmed.bounds()):
        assert _same(a, b)
    assert full.sum() == trimmed.sum()
    assert _same(full.mean(), trimmed.mean())
    assert _same(full.percentile(p), trimmed.percentile(p))


@given(weighted_lists(min_size=1))
def test_percentile_endpoints_match_bounds(data):
    values, weights = data
    for s in (Sample(list(values)), Sample(list(values), list(weights))):
        lo, hi = s.bounds()
        assert _same(s.percentile(0), lo)
        assert _same(s.percentile(1), hi)


@given(weighted_lists(min_size=1))
def test_iqr_is_non_negative(data):
    values, weights = data
    assert Sample(list(values)).iqr() >= 0
    weighted = Sample(list(values), list(weights))
    if weighted.weight() > 0:
        assert weighted.iqr() >= 0


@given(weighted_lists())
def test_sort_is_idempotent_and_keeps_pairs(data):
    values, weights = data
    s = Sample(list(values), list(weights)).sort()
    once = (list(s.values), list(s.weights))
    s.sorted = False
    s.sort()
    assert (s.values, s.weights.data) == once
    expected = sorted(zip(values, weights), key=lambda pair: pair[0])
    assert list(zip(s.values, s.weights)) == expected


@given(weighted_lists())
def test_copy_then_sort_leaves_original(data):
    values, weights = data
    original = Sample(list(values), list(weights))
    original.copy().sort()
    assert original.values == values
    assert original.weights.data == weights
    assert original.sorted is False


@given(weighted_lists(min_size=1), st.lists(rank, min_size=1, max_size=10))
def test_quantile_index_agrees_with_scan(data, ranks):
    values, weights = data
    s = Sample(list(values), list(weights))
    index = s.quantile_index()
    for p in ranks:
        assert _same(index.percentile(p), s.percentile(p))
