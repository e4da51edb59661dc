"""
Unit tests for validation helpers and decorators.
"""
# 说明：参数验证工具（ensure / ensure_type / as_real / validate_arguments）的单元测试。

import numpy as np
import pytest

from samplestats.core.utils import (
    ParamValidationError,
    as_real,
    ensure,
    ensure_type,
    validate_arguments,
)


def test_ensure_passes_and_fails() -> None:
    ensure(True, "should not raise")
    with pytest.raises(ParamValidationError):
        ensure(False, "error")
    with pytest.raises(KeyError):
        ensure(False, "error", error=KeyError)


def test_ensure_type_checks() -> None:
    ensure_type(5, (int,), label="value")
    with pytest.raises(ParamValidationError, match="value must be instance of int"):
        ensure_type("text", (int,), label="value")


def test_as_real() -> None:
    assert as_real(1) == 1.0
    assert as_real(np.float64(0.25)) == 0.25
    with pytest.raises(ParamValidationError):
        as_real(False)
    with pytest.raises(ParamValidationError):
        as_real("1.0")


def test_validate_arguments_decorator() -> None:
    @validate_arguments({"x": as_real})
    def double(x: float) -> float:
        return x * 2

    assert double(4) == 8.0
    assert double(x=1) == 2.0
    with pytest.raises(ParamValidationError):
        double("bad")  # type: ignore[arg-type]
