"""
Unit tests for logging utilities.
"""
# 说明：日志配置与 logger 获取的单元测试。
# 覆盖：
# - configure_logging(...)：根据给定日志级别初始化 logging 系统
# - 对未排序样本执行 sort() 时输出 DEBUG 日志；开启 verify_sorted 后对错误的有序声明输出 WARNING

import logging

import pytest

from samplestats.core.data import Sample, UnsortedSampleError
from samplestats.core.utils import configure, configure_logging, get_logger


def test_get_logger_returns_named_logger() -> None:
    configure_logging(level="INFO")
    logger = get_logger("samplestats.test")
    assert logger.name == "samplestats.test"
    assert logging.getLogger("samplestats").level == logging.INFO


def test_sort_logs_reorder(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="samplestats"):
        Sample([3.0, 1.0, 2.0], [1.0, 1.0, 1.0]).sort()
    assert "Sorted 3 values (weighted=True)" in caplog.text


def test_sort_of_ascending_input_is_silent(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="samplestats"):
        Sample([1.0, 2.0, 3.0]).sort()
    assert "Sorted" not in caplog.text


def test_false_sorted_claim_logs_warning(caplog) -> None:
    configure(verify_sorted=True)
    with caplog.at_level(logging.WARNING, logger="samplestats"):
        with pytest.raises(UnsortedSampleError):
            Sample([2.0, 1.0], sorted=True).bounds()
    assert "flagged sorted" in caplog.text
