"""Shared pytest configuration and path setup for test modules."""

import sys
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)

from samplestats.core.utils.config import get_config  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_runtime_config():
    # 每个测试结束后恢复全局 RuntimeConfig，避免 configure(...) 的修改泄漏到其它测试
    cfg = get_config()
    saved = dict(vars(cfg))
    yield cfg
    for key, value in saved.items():
        setattr(cfg, key, value)
