"""Shared utility helpers used across the core library."""

from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    get_logger,
    configure_logging,
)
from .param_validation import (
    as_real,
    ensure,
    ensure_type,
    validate_arguments,
    ParamValidationError,
)

__all__ = [
    "RuntimeConfig",
    "get_config",
    "configure",
    "get_logger",
    "configure_logging",
    "as_real",
    "ensure",
    "ensure_type",
    "validate_arguments",
    "ParamValidationError",
]
