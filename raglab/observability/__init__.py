"""
Observability module.

Provides logging configuration and safe structured-logging helpers.
"""

from raglab.observability.logger import configure_logging
from raglab.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)

__all__ = [
    "configure_logging",
    "log_with_context",
    "log_exception_with_context",
    "safe_log_value",
]
