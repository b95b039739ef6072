"""
Utility helpers shared across cratedbal packages.
"""

from .logging import configure_logging, get_correlation_id, get_logger, set_correlation_id

__all__ = ["configure_logging", "get_correlation_id", "get_logger", "set_correlation_id"]
