"""
Error hierarchy raised by cratedbal platforms and builders.
"""

from __future__ import annotations


class PlatformError(RuntimeError):
    """Base error for platform-related failures."""


class UnsupportedOperationError(PlatformError):
    """
    Raised when the target dialect cannot express a generic operation.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Operation '{operation}' is not supported by platform.")


class InvalidArgumentError(PlatformError, ValueError):
    """Raised when a descriptor is malformed in a way the platform can detect."""


class PlatformConfigurationError(PlatformError):
    """Raised when platform configuration is missing or invalid."""
