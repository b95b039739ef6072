"""
cratedbal public package initialization.

Translates database-agnostic schema descriptors into CrateDB DDL.
"""

from .core import (
    ColumnDescriptor,
    ColumnRename,
    CustomSQL,
    IndexDescriptor,
    LogicalType,
    StandardType,
    TableDiff,
    TableSchemaOptions,
)  # noqa: F401
from .dialects import CratePlatform, PlatformCapabilities, get_platform  # noqa: F401
from .errors import (
    InvalidArgumentError,
    PlatformConfigurationError,
    PlatformError,
    UnsupportedOperationError,
)  # noqa: F401
from .hooks import SchemaEventDispatcher  # noqa: F401
from .schema import SchemaBuilder  # noqa: F401

__all__ = [
    "ColumnDescriptor",
    "ColumnRename",
    "CratePlatform",
    "CustomSQL",
    "IndexDescriptor",
    "InvalidArgumentError",
    "LogicalType",
    "PlatformCapabilities",
    "PlatformConfigurationError",
    "PlatformError",
    "SchemaBuilder",
    "SchemaEventDispatcher",
    "StandardType",
    "TableDiff",
    "TableSchemaOptions",
    "UnsupportedOperationError",
    "get_platform",
]
