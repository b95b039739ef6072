"""
Core descriptors and type definitions shared by platforms and builders.
"""

from .descriptors import (
    ColumnDescriptor,
    ColumnRename,
    DescriptorError,
    IndexDescriptor,
    TableDiff,
    TableSchemaOptions,
)
from .types import ColumnType, CustomSQL, LogicalType, StandardType

__all__ = [
    "ColumnDescriptor",
    "ColumnRename",
    "ColumnType",
    "CustomSQL",
    "DescriptorError",
    "IndexDescriptor",
    "LogicalType",
    "StandardType",
    "TableDiff",
    "TableSchemaOptions",
]
