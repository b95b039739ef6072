"""
Logical column types and the column type tagged union.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class LogicalType(str, Enum):
    """
    Dialect-independent column types understood by the host framework.
    """

    SMALLINT = "smallint"
    INTEGER = "integer"
    BIGINT = "bigint"
    BOOLEAN = "boolean"
    STRING = "string"
    TEXT = "text"
    FLOAT = "float"
    DOUBLE = "double"
    DATETIME = "timestamp"
    DATETIMETZ = "timestamptz"
    DATE = "date"
    TIME = "time"
    BLOB = "blob"


@dataclass(frozen=True)
class StandardType:
    logical_type: LogicalType

    def __post_init__(self) -> None:
        # coerce enum value strings such as "blob"
        object.__setattr__(self, "logical_type", LogicalType(self.logical_type))


@dataclass(frozen=True)
class CustomSQL:
    """Raw type clause supplied by the caller, rendered verbatim."""

    declaration: str


ColumnType = Union[StandardType, CustomSQL]
