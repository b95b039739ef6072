"""
Immutable schema descriptors consumed by platforms and the schema builder.

Descriptors are created by the host per operation and discarded once the
generated SQL has been returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional, Sequence

from .types import ColumnType, CustomSQL, LogicalType, StandardType

if TYPE_CHECKING:
    from ..dialects.base import Platform


class DescriptorError(TypeError):
    """Raised when a descriptor is constructed with an unusable value."""


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    A single column: name, type and the optional extras a host may attach.

    ``length`` and ``default`` are kept for the host's benefit; platforms
    decide whether they are rendered.
    """

    name: str
    column_type: ColumnType
    length: Optional[int] = None
    default: Any = None
    comment: Optional[str] = None
    quoted: bool = False

    def __post_init__(self) -> None:
        column_type = self.column_type
        if isinstance(column_type, LogicalType):
            object.__setattr__(self, "column_type", StandardType(column_type))
        elif not isinstance(column_type, (StandardType, CustomSQL)):
            raise DescriptorError(
                f"Column '{self.name}' requires a LogicalType, StandardType or CustomSQL, "
                f"received {column_type!r}"
            )

    @property
    def logical_type(self) -> LogicalType | None:
        if isinstance(self.column_type, StandardType):
            return self.column_type.logical_type
        return None

    def quoted_name(self, platform: "Platform") -> str:
        if self.quoted:
            return platform.quote_identifier(self.name)
        return self.name


@dataclass(frozen=True)
class IndexDescriptor:
    name: str
    columns: tuple[str, ...] = ()
    quoted: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))

    def quoted_name(self, platform: "Platform") -> str:
        if self.quoted:
            return platform.quote_identifier(self.name)
        return self.name


@dataclass(frozen=True)
class TableSchemaOptions:
    """
    Extra CREATE TABLE options.

    ``foreign_keys`` is ``None`` when absent; any other value, including an
    empty sequence, counts as a foreign key request.
    """

    primary_key: Optional[Sequence[str]] = None
    indexes: Sequence[IndexDescriptor] = ()
    foreign_keys: Optional[Sequence[Any]] = None

    def primary_key_columns(self) -> list[str]:
        # dict.fromkeys keeps first-seen order while dropping duplicates
        return list(dict.fromkeys(self.primary_key or ()))


@dataclass(frozen=True)
class ColumnRename:
    old_name: str
    column: ColumnDescriptor


@dataclass(frozen=True)
class TableDiff:
    """
    Difference between an existing table and its desired definition.
    """

    name: str
    added_columns: Sequence[ColumnDescriptor] = field(default_factory=tuple)
    removed_columns: Sequence[ColumnDescriptor] = field(default_factory=tuple)
    changed_columns: Sequence[ColumnDescriptor] = field(default_factory=tuple)
    renamed_columns: Sequence[ColumnRename] = field(default_factory=tuple)
    new_name: Optional[str] = None
