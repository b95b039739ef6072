"""
Platform strategy interfaces describing DDL generation behaviors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from ..core.descriptors import ColumnDescriptor, IndexDescriptor
from ..core.types import LogicalType


@dataclass(frozen=True)
class PlatformCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_sequences: bool = False
    supports_schemas: bool = False
    supports_identity_columns: bool = False
    supports_comment_on_statement: bool = False
    supports_inline_column_comments: bool = False
    prefers_sequences: bool = False


class Platform(Protocol):
    """
    Strategy interface consumed by the schema builder and the host framework.
    """

    @property
    def name(self) -> str: ...

    @property
    def capabilities(self) -> PlatformCapabilities: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def is_reserved_keyword(self, word: str) -> bool: ...

    def logical_type_for(self, native_type: str, default: LogicalType | None = None) -> LogicalType | None: ...

    def declare_column(self, name: str, column: ColumnDescriptor) -> str: ...

    def declare_columns(self, columns: Sequence[ColumnDescriptor]) -> str: ...

    def declare_index(self, index: IndexDescriptor) -> str: ...

    def comment_on_column_sql(self, table_name: str, column_name: str, comment: str) -> str: ...

    def convert_booleans(self, item: Any) -> Any: ...
