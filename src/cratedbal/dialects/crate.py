"""
CrateDB platform implementation.
"""

from __future__ import annotations

import sys
from numbers import Number
from typing import Any, Final, Mapping, Sequence

from ..core.descriptors import ColumnDescriptor, IndexDescriptor
from ..core.types import CustomSQL, LogicalType
from ..errors import InvalidArgumentError, UnsupportedOperationError
from .base import Platform, PlatformCapabilities
from .keywords import is_reserved
from .type_mapping import CRATE_TYPE_MAPPING, TypeMapping

_TYPE_DECLARATIONS: Final[Mapping[LogicalType, str]] = {
    LogicalType.SMALLINT: "SHORT",
    LogicalType.INTEGER: "INT",
    # no 64-bit integer type; values are stored as DOUBLE
    LogicalType.BIGINT: "DOUBLE",
    LogicalType.BOOLEAN: "BOOLEAN",
    LogicalType.STRING: "STRING",
    LogicalType.TEXT: "STRING",
    LogicalType.FLOAT: "FLOAT",
    LogicalType.DOUBLE: "DOUBLE",
    LogicalType.DATETIME: "TIMESTAMP",
    LogicalType.DATETIMETZ: "TIMESTAMP",
    LogicalType.DATE: "TIMESTAMP",
    LogicalType.TIME: "TIMESTAMP",
}


class CratePlatform:
    """
    CrateDB platform: a single string type, full-text indexes only, and no
    sequences, foreign keys or destructive column changes.
    """

    name: Final[str] = "crate"
    capabilities: Final[PlatformCapabilities] = PlatformCapabilities(
        supports_sequences=False,
        supports_schemas=True,
        supports_identity_columns=True,
        supports_comment_on_statement=True,
        supports_inline_column_comments=True,
        prefers_sequences=False,
    )
    varchar_max_length: Final[int] = sys.maxsize
    datetime_tz_format: Final[str] = "%Y-%m-%d %H:%M:%S%z"

    def __init__(self) -> None:
        self.type_mapping = TypeMapping(CRATE_TYPE_MAPPING)

    # Capability probe ----------------------------------------------------
    def supports_sequences(self) -> bool:
        return self.capabilities.supports_sequences

    def supports_schemas(self) -> bool:
        return self.capabilities.supports_schemas

    def supports_identity_columns(self) -> bool:
        return self.capabilities.supports_identity_columns

    def supports_comment_on_statement(self) -> bool:
        return self.capabilities.supports_comment_on_statement

    def supports_inline_column_comments(self) -> bool:
        return self.capabilities.supports_inline_column_comments

    def prefers_sequences(self) -> bool:
        return self.capabilities.prefers_sequences

    def now_expression(self) -> str:
        raise UnsupportedOperationError("now_expression")

    def truncate_table_sql(self, table_name: str, cascade: bool = False) -> str:
        raise UnsupportedOperationError("truncate_table_sql")

    def read_lock_sql(self) -> str:
        raise UnsupportedOperationError("read_lock_sql")

    # Identifiers ---------------------------------------------------------
    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def is_reserved_keyword(self, word: str) -> bool:
        return is_reserved(word)

    def sql_result_casing(self, column: str) -> str:
        """
        Result sets come back with lowercase column names.
        """
        return column.lower()

    # Types ---------------------------------------------------------------
    def logical_type_for(
        self, native_type: str, default: LogicalType | None = None
    ) -> LogicalType | None:
        return self.type_mapping.logical_type_for(native_type, default)

    def type_declaration(self, logical_type: LogicalType) -> str:
        if logical_type is LogicalType.BLOB:
            return self.blob_type_declaration()
        return _TYPE_DECLARATIONS[logical_type]

    def blob_type_declaration(self) -> str:
        raise UnsupportedOperationError("blob_type_declaration")

    def common_integer_type_declaration(self) -> str:
        # no UNSIGNED / ZEROFILL style modifiers
        return ""

    # Declarations --------------------------------------------------------
    def declare_column(self, name: str, column: ColumnDescriptor) -> str:
        column_type = column.column_type
        if isinstance(column_type, CustomSQL):
            column_def = column_type.declaration
        else:
            column_def = self.type_declaration(column_type.logical_type)

        if self.supports_inline_column_comments() and column.comment:
            column_def += f" COMMENT '{column.comment}'"

        return f"{name} {column_def}"

    def declare_columns(self, columns: Sequence[ColumnDescriptor]) -> str:
        return ", ".join(self.declare_column(column.quoted_name(self), column) for column in columns)

    def declare_index(self, index: IndexDescriptor) -> str:
        if not index.columns:
            raise InvalidArgumentError("Incomplete definition. 'columns' required.")
        column_list = ", ".join(index.columns)
        return f"INDEX {index.quoted_name(self)} using fulltext ({column_list})"

    def comment_on_column_sql(self, table_name: str, column_name: str, comment: str) -> str:
        escaped = comment.replace("'", "''")
        return f"COMMENT ON COLUMN {table_name}.{column_name} IS '{escaped}'"

    # Expressions ---------------------------------------------------------
    def substring_expression(self, value: str, start: Any, length: Any = None) -> str:
        if length is None:
            return f"SUBSTR({value}, {start})"
        return f"SUBSTR({value}, {start}, {length})"

    def regexp_expression(self) -> str:
        # no regular expression operator, plain LIKE matching only
        return "LIKE"

    def date_diff_expression(self, date1: str, date2: str) -> str:
        return f"{date1} - {date2}"

    def convert_booleans(self, item: Any) -> Any:
        """
        Convert booleans and numbers to the literals ``'true'`` / ``'false'``.

        Lists and tuples are converted element-wise; anything else is
        returned unchanged.
        """
        if isinstance(item, (list, tuple)):
            return type(item)(self._convert_boolean(value) for value in item)
        return self._convert_boolean(item)

    @staticmethod
    def _convert_boolean(value: Any) -> Any:
        if isinstance(value, (bool, Number)):
            return "true" if value else "false"
        return value

    # Introspection -------------------------------------------------------
    def list_databases_sql(self) -> str:
        return "SELECT table_name FROM information_schema.tables"

    def list_tables_sql(self) -> str:
        return "SELECT table_name, schema_name FROM information_schema.tables"

    def list_table_columns_sql(self, table: str, database: str | None = None) -> str:
        # TODO: filter on table_name / schema_name once callers rely on per-table results
        return "SELECT column_name as field, data_type as type from information_schema.columns"


def get_crate_platform() -> Platform:
    return CratePlatform()
