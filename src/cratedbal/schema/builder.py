"""
Schema builder converting table descriptors into DDL statements.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..core.descriptors import ColumnDescriptor, TableDiff, TableSchemaOptions
from ..dialects.base import Platform
from ..errors import UnsupportedOperationError
from ..hooks.dispatcher import ALTER_TABLE, ALTER_TABLE_ADD_COLUMN, SchemaEventDispatcher
from ..utils import get_logger


class SchemaBuilder:
    """
    Produces platform-specific SQL for CREATE TABLE and ALTER TABLE.

    Every call is independent; a failing call emits no statements.
    """

    def __init__(self, platform: Platform, *, events: SchemaEventDispatcher | None = None) -> None:
        self.platform = platform
        self.events = events if events is not None else SchemaEventDispatcher()
        self.logger = get_logger("schema.builder")

    def create_table_sql(
        self,
        table_name: str,
        columns: Sequence[ColumnDescriptor],
        options: TableSchemaOptions | None = None,
    ) -> List[str]:
        options = options or TableSchemaOptions()
        if options.foreign_keys is not None:
            self._reject(table_name, "Create Table: foreign keys")

        self._warn_reserved(table_name, columns)
        fields = self.platform.declare_columns(columns)

        key_columns = options.primary_key_columns()
        if key_columns:
            fields += f", PRIMARY KEY({', '.join(key_columns)})"

        for index in options.indexes:
            fields += f", {self.platform.declare_index(index)}"

        sql = f"CREATE TABLE {table_name} ({fields})"
        self.logger.debug("Generated %s", sql)
        return [sql]

    def alter_table_sql(self, diff: TableDiff) -> List[str]:
        self._check_alter_supported(diff)
        self._warn_reserved(diff.name, diff.added_columns)

        sql: List[str] = []
        comments_sql: List[str] = []
        column_sql: List[str] = []

        for column in diff.added_columns:
            handled = self.events.dispatch(
                ALTER_TABLE_ADD_COLUMN, column=column, diff=diff, platform=self.platform
            )
            if handled is not None:
                column_sql.extend(handled)
                continue

            declaration = self.platform.declare_column(column.quoted_name(self.platform), column)
            sql.append(f"ALTER TABLE {diff.name} ADD {declaration}")
            if column.comment:
                comments_sql.append(
                    self.platform.comment_on_column_sql(diff.name, column.name, column.comment)
                )

        table_sql = self.events.dispatch(ALTER_TABLE, diff=diff, platform=self.platform)
        if table_sql is None:
            table_sql = []
            sql.extend(self._alter_table_index_foreign_key_sql(diff))
            sql.extend(comments_sql)

        statements = sql + table_sql + column_sql
        self.logger.debug("Generated %d statement(s) for ALTER TABLE %s", len(statements), diff.name)
        return statements

    def _check_alter_supported(self, diff: TableDiff) -> None:
        if diff.removed_columns:
            self._reject(diff.name, "Alter Table: drop columns")
        if diff.changed_columns:
            self._reject(diff.name, "Alter Table: change column options")
        if diff.renamed_columns:
            self._reject(diff.name, "Alter Table: rename columns")
        if diff.new_name is not None:
            self._reject(diff.name, "Alter Table: rename table")

    def _alter_table_index_foreign_key_sql(self, diff: TableDiff) -> List[str]:
        # indexes and foreign keys cannot be altered independently of the table
        return []

    def _reject(self, table_name: str, operation: str) -> None:
        self.logger.debug("Rejecting '%s' on table %s", operation, table_name)
        raise UnsupportedOperationError(operation)

    def _warn_reserved(self, table_name: str, columns: Iterable[ColumnDescriptor]) -> None:
        for column in columns:
            if not column.quoted and self.platform.is_reserved_keyword(column.name):
                self.logger.warning(
                    "Column %s.%s is a reserved keyword; declare it quoted to avoid syntax errors.",
                    table_name,
                    column.name,
                )
