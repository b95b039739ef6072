import sys

import pytest

from cratedbal.core import ColumnDescriptor, CustomSQL, IndexDescriptor, LogicalType, StandardType
from cratedbal.dialects import CratePlatform
from cratedbal.errors import InvalidArgumentError, UnsupportedOperationError

platform = CratePlatform()


@pytest.mark.parametrize(
    "logical_type, keyword",
    [
        (LogicalType.SMALLINT, "SHORT"),
        (LogicalType.INTEGER, "INT"),
        (LogicalType.BIGINT, "DOUBLE"),
        (LogicalType.BOOLEAN, "BOOLEAN"),
        (LogicalType.STRING, "STRING"),
        (LogicalType.TEXT, "STRING"),
        (LogicalType.FLOAT, "FLOAT"),
        (LogicalType.DOUBLE, "DOUBLE"),
        (LogicalType.DATETIME, "TIMESTAMP"),
        (LogicalType.DATETIMETZ, "TIMESTAMP"),
        (LogicalType.DATE, "TIMESTAMP"),
        (LogicalType.TIME, "TIMESTAMP"),
    ],
)
def test_declare_column_type_keywords(logical_type, keyword):
    column = ColumnDescriptor("value", logical_type)
    assert platform.declare_column("value", column) == f"value {keyword}"


def test_string_length_is_ignored():
    short = ColumnDescriptor("code", LogicalType.STRING, length=3)
    long = ColumnDescriptor("code", LogicalType.STRING, length=100000)
    assert platform.declare_column("code", short) == "code STRING"
    assert platform.declare_column("code", long) == "code STRING"
    assert platform.varchar_max_length == sys.maxsize


def test_default_is_not_rendered():
    column = ColumnDescriptor("age", LogicalType.INTEGER, default=0)
    assert platform.declare_column("age", column) == "age INT"


def test_blob_column_is_unsupported():
    column = ColumnDescriptor("payload", LogicalType.BLOB)
    with pytest.raises(UnsupportedOperationError) as excinfo:
        platform.declare_column("payload", column)
    assert excinfo.value.operation == "blob_type_declaration"


def test_blob_given_as_enum_value_is_unsupported():
    column = ColumnDescriptor("payload", StandardType("blob"))  # type: ignore[arg-type]
    with pytest.raises(UnsupportedOperationError):
        platform.declare_column("payload", column)


def test_custom_declaration_used_verbatim():
    column = ColumnDescriptor("tags", CustomSQL("ARRAY(STRING)"))
    assert platform.declare_column("tags", column) == "tags ARRAY(STRING)"


def test_inline_comment_appended_verbatim():
    column = ColumnDescriptor("name", LogicalType.STRING, comment="it's a label")
    assert platform.declare_column("name", column) == "name STRING COMMENT 'it's a label'"


def test_empty_comment_is_skipped():
    column = ColumnDescriptor("name", LogicalType.STRING, comment="")
    assert "COMMENT" not in platform.declare_column("name", column)


def test_declare_columns_quotes_flagged_names():
    columns = [
        ColumnDescriptor("id", LogicalType.INTEGER),
        ColumnDescriptor("select", LogicalType.STRING, quoted=True),
    ]
    assert platform.declare_columns(columns) == 'id INT, "select" STRING'


def test_common_integer_declaration_is_empty():
    assert platform.common_integer_type_declaration() == ""


def test_declare_index_renders_fulltext():
    index = IndexDescriptor("name_ft", ("first_name", "last_name"))
    assert platform.declare_index(index) == "INDEX name_ft using fulltext (first_name, last_name)"


def test_declare_index_requires_columns():
    with pytest.raises(InvalidArgumentError):
        platform.declare_index(IndexDescriptor("empty_idx", ()))


def test_capabilities():
    assert platform.name == "crate"
    assert platform.supports_sequences() is False
    assert platform.supports_schemas() is True
    assert platform.supports_identity_columns() is True
    assert platform.supports_comment_on_statement() is True
    assert platform.supports_inline_column_comments() is True
    assert platform.prefers_sequences() is False
    assert platform.datetime_tz_format == "%Y-%m-%d %H:%M:%S%z"


@pytest.mark.parametrize(
    "call",
    [
        lambda: platform.now_expression(),
        lambda: platform.truncate_table_sql("events"),
        lambda: platform.truncate_table_sql("events", cascade=True),
        lambda: platform.read_lock_sql(),
    ],
)
def test_unsupported_statements_raise(call):
    with pytest.raises(UnsupportedOperationError, match="is not supported by platform"):
        call()


def test_expression_helpers():
    assert platform.substring_expression("name", 2) == "SUBSTR(name, 2)"
    assert platform.substring_expression("name", 2, 5) == "SUBSTR(name, 2, 5)"
    assert platform.regexp_expression() == "LIKE"
    assert platform.date_diff_expression("ended", "started") == "ended - started"
    assert platform.sql_result_casing("MixedCase_Col") == "mixedcase_col"


def test_convert_booleans():
    assert platform.convert_booleans(True) == "true"
    assert platform.convert_booleans(False) == "false"
    assert platform.convert_booleans(1) == "true"
    assert platform.convert_booleans(0) == "false"
    assert platform.convert_booleans("yes") == "yes"
    assert platform.convert_booleans([True, 0, "x"]) == ["true", "false", "x"]


def test_comment_on_column_escapes_quotes():
    sql = platform.comment_on_column_sql("t", "name", "it's")
    assert sql == "COMMENT ON COLUMN t.name IS 'it''s'"


def test_introspection_queries():
    assert platform.list_databases_sql() == "SELECT table_name FROM information_schema.tables"
    assert platform.list_tables_sql() == "SELECT table_name, schema_name FROM information_schema.tables"
    expected = "SELECT column_name as field, data_type as type from information_schema.columns"
    assert platform.list_table_columns_sql("t") == expected
    assert platform.list_table_columns_sql("t", "doc") == expected


def test_identifier_quoting_and_keywords():
    assert platform.quote_identifier('odd"name') == '"odd""name"'
    assert platform.is_reserved_keyword("select") is True
    assert platform.is_reserved_keyword("title") is False
