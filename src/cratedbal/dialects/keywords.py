"""
Reserved keywords of the CrateDB SQL dialect.
"""

from __future__ import annotations

from typing import FrozenSet

CRATE_RESERVED_KEYWORDS: FrozenSet[str] = frozenset(
    {
        "ADD",
        "ALL",
        "ALTER",
        "AND",
        "ANY",
        "ARRAY",
        "AS",
        "ASC",
        "BETWEEN",
        "BY",
        "CALLED",
        "CASE",
        "CAST",
        "COLUMN",
        "CONSTRAINT",
        "COSTS",
        "CREATE",
        "CROSS",
        "CURRENT_DATE",
        "CURRENT_SCHEMA",
        "CURRENT_TIME",
        "CURRENT_TIMESTAMP",
        "CURRENT_USER",
        "DEFAULT",
        "DELETE",
        "DENY",
        "DESC",
        "DESCRIBE",
        "DIRECTORY",
        "DISTINCT",
        "DROP",
        "ELSE",
        "END",
        "ESCAPE",
        "EXCEPT",
        "EXISTS",
        "EXTRACT",
        "FALSE",
        "FIRST",
        "FOR",
        "FROM",
        "FULL",
        "FUNCTION",
        "GRANT",
        "GROUP",
        "HAVING",
        "IF",
        "IN",
        "INDEX",
        "INNER",
        "INPUT",
        "INSERT",
        "INTERSECT",
        "INTO",
        "IS",
        "JOIN",
        "LAST",
        "LEFT",
        "LIKE",
        "LIMIT",
        "MATCH",
        "NOT",
        "NULL",
        "NULLS",
        "OBJECT",
        "OFFSET",
        "ON",
        "OR",
        "ORDER",
        "OUTER",
        "PERSISTENT",
        "RECURSIVE",
        "RESET",
        "RETURNS",
        "REVOKE",
        "RIGHT",
        "SELECT",
        "SESSION_USER",
        "SET",
        "SOME",
        "STRATIFY",
        "TABLE",
        "THEN",
        "TRANSIENT",
        "TRUE",
        "TRY_CAST",
        "UNBOUNDED",
        "UNION",
        "UPDATE",
        "USER",
        "USING",
        "WHEN",
        "WHERE",
        "WITH",
    }
)


def is_reserved(word: str) -> bool:
    return word.upper() in CRATE_RESERVED_KEYWORDS
