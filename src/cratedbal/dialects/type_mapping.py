"""
Native type name to logical type mapping used during introspection.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from ..core.types import LogicalType

CRATE_TYPE_MAPPING: Mapping[str, LogicalType] = MappingProxyType(
    {
        "short": LogicalType.SMALLINT,
        "integer": LogicalType.INTEGER,
        "int": LogicalType.INTEGER,
        "bool": LogicalType.BOOLEAN,
        "boolean": LogicalType.BOOLEAN,
        "string": LogicalType.STRING,
        "float": LogicalType.FLOAT,
        "double": LogicalType.FLOAT,
        "timestamp": LogicalType.DATETIME,
    }
)


class TypeMapping:
    """
    Read-only lookup from dialect type names to logical types.

    Native names are matched case-insensitively. Unknown names resolve to the
    caller's default rather than a guessed type.
    """

    def __init__(self, entries: Mapping[str, LogicalType]) -> None:
        self._entries: Mapping[str, LogicalType] = MappingProxyType(
            {native.lower(): logical for native, logical in entries.items()}
        )

    def logical_type_for(
        self, native_type: str, default: LogicalType | None = None
    ) -> LogicalType | None:
        return self._entries.get(native_type.strip().lower(), default)

    def has_native_type(self, native_type: str) -> bool:
        return native_type.strip().lower() in self._entries

    def native_types(self) -> Iterable[str]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
