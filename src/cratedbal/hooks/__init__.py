"""
Schema generation hooks registry.
"""

from .dispatcher import (
    ALTER_TABLE,
    ALTER_TABLE_ADD_COLUMN,
    HookEvent,
    SchemaEventDispatcher,
)

__all__ = [
    "ALTER_TABLE",
    "ALTER_TABLE_ADD_COLUMN",
    "HookEvent",
    "SchemaEventDispatcher",
]
