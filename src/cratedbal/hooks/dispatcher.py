"""
Hook dispatcher letting hosts intercept ALTER TABLE generation.

A handler returns ``None`` to leave default generation alone, or a sequence of
SQL statements (possibly empty) or a single statement string to take over.
Once any handler takes over, the builder skips its default SQL for that
column or table and emits the handler-supplied statements instead.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

HookHandler = Callable[..., Optional[Union[str, Sequence[str]]]]


@dataclass(frozen=True)
class HookEvent:
    name: str


ALTER_TABLE_ADD_COLUMN = HookEvent("alter_table_add_column")
ALTER_TABLE = HookEvent("alter_table")


class SchemaEventDispatcher:
    """
    Maintains handlers for schema generation events.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[HookHandler]] = defaultdict(list)

    def register(self, event: HookEvent | str, handler: HookHandler) -> None:
        self._handlers[_event_name(event)].append(handler)

    def has_handlers(self, event: HookEvent | str) -> bool:
        return bool(self._handlers.get(_event_name(event)))

    def dispatch(self, event: HookEvent | str, **context: Any) -> list[str] | None:
        """
        Fire ``event``; return collected SQL if a handler took over, else ``None``.
        """
        handled = False
        statements: list[str] = []
        for handler in list(self._handlers.get(_event_name(event), [])):
            result = handler(**context)
            if result is None:
                continue
            handled = True
            if isinstance(result, str):
                result = [result]
            statements.extend(result)
        return statements if handled else None

    def clear(self) -> None:
        self._handlers.clear()


def _event_name(event: HookEvent | str) -> str:
    return event.name if isinstance(event, HookEvent) else event

