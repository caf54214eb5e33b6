"""Per-protocol dispatch registry.

A Registry maps type identifiers (keywords) to method tables (operation name
-> callable). Writers serialize on a lock and publish a fresh type map on
every merge; readers take whatever map is current without locking, so a
forwarder never sees a half-merged table.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Callable

from adhoc import LispValue
from adhoc.types.errors import AdhocTypeError, NoImplementation
from adhoc.types.symbol import Symbol, is_keyword

if TYPE_CHECKING:
    from adhoc.protocols.operation import OperationDescriptor

logger = logging.getLogger(__name__)

MethodTable = dict[str, Callable[..., LispValue]]


def operation_key(key: Symbol | str) -> str:
    """Normalize a method-table key (`op` symbol, "op" string or :op keyword) to the bare operation name."""
    if isinstance(key, Symbol):
        key = key.id
    if not isinstance(key, str) or not key:
        raise AdhocTypeError(f"Method table keys must be operation names, got {key!r}")
    return key[1:] if key.startswith(":") and len(key) > 1 else key


class Registry:
    """Dispatch table of one protocol."""

    def __init__(self, name: Symbol):
        self.name: Symbol = name
        self.doc: str | None = None
        # filled in by the protocol builder
        self.operations: dict[Symbol, OperationDescriptor] = {}
        self.forwarders: dict[Symbol, Callable[..., LispValue]] = {}
        self._tables: dict[Symbol, MethodTable] = {}
        self._lock = threading.Lock()

    def prepare(self, type_id: Symbol, table: Mapping) -> MethodTable:
        """Validate `type_id` and `table` and return the table with normalized keys.

        Touches no state, so callers can check several registrations before
        committing any of them.
        """
        if not is_keyword(type_id):
            raise AdhocTypeError(f"Type identifier must be a keyword, got {type_id!r}")
        if not isinstance(table, Mapping):
            raise AdhocTypeError(
                f"Method table for {type_id} in {self.name} must be a map, got {type(table).__name__}"
            )
        return {operation_key(k): v for k, v in table.items()}

    def commit(self, type_id: Symbol, methods: MethodTable) -> None:
        """Merge a table returned by `prepare` into the entry for `type_id`."""
        with self._lock:
            tables = dict(self._tables)
            merged = dict(tables.get(type_id, {}))
            merged.update(methods)
            tables[type_id] = merged
            self._tables = tables
        logger.debug("Registered %s for %s in protocol %s", sorted(methods), type_id, self.name)

    def merge(self, type_id: Symbol, table: Mapping) -> None:
        """Merge `table` into the entry for `type_id`, creating it if absent."""
        self.commit(type_id, self.prepare(type_id, table))

    def implementation(self, type_id: Symbol, operation: Symbol | str) -> Callable[..., LispValue]:
        """Return the callable for `operation` on `type_id` or raise NoImplementation."""
        op = operation_key(operation)
        table = self._tables.get(type_id)
        if table is None:
            raise NoImplementation(op, type_id, self.name)
        if op not in table:
            raise NoImplementation(op, type_id, self.name)
        return table[op]

    def method_table(self, type_id: Symbol) -> MethodTable | None:
        table = self._tables.get(type_id)
        return dict(table) if table is not None else None

    def types(self) -> list[Symbol]:
        return list(self._tables)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        ops = " ".join(str(o) for o in self.operations)
        return f"<protocol {self.name} ({ops}) types={[str(t) for t in self._tables]}>"
