"""Registering implementations of protocols for a type."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from adhoc import LispValue
from adhoc.config import get_odd_pairs_policy
from adhoc.protocols.registry import Registry
from adhoc.types.errors import AdhocTypeError, InvalidArgumentCount
from adhoc.types.nil import Nil
from adhoc.types.symbol import Symbol

logger = logging.getLogger(__name__)


def extend(type_id: Symbol, registry: Registry, table: Mapping, *more: LispValue) -> LispValue:
    """Merge method tables into one or more protocol registries for `type_id`.

    (extend :point Show {:show f} Eq {:eq g})

    `more` holds further registry/table pairs for the same type, applied in
    order. A trailing registry with no table is dropped with a warning, or
    raises InvalidArgumentCount when ADHOC_ODD_PAIRS=error.
    """
    pairs = [(registry, table)] + [(more[i], more[i + 1]) for i in range(0, len(more) - 1, 2)]

    if len(more) % 2:
        dangling = more[-1]
        if get_odd_pairs_policy() == "error":
            raise InvalidArgumentCount(
                f"extend for {type_id}: {dangling!r} has no method table"
            )
        logger.warning("extend for %s: ignoring %r without a method table", type_id, dangling)

    # validate and normalize every pair before touching any registry
    prepared = []
    for reg, methods in pairs:
        if not isinstance(reg, Registry):
            raise AdhocTypeError(f"extend expects a protocol, got {reg!r}")
        if not isinstance(methods, Mapping):
            raise AdhocTypeError(f"extend expects a method table map for {reg.name}, got {methods!r}")
        prepared.append((reg, reg.prepare(type_id, methods)))

    for reg, methods in prepared:
        reg.commit(type_id, methods)
    return Nil
