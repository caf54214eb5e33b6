"""Runtime type classification for protocol dispatch.

`type_of` maps any runtime value to a keyword naming its type. A metadata
override is consulted first so callers can impose nominal types over
structural data; after that the primitive predicates are tried in a fixed
order. The order matters: a Macro is callable, True is an int, and the
symbols #t/#f are symbols, yet each must land in its own category.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Callable

from adhoc import LispValue
from adhoc.config import get_type_key
from adhoc.types import predicates as p
from adhoc.types.errors import UnclassifiableValue
from adhoc.types.metadata import meta
from adhoc.types.symbol import Symbol, is_keyword

logger = logging.getLogger(__name__)

SYMBOL = Symbol(":symbol")
KEYWORD = Symbol(":keyword")
ATOM = Symbol(":atom")
NIL = Symbol(":nil")
TRUE = Symbol(":true")
FALSE = Symbol(":false")
NUMBER = Symbol(":number")
STRING = Symbol(":string")
MACRO = Symbol(":macro")
LIST = Symbol(":list")
VECTOR = Symbol(":vector")
MAP = Symbol(":map")
FUNCTION = Symbol(":function")

# First match wins.
TYPE_PREDICATES: tuple[tuple[Callable[[LispValue], bool], Symbol], ...] = (
    (p.is_symbol, SYMBOL),
    (p.is_keyword, KEYWORD),
    (p.is_atom, ATOM),
    (p.is_nil, NIL),
    (p.is_true, TRUE),
    (p.is_false, FALSE),
    (p.is_number, NUMBER),
    (p.is_string, STRING),
    (p.is_macro, MACRO),
    (p.is_list, LIST),
    (p.is_vector, VECTOR),
    (p.is_map, MAP),
    (p.is_function, FUNCTION),
)


def type_override(value: LispValue) -> Symbol | None:
    """Return the keyword stored under the type key of `value`'s metadata, if any."""
    m = meta(value)
    if not isinstance(m, Mapping):
        return None
    tag = m.get(Symbol(get_type_key()))
    if tag is None:
        return None
    if not is_keyword(tag):
        logger.debug("Ignoring non-keyword type tag %r on %s value", tag, type(value).__name__)
        return None
    return tag


def type_of(value: LispValue) -> Symbol:
    """Classify `value`; raises UnclassifiableValue when no category applies."""
    tag = type_override(value)
    if tag is not None:
        return tag
    for predicate, type_id in TYPE_PREDICATES:
        if predicate(value):
            return type_id
    raise UnclassifiableValue(value)
