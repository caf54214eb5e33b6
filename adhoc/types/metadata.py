"""Reading and attaching metadata maps.

Only the runtime's own wrapper types carry metadata: List, Vector, HashMap,
Atom and Function (Macro included). `with_meta` never mutates its argument; it
returns a copy of the value that carries the new map.
"""

from __future__ import annotations

from collections.abc import Mapping

from adhoc import LispValue
from adhoc.types.atom import Atom
from adhoc.types.collections import HashMap, List, Vector
from adhoc.types.errors import AdhocTypeError
from adhoc.types.function import Function
from adhoc.types.nil import Nil

_META_CARRIERS = (List, Vector, HashMap, Atom, Function)


def meta(value: LispValue) -> LispValue:
    """Return the metadata attached to `value`, or Nil when there is none."""
    if isinstance(value, _META_CARRIERS):
        return value.meta
    return Nil


def with_meta(value: LispValue, m: LispValue) -> LispValue:
    """Return a copy of `value` carrying metadata `m` (a map or Nil)."""
    if m is not Nil and m is not None and not isinstance(m, Mapping):
        raise AdhocTypeError(f"Metadata must be a map, got {type(m).__name__}")
    m = Nil if m is None else m

    match value:
        case Function():
            return value.copy(m)
        case Atom():
            return Atom(value.value, m)
        case list():
            out = List(value)
        case tuple():
            out = Vector(value)
        case Mapping():
            out = HashMap(value)
        case _ if callable(value):
            return Function(value, meta=m)
        case _:
            raise AdhocTypeError(f"Cannot attach metadata to {type(value).__name__} value {value!r}")
    out.meta = m
    return out
