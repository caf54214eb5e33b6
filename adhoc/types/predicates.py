"""Primitive type predicates of the value runtime.

Each predicate answers for one category in isolation; the order in which the
classifier consults them lives in adhoc.protocols.classifier.
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Number

from adhoc import LispValue
from adhoc.types.atom import Atom
from adhoc.types.function import Macro
from adhoc.types.nil import NilType
from adhoc.types.symbol import Symbol, TRUE, FALSE, is_keyword


def is_symbol(x: LispValue) -> bool:
    return isinstance(x, Symbol) and not is_keyword(x) and x != TRUE and x != FALSE


def is_atom(x: LispValue) -> bool:
    return isinstance(x, Atom)


def is_nil(x: LispValue) -> bool:
    return x is None or isinstance(x, NilType)


def is_true(x: LispValue) -> bool:
    return x is True or (isinstance(x, Symbol) and x == TRUE)


def is_false(x: LispValue) -> bool:
    return x is False or (isinstance(x, Symbol) and x == FALSE)


def is_number(x: LispValue) -> bool:
    return isinstance(x, Number) and not isinstance(x, bool)


def is_string(x: LispValue) -> bool:
    return isinstance(x, str)


def is_macro(x: LispValue) -> bool:
    return isinstance(x, Macro)


def is_list(x: LispValue) -> bool:
    return isinstance(x, list)


def is_vector(x: LispValue) -> bool:
    return isinstance(x, tuple)


def is_map(x: LispValue) -> bool:
    return isinstance(x, Mapping)


def is_function(x: LispValue) -> bool:
    return callable(x) and not isinstance(x, Macro)
