"""Built-in functions exposing protocols and the value runtime to Lisp code.

Every builtin follows the runtime calling convention fn(env, args), where
`args` is the list of already-evaluated argument values. Predicates answer
with the truth symbols #t / #f.
"""
from __future__ import annotations

from typing import Callable

from adhoc import LispValue
from adhoc.protocols.classifier import type_of
from adhoc.protocols.extend import extend
from adhoc.protocols.forms import defprotocol_form
from adhoc.protocols.satisfies import satisfies
from adhoc.types import predicates
from adhoc.types.atom import Atom
from adhoc.types.collections import HashMap, List, Vector
from adhoc.types.environment import Environment
from adhoc.types.errors import AdhocArityError, AdhocTypeError
from adhoc.types.metadata import meta, with_meta
from adhoc.types.nil import Nil
from adhoc.types.symbol import Symbol, TRUE, FALSE, keyword

Builtin = Callable[[Environment, list[LispValue]], LispValue]


def _truth(flag: bool) -> Symbol:
    return TRUE if flag else FALSE


def _expect(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise AdhocArityError(f"{name} requires exactly {count} argument(s), got {len(args)}")


# -------------------------------
# Protocols
# -------------------------------
def type_of_builtin(env: Environment, args: list[LispValue]) -> Symbol:
    """(type-of x) -> keyword naming the dispatch type of x."""
    _expect("type-of", args, 1)
    return type_of(args[0])


def defprotocol_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(defprotocol Name (op [this ...]) ...), declared into the calling env."""
    return defprotocol_form(list(args), env)


def extend_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(extend :type Protocol {:op fn} Protocol2 {:op2 fn2} ...)"""
    if len(args) < 3:
        raise AdhocArityError("extend requires a type, a protocol and a method table")
    return extend(*args)


def satisfies_builtin(env: Environment, args: list[LispValue]) -> Symbol:
    """(satisfies? Protocol x)"""
    _expect("satisfies?", args, 2)
    return _truth(satisfies(args[0], args[1]))


# -------------------------------
# Metadata
# -------------------------------
def meta_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    _expect("meta", args, 1)
    return meta(args[0])


def with_meta_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    _expect("with-meta", args, 2)
    return with_meta(args[0], args[1])


# -------------------------------
# Constructors
# -------------------------------
def keyword_builtin(env: Environment, args: list[LispValue]) -> Symbol:
    """(keyword "name") or (keyword 'name) -> :name"""
    _expect("keyword", args, 1)
    x = args[0]
    if not isinstance(x, (str, Symbol)):
        raise AdhocTypeError(f"keyword expects a string or symbol, got {x!r}")
    return keyword(x)


def list_builtin(env: Environment, args: list[LispValue]) -> List:
    return List(args)


def vector_builtin(env: Environment, args: list[LispValue]) -> Vector:
    return Vector(args)


def hash_map_builtin(env: Environment, args: list[LispValue]) -> HashMap:
    """(hash-map k1 v1 k2 v2 ...)"""
    if len(args) % 2 != 0:
        raise AdhocArityError("hash-map requires an even number of arguments")
    return HashMap(zip(args[0::2], args[1::2]))


# -------------------------------
# Atoms
# -------------------------------
def _atom_arg(name: str, x: LispValue) -> Atom:
    if not isinstance(x, Atom):
        raise AdhocTypeError(f"{name} expects an atom, got {x!r}")
    return x


def atom_builtin(env: Environment, args: list[LispValue]) -> Atom:
    _expect("atom", args, 1)
    return Atom(args[0])


def deref_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    _expect("deref", args, 1)
    return _atom_arg("deref", args[0]).deref()


def reset_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    _expect("reset!", args, 2)
    return _atom_arg("reset!", args[0]).reset(args[1])


def swap_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """(swap! a f x y) sets a to (f @a x y)."""
    if len(args) < 2:
        raise AdhocArityError("swap! requires an atom and a function")
    fn = args[1]
    if not callable(fn):
        raise AdhocTypeError(f"swap! expects a function, got {fn!r}")
    return _atom_arg("swap!", args[0]).swap(fn, *args[2:])


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test: Callable[[LispValue], bool]) -> Builtin:
    def builtin(env: Environment, args: list[LispValue]) -> Symbol:
        _expect(name, args, 1)
        return _truth(test(args[0]))

    builtin.__name__ = name
    builtin.__doc__ = f"({name} x)"
    return builtin


PREDICATES: dict[str, Callable[[LispValue], bool]] = {
    "symbol?": predicates.is_symbol,
    "keyword?": predicates.is_keyword,
    "atom?": predicates.is_atom,
    "nil?": predicates.is_nil,
    "true?": predicates.is_true,
    "false?": predicates.is_false,
    "number?": predicates.is_number,
    "string?": predicates.is_string,
    "macro?": predicates.is_macro,
    "list?": predicates.is_list,
    "vector?": predicates.is_vector,
    "map?": predicates.is_map,
    "fn?": predicates.is_function,
}


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update(
        {
            Symbol("type-of"): type_of_builtin,
            Symbol("defprotocol"): defprotocol_builtin,
            Symbol("extend"): extend_builtin,
            Symbol("satisfies?"): satisfies_builtin,
            Symbol("meta"): meta_builtin,
            Symbol("with-meta"): with_meta_builtin,
            Symbol("keyword"): keyword_builtin,
            Symbol("list"): list_builtin,
            Symbol("vector"): vector_builtin,
            Symbol("hash-map"): hash_map_builtin,
            Symbol("atom"): atom_builtin,
            Symbol("deref"): deref_builtin,
            Symbol("reset!"): reset_builtin,
            Symbol("swap!"): swap_builtin,
        }
    )
    env.update({Symbol(name): _predicate(name, test) for name, test in PREDICATES.items()})
    env.define(Symbol("#t"), TRUE)
    env.define(Symbol("#f"), FALSE)
    env.define(Symbol("nil"), Nil)
