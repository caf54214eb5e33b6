from __future__ import annotations
import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.id = sys.intern(name)

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


# Truth values are the self-evaluating symbols #t / #f.
TRUE = Symbol("#t")
FALSE = Symbol("#f")


def is_keyword(x) -> bool:
    """Keywords are symbols whose name starts with ':' (e.g. :number)."""
    return isinstance(x, Symbol) and len(x.id) > 1 and x.id.startswith(":")


def keyword(name: str | Symbol) -> Symbol:
    """Build a keyword from a name, adding the leading ':' when missing."""
    s = name.id if isinstance(name, Symbol) else str(name)
    return Symbol(s if s.startswith(":") else f":{s}")


def to_symbol(name: str | Symbol) -> Symbol:
    return name if isinstance(name, Symbol) else Symbol(str(name))
