"""Metadata-carrying collections.

Plain Python lists, tuples and dicts are valid runtime values on their own;
these subclasses exist so a collection can carry a metadata map without
changing how it compares or iterates.
"""

from __future__ import annotations

from adhoc.types.nil import Nil


class List(list):
    """A Lisp list (the list-marker sequence) with metadata."""

    meta = Nil

    def __repr__(self) -> str:
        return "(" + " ".join(repr(x) for x in self) + ")"


class Vector(tuple):
    """An ordered sequence without the list marker."""

    meta = Nil

    def __repr__(self) -> str:
        return "[" + " ".join(repr(x) for x in self) + "]"


class HashMap(dict):
    """An associative map with metadata."""

    meta = Nil

    def __repr__(self) -> str:
        return "{" + " ".join(f"{k!r} {v!r}" for k, v in self.items()) + "}"
