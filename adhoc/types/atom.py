from __future__ import annotations

from typing import Callable

from adhoc import LispValue
from adhoc.types.nil import Nil


class Atom:
    """A boxed mutable cell. Identity, not contents, defines equality."""

    __slots__ = ("value", "meta")

    def __init__(self, value: LispValue = Nil, meta: LispValue = Nil):
        self.value: LispValue = value
        self.meta: LispValue = meta

    def deref(self) -> LispValue:
        return self.value

    def reset(self, value: LispValue) -> LispValue:
        self.value = value
        return value

    def swap(self, fn: Callable[..., LispValue], *args: LispValue) -> LispValue:
        """Replace the contents with fn(current, *args) and return the new value."""
        self.value = fn(self.value, *args)
        return self.value

    def __repr__(self) -> str:
        return f"(atom {self.value!r})"
