"""Callable runtime values: plain functions and compiled macros."""

from __future__ import annotations

from typing import Callable

from adhoc import LispValue
from adhoc.types.nil import Nil


class Function:
    """A first-class function value wrapping a Python callable.

    The wrapper is what lets a function carry metadata; calling it calls the
    wrapped callable with the same positional and keyword arguments.
    """

    __slots__ = ("fn", "name", "meta")

    def __init__(self, fn: Callable[..., LispValue], name: str | None = None, meta: LispValue = Nil):
        # Unwrap so with-meta on a Function does not nest wrappers
        if isinstance(fn, Function):
            name = name or fn.name
            fn = fn.fn
        self.fn = fn
        self.name: str = name or getattr(fn, "__name__", "anonymous")
        self.meta: LispValue = meta

    def __call__(self, *args, **kwargs) -> LispValue:
        return self.fn(*args, **kwargs)

    def copy(self, meta: LispValue = Nil) -> Function:
        return type(self)(self.fn, self.name, meta)

    def __repr__(self) -> str:
        return f"<fn {self.name}>"


class Macro(Function):
    """A compiled macro transformer. Callable, but classified as a macro."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"<macro {self.name}>"
