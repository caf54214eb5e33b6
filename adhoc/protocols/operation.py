"""Operation descriptors: the declared shape of one protocol operation.

A parameter list such as `[this a & more]` describes an operation whose first
parameter is the dispatch argument. When the second-to-last parameter is a
rest marker the operation is variadic: the marker is dropped and the last
parameter collects the remaining arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from adhoc.config import get_rest_markers
from adhoc.types.errors import InvalidOperationArity, AdhocTypeError
from adhoc.types.symbol import Symbol, to_symbol


@dataclass(frozen=True)
class OperationDescriptor:
    name: Symbol
    params: tuple[Symbol, ...]
    variadic: bool = False
    # index of the rest marker in `params`, or None
    rest_index: Optional[int] = None
    doc: Optional[str] = None

    @property
    def fixed(self) -> tuple[Symbol, ...]:
        """Parameters bound positionally, dispatch argument first."""
        if self.variadic:
            return self.params[: self.rest_index]
        return self.params

    @property
    def rest(self) -> Optional[Symbol]:
        """Name of the rest collector for variadic operations."""
        return self.params[-1] if self.variadic else None

    @property
    def dispatch_param(self) -> Symbol:
        return self.fixed[0]

    def accepts(self, count: int) -> bool:
        """Whether a call with `count` positional arguments fits this shape."""
        n = len(self.fixed)
        return count >= n if self.variadic else count == n

    def __str__(self) -> str:
        return f"({self.name} [{' '.join(str(s) for s in self.params)}])"


def _as_name(x, what: str) -> Symbol:
    if isinstance(x, (Symbol, str)):
        return to_symbol(x)
    raise AdhocTypeError(f"{what} must be a symbol, got {x!r}")


def parse_operation(
    name: Symbol | str, params: Iterable[Symbol | str], doc: str | None = None
) -> OperationDescriptor:
    """Build an OperationDescriptor, validating the parameter list.

    Raises InvalidOperationArity when there is no dispatch argument or when a
    rest marker appears anywhere but second-to-last.
    """
    op_name = _as_name(name, "Protocol operation name")
    formals = tuple(_as_name(x, f"Parameter of {op_name}") for x in params)
    markers = {Symbol(m) for m in get_rest_markers()}

    if not formals:
        raise InvalidOperationArity(op_name, "missing dispatch argument")

    rest_index: Optional[int] = None
    if len(formals) >= 2 and formals[-2] in markers:
        rest_index = len(formals) - 2

    for i, formal in enumerate(formals):
        if formal in markers and i != rest_index:
            raise InvalidOperationArity(
                op_name, f"rest marker {formal} must be followed by exactly one name"
            )

    if rest_index == 0:
        raise InvalidOperationArity(op_name, "missing dispatch argument before rest marker")

    return OperationDescriptor(
        name=op_name,
        params=formals,
        variadic=rest_index is not None,
        rest_index=rest_index,
        doc=doc,
    )
