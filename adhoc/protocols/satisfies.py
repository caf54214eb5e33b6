from __future__ import annotations

from adhoc import LispValue
from adhoc.protocols.classifier import type_of
from adhoc.protocols.registry import Registry
from adhoc.types.errors import AdhocTypeError


def satisfies(registry: Registry, value: LispValue) -> bool:
    """True when the type of `value` has any implementation registered in `registry`.

    A type that implements only some of the protocol's operations still satisfies it.
    """
    if not isinstance(registry, Registry):
        raise AdhocTypeError(f"satisfies expects a protocol, got {registry!r}")
    return type_of(value) in registry
