"""Protocol declaration: registry creation and forwarder synthesis.

`declare_protocol` turns a protocol name and a list of operation shapes into
one Registry plus one forwarder per operation, and binds all of them into the
given Environment. Every forwarder dispatches on the runtime type of its first
argument and hands the call, arguments untouched, to the implementation
registered for that type.
"""

from __future__ import annotations

import inspect
import keyword as py_keyword
import logging
import re
from typing import Callable, Iterable, Sequence, Union

from adhoc import LispValue
from adhoc.protocols.classifier import type_of
from adhoc.protocols.operation import OperationDescriptor, parse_operation
from adhoc.protocols.registry import Registry
from adhoc.types.environment import Environment
from adhoc.types.errors import AdhocArityError, AdhocTypeError
from adhoc.types.symbol import Symbol, to_symbol

logger = logging.getLogger(__name__)

OperationSpec = Union[OperationDescriptor, Sequence]


def _py_name(sym: Symbol, taken: set[str]) -> str:
    # Lisp names (get-in, empty?) are not Python identifiers
    name = re.sub(r"\W", "_", sym.id)
    if not name.isidentifier() or py_keyword.iskeyword(name):
        name = f"_{name}"
    while name in taken:
        name += "_"
    taken.add(name)
    return name


def _signature(op: OperationDescriptor) -> inspect.Signature:
    taken: set[str] = set()
    params = [
        inspect.Parameter(_py_name(p, taken), inspect.Parameter.POSITIONAL_ONLY)
        for p in op.fixed
    ]
    if op.variadic:
        params.append(inspect.Parameter(_py_name(op.rest, taken), inspect.Parameter.VAR_POSITIONAL))
    return inspect.Signature(params)


def make_forwarder(registry: Registry, op: OperationDescriptor) -> Callable[..., LispValue]:
    """Build the dispatching callable for one operation of `registry`."""
    op_name = op.name.id
    arity = len(op.fixed)
    shape = f"at least {arity}" if op.variadic else f"exactly {arity}"

    def forwarder(*args: LispValue) -> LispValue:
        if not op.accepts(len(args)):
            raise AdhocArityError(f"{op_name} expects {shape} argument(s), got {len(args)}")
        impl = registry.implementation(type_of(args[0]), op_name)
        # fixed arguments then the rest arguments, each passed individually
        return impl(*args[:arity], *args[arity:])

    forwarder.__name__ = _py_name(op.name, set())
    forwarder.__qualname__ = f"{registry.name}.{forwarder.__name__}"
    forwarder.__doc__ = op.doc or f"Dispatch {op} on the type of {op.dispatch_param}."
    forwarder.__signature__ = _signature(op)
    forwarder.descriptor = op
    forwarder.protocol = registry
    return forwarder


def _descriptor(spec: OperationSpec) -> OperationDescriptor:
    if isinstance(spec, OperationDescriptor):
        return spec
    if isinstance(spec, (list, tuple)) and len(spec) in (2, 3):
        return parse_operation(*spec)
    raise AdhocTypeError(f"Protocol operations are (name, params[, doc]), got {spec!r}")


def declare_protocol(env: Environment, name: Symbol | str, operations: Iterable[OperationSpec]) -> Registry:
    """Declare protocol `name` in `env` and return its fresh Registry.

    Binds the registry under `name` and one forwarder per operation under the
    operation's name. All operations are validated before anything is bound.
    Declaring an existing protocol again replaces it with an empty registry;
    forwarders of the old declaration that are still bound in this frame and
    not declared again are unbound.
    """
    proto_name = to_symbol(name)
    descriptors = [_descriptor(spec) for spec in operations]

    previous = env.vars.get(proto_name)
    if isinstance(previous, Registry):
        logger.info(
            "Redeclaring protocol %s; discarding implementations for %d type(s)",
            proto_name, len(previous),
        )

    registry = Registry(proto_name)
    for op in descriptors:
        if op.name in registry.operations:
            logger.debug("Protocol %s declares %s more than once; keeping the last", proto_name, op.name)
        registry.operations[op.name] = op
        registry.forwarders[op.name] = make_forwarder(registry, op)

    if isinstance(previous, Registry):
        for op_name, stale in previous.forwarders.items():
            if op_name not in registry.forwarders and env.vars.get(op_name) is stale:
                del env.vars[op_name]
                logger.debug("Unbound %s dropped from protocol %s", op_name, proto_name)

    for op_name, forwarder in registry.forwarders.items():
        env.define(op_name, forwarder)
    env.define(proto_name, registry)
    logger.debug("Declared protocol %s with operations %s", proto_name, [str(o) for o in registry.operations])
    return registry
