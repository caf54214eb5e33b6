from __future__ import annotations

from collections.abc import Sequence

from adhoc import SExpression, LispValue
from adhoc.protocols.builder import declare_protocol
from adhoc.protocols.operation import OperationDescriptor, parse_operation
from adhoc.types.environment import Environment
from adhoc.types.errors import AdhocArityError, AdhocTypeError
from adhoc.types.nil import Nil
from adhoc.types.symbol import Symbol


def _operation(proto_name: Symbol, form: SExpression) -> OperationDescriptor:
    # (op [this a & more] "optional doc")
    if isinstance(form, str) or not isinstance(form, Sequence) or len(form) not in (2, 3):
        raise AdhocArityError(f"defprotocol {proto_name}: expected (name [params] \"doc\"?), got {form!r}")
    name, params, *doc = form
    if not isinstance(name, Symbol):
        raise AdhocTypeError(f"defprotocol {proto_name}: operation name must be a Symbol, got {name!r}")
    if isinstance(params, str) or not isinstance(params, Sequence):
        raise AdhocTypeError(f"defprotocol {proto_name}: parameters of {name} must be a vector, got {params!r}")
    if doc and not isinstance(doc[0], str):
        raise AdhocTypeError(f"defprotocol {proto_name}: docstring of {name} must be a string")
    return parse_operation(name, params, doc[0] if doc else None)


def defprotocol_form(tail: list[SExpression], env: Environment) -> LispValue:
    """
    (defprotocol Name "doc"? (op1 [this]) (op2 [this x & more] "doc") ...)
    Binds Name to a fresh registry and each op to its forwarder in `env`.
    """
    if not tail or not isinstance(tail[0], Symbol):
        raise AdhocArityError("defprotocol requires a protocol name")
    proto_name = tail[0]
    body = list(tail[1:])
    doc = body.pop(0) if body and isinstance(body[0], str) else None

    registry = declare_protocol(env, proto_name, [_operation(proto_name, f) for f in body])
    registry.doc = doc
    return Nil
