from __future__ import annotations

from typing import Any


class AdhocError(Exception):
    """ Base class for all adhoc errors"""
    pass

class AdhocInvalidSymbol(AdhocError):
    """ Raised when an invalid symbol is used"""
    pass

class AdhocUnboundSymbol(AdhocError):
    """ Raised when a symbol is used before it is bound"""
    pass

class AdhocNameError(AdhocError):
    """ Raised when a name is used before it is defined"""

class AdhocArityError(AdhocError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class AdhocTypeError(AdhocError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class UnclassifiableValue(AdhocTypeError):
    """Raised when type_of runs out of categories for a value."""

    def __init__(self, value: Any):
        super().__init__(f"Cannot classify value {value!r} of Python type {type(value).__name__}")
        self.value = value


class NoImplementation(AdhocError):
    """Raised at call time when a type has no implementation of an operation."""

    def __init__(self, operation: Any, type_id: Any, protocol: Any = None):
        where = f" in protocol {protocol}" if protocol is not None else ""
        super().__init__(f"No implementation of {operation}{where} for type {type_id}")
        self.operation = operation
        self.type_id = type_id
        self.protocol = protocol


class InvalidOperationArity(AdhocArityError):
    """Raised when a protocol operation is declared without a dispatch argument."""

    def __init__(self, operation: Any, reason: str):
        super().__init__(f"Invalid parameter list for protocol operation {operation}: {reason}")
        self.operation = operation


class InvalidArgumentCount(AdhocArityError):
    """Raised by extend when a trailing registry has no method table (strict mode)."""
