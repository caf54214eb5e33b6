# Core type aliases for the adhoc value model.
# Runtime values are plain Python objects (int, float, str, list, dict, callables)
# plus the few wrapper types in adhoc.types (Symbol, Nil, Atom, Vector, ...).
#
# - SExpression: unevaluated forms handed to defprotocol_form.
# - LispValue:  evaluated runtime values.
# Both resolve to `Any`; they are defined before any submodule import because
# every submodule imports them from here.

import logging
from typing import Any

# Runtime value alias
LispValue = Any
SExpression = LispValue

logging.getLogger(__name__).addHandler(logging.NullHandler())

from adhoc.types.errors import (  # noqa: E402
    AdhocError,
    UnclassifiableValue,
    NoImplementation,
    InvalidOperationArity,
    InvalidArgumentCount,
)
from adhoc.protocols import (  # noqa: E402
    type_of,
    declare_protocol,
    extend,
    satisfies,
    defprotocol_form,
    Registry,
)
