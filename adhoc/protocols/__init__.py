"""Protocols: named sets of operations dispatched on the type of their first argument."""

from adhoc.protocols.classifier import type_of
from adhoc.protocols.operation import OperationDescriptor, parse_operation
from adhoc.protocols.registry import Registry
from adhoc.protocols.builder import declare_protocol, make_forwarder
from adhoc.protocols.extend import extend
from adhoc.protocols.satisfies import satisfies
from adhoc.protocols.forms import defprotocol_form
