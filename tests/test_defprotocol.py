import inspect
import logging

import pytest

from adhoc.protocols.builder import declare_protocol
from adhoc.protocols.extend import extend
from adhoc.protocols.operation import parse_operation
from adhoc.protocols.registry import Registry
from adhoc.protocols.satisfies import satisfies
from adhoc.types.environment import Environment
from adhoc.types.errors import (
    AdhocArityError,
    AdhocTypeError,
    InvalidOperationArity,
    NoImplementation,
    UnclassifiableValue,
)
from adhoc.types.metadata import with_meta
from adhoc.types.symbol import Symbol, keyword

S = Symbol
NUMBER = keyword("number")


def shape_protocol(env):
    return declare_protocol(env, "Shape", [("area", ["this"]), ("scale", ["this", "factor"])])


def test_declaration_binds_registry_and_forwarders(env):
    reg = shape_protocol(env)
    assert isinstance(reg, Registry)
    assert env.lookup(S("Shape")) is reg
    assert env.lookup(S("area")) is reg.forwarders[S("area")]
    assert env.lookup(S("scale")) is reg.forwarders[S("scale")]
    assert list(reg.operations) == [S("area"), S("scale")]
    assert len(reg) == 0


def test_forwarder_dispatches_on_first_argument(env):
    reg = shape_protocol(env)
    extend(NUMBER, reg, {"area": lambda this: this * this})
    extend(keyword("string"), reg, {"area": lambda this: len(this)})
    area = env.lookup(S("area"))
    assert area(3) == 9
    assert area("abcd") == 4


def test_forwarder_passes_arguments_unchanged(env):
    reg = shape_protocol(env)
    calls = []

    def impl(*args):
        calls.append(args)
        return "scaled"

    extend(keyword("list"), reg, {"scale": impl})
    xs = [1, 2]
    assert env.lookup(S("scale"))(xs, 10) == "scaled"
    assert calls == [(xs, 10)]
    assert calls[0][0] is xs


def test_variadic_arguments_are_spread(env):
    declare_protocol(env, "Collection", [("conj", ["this", "a", "&", "rest"])])
    calls = []
    extend(keyword("list"), env.lookup(S("Collection")), {"conj": lambda *args: calls.append(args)})
    conj = env.lookup(S("conj"))
    x = [0]

    conj(x, 1, 2, 3)
    conj(x, 1)
    assert calls == [(x, 1, 2, 3), (x, 1)]
    assert len(calls[0]) == 4


def test_forwarder_checks_declared_arity(env):
    shape_protocol(env)
    declare_protocol(env, "Collection", [("conj", ["this", "a", "&", "rest"])])
    with pytest.raises(AdhocArityError):
        env.lookup(S("area"))()
    with pytest.raises(AdhocArityError):
        env.lookup(S("area"))(1, 2)
    with pytest.raises(AdhocArityError):
        env.lookup(S("scale"))(1)
    with pytest.raises(AdhocArityError):
        env.lookup(S("conj"))([1])


def test_unregistered_type_raises_no_implementation(env):
    reg = shape_protocol(env)
    extend(NUMBER, reg, {"area": lambda this: this})
    with pytest.raises(NoImplementation) as info:
        env.lookup(S("area"))("square")
    assert info.value.operation == "area"
    assert info.value.type_id == keyword("string")
    assert info.value.protocol == S("Shape")


def test_partial_implementation(env):
    reg = shape_protocol(env)
    extend(NUMBER, reg, {"area": lambda this: this * 2})
    assert satisfies(reg, 2)
    assert env.lookup(S("area"))(2) == 4
    with pytest.raises(NoImplementation) as info:
        env.lookup(S("scale"))(2, 3)
    assert info.value.operation == "scale"
    assert info.value.type_id == NUMBER


def test_unclassifiable_dispatch_argument(env):
    shape_protocol(env)
    with pytest.raises(UnclassifiableValue):
        env.lookup(S("area"))(object())


def test_dispatch_honours_metadata_type(env):
    reg = shape_protocol(env)
    extend(keyword("circle"), reg, {"area": lambda c: 3 * c[keyword("r")] ** 2})
    circle = with_meta({keyword("r"): 2}, {keyword("type"): keyword("circle")})
    assert env.lookup(S("area"))(circle) == 12
    with pytest.raises(NoImplementation):
        env.lookup(S("area"))({keyword("r"): 2})


def test_redeclaration_resets_registry(env, caplog):
    old = shape_protocol(env)
    extend(NUMBER, old, {"area": lambda this: this})
    old_area = env.lookup(S("area"))

    caplog.set_level(logging.INFO, logger="adhoc.protocols.builder")
    new = shape_protocol(env)

    assert new is not old
    assert env.lookup(S("Shape")) is new
    assert not satisfies(new, 1)
    with pytest.raises(NoImplementation):
        env.lookup(S("area"))(1)
    # forwarders close over the registry they were built with
    assert old_area(7) == 7
    assert "Redeclaring protocol Shape" in caplog.text


def test_redeclaration_unbinds_dropped_operations(env):
    shape_protocol(env)
    new = declare_protocol(env, "Shape", [("area", ["this"])])
    assert env.find(S("scale")) is None
    assert env.lookup(S("area")) is new.forwarders[S("area")]


def test_redeclaration_keeps_rebound_names(env):
    shape_protocol(env)
    env.define(S("scale"), len)
    declare_protocol(env, "Shape", [("area", ["this"])])
    assert env.lookup(S("scale")) is len


def test_invalid_operation_binds_nothing(env):
    with pytest.raises(InvalidOperationArity):
        declare_protocol(env, "Broken", [("fine", ["this"]), ("empty", [])])
    assert env.find(S("Broken")) is None
    assert env.find(S("fine")) is None


def test_operation_specs_must_be_pairs(env):
    with pytest.raises(AdhocTypeError):
        declare_protocol(env, "Broken", ["area"])


def test_descriptors_may_be_passed_directly(env):
    reg = declare_protocol(env, S("Show"), [parse_operation("show", ["this"], "Render a value.")])
    show = env.lookup(S("show"))
    assert show.__doc__ == "Render a value."
    assert show.descriptor is reg.operations[S("show")]
    assert show.protocol is reg


def test_forwarder_signature_mirrors_declaration(env):
    declare_protocol(
        env,
        "Lookup",
        [("get-in", ["this", "key-path", "&", "defaults"]), ("empty?", ["coll"])],
    )
    get_in = env.lookup(S("get-in"))
    params = inspect.signature(get_in).parameters
    assert list(params) == ["this", "key_path", "defaults"]
    assert params["defaults"].kind is inspect.Parameter.VAR_POSITIONAL
    assert get_in.__name__ == "get_in"
    assert env.lookup(S("empty?")).__name__ == "empty_"
    assert "get-in" in get_in.__doc__


def test_declaration_is_scoped_to_its_environment(env):
    child = Environment(outer=env)
    shape_protocol(child)
    assert child.lookup(S("area")) is not None
    assert env.find(S("area")) is None
    assert env.find(S("Shape")) is None
