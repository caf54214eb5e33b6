import pytest

from adhoc.types.atom import Atom
from adhoc.types.collections import HashMap, List, Vector
from adhoc.types.errors import AdhocArityError, AdhocTypeError
from adhoc.types.function import Macro
from adhoc.types.nil import Nil
from adhoc.types.symbol import Symbol, TRUE, FALSE, keyword

S = Symbol


def call(env, name, *args):
    return env.lookup(S(name))(env, list(args))


def test_constants(env):
    assert env.lookup(S("#t")) == TRUE
    assert env.lookup(S("#f")) == FALSE
    assert env.lookup(S("nil")) is Nil


def test_type_of_builtin(env):
    assert call(env, "type-of", 1) == keyword("number")
    assert call(env, "type-of", call(env, "vector", 1, 2)) == keyword("vector")
    assert call(env, "type-of", env.lookup(S("type-of"))) == keyword("function")
    with pytest.raises(AdhocArityError):
        call(env, "type-of")


@pytest.mark.parametrize(
    "name, value, expected",
    [
        ("nil?", Nil, TRUE),
        ("nil?", [], FALSE),
        ("symbol?", S("x"), TRUE),
        ("symbol?", S(":x"), FALSE),
        ("keyword?", S(":x"), TRUE),
        ("true?", TRUE, TRUE),
        ("false?", False, TRUE),
        ("number?", True, FALSE),
        ("number?", 3.5, TRUE),
        ("string?", "s", TRUE),
        ("atom?", Atom(1), TRUE),
        ("list?", [1], TRUE),
        ("list?", (1,), FALSE),
        ("vector?", Vector([1]), TRUE),
        ("map?", {}, TRUE),
        ("fn?", len, TRUE),
        ("fn?", Macro(len), FALSE),
        ("macro?", Macro(len), TRUE),
    ],
)
def test_predicates(env, name, value, expected):
    assert call(env, name, value) == expected


def test_predicates_take_one_argument(env):
    with pytest.raises(AdhocArityError):
        call(env, "nil?", Nil, Nil)


def test_keyword_builtin(env):
    assert call(env, "keyword", "point") == S(":point")
    assert call(env, "keyword", S("point")) == S(":point")
    assert call(env, "keyword", ":point") == S(":point")
    with pytest.raises(AdhocTypeError):
        call(env, "keyword", 5)


def test_collection_constructors(env):
    xs = call(env, "list", 1, 2)
    assert isinstance(xs, List) and xs == [1, 2]
    v = call(env, "vector", 1, 2)
    assert isinstance(v, Vector) and v == (1, 2)
    m = call(env, "hash-map", S(":a"), 1, S(":b"), 2)
    assert isinstance(m, HashMap) and m == {S(":a"): 1, S(":b"): 2}
    with pytest.raises(AdhocArityError):
        call(env, "hash-map", S(":a"))


def test_atoms(env):
    a = call(env, "atom", 1)
    assert isinstance(a, Atom)
    assert call(env, "deref", a) == 1
    assert call(env, "reset!", a, 5) == 5
    assert call(env, "swap!", a, lambda x, y: x + y, 10) == 15
    assert a.deref() == 15
    with pytest.raises(AdhocTypeError):
        call(env, "deref", 1)
    with pytest.raises(AdhocTypeError):
        call(env, "swap!", a, 3)
    with pytest.raises(AdhocArityError):
        call(env, "swap!", a)


def test_meta_builtins(env):
    m = call(env, "hash-map", S(":type"), S(":point"))
    p = call(env, "with-meta", call(env, "hash-map", S(":x"), 1), m)
    assert call(env, "meta", p) == m
    assert call(env, "type-of", p) == S(":point")
    assert call(env, "meta", 1) is Nil
