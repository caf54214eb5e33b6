from __future__ import annotations


class NilType:
    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    # Nil is equal only to Nil; hash must agree with __eq__ so Nil can key a map
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def __reduce__(self):
        return (_get_nil, ())


def _get_nil():
    return Nil


Nil = NilType()
