from adhoc.types.symbol import Symbol, TRUE, FALSE, keyword, is_keyword
from adhoc.types.nil import Nil
from adhoc.types.atom import Atom
from adhoc.types.collections import List, Vector, HashMap
from adhoc.types.function import Function, Macro
from adhoc.types.metadata import meta, with_meta
from adhoc.types.environment import Environment
