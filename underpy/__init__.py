r"""
'     _   _ _  _ ___  ___ ___ _____   __
'    | | | | \| |   \| __| _ \ _ \ \ / /
'    | |_| | .` | |) | _||   /  _/\ V /
'     \___/|_|\_|___/|___|_|_\_|   |_|

map / filter / reduce style combinators over sequences and associations,
with one calling convention: callback(value, index_or_key, container).
"""
import logging

# library logging is opt-in for the host application
logging.getLogger(__name__).addHandler(logging.NullHandler())

# expose the shape classifier and its types
from .types import Shape
from .shape import classify, entries

# expose the predicates
from .predicates import (
    is_array,
    is_association,
    is_table,
    is_function,
    is_string,
    is_integer,
    is_float,
    is_number,
    is_boolean,
    is_null
)

# expose the iteration kernel
from .kernel import each

# expose the combinators
from .extensions.combinators import (
    map,
    reduce,
    inject,
    foldl,
    reduce_right,
    foldr,
    find,
    filter,
    reject,
    every,
    all,
    some,
    any,
    contains,
    include,
    invoke,
    pluck,
    max,
    min,
    size,
    where,
    find_where
)

# expose the sequence helpers
from .extensions.sequences import (
    first,
    last,
    initial,
    rest,
    compact,
    flatten,
    without,
    difference,
    table
)
from .extensions.set import uniq, union, intersection

# expose the association helpers
from .extensions.associations import (
    slots,
    keys,
    values,
    pairs,
    invert,
    functions,
    methods,
    extend,
    defaults,
    pick,
    omit,
    has,
    copy,
    tap,
    is_empty
)

# expose the grouping helpers
from .extensions.grouping import group_by, count_by, index_by, sort_by

# expose the factory functions and the chain wrapper
from .factories import times, identity, chain
from .chaining import Chain

# define what `import *` does
__all__ = [
    "Shape", "classify", "entries",
    "is_array", "is_association", "is_table", "is_function", "is_string",
    "is_integer", "is_float", "is_number", "is_boolean", "is_null",
    "each",
    "map", "reduce", "inject", "foldl", "reduce_right", "foldr",
    "find", "filter", "reject", "every", "all", "some", "any",
    "contains", "include", "invoke", "pluck", "max", "min", "size",
    "where", "find_where",
    "first", "last", "initial", "rest", "compact", "flatten",
    "without", "difference", "table", "uniq", "union", "intersection",
    "slots", "keys", "values", "pairs", "invert", "functions", "methods",
    "extend", "defaults", "pick", "omit", "has", "copy", "tap", "is_empty",
    "group_by", "count_by", "index_by", "sort_by",
    "times", "identity", "chain", "Chain"
]
