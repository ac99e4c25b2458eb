from __future__ import annotations
from functools import wraps
from .types import *
from .kernel import each
from .extensions import combinators, sequences, associations, grouping
from .extensions import set as set_ops


class Chain(Generic[T]):
    """
    wraps a value so operations read left to right.
    every operation is available as a method taking the wrapped value as its first
    argument and returning a new chain. evaluation is eager; call value() to unwrap.
    """

    def __init__(self, wrapped: T):
        self._wrapped = wrapped

    def value(self) -> T:
        """unwrap the current result"""
        return self._wrapped

    def each(self, callback: Iteratee, context: Any = None) -> 'Chain[T]':
        """runs each for side effects and keeps the wrapped value"""
        each(self._wrapped, callback, context)
        return self

    def tap(self, callback: Callable[[T], Any]) -> 'Chain[T]':
        """inspect the wrapped value mid-chain without changing it"""
        associations.tap(self._wrapped, callback)
        return self

    def __repr__(self) -> str:
        return f"Chain({self._wrapped!r})"


def _chained(operation: Callable[..., Any]) -> Callable[..., 'Chain[Any]']:
    @wraps(operation)
    def method(self: Chain, *args, **kwargs) -> Chain:
        return Chain(operation(self._wrapped, *args, **kwargs))
    return method


_CHAINABLE = {
    # combinators
    "map": combinators.map, "reduce": combinators.reduce, "inject": combinators.inject,
    "foldl": combinators.foldl, "reduce_right": combinators.reduce_right, "foldr": combinators.foldr,
    "find": combinators.find, "filter": combinators.filter, "reject": combinators.reject,
    "every": combinators.every, "all": combinators.all, "some": combinators.some, "any": combinators.any,
    "contains": combinators.contains, "include": combinators.include, "invoke": combinators.invoke,
    "pluck": combinators.pluck, "max": combinators.max, "min": combinators.min, "size": combinators.size,
    "where": combinators.where, "find_where": combinators.find_where,
    # sequences
    "first": sequences.first, "last": sequences.last, "initial": sequences.initial, "rest": sequences.rest,
    "compact": sequences.compact, "flatten": sequences.flatten, "without": sequences.without,
    "difference": sequences.difference, "table": sequences.table,
    "uniq": set_ops.uniq, "union": set_ops.union, "intersection": set_ops.intersection,
    # associations
    "slots": associations.slots, "keys": associations.keys, "values": associations.values,
    "pairs": associations.pairs, "invert": associations.invert, "functions": associations.functions,
    "methods": associations.methods, "extend": associations.extend, "defaults": associations.defaults,
    "pick": associations.pick, "omit": associations.omit, "has": associations.has,
    "copy": associations.copy, "is_empty": associations.is_empty,
    # grouping
    "group_by": grouping.group_by, "count_by": grouping.count_by,
    "index_by": grouping.index_by, "sort_by": grouping.sort_by,
}

for _name, _operation in _CHAINABLE.items():
    setattr(Chain, _name, _chained(_operation))
