from __future__ import annotations
import types
from ..types import *
from ..kernel import adapt
from ..shape import entries_of, sequence_of, has_slot, get_slot, equal
from ..predicates import is_association

# note: several names below shadow builtins (map, filter, max, min, all, any).
# nothing in this module relies on the builtin versions.


def map(container: Any, callback: Iteratee, context: Any = None) -> List[Any]:
    """project every element (or association value) through callback into a new list"""
    call = adapt(callback, context)
    return [call(value, key, container) for key, value in entries_of(container, "map")]


def reduce(container: Any, callback: Reducer, memo: Any, context: Any = None) -> Any:
    """
    left fold: memo = callback(memo, value, index_or_key, container).
    the seed is mandatory; a none or unclassifiable container returns it untouched.
    """
    call = adapt(callback, context, minimum=2)
    for key, value in entries_of(container, "reduce"):
        memo = call(memo, value, key, container)
    return memo


def reduce_right(container: Any, callback: Reducer, memo: Any, context: Any = None) -> Any:
    """right fold, same callback contract as reduce"""
    call = adapt(callback, context, minimum=2)
    for key, value in reversed(list(entries_of(container, "reduce_right"))):
        memo = call(memo, value, key, container)
    return memo


def find(seq: Any, callback: Predicate, context: Any = None) -> Any:
    """first element whose callback result is truthy, or none"""
    call = adapt(callback, context)
    for index, value in enumerate(sequence_of(seq, "find")):
        if call(value, index, seq):
            return value
    return None


def filter(seq: Any, callback: Predicate, context: Any = None) -> List[Any]:
    """elements whose callback result is truthy"""
    call = adapt(callback, context)
    return [value for index, value in enumerate(sequence_of(seq, "filter")) if call(value, index, seq)]


def reject(seq: Any, callback: Predicate, context: Any = None) -> List[Any]:
    """elements whose callback result is falsy. the complement of filter."""
    call = adapt(callback, context)
    return [value for index, value in enumerate(sequence_of(seq, "reject")) if not call(value, index, seq)]


def every(seq: Any, callback: Optional[Predicate] = None, context: Any = None) -> bool:
    """false on the first falsy result. vacuously true for empty or none input."""
    call = adapt(callback if callback is not None else _truthy, context)
    for index, value in enumerate(sequence_of(seq, "every")):
        if not call(value, index, seq):
            return False
    return True


def some(seq: Any, callback: Optional[Predicate] = None, context: Any = None) -> bool:
    """true on the first truthy result. false for empty input."""
    call = adapt(callback if callback is not None else _truthy, context)
    for index, value in enumerate(sequence_of(seq, "some")):
        if call(value, index, seq):
            return True
    return False


def contains(container: Any, value: Any) -> bool:
    """linear == scan over sequence elements or association values (never keys)"""
    for _, candidate in entries_of(container, "contains"):
        if equal(candidate, value):
            return True
    return False


def invoke(container: Any, method_name: str, *args: Any) -> Any:
    """
    call the named method on every element, with the element as receiver.
    mapping elements have their stored function bound to the mapping itself.
    a missing method propagates as attributeerror / keyerror. returns the container.
    """
    for _, element in entries_of(container, "invoke"):
        if is_association(element):
            types.MethodType(element[method_name], element)(*args)
        else:
            getattr(element, method_name)(*args)
    return container


def pluck(container: Any, name: Any) -> List[Any]:
    """item[name] for every item that has that slot. items without it are skipped."""
    return [get_slot(item, name) for _, item in entries_of(container, "pluck") if has_slot(item, name)]


def _extreme(container: Any, callback: Optional[Iteratee], context: Any,
             better: Callable[[Any, Any], bool], operation: str) -> Any:
    rank = adapt(callback, context) if callback is not None else None
    winner, best = None, None
    found = False
    for key, value in entries_of(container, operation):
        score = rank(value, key, container) if rank else value
        # strict comparison: the first extremal element wins ties
        if not found or better(score, best):
            winner, best, found = value, score, True
    return winner


def max(container: Any, callback: Optional[Iteratee] = None, context: Any = None) -> Any:
    """largest element, ranked by callback when given. none for empty input."""
    return _extreme(container, callback, context, lambda a, b: a > b, "max")


def min(container: Any, callback: Optional[Iteratee] = None, context: Any = None) -> Any:
    """smallest element, ranked by callback when given. none for empty input."""
    return _extreme(container, callback, context, lambda a, b: a < b, "min")


def size(container: Any) -> int:
    """sequence length or association entry count. 0 for anything else."""
    return sum(1 for _ in entries_of(container, "size"))


def _matches(candidate: Any, props: Mapping) -> bool:
    # a key absent on the candidate counts as a pass, not a mismatch
    for key, expected in props.items():
        if has_slot(candidate, key) and not equal(get_slot(candidate, key), expected):
            return False
    return True


def where(container: Any, props: Mapping) -> List[Any]:
    """every element matching the properties matcher"""
    return [item for _, item in entries_of(container, "where") if _matches(item, props)]


def find_where(container: Any, props: Mapping) -> Any:
    """first element matching the properties matcher, or none"""
    for _, item in entries_of(container, "find_where"):
        if _matches(item, props):
            return item
    return None


def _truthy(value: Any) -> bool:
    return bool(value)


# --- aliases ---
inject = reduce
foldl = reduce
foldr = reduce_right
all = every
any = some
include = contains
