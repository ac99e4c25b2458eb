from __future__ import annotations
from itertools import chain
from ..types import *
from ..predicates import is_array
from ..shape import sequence_of, equal


def _slice(seq: Any, start: int, stop: int) -> List[Any]:
    # ranges, deques and arrays do not all slice into lists, so copy element-wise
    data = list(seq)
    return data[start:stop]


def first(seq: Any, n: int = 1) -> List[Any]:
    """up to n elements from the front"""
    data = sequence_of(seq, "first")
    if n <= 0: return []
    return _slice(data, 0, n)


def last(seq: Any, n: int = 1) -> List[Any]:
    """up to n elements from the back"""
    data = sequence_of(seq, "last")
    if n <= 0: return []
    length = len(data)
    return _slice(data, length - n if n < length else 0, length)


def initial(seq: Any, n: int = 1) -> List[Any]:
    """
    everything but the last n elements.
    when n covers the whole sequence (or is not positive) nothing is dropped.
    """
    data = sequence_of(seq, "initial")
    length = len(data)
    if n >= length or n <= 0:
        n = 0
    return _slice(data, 0, length - n)


def rest(seq: Any, index: int = 1) -> List[Any]:
    """elements from index onward, with index clamped into [0, len]"""
    data = sequence_of(seq, "rest")
    length = len(data)
    index = 0 if index < 1 else (length if index > length else index)
    return _slice(data, index, length)


def compact(seq: Any) -> List[Any]:
    """drop falsy elements (none, zero, false, empty strings and containers)"""
    return [item for item in sequence_of(seq, "compact") if item]


def flatten(seq: Any, shallow: bool = False) -> List[Any]:
    """
    inline nested sequences into a single list, preserving order.
    depth is unbounded unless `shallow`, in which case exactly one level is removed.
    an explicit stack of iterators is used, so nesting depth is not limited by recursion.
    """
    data = sequence_of(seq, "flatten")
    if shallow:
        result = []
        for item in data:
            if is_array(item): result.extend(item)
            else: result.append(item)
        return result

    result = []
    stack = [iter(data)]
    while stack:
        for item in stack[-1]:
            if is_array(item):
                stack.append(iter(item))
                break
            result.append(item)
        else:
            stack.pop()
    return result


def _contains(values: Iterable[Any], candidate: Any) -> bool:
    # equality scan so unhashable elements and arrays work
    for value in values:
        if equal(value, candidate):
            return True
    return False


def without(seq: Any, *values: Any) -> List[Any]:
    """elements not equal to any of the given values"""
    return [item for item in sequence_of(seq, "without") if not _contains(values, item)]


def difference(seq: Any, *others: Any) -> List[Any]:
    """elements absent from every other given sequence"""
    excluded = list(chain.from_iterable(sequence_of(other, "difference") for other in others))
    return [item for item in sequence_of(seq, "difference") if not _contains(excluded, item)]


def table(pairs_or_keys: Any, values: Any = None) -> Dict[Any, Any]:
    """
    build a dict either by zipping keys with values, or from [key, value] pairs.
    keys without a matching value map to none.
    """
    keys = sequence_of(pairs_or_keys, "table")
    if values is not None:
        values = list(sequence_of(values, "table"))
        return {key: (values[i] if i < len(values) else None) for i, key in enumerate(keys)}
    return {pair[0]: pair[1] for pair in keys}
