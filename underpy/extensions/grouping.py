from __future__ import annotations
from collections import defaultdict
from ..types import *
from ..kernel import adapt
from ..shape import entries_of


def _keyed(container: Any, callback: Optional[Iteratee], context: Any, operation: str) -> List[Tuple[Any, Any]]:
    """(group key, value) for every element; no callback groups by the value itself"""
    call = adapt(callback, context) if callback is not None else None
    return [(call(value, key, container) if call else value, value)
            for key, value in entries_of(container, operation)]


def group_by(container: Any, callback: Optional[Iteratee] = None, context: Any = None) -> Dict[Any, List[Any]]:
    """group elements by the callback result"""
    groups = defaultdict(list)
    for group_key, value in _keyed(container, callback, context, "group_by"):
        groups[group_key].append(value)
    return dict(groups)


def count_by(container: Any, callback: Optional[Iteratee] = None, context: Any = None) -> Dict[Any, int]:
    """count elements per callback result"""
    counts = defaultdict(int)
    for group_key, _ in _keyed(container, callback, context, "count_by"):
        counts[group_key] += 1
    return dict(counts)


def index_by(container: Any, callback: Optional[Iteratee] = None, context: Any = None) -> Dict[Any, Any]:
    """map each callback result to its element; later elements overwrite earlier ones"""
    return {group_key: value for group_key, value in _keyed(container, callback, context, "index_by")}


def sort_by(container: Any, callback: Optional[Iteratee] = None, context: Any = None) -> List[Any]:
    """elements ordered by callback result. the sort is stable."""
    keyed = _keyed(container, callback, context, "sort_by")
    return [value for _, value in sorted(keyed, key=lambda pair: pair[0])]
