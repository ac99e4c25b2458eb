from __future__ import annotations
import copy as _copy
import pandas as pd
from ..types import *
from ..kernel import adapt
from ..predicates import is_array, is_association, is_table
from ..shape import classify, entries, entries_of, has_slot


def slots(assoc: Any) -> List[Any]:
    """keys (or indices) in traversal order"""
    return [key for key, _ in entries_of(assoc, "slots")]


def values(assoc: Any) -> List[Any]:
    return [value for _, value in entries_of(assoc, "values")]


def pairs(assoc: Any) -> List[Tuple[Any, Any]]:
    """(key, value) tuples in traversal order"""
    return [(key, value) for key, value in entries_of(assoc, "pairs")]


def invert(assoc: Any) -> Dict[Any, Any]:
    """swap keys and values. on duplicate values the last key wins."""
    return {value: key for key, value in entries_of(assoc, "invert")}


def functions(assoc: Any) -> List[Any]:
    """sorted names of the entries holding callables"""
    return sorted(key for key, value in entries_of(assoc, "functions") if callable(value))


def _writable(dest: Any) -> bool:
    # read-only mappings (mappingproxy, frozen views) are left untouched
    return isinstance(dest, (MutableMapping, pd.Series))


def extend(dest: Any, *sources: Any) -> Any:
    """
    shallow-merge sources into dest from left to right; later sources win.
    none sources are skipped. mutates and returns dest.
    """
    if not _writable(dest):
        return dest
    for source in sources:
        for key, value in entries_of(source, "extend"):
            dest[key] = value
    return dest


def defaults(dest: Any, *sources: Any) -> Any:
    """
    fill keys of dest that are absent or none. the first source supplying a key wins.
    mutates and returns dest.
    """
    if not _writable(dest):
        return dest
    for source in sources:
        for key, value in entries_of(source, "defaults"):
            if key not in dest or dest[key] is None:
                dest[key] = value
    return dest


def _key_list(keys: Tuple[Any, ...]) -> List[Any]:
    # a single list argument is the key list itself, otherwise the extras are the keys
    if len(keys) == 1 and is_array(keys[0]):
        return list(keys[0])
    return list(keys)


def pick(assoc: Any, *keys: Any) -> Dict[Any, Any]:
    """shallow copy holding only the given keys that exist on assoc"""
    if not is_association(assoc):
        return {}
    return {key: assoc[key] for key in _key_list(keys) if key in assoc}


def omit(assoc: Any, *keys: Any) -> Dict[Any, Any]:
    """shallow copy without the given keys"""
    if not is_association(assoc):
        return {}
    excluded = _key_list(keys)
    return {key: value for key, value in entries_of(assoc, "omit") if key not in excluded}


def has(assoc: Any, key: Any) -> bool:
    """key presence. for sequences, an in-range non-negative index."""
    return is_table(assoc) and has_slot(assoc, key)


def copy(value: Any) -> Any:
    """shallow copy of sequences and associations; nested containers stay shared"""
    if is_table(value):
        return _copy.copy(value)
    return value


def tap(value: T, callback: Callable[[T], Any]) -> T:
    """call callback(value) for its side effect and hand value back"""
    adapt(callback)(value)
    return value


def is_empty(value: Any) -> bool:
    """true for a sequence or association without entries, false for anything else"""
    shape = classify(value)
    if shape is Shape.OTHER:
        return False
    for _ in entries(value, shape):
        return False
    return True


# --- aliases ---
keys = slots
methods = functions
