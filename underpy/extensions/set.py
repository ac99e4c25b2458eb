"""
order-preserving set-style helpers over sequences.
membership is by ==, so unhashable elements (lists, dicts) are fine.
"""
from __future__ import annotations
from itertools import chain
from ..types import *
from ..shape import sequence_of
from .sequences import _contains


def uniq(seq: Any) -> List[Any]:
    """distinct elements, keeping the first occurrence of each"""
    result = []
    for item in sequence_of(seq, "uniq"):
        if not _contains(result, item):
            result.append(item)
    return result


def union(*seqs: Any) -> List[Any]:
    """distinct elements of all sequences in order of first appearance"""
    return uniq(list(chain.from_iterable(sequence_of(seq, "union") for seq in seqs)))


def intersection(seq: Any, *others: Any) -> List[Any]:
    """distinct elements of seq present in every other sequence"""
    pools = [list(sequence_of(other, "intersection")) for other in others]
    return [item for item in uniq(seq) if all(_contains(pool, item) for pool in pools)]
