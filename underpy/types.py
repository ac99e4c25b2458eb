from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Mapping, MutableMapping, Sequence, Hashable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# callbacks may declare any prefix of (value, index_or_key, container)
Iteratee = Callable[..., Any]
Predicate = Callable[..., bool]
Reducer = Callable[..., Any]

# (index_or_key, value) as produced by the shape classifier
Entry = Tuple[Any, Any]


class Shape(Enum):
    """the container shapes every combinator dispatches on"""
    SEQUENCE = "sequence"
    ASSOCIATION = "association"
    OTHER = "other"

    def __repr__(self) -> str:
        return f"Shape.{self.name}"
