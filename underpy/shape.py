import logging

import numpy as np
import pandas as pd

from .types import *
from .predicates import is_array, is_association, is_integer

logger = logging.getLogger(__name__)


def classify(value: Any) -> Shape:
    """decide which container shape a value has. sequences are tested first."""
    if is_array(value):
        return Shape.SEQUENCE
    if is_association(value):
        return Shape.ASSOCIATION
    return Shape.OTHER


def entries(container: Any, shape: Optional[Shape] = None) -> Iterator[Entry]:
    """yield (index_or_key, value) pairs for either shape, nothing for anything else"""
    shape = shape or classify(container)
    if shape is Shape.SEQUENCE:
        return enumerate(container)
    if shape is Shape.ASSOCIATION:
        return iter(container.items())
    return iter(())


def entries_of(container: Any, operation: str) -> Iterator[Entry]:
    """entries() that logs when an operation silently degrades on its input"""
    shape = classify(container)
    if shape is Shape.OTHER and container is not None:
        logger.debug("%s: %s is not a sequence or association, treating as empty",
                     operation, type(container).__name__)
    return entries(container, shape)


def sequence_of(value: Any, operation: str) -> Any:
    """the value itself when it is a sequence, otherwise an empty tuple"""
    if is_array(value):
        return value
    if value is not None:
        logger.debug("%s: %s is not a sequence, treating as empty",
                     operation, type(value).__name__)
    return ()


def has_slot(item: Any, name: Any) -> bool:
    """whether item[name] (or item.name for plain objects) resolves"""
    if is_association(item):
        return name in item
    if is_array(item):
        return is_integer(name) and 0 <= name < len(item)
    return isinstance(name, str) and hasattr(item, name)


def get_slot(item: Any, name: Any) -> Any:
    if is_association(item) or is_array(item):
        return item[name]
    return getattr(item, name)


def equal(left: Any, right: Any) -> bool:
    """value equality that stays a plain bool when arrays or series are involved"""
    if left is right:
        return True
    if isinstance(left, (np.ndarray, pd.Series)) or isinstance(right, (np.ndarray, pd.Series)):
        try:
            return bool(np.array_equal(left, right))
        except (TypeError, ValueError):
            # ragged or incomparable operands cannot be equal
            return False
    return bool(left == right)
