from .types import *
from collections.abc import Mapping, Sequence as _AbcSequence

import numpy as np
import pandas as pd

_TEXT_TYPES = (str, bytes, bytearray)


def is_array(value: Any) -> bool:
    """true for ordered, 0-based, length-bearing containers (strings excluded)"""
    if isinstance(value, np.ndarray):
        # 0-d arrays are scalars in disguise
        return value.ndim > 0
    if isinstance(value, _TEXT_TYPES):
        return False
    return isinstance(value, (list, tuple, range, _AbcSequence))


def is_association(value: Any) -> bool:
    """true for key/value containers: mappings and pandas series"""
    return isinstance(value, (Mapping, pd.Series))


def is_table(value: Any) -> bool:
    """true for either container shape"""
    return is_array(value) or is_association(value)


def is_function(value: Any) -> bool:
    return callable(value)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_integer(value: Any) -> bool:
    """ints and numpy integers. bools are not integers here."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def is_float(value: Any) -> bool:
    return isinstance(value, (float, np.floating))


def is_number(value: Any) -> bool:
    return is_integer(value) or is_float(value)


def is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def is_null(value: Any) -> bool:
    return value is None
