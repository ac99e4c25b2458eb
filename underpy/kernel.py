import inspect
import types

from .types import *
from .shape import entries_of

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _positional_capacity(func: Callable, fallback: int) -> Optional[int]:
    """how many positional arguments func takes. none means unbounded."""
    if isinstance(func, type) and func.__module__ == "builtins":
        # str, int, list ... take optional extras that are not (index, container)
        return fallback
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins without introspectable signatures get only what the caller needs
        return fallback
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in _POSITIONAL:
            count += 1
    return count


def adapt(callback: Any, context: Any = None, minimum: int = 1) -> Callable[..., Any]:
    """
    normalize a user callback into a function that accepts the full argument list.

    the callback is bound as a method of `context` when one is given, and is called
    with only as many leading arguments as it declares. positional parameters with
    defaults count too and get filled, so `lambda x, y=1: ...` receives the index as y.
    a non-callable callback only
    fails when it is actually invoked, so empty inputs never raise.
    """
    if not callable(callback):
        def not_callable(*args):
            raise TypeError(f"callback must be callable, got {type(callback).__name__}")
        return not_callable

    func = types.MethodType(callback, context) if context is not None else callback
    capacity = _positional_capacity(func, minimum)
    if capacity is None:
        return func

    def call(*args):
        return func(*args[:capacity])
    return call


def each(container: Any, callback: Iteratee, context: Any = None) -> None:
    """call callback(value, index_or_key, container) for every element. no early exit."""
    call = adapt(callback, context)
    for key, value in entries_of(container, "each"):
        call(value, key, container)
