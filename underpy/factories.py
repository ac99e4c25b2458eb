import typing
from .types import *
from .kernel import adapt

if typing.TYPE_CHECKING:
    from .chaining import Chain


def times(n: int, callback: Callable[[int], T], context: Any = None) -> List[T]:
    """collect callback(i) for i in 0..n-1. n <= 0 yields an empty list."""
    call = adapt(callback, context)
    return [call(i) for i in range(n)] if n > 0 else []


def identity(value: T) -> T:
    return value


def chain(value: Any) -> 'Chain':
    """wrap a value so operations can be called as chained methods"""
    from .chaining import Chain
    return Chain(value)
