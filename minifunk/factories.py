from .types import *
from .exceptions import require_bound
from .enumerable import Enumerable
from .stream import Stream

def stream(source: Iterable[T]) -> Stream[T]:
    """create a stream from a list, a tuple or any finite iterable"""
    return Stream.from_iterable(source)

def enumerable(source: Iterable[T]) -> Enumerable[T]:
    """create an enumerable from a list, a tuple or any finite iterable"""
    return Enumerable.from_iterable(source)

def of(*items: T) -> Stream[T]:
    return Stream.of(*items)

def empty() -> Stream[Any]:
    """create empty stream"""
    return Stream.empty()

def from_range(start: int, count: int) -> Stream[int]:
    """create a stream of count consecutive ints"""
    require_bound(count, "count")
    return Stream(range(start, start + count))

# --- aliases ---
S = stream
