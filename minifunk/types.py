from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)
from .exceptions import require_callable

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')
K = TypeVar('K')
V = TypeVar('V')

# capability contracts, supplied by the caller at each call site
Function = Callable[[T], U]
BiFunction = Callable[[U, T], U]
Predicate = Callable[[T], bool]
Consumer = Callable[[T], None]
Comparator = Callable[[T, T], int]
KeySelector = Callable[[T], K]
Selector = Callable[[T], U]

_ABSENT = object()


class Maybe(Generic[T]):
    """
    explicit optional result of a search.
    a present maybe may hold None or 0, which is what separates it from a null return.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any = _ABSENT):
        self._value = value

    @classmethod
    def of(cls, value: T) -> 'Maybe[T]':
        return cls(value)

    @classmethod
    def empty(cls) -> 'Maybe[Any]':
        return cls()

    @property
    def is_present(self) -> bool: return self._value is not _ABSENT

    @property
    def is_empty(self) -> bool: return self._value is _ABSENT

    def get(self) -> T:
        """the held value, erroring if absent"""
        if self._value is _ABSENT:
            raise ValueError("no value present")
        return self._value

    def or_else(self, default: T) -> T:
        return default if self._value is _ABSENT else self._value

    def map(self, mapper: Callable[[T], U]) -> 'Maybe[U]':
        """transform the held value, an absent maybe stays absent"""
        require_callable(mapper, "mapper")
        if self._value is _ABSENT:
            return self
        return Maybe(mapper(self._value))

    def if_present(self, action: Callable[[T], None]) -> None:
        require_callable(action, "action")
        if self._value is not _ABSENT:
            action(self._value)

    def __bool__(self) -> bool:
        return self.is_present

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self.is_empty or other.is_empty:
            return self.is_empty and other.is_empty
        return self._value == other._value

    __hash__ = None

    def __repr__(self) -> str:
        if self._value is _ABSENT:
            return "Maybe.empty()"
        return f"Maybe.of({self._value!r})"
