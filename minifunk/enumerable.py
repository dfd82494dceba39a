from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *
from .exceptions import require_iterable

# --- core functionality ---
from .extensions.core import _CoreOperations
from .extensions.terminal import _TerminalOperations, TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    def __init__(self, source: Iterable[T]):
        """init from any finite iterable. the elements are copied into an owned list."""
        require_iterable(source)
        self._data: List[T] = list(source)
        self.to = TerminalAccessor(self)

    @classmethod
    def from_iterable(cls, source: Iterable[T]):
        """wrap a list, a tuple or any other finite iterable"""
        seq = cls(source)
        logger.debug(f"created {cls.__name__} of {len(seq._data)} elements")
        return seq

    @classmethod
    def of(cls, *items: T):
        return cls(items)

    @classmethod
    def empty(cls):
        return cls(())

    def _get_data(self) -> List[T]:
        return self._data

    def _derive(self, data: Iterable[U]):
        """every transformation goes through here: a new instance of the receiver's class"""
        return type(self)(data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, item: Any) -> bool:
        return item in self._data

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    __hash__ = None

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._data) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

# --- enumerable: the first design ---

class Enumerable(
    _BaseSequence[T],
    _CoreOperations[T],
    _TerminalOperations[T]
):
    """
    a sequence of elements supporting aggregate operations, in the javascript array vocabulary.
    filter returns a new instance like every other transformation; the receiver never changes.
    """

    def sort(self, comparator: Comparator[T]) -> 'Enumerable[T]':
        """stable sort of a copy using a three-way comparator"""
        return self._sort_with(comparator)

    def find(self, predicate: Predicate[T]) -> Maybe[T]:
        """first element satisfying the predicate, or an empty maybe"""
        return self._find_first(predicate)

    def every(self, predicate: Predicate[T]) -> bool:
        return self._all_match(predicate)

    def some(self, predicate: Predicate[T]) -> bool:
        return self._any_match(predicate)

    def as_list(self) -> List[T]:
        """a copy of the elements, changing it does not touch the enumerable"""
        return list(self._data)
