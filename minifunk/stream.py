from __future__ import annotations

from .types import *
from .enumerable import _BaseSequence
from .extensions.core import _CoreOperations
from .extensions.terminal import _TerminalOperations


class Stream(
    _BaseSequence[T],
    _CoreOperations[T],
    _TerminalOperations[T]
):
    """
    a sequence of elements supporting aggregate operations, in the java stream vocabulary.
    immutable after construction: every transformation returns a new stream.
    """

    def sorted(self, comparator: Comparator[T]) -> 'Stream[T]':
        """stable sort of a copy using a three-way comparator"""
        return self._sort_with(comparator)

    def find_first(self, predicate: Predicate[T]) -> Maybe[T]:
        """first element satisfying the predicate, or an empty maybe"""
        return self._find_first(predicate)

    def all_match(self, predicate: Predicate[T]) -> bool:
        """true when every element satisfies the predicate, vacuously true when empty"""
        return self._all_match(predicate)

    def any_match(self, predicate: Predicate[T]) -> bool:
        """true when at least one element satisfies the predicate"""
        return self._any_match(predicate)

    def none_match(self, predicate: Predicate[T]) -> bool:
        return not self._any_match(predicate)

    def to_list(self) -> List[T]:
        """a copy of the elements, changing it does not touch the stream"""
        return list(self._data)
