from __future__ import annotations
import logging
import typing
from functools import cmp_to_key
from itertools import chain
from ..types import *
from ..exceptions import require_callable, require_iterable, require_bound

if typing.TYPE_CHECKING:
    from ..enumerable import _BaseSequence

logger = logging.getLogger(__name__)

class _CoreOperations(Generic[T]):
    """chainable transformations. each one returns a new sequence of the receiver's class."""

    def filter(self: '_BaseSequence[T]', predicate: Predicate[T]) -> '_BaseSequence[T]':
        """keep the elements satisfying a predicate"""
        require_callable(predicate, "predicate")
        return self._derive([x for x in self._get_data() if predicate(x)])

    def map(self: '_BaseSequence[T]', mapper: Function[T, U]) -> '_BaseSequence[U]':
        """project each element to a new form"""
        require_callable(mapper, "mapper")
        return self._derive([mapper(x) for x in self._get_data()])

    def flat_map(self: '_BaseSequence[T]', mapper: Function[T, Iterable[U]]) -> '_BaseSequence[U]':
        """project each element to a sequence and flatten one level, in encounter order"""
        require_callable(mapper, "mapper")

        def produced():
            for item in self._get_data():
                yield require_iterable(mapper(item), "mapper result")

        # the list() drains every produced sequence before anything is returned
        return self._derive(list(chain.from_iterable(produced())))

    def _sort_with(self: '_BaseSequence[T]', comparator: Comparator[T]) -> '_BaseSequence[T]':
        require_callable(comparator, "comparator")
        data = self._get_data()
        logger.debug(f"sorting {len(data)} elements with {comparator!r}")
        # sorted() copies, python's sort is stable
        return self._derive(sorted(data, key=cmp_to_key(comparator)))

    def sorted_by(self: '_BaseSequence[T]', key_selector: Optional[KeySelector[T, K]] = None,
                  reverse: bool = False) -> '_BaseSequence[T]':
        """stable sort by a key, natural ordering when no key is given"""
        if key_selector is not None:
            require_callable(key_selector, "key_selector")
        return self._derive(sorted(self._get_data(), key=key_selector, reverse=reverse))

    def distinct(self: '_BaseSequence[T]') -> '_BaseSequence[T]':
        """drop duplicates by equality. keeps the first occurrence."""
        data = self._get_data()
        try:
            # dicts are ordered, so fromkeys is an order-preserving unique filter
            return self._derive(dict.fromkeys(data))
        except TypeError:
            # unhashable elements, fall back to an equality scan
            kept = []
            for item in data:
                if item not in kept:
                    kept.append(item)
            return self._derive(kept)

    def limit(self: '_BaseSequence[T]', max_size: int) -> '_BaseSequence[T]':
        """the first max_size elements, or all of them when the sequence is shorter"""
        require_bound(max_size, "max_size")
        data = self._get_data()
        if max_size < len(data):
            logger.debug(f"limit truncates {len(data)} elements to {max_size}")
        return self._derive(data[:max_size])

    def skip(self: '_BaseSequence[T]', count: int) -> '_BaseSequence[T]':
        """drop the first count elements"""
        require_bound(count, "count")
        return self._derive(self._get_data()[count:])
