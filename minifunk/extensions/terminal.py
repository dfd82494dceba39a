from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..exceptions import require_callable

if typing.TYPE_CHECKING:
    from ..enumerable import _BaseSequence

class _TerminalOperations(Generic[T]):
    """operations that consume the sequence and return a plain value"""

    def for_each(self: '_BaseSequence[T]', action: Consumer[T]) -> None:
        """perform an action on every element. errors raised by the action reach the caller."""
        require_callable(action, "action")
        for item in self._get_data():
            action(item)

    def reduce(self: '_BaseSequence[T]', initial: R, combinator: BiFunction[R, T]) -> R:
        """left fold starting from initial, combinator receives (accumulator, element)"""
        require_callable(combinator, "combinator")
        accumulator = initial
        for item in self._get_data():
            accumulator = combinator(accumulator, item)
        return accumulator

    def count(self: '_BaseSequence[T]') -> int:
        return len(self._get_data())

    def _find_first(self: '_BaseSequence[T]', predicate: Predicate[T]) -> Maybe[T]:
        require_callable(predicate, "predicate")
        for item in self._get_data():
            if predicate(item):
                return Maybe.of(item)
        return Maybe.empty()

    def _all_match(self: '_BaseSequence[T]', predicate: Predicate[T]) -> bool:
        require_callable(predicate, "predicate")
        return all(predicate(x) for x in self._get_data())

    def _any_match(self: '_BaseSequence[T]', predicate: Predicate[T]) -> bool:
        require_callable(predicate, "predicate")
        return any(predicate(x) for x in self._get_data())


class TerminalAccessor(Generic[T]):
    """conversions, reached through `seq.to`. every result is a fresh container."""

    def __init__(self, sequence_instance: '_BaseSequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sequence._get_data())

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._sequence._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._sequence._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later keys win"""
        require_callable(key_selector, "key_selector")
        if value_selector is not None:
            require_callable(value_selector, "value_selector")
        val_sel = value_selector if value_selector is not None else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._sequence._get_data()}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sequence._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._sequence._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._sequence._get_data())

    def join(self, separator: str = ", ") -> str:
        return separator.join(str(item) for item in self._sequence._get_data())
