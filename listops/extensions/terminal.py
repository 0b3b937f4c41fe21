from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from .. import operations as ops
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import ListEnumerable

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'ListEnumerable[T]'):
        self._enumerable = enumerable_instance

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to list (a copy, the cached data stays untouched)"""
        return list(self._enumerable._get_data())

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, U]] = None) -> Dict[K, U]:
        """convert to dictionary, later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable._get_data()}

    # --- cardinality & positional access ---

    def length(self) -> int:
        return ops.length(self._enumerable._get_data())

    def is_empty(self) -> bool:
        return ops.is_empty(self._enumerable._get_data())

    def head(self) -> T:
        """first element, raises EmptyListError when there is none"""
        return ops.head(self._enumerable._get_data())

    def nth(self, index: int) -> T:
        """element at index, raises IndexOutOfBoundsError when it does not exist"""
        return ops.nth(self._enumerable._get_data(), index)

    def try_nth(self, index: int) -> Optional[T]:
        return ops.try_nth(self._enumerable._get_data(), index)

    def first(self) -> T: return ops.first(self._enumerable._get_data())

    def second(self) -> T: return ops.second(self._enumerable._get_data())

    def third(self) -> T: return ops.third(self._enumerable._get_data())

    def last(self) -> T: return ops.last(self._enumerable._get_data())

    # --- searching ---

    def find(self, predicate: IndexedPredicate[T]) -> Optional[T]:
        return ops.find(predicate, self._enumerable._get_data())

    def find_index(self, predicate: IndexedPredicate[T]) -> Optional[int]:
        return ops.find_index(predicate, self._enumerable._get_data())

    def some(self, predicate: IndexedPredicate[T]) -> bool:
        return ops.some(predicate, self._enumerable._get_data())

    def every(self, predicate: IndexedPredicate[T]) -> bool:
        return ops.every(predicate, self._enumerable._get_data())

    # --- folding & side effects ---

    def foldl(self, accumulator: LeftFolder[R, T], initial: R = None) -> R:
        """reduce from the left with accumulator(acc, element)"""
        return ops.foldl(accumulator, self._enumerable._get_data(), initial)

    def foldr(self, accumulator: RightFolder[T, R], initial: R = None) -> R:
        """reduce from the right with accumulator(element, acc)"""
        return ops.foldr(accumulator, self._enumerable._get_data(), initial)

    def for_all(self, action: IndexedAction[T]) -> 'ListEnumerable[T]':
        """
        performs action(element, index) on each element for side-effects.
        this is an EAGER operation; returns the original enumerable to allow chaining.
        """
        ops.for_all(action, self._enumerable._get_data())
        return self._enumerable
