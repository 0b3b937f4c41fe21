from __future__ import annotations

from abc import ABC, abstractmethod
from . import operations as ops
from .curry import pipeline
from .types import *

# --- accessors ---
from .extensions.grouping import GroupingAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IListEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base enumerable implementation ---

class _BaseListEnumerable(IListEnumerable[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.length()

    def __repr__(self) -> str:
        return f"ListEnumerable({self._get_data()!r})"

# --- main enumerable class ---

class ListEnumerable(_BaseListEnumerable[T]):
    """
    a lazy, chainable view over a list. every method returns a new
    ListEnumerable; nothing runs until the data is requested through `.to`,
    iteration or len().
    """
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.group = GroupingAccessor(self)
        self.to = TerminalAccessor(self)

    def _derive(self, operation: Callable[[List[T]], List[U]]) -> 'ListEnumerable[U]':
        return ListEnumerable(lambda: operation(self._get_data()))

    # --- projection ---

    def map(self, fn: IndexedSelector[T, U]) -> 'ListEnumerable[U]':
        """project each element, fn receives (element, index)"""
        return self._derive(lambda data: ops.map(fn, data))

    def filter(self, fn: IndexedPredicate[T]) -> 'ListEnumerable[T]':
        """keep elements where fn(element, index) is true"""
        return self._derive(lambda data: ops.filter(fn, data))

    def flat_map(self, fn: IndexedSelector[T, Iterable[U]]) -> 'ListEnumerable[U]':
        return self._derive(lambda data: ops.flat_map(fn, data))

    def flatten(self) -> 'ListEnumerable[Any]':
        return self._derive(ops.flatten)

    # --- structure ---

    def reverse(self) -> 'ListEnumerable[T]':
        return self._derive(ops.reverse)

    def append(self, other: Iterable[U]) -> 'ListEnumerable[Union[T, U]]':
        """concatenate another sequence after this one"""
        return self._derive(lambda data: ops.append(data, other))

    def cons(self, value: U) -> 'ListEnumerable[Union[T, U]]':
        """add a single value at the end"""
        return self._derive(lambda data: ops.cons(data, value))

    def tail(self) -> 'ListEnumerable[T]':
        return self._derive(ops.tail)

    # --- slicing ---

    def take(self, num: int) -> 'ListEnumerable[T]':
        return self._derive(lambda data: ops.take(data, num))

    def take_while(self, fn: IndexedPredicate[T]) -> 'ListEnumerable[T]':
        return self._derive(lambda data: ops.take_while(fn, data))

    def drop(self, num: int) -> 'ListEnumerable[T]':
        return self._derive(lambda data: ops.drop(data, num))

    def drop_while(self, fn: IndexedPredicate[T]) -> 'ListEnumerable[T]':
        return self._derive(lambda data: ops.drop_while(fn, data))

    def slice(self, start: int = 0, length: Optional[int] = None) -> 'ListEnumerable[T]':
        return self._derive(lambda data: ops.slice(data, start, length))

    # --- set & ordering ---

    def unique(self) -> 'ListEnumerable[T]':
        """distinct elements by strict equality, first occurrence kept"""
        return self._derive(ops.unique)

    def sort_list(self, fn: Comparator[T]) -> 'ListEnumerable[T]':
        """stable sort by a three-way comparator"""
        return self._derive(lambda data: ops.sort_list(fn, data))

    def sort_unique(self, fn: Comparator[T]) -> 'ListEnumerable[T]':
        return self._derive(lambda data: ops.sort_unique(fn, data))

    # --- curried interop ---

    def pipe(self, *steps: Transformer[Any, List[Any]]) -> 'ListEnumerable[Any]':
        """
        run curried list transformers (see listops.curried) over the data.
        every step must return a list so the result stays chainable.
        """
        run = pipeline(*steps)
        return self._derive(lambda data: list(run(data)))
