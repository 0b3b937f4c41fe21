from __future__ import annotations
from itertools import chain
from ..callables import indexed
from ..types import *


def map(fn: IndexedSelector[T, U], items: Iterable[T]) -> List[U]:
    """project each element to a new form, passing its index as well"""
    selector = indexed(fn)
    return [selector(item, index) for index, item in enumerate(items)]


def filter(fn: IndexedPredicate[T], items: Iterable[T]) -> List[T]:
    """keep the elements for which fn(element, index) is true"""
    predicate = indexed(fn)
    return [item for index, item in enumerate(items) if predicate(item, index)]


def flat_map(fn: IndexedSelector[T, Iterable[U]], items: Iterable[T]) -> List[U]:
    """project each element to a sequence and concatenate the results"""
    selector = indexed(fn)
    return [inner for index, item in enumerate(items) for inner in selector(item, index)]


def reverse(items: Iterable[T]) -> List[T]:
    """the elements in reverse order"""
    return list(items)[::-1]


rev = reverse


def init(fn: IndexGenerator[T], length: int) -> List[T]:
    """build a list of the given length where element i is fn(i)"""
    return [fn(i) for i in range(length)]


def append(items: Iterable[T], other: Iterable[U]) -> List[Union[T, U]]:
    """concatenate two lists"""
    # chain accepts any iterable on either side without an intermediate copy
    return list(chain(items, other))


def cons(items: Iterable[T], value: U) -> List[Union[T, U]]:
    """
    a new list with value added at the END of items.
    note this appends, unlike the classic lisp cons which prepends.
    """
    return list(chain(items, [value]))


def as_list(items: Iterable[T]) -> List[T]:
    """read-only list view of items; copies only when items is not already a list"""
    return items if isinstance(items, list) else list(items)
