from __future__ import annotations
from functools import reduce
from ..callables import indexed
from ..errors import EmptyListError, IndexOutOfBoundsError
from ..types import *
from .core import as_list


# --- cardinality ---

def length(items: Iterable[T]) -> int:
    """number of elements"""
    return len(as_list(items))


def is_empty(items: Iterable[T]) -> bool:
    """true when the list has no elements"""
    return length(items) == 0


isEmpty = is_empty


# --- positional access ---

def head(items: Iterable[T]) -> T:
    """first element, raising EmptyListError on an empty list"""
    data = as_list(items)
    if not data:
        raise EmptyListError()
    return data[0]


def tail(items: Iterable[T]) -> List[T]:
    """everything except the first element; empty for lists of zero or one element"""
    return as_list(items)[1:]


hd = head
tl = tail


def nth(items: Iterable[T], index: int) -> T:
    """
    element at index. negative indexes are not wrapped around.

    raises IndexOutOfBoundsError when the position does not exist, and its
    EmptyListError subclass when the list has no elements at all.
    """
    data = as_list(items)
    if not data:
        raise EmptyListError(index)
    if not 0 <= index < len(data):
        raise IndexOutOfBoundsError(index, len(data))
    return data[index]


def try_nth(items: Iterable[T], index: int) -> Optional[T]:
    """element at index, or None when the position does not exist"""
    data = as_list(items)
    return data[index] if 0 <= index < len(data) else None


def first(items: Iterable[T]) -> T:
    return nth(items, 0)


def second(items: Iterable[T]) -> T:
    return nth(items, 1)


def third(items: Iterable[T]) -> T:
    return nth(items, 2)


def last(items: Iterable[T]) -> T:
    data = as_list(items)
    return nth(data, len(data) - 1)


# --- searching ---

def find(fn: IndexedPredicate[T], items: Iterable[T]) -> Optional[T]:
    """first element satisfying fn, or None"""
    predicate = indexed(fn)
    for index, item in enumerate(items):
        if predicate(item, index):
            return item
    return None


def find_index(fn: IndexedPredicate[T], items: Iterable[T]) -> Optional[int]:
    """position of the first element satisfying fn, or None"""
    predicate = indexed(fn)
    for index, item in enumerate(items):
        if predicate(item, index):
            return index
    return None


def some(fn: IndexedPredicate[T], items: Iterable[T]) -> bool:
    """true if at least one element satisfies fn. false for an empty list."""
    predicate = indexed(fn)
    return any(predicate(item, index) for index, item in enumerate(items))


def every(fn: IndexedPredicate[T], items: Iterable[T]) -> bool:
    """true if all elements satisfy fn. true for an empty list."""
    predicate = indexed(fn)
    return all(predicate(item, index) for index, item in enumerate(items))


# --- folding ---

def foldl(fn: LeftFolder[R, T], items: Iterable[T], initial: R = None) -> R:
    """reduce from the left: fn(fn(fn(initial, x0), x1), x2)"""
    return reduce(fn, items, initial)


def foldr(fn: RightFolder[T, R], items: Iterable[T], initial: R = None) -> R:
    """reduce from the right: fn(x0, fn(x1, fn(x2, initial)))"""
    return reduce(lambda acc, item: fn(item, acc), reversed(as_list(items)), initial)


fold_left = foldl
fold_right = foldr


def for_all(fn: IndexedAction[T], items: Iterable[T]) -> None:
    """call fn(element, index) on every element in order, for its side effects"""
    action = indexed(fn)
    for index, item in enumerate(items):
        action(item, index)
