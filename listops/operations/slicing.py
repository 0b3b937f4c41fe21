from __future__ import annotations
from itertools import takewhile, dropwhile
from ..callables import indexed
from ..types import *
from .core import as_list


def take(items: Iterable[T], num: int) -> List[T]:
    """the first num elements; empty when num <= 0"""
    return as_list(items)[:max(num, 0)]


def take_while(fn: IndexedPredicate[T], items: Iterable[T]) -> List[T]:
    """the longest prefix whose elements all satisfy fn(element, index)"""
    predicate = indexed(fn)
    return [item for _, item in takewhile(lambda pair: predicate(pair[1], pair[0]), enumerate(items))]


def drop(items: Iterable[T], num: int) -> List[T]:
    """
    everything after the first num elements.

    num is clamped to the list bounds, so num <= 0 gives a full copy. a negative
    num does not count back from the end; use slice(items, -n) for the last n.
    """
    return as_list(items)[max(num, 0):]


def drop_while(fn: IndexedPredicate[T], items: Iterable[T]) -> List[T]:
    """the remainder starting at the first element for which fn(element, index) is false"""
    predicate = indexed(fn)
    return [item for _, item in dropwhile(lambda pair: predicate(pair[1], pair[0]), enumerate(items))]


dropWhile = drop_while


def slice(items: Iterable[T], start: int = 0, length: Optional[int] = None) -> List[T]:
    """
    length elements beginning at start, or everything from start when length is None.

    a negative start counts back from the end of the list and a negative length
    stops that many elements before the end. out of range values clamp, they
    never raise.
    """
    data = as_list(items)
    size = len(data)

    begin = max(size + start, 0) if start < 0 else min(start, size)
    if length is None:
        end = size
    elif length < 0:
        end = max(size + length, begin)
    else:
        end = min(begin + length, size)
    return data[begin:end]
