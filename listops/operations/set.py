from __future__ import annotations
from functools import cmp_to_key
from ..types import *


def _strict_key(value: Any) -> Tuple[type, Any]:
    # pairing every value, nested ones included, with its exact type keeps 1, 1.0 and True apart
    if isinstance(value, tuple):
        return type(value), tuple(_strict_key(v) for v in value)
    if isinstance(value, frozenset):
        return type(value), frozenset(_strict_key(v) for v in value)
    return type(value), value


def _strict_equals(a: Any, b: Any) -> bool:
    if type(a) is not type(b):
        return False
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(_strict_equals(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        return len(a) == len(b) and all(
            any(_strict_equals(key, other_key) and _strict_equals(value, other_value)
                for other_key, other_value in b.items())
            for key, value in a.items()
        )
    if isinstance(a, (set, frozenset)):
        return len(a) == len(b) and all(any(_strict_equals(x, y) for y in b) for x in a)
    return a == b


def unique(items: Iterable[T]) -> List[T]:
    """
    remove duplicates, keeping the first occurrence of each value in order.

    equality is strict: values must share their exact type and compare equal,
    and the same holds for every element nested in lists, tuples, sets and dicts.
    hashable values are tracked in a set; unhashable ones fall back to a linear
    scan over the values kept so far.
    """
    result = []
    seen = set()
    for item in items:
        try:
            key = _strict_key(item)
            if key in seen:
                continue
            seen.add(key)
        except TypeError:
            if any(_strict_equals(kept, item) for kept in result):
                continue
        result.append(item)
    return result


def sort_list(fn: Comparator[T], items: Iterable[T]) -> List[T]:
    """
    a new list sorted in increasing order according to the comparator fn.
    the sort is stable, so elements comparing equal keep their input order.
    """
    return sorted(items, key=cmp_to_key(fn))


def sort_unique(fn: Comparator[T], items: Iterable[T]) -> List[T]:
    """sort with fn, then keep only the first of each run that fn considers equal"""
    result = []
    for item in sort_list(fn, items):
        if not result or fn(result[-1], item) != 0:
            result.append(item)
    return result
