from __future__ import annotations
from ..types import *


def flatten(items: Iterable[Nested[T]]) -> List[T]:
    """
    flatten arbitrarily nested lists and tuples into one flat list, depth first,
    left to right. strings, dicts and any other values are leaves.
    """
    result = []

    def flatten_recursive(nested):
        for item in nested:
            if isinstance(item, NESTED_TYPES):
                flatten_recursive(item)
            else:
                result.append(item)

    flatten_recursive(items)
    return result
