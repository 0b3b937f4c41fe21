from __future__ import annotations
from collections import defaultdict
from ..callables import indexed
from ..types import *


def partition(fn: IndexedPredicate[T], items: Iterable[T]) -> Tuple[List[T], List[T]]:
    """split into (matches, non_matches), both in original order"""
    predicate = indexed(fn)
    matches, non_matches = [], []
    for index, item in enumerate(items):
        (matches if predicate(item, index) else non_matches).append(item)
    return matches, non_matches


def group_by(fn: KeySelector[T, K], items: Iterable[T]) -> Dict[K, List[T]]:
    """
    group elements by the key fn returns for them.
    keys keep first-seen order and every group keeps the original element order.
    """
    groups = defaultdict(list)
    for item in items:
        groups[fn(item)].append(item)
    return dict(groups)
