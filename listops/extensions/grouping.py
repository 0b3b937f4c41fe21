from __future__ import annotations
import typing
from .. import operations as ops
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import ListEnumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'ListEnumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements by a key, keys in first-seen order"""
        return ops.group_by(key_selector, self._enumerable._get_data())

    def partition(self, predicate: IndexedPredicate[T]) -> Tuple[List[T], List[T]]:
        """partition elements into (matches, non_matches)"""
        return ops.partition(predicate, self._enumerable._get_data())
