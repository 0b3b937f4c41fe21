from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Sequence, Any, Optional, Union,
    Dict, List, Tuple, Hashable
)

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')
K = TypeVar('K', bound=Hashable)

# callbacks that receive the element and its position in the input
IndexedPredicate = Callable[[T, int], bool]
IndexedSelector = Callable[[T, int], U]
IndexedAction = Callable[[T, int], Any]

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparator = Callable[[T, T], int]
LeftFolder = Callable[[R, T], R]
RightFolder = Callable[[T, R], R]
IndexGenerator = Callable[[int], T]

# a list transformer awaiting its input, as produced by the curried form
Transformer = Callable[[Iterable[T]], U]

# sequence types that flatten() descends into; everything else is a leaf
NESTED_TYPES = (list, tuple)

Nested = Union[T, Sequence['Nested[T]']]
