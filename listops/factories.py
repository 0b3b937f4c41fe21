import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import ListEnumerable

def from_iterable(data: Iterable[T]) -> 'ListEnumerable[T]':
    """create a list enumerable from any iterable; the input is copied, never mutated"""
    from .enumerable import ListEnumerable
    return ListEnumerable(lambda: list(data))

def from_range(start: int, count: int) -> 'ListEnumerable[int]':
    """create a list enumerable of count consecutive integers"""
    from .enumerable import ListEnumerable
    return ListEnumerable(lambda: list(range(start, start + count)))

def repeat(item: T, count: int) -> 'ListEnumerable[T]':
    """create a list enumerable with item repeated count times"""
    from .enumerable import ListEnumerable
    return ListEnumerable(lambda: [item] * count)

def empty() -> 'ListEnumerable[Any]':
    """create an empty list enumerable"""
    from .enumerable import ListEnumerable
    return ListEnumerable(lambda: [])

def generate(generator_func: IndexGenerator[T], count: int) -> 'ListEnumerable[T]':
    """create a list enumerable whose element i is generator_func(i)"""
    from .enumerable import ListEnumerable
    from .operations import init
    return ListEnumerable(lambda: init(generator_func, count))

# --- aliases ---
listops_of = from_iterable
L = from_iterable
