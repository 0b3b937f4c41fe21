r"""
'    .____    .___  ____________________________ __________  _________
'    |    |   |   |/   _____/\__    ___/\_____  \\______   \/   _____/
'    |    |   |   |\_____  \   |    |    /   |   \|     ___/\_____  \
'    |    |___|   |/        \  |    |   /    |    \    |    /        \
'    |_______ \___/_______  /  |____|   \_______  /____|   /_______  /
'            \/           \/                    \/                 \/
"""

# expose the direct form of every operation
from .operations import (
    map, filter, flat_map, reverse, rev, init, append, cons,
    length, is_empty, isEmpty, head, hd, tail, tl, nth, try_nth,
    first, second, third, last,
    find, find_index, some, every,
    foldl, fold_left, foldr, fold_right, for_all,
    partition, group_by,
    unique, sort_list, sort_unique,
    take, take_while, drop, drop_while, dropWhile, slice,
    flatten
)

# expose the curried form and the composition helpers
from . import curried
from .curry import pipeable, pipe, pipeline, compose

# expose the errors
from .errors import ListOpsError, IndexOutOfBoundsError, EmptyListError

# expose the fluent chain and its factory functions
from .enumerable import ListEnumerable
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    listops_of,
    L
)

# define what `import *` does
# the direct operations that shadow builtins (map, filter, slice) are left
# out so a star import cannot silently replace them
__all__ = [
    "flat_map", "reverse", "rev", "init", "append", "cons",
    "length", "is_empty", "isEmpty", "head", "hd", "tail", "tl", "nth", "try_nth",
    "first", "second", "third", "last",
    "find", "find_index", "some", "every",
    "foldl", "fold_left", "foldr", "fold_right", "for_all",
    "partition", "group_by",
    "unique", "sort_list", "sort_unique",
    "take", "take_while", "drop", "drop_while", "dropWhile",
    "flatten",
    "curried", "pipeable", "pipe", "pipeline", "compose",
    "ListOpsError", "IndexOutOfBoundsError", "EmptyListError",
    "ListEnumerable",
    "from_iterable", "from_range", "repeat", "empty", "generate", "listops_of", "L"
]
