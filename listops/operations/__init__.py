from .core import map, filter, flat_map, reverse, rev, init, append, cons
from .terminal import (
    length, is_empty, isEmpty, head, hd, tail, tl, nth, try_nth,
    first, second, third, last,
    find, find_index, some, every,
    foldl, fold_left, foldr, fold_right, for_all
)
from .grouping import partition, group_by
from .set import unique, sort_list, sort_unique
from .slicing import take, take_while, drop, drop_while, dropWhile, slice
from .utility import flatten
