"""
the curried form of every list operation.

each function takes the operation's arguments except the list and returns a
function awaiting the list::

    from listops import curried as c, pipe

    pipe([1, 2, 3, 4], c.filter(lambda x: x % 2 == 0), c.map(lambda x: x * 10))
    # [20, 40]
"""
from . import operations as _ops
from .curry import pipeable, pipe, pipeline, compose

# --- core ---
map = pipeable(_ops.map)
filter = pipeable(_ops.filter)
flat_map = pipeable(_ops.flat_map)
reverse = pipeable(_ops.reverse)
rev = reverse
append = pipeable(_ops.append)
cons = pipeable(_ops.cons)
# init builds a list instead of consuming one, so it has no curried variant
init = _ops.init

# --- terminal ---
length = pipeable(_ops.length)
is_empty = pipeable(_ops.is_empty)
isEmpty = is_empty
head = pipeable(_ops.head)
hd = head
tail = pipeable(_ops.tail)
tl = tail
nth = pipeable(_ops.nth)
try_nth = pipeable(_ops.try_nth)
first = pipeable(_ops.first)
second = pipeable(_ops.second)
third = pipeable(_ops.third)
last = pipeable(_ops.last)
find = pipeable(_ops.find)
find_index = pipeable(_ops.find_index)
some = pipeable(_ops.some)
every = pipeable(_ops.every)
foldl = pipeable(_ops.foldl)
fold_left = foldl
foldr = pipeable(_ops.foldr)
fold_right = foldr
for_all = pipeable(_ops.for_all)

# --- grouping ---
partition = pipeable(_ops.partition)
group_by = pipeable(_ops.group_by)

# --- set & ordering ---
unique = pipeable(_ops.unique)
sort_list = pipeable(_ops.sort_list)
sort_unique = pipeable(_ops.sort_unique)

# --- slicing ---
take = pipeable(_ops.take)
take_while = pipeable(_ops.take_while)
drop = pipeable(_ops.drop)
drop_while = pipeable(_ops.drop_while)
dropWhile = drop_while
slice = pipeable(_ops.slice)

# --- utility ---
flatten = pipeable(_ops.flatten)
