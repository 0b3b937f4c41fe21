import suite
from dgen import from_schema
from listops import map, filter, flat_map, reverse, rev, init, append, cons, flatten, length

test = suite.test
assert_that = suite.assert_that

# test data schemas
order_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 1000}),
    'customer': 'first_name',
    'amount': ('pyint', {'min_value': 1, 'max_value': 2000}),
    'status': {'_qen_provider': 'choice', 'from': ['open', 'paid', 'refunded']},
}

numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


# map() tests

@test("map passes element and index")
def test_map_with_index():
    result = map(lambda val, index: val + index, [5, 4, 3, 2, 1])
    assert_that(result == [5, 5, 5, 5, 5], f"got {result}")


@test("map accepts single argument callbacks")
def test_map_single_argument():
    assert_that(map(lambda x: x * x, [1, 2, 3]) == [1, 4, 9], "should square all numbers")
    assert_that(map(str.upper, ['a', 'b']) == ['A', 'B'], "unbound methods should work as callbacks")


@test("map keeps length and identity is identity")
def test_map_properties():
    orders = from_schema(order_schema, seed=7).take(25).to.list()
    assert_that(length(map(lambda o: o['id'], orders)) == len(orders), "length should be preserved")
    assert_that(map(lambda o: o, orders) == orders, "identity map should return equal list")


@test("map does not mutate its input")
def test_map_immutable():
    data = [1, 2, 3]
    result = map(lambda x: x * 2, data)
    assert_that(data == [1, 2, 3], "input should be untouched")
    assert_that(result is not data, "result should be a new list")


@test("map accepts any iterable")
def test_map_iterables():
    assert_that(map(lambda x: x + 1, (1, 2)) == [2, 3], "tuples should work")
    assert_that(map(lambda x, i: i, range(3)) == [0, 1, 2], "ranges should work")
    assert_that(map(lambda x: x, iter([9])) == [9], "iterators should work")


# filter() tests

@test("filter keeps matching elements in order")
def test_filter_basic():
    result = filter(lambda val: val % 2 == 0, numbers)
    assert_that(result == [2, 4, 6, 8, 10], f"got {result}")


@test("filter passes the original index")
def test_filter_index():
    result = filter(lambda val, index: index % 2 == 0, ['a', 'b', 'c', 'd', 'e'])
    assert_that(result == ['a', 'c', 'e'], f"got {result}")


@test("filter and its negation split the list")
def test_filter_complement():
    orders = from_schema(order_schema, seed=11).take(40).to.list()
    paid = filter(lambda o: o['status'] == 'paid', orders)
    not_paid = filter(lambda o: o['status'] != 'paid', orders)
    assert_that(len(paid) + len(not_paid) == len(orders), "both halves should cover the input")
    assert_that(all(o in orders for o in paid), "every kept element should come from the input")


@test("filter handles empty result")
def test_filter_empty_result():
    assert_that(filter(lambda x: x > 100, numbers) == [], "should return empty list for no matches")
    assert_that(filter(lambda x: True, []) == [], "empty input gives empty output")


# flat_map() tests

@test("flat_map concatenates results in order")
def test_flat_map_split():
    result = flat_map(lambda s: s.split(' '), ['hello world', 'this is a list with', 'strings'])
    assert_that(result == ['hello', 'world', 'this', 'is', 'a', 'list', 'with', 'strings'], f"got {result}")


@test("flat_map with index and empty results")
def test_flat_map_index():
    result = flat_map(lambda val, index: [val] * index, ['a', 'b', 'c'])
    assert_that(result == ['b', 'c', 'c'], f"got {result}")


# reverse() tests

@test("reverse inverts order and is its own inverse")
def test_reverse():
    assert_that(reverse([1, 2, 3]) == [3, 2, 1], "should reverse")
    assert_that(reverse(reverse(numbers)) == numbers, "double reverse should be identity")
    assert_that(rev([]) == [], "rev of empty is empty")
    assert_that(rev is reverse, "rev should alias reverse")


# init() tests

@test("init builds a list from an index function")
def test_init():
    assert_that(init(lambda i: i + 1, 3) == [1, 2, 3], "should build [1, 2, 3]")
    assert_that(init(lambda i: i, 0) == [], "length 0 gives empty list")
    assert_that(init(lambda i: i, -2) == [], "negative length gives empty list")


# append() and cons() tests

@test("append concatenates two lists")
def test_append():
    first_part, second_part = [1, 2, 3], [4, 5, 6]
    result = append(first_part, second_part)
    assert_that(result == [1, 2, 3, 4, 5, 6], f"got {result}")
    assert_that(len(result) == len(first_part) + len(second_part), "lengths should add up")
    assert_that(result[:len(first_part)] == first_part, "prefix should be the first list")


@test("cons adds the value at the end without mutating")
def test_cons():
    data = [1, 2, 3, 4]
    assert_that(cons(data, 5) == [1, 2, 3, 4, 5], "value should be appended")
    assert_that(data == [1, 2, 3, 4], "input should be untouched")
    assert_that(cons([], 'x') == ['x'], "cons onto empty list")


# flatten() tests

@test("flatten removes arbitrary nesting")
def test_flatten_basic():
    result = flatten([[[1, 2], 3], [4, [5]], 6])
    assert_that(result == [1, 2, 3, 4, 5, 6], f"got {result}")


@test("flatten treats strings and dicts as leaves")
def test_flatten_leaves():
    result = flatten([1, "hello", [2, ("nested", 3)], [{'k': 1}], []])
    assert_that(result == [1, "hello", 2, "nested", 3, {'k': 1}], f"got {result}")


@test("flatten on a flat list is identity")
def test_flatten_flat():
    assert_that(flatten(numbers) == numbers, "flat input should be unchanged")


@test("flatten preserves the number of leaves")
def test_flatten_leaf_count():
    def count_leaves(value):
        if isinstance(value, (list, tuple)):
            return sum(count_leaves(v) for v in value)
        return 1

    nested = from_schema({'_qen_provider': 'nested', 'depth': 5}, seed=3).take(30).to.list()
    flat = flatten(nested)
    assert_that(len(flat) == count_leaves(nested), "leaf count should be invariant")
    assert_that(all(isinstance(x, int) for x in flat), "only leaves should remain")


if __name__ == "__main__":
    suite.main(title="listops core operations test suite")
