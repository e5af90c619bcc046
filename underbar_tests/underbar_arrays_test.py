import suite
from collections import Counter
import numpy as np
from dgen import from_schema
from underbar import shuffle, sort_by, sortBy, zip, flatten, intersection, difference

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

# test data schemas
person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 1000}),
    'name': 'word',
    'city': {'_provider': 'choice', 'from': ['ny', 'la', 'chi']},
    'score': ('pyint', {'min_value': 80, 'max_value': 100})
}


# shuffle() tests

@test("shuffle keeps every element exactly once")
def test_shuffle_permutation():
    data = list(range(50))
    result = shuffle(data, rng=1)
    assert_that(sorted(result) == data, "shuffle must be a permutation")
    assert_that(result is not data, "a new list should come back")


@test("shuffle does not touch its input")
def test_shuffle_no_mutation():
    data = ['a', 'b', 'c', 'd']
    shuffle(data, rng=3)
    assert_that(data == ['a', 'b', 'c', 'd'], "the input must not change")


@test("shuffle is reproducible with a seeded generator")
def test_shuffle_seeded():
    data = list(range(20))
    a = shuffle(data, rng=np.random.default_rng(99))
    b = shuffle(data, rng=np.random.default_rng(99))
    assert_that(a == b, "equal seeds should give equal permutations")


@test("shuffle reaches every permutation of a small input")
def test_shuffle_uniform():
    rng = np.random.default_rng(2024)
    counts = Counter(tuple(shuffle([1, 2, 3], rng=rng)) for _ in range(6000))
    assert_that(len(counts) == 6, f"all six orders should appear, saw {len(counts)}")
    assert_that(all(800 < n < 1200 for n in counts.values()), f"orders should be roughly even: {counts}")


@test("shuffle handles empty and single-element input")
def test_shuffle_small():
    assert_that(shuffle([], rng=0) == [], "empty stays empty")
    assert_that(shuffle(['only'], rng=0) == ['only'], "one element stays put")


# sort_by() tests

@test("sort_by orders records by a property name")
def test_sort_by_property():
    result = sort_by([{'n': 3}, {'n': 1}, {'n': 2}], 'n')
    assert_that([r['n'] for r in result] == [1, 2, 3], f"unexpected order {result}")


@test("sort_by orders by a key function")
def test_sort_by_function():
    words = ['pear', 'fig', 'banana']
    assert_that(sort_by(words, len) == ['fig', 'pear', 'banana'], "should sort by length")
    assert_that(words == ['pear', 'fig', 'banana'], "the input must not change")


@test("sort_by is stable for equal keys")
def test_sort_by_stable():
    people = from_schema(person_schema, seed=11).records(40)
    result = sortBy(people, 'city')
    for city in ('chi', 'la', 'ny'):
        original = [p['id'] for p in people if p['city'] == city]
        sorted_ids = [p['id'] for p in result if p['city'] == city]
        assert_that(original == sorted_ids, f"people in {city} should keep their input order")
    cities = [p['city'] for p in result]
    assert_that(cities == sorted(cities), "cities should be ascending")


# zip() tests

@test("zip pads shorter sequences with none")
def test_zip_padding():
    result = zip(['a', 'b', 'c', 'd'], [1, 2, 3])
    assert_that(result == [['a', 1], ['b', 2], ['c', 3], ['d', None]], f"unexpected result {result}")


@test("zip groups three sequences by index")
def test_zip_three():
    result = zip([1, 2], ['x'], [True, False, None])
    expected = [[1, 'x', True], [2, None, False], [None, None, None]]
    assert_that(result == expected, f"unexpected result {result}")


@test("zip of nothing is empty")
def test_zip_empty():
    assert_that(zip() == [], "no inputs give no rows")
    assert_that(zip([], []) == [], "empty inputs give no rows")


# flatten() tests

@test("flatten expands nesting of any depth")
def test_flatten_deep():
    assert_that(flatten([1, [2, [3, [4]], 5]]) == [1, 2, 3, 4, 5], "should flatten fully")


@test("flatten keeps strings and mappings whole")
def test_flatten_atoms():
    result = flatten(['ab', ('c', ['d']), {'k': [1]}, [[]]])
    assert_that(result == ['ab', 'c', 'd', {'k': [1]}], f"unexpected result {result}")


@test("flatten does not touch its input")
def test_flatten_no_mutation():
    nested = [1, [2, [3]]]
    flatten(nested)
    assert_that(nested == [1, [2, [3]]], "the input must not change")


# intersection() tests

@test("intersection keeps shared elements in first order")
def test_intersection_basic():
    assert_that(intersection([1, 2, 3], [2, 3, 4]) == [2, 3], "should keep 2 and 3")
    assert_that(intersection([4, 2, 3, 1], [1, 2, 3, 4]) == [4, 2, 3, 1], "first order wins")


@test("intersection across several sequences")
def test_intersection_many():
    result = intersection(['a', 'b', 'c', 'd'], ['b', 'c', 'd'], ['d', 'c'])
    assert_that(result == ['c', 'd'], f"unexpected result {result}")


@test("intersection keeps the first sequence's duplicates")
def test_intersection_multiplicity():
    assert_that(intersection([1, 1, 2, 3], [1, 2]) == [1, 1, 2], "duplicates in the first input stay")


@test("intersection never mutates its inputs")
def test_intersection_no_mutation():
    a, b = [1, 2, 3], [3]
    result = intersection(a, b)
    assert_that(a == [1, 2, 3] and b == [3], "inputs must not change")
    assert_that(result is not a, "a new list should come back")


@test("intersection of one sequence is a copy of it")
def test_intersection_single():
    assert_that(intersection([1, 2, 2]) == [1, 2, 2], "no other inputs means nothing is filtered")


@test("intersection uses strict equality")
def test_intersection_strict():
    assert_that(intersection([1, True, [1]], [True, [1]]) == [True, [1]], "1 should not match true")


# difference() tests

@test("difference removes elements found in the others")
def test_difference_basic():
    assert_that(difference([1, 2, 3, 4], [2, 4]) == [1, 3], "should keep 1 and 3")


@test("difference against several sequences keeps order and duplicates")
def test_difference_many():
    result = difference([5, 1, 5, 2, 3, 1], [2], [3, 9])
    assert_that(result == [5, 1, 5, 1], f"unexpected result {result}")


@test("difference never mutates its inputs")
def test_difference_no_mutation():
    a = [1, 2, 3]
    difference(a, [1])
    assert_that(a == [1, 2, 3], "the first input must not change")


if __name__ == "__main__":
    suite.main(title="underbar array set algebra test")
