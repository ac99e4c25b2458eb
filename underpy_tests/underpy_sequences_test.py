from collections import deque

import numpy as np

import suite
import underpy as _

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

letters = ["a", "b", "c", "d", "e"]


# first() / last() tests

@test("first and last take one element by default, as a list")
def test_first_last_default():
    assert_equal(_.first(letters), ["a"])
    assert_equal(_.last(letters), ["e"])


@test("first and last clamp n to the sequence length")
def test_first_last_clamp():
    assert_equal(_.first(letters, 3), ["a", "b", "c"])
    assert_equal(_.last(letters, 2), ["d", "e"])
    assert_equal(_.first(letters, 50), letters)
    assert_equal(_.last(letters, 50), letters)


@test("first and last yield nothing for n <= 0")
def test_first_last_non_positive():
    assert_equal(_.first(letters, 0), [])
    assert_equal(_.last(letters, -2), [])


@test("first and last return fresh lists")
def test_first_last_fresh():
    result = _.first(letters, 5)
    result.append("z")
    assert_equal(len(letters), 5, "input must not change")


# initial() / rest() tests

@test("initial drops the last n elements")
def test_initial():
    assert_equal(_.initial(letters), ["a", "b", "c", "d"])
    assert_equal(_.initial(letters, 2), ["a", "b", "c"])


@test("initial with n covering the sequence drops nothing")
def test_initial_clamp():
    assert_equal(_.initial(letters, 5), letters)
    assert_equal(_.initial(letters, 99), letters)
    assert_equal(_.initial(letters, 0), letters)
    assert_equal(_.initial([], 1), [])


@test("rest returns everything from index onward")
def test_rest():
    assert_equal(_.rest(letters), ["b", "c", "d", "e"])
    assert_equal(_.rest(letters, 3), ["d", "e"])


@test("rest clamps the index into range")
def test_rest_clamp():
    assert_equal(_.rest(letters, 0), letters)
    assert_equal(_.rest(letters, -4), letters)
    assert_equal(_.rest(letters, 5), [])
    assert_equal(_.rest(letters, 9), [])


@test("slicing helpers accept tuples, ranges, deques and arrays")
def test_slicing_other_sequences():
    assert_equal(_.first((1, 2, 3), 2), [1, 2])
    assert_equal(_.last(range(10), 3), [7, 8, 9])
    assert_equal(_.rest(deque([1, 2, 3])), [2, 3])
    assert_equal(_.initial(np.array([1, 2, 3])), [1, 2])


@test("slicing helpers return empty lists for non-sequences")
def test_slicing_other():
    assert_equal(_.first(None), [])
    assert_equal(_.rest({"a": 1}), [])
    assert_equal(_.last("abc"), [])


# compact() tests

@test("compact removes falsy values including none and zero")
def test_compact():
    assert_equal(_.compact([0, 1, None, 2, 0.0, "", "x", False, [], [0]]), [1, 2, "x", [0]])


# flatten() tests

@test("flatten removes every level of nesting")
def test_flatten_deep():
    assert_equal(_.flatten([1, [2, [3, [4]], 5]]), [1, 2, 3, 4, 5])


@test("flatten shallow removes exactly one level")
def test_flatten_shallow():
    assert_equal(_.flatten([1, [2, [3, [4]], 5]], True), [1, 2, [3, [4]], 5])


@test("flatten of a shallow flatten equals a deep flatten")
def test_flatten_composition():
    nested = [[1, (2, [3])], [], [[[]]], 4, [[5, [6, [7]]]]]
    assert_equal(_.flatten(_.flatten(nested, True)), _.flatten(nested))
    assert_equal(_.flatten(nested), [1, 2, 3, 4, 5, 6, 7])


@test("flatten passes non-sequences through unchanged")
def test_flatten_passthrough():
    record = {"k": [1, 2]}
    result = _.flatten(["ab", [record, None], 3])
    assert_equal(result, ["ab", record, None, 3])
    assert_that(result[1] is record, "associations are not copied or expanded")


@test("flatten handles nesting deeper than the recursion limit")
def test_flatten_very_deep():
    nested = [0]
    for i in range(1, 5000):
        nested = [nested, i]
    result = _.flatten(nested)
    assert_equal(result, list(range(5000)))


@test("flatten expands multi-dimensional numpy arrays")
def test_flatten_numpy():
    result = _.flatten([np.array([[1, 2], [3, 4]]), 5])
    assert_equal([int(x) for x in result], [1, 2, 3, 4, 5])


# without() / difference() tests

@test("without removes every listed value")
def test_without():
    assert_equal(_.without([1, 2, 1, 0, 3, 1, 4], 0, 1), [2, 3, 4])
    assert_equal(_.without([[1], [2]], [1]), [[2]], "unhashable values compare by equality")


@test("difference removes values present in any other sequence")
def test_difference():
    assert_equal(_.difference([1, 2, 3, 4, 5], [5, 2, 10]), [1, 3, 4])
    assert_equal(_.difference([1, 2, 3, 4], [1], (4,), None), [2, 3])
    assert_equal(_.difference([1, 2]), [1, 2])


# table() tests

@test("table zips keys with values")
def test_table_zip():
    assert_equal(_.table(["a", "b"], [1, 2]), {"a": 1, "b": 2})
    assert_equal(_.table(["a", "b", "c"], [1]), {"a": 1, "b": None, "c": None})


@test("table builds a dict from pairs")
def test_table_pairs():
    assert_equal(_.table([["a", 1], ("b", 2)]), {"a": 1, "b": 2})
    assert_equal(_.table(_.pairs({"x": 9})), {"x": 9})


# uniq() / union() / intersection() tests

@test("uniq keeps the first occurrence of each value")
def test_uniq():
    assert_equal(_.uniq([3, 1, 3, 2, 1]), [3, 1, 2])
    assert_equal(_.uniq([{"a": 1}, {"a": 1}]), [{"a": 1}])


@test("union and intersection preserve first-appearance order")
def test_union_intersection():
    assert_equal(_.union([1, 2, 3], [101, 2, 1, 10], [2, 1]), [1, 2, 3, 101, 10])
    assert_equal(_.intersection([1, 2, 3, 2], [101, 2, 1, 10], [2, 1]), [1, 2])


@test("without, difference and uniq handle nested arrays")
def test_array_elements():
    first_array, second_array = np.array([1, 2]), np.array([3, 4])
    assert_equal(len(_.without([first_array, 3], 3)), 1)
    assert_that(_.without([first_array, 3], 3)[0] is first_array, "the array survives")
    assert_equal(_.without([first_array, second_array], np.array([1, 2]))[0].tolist(), [3, 4])
    remaining = _.difference([first_array, second_array, 5], [np.array([3, 4])], [5])
    assert_equal([a.tolist() for a in remaining], [[1, 2]])
    assert_equal(len(_.uniq([first_array, np.array([1, 2]), second_array])), 2)


if __name__ == "__main__":
    suite.run(title="underpy sequence test suite")
