import numpy as np
import pandas as pd
import suite
from lazinq import (
    P, Enumerable, empty, from_range,
    EmptyInputError, TooManyMatchesError, IndexOutOfRangeError, DuplicateKeyError,
    ArgumentOutOfRangeError, InvalidOperationError
)

assert_that = suite.assert_that
assert_raises = suite.assert_raises

people = [
    {'name': 'alice', 'age': 31, 'city': 'oslo'},
    {'name': 'bob', 'age': 25, 'city': 'lima'},
    {'name': 'carol', 'age': 42, 'city': 'oslo'},
]


# --- materializers ---

@suite.test("to.list round-trips a list")
def test_list_round_trip():
    xs = [3, 1, 2, 1]
    assert_that(P(P(xs).to.list()).to.list() == xs, "list -> enumerable -> list is the identity")
    assert_that(P(P(xs).to.list()).to.array().tolist() == P(xs).to.array().tolist(), "array round trip keeps order")


@suite.test("to.set, to.array and pandas conversions")
def test_other_materializers():
    assert_that(P([1, 2, 2]).to.set() == {1, 2}, "set drops duplicates")
    array = P([1, 2, 3]).to.array()
    assert_that(isinstance(array, np.ndarray) and array.tolist() == [1, 2, 3], "numpy array")
    series = P([1.0, 2.0]).to.pandas()
    assert_that(isinstance(series, pd.Series) and series.sum() == 3.0, "pandas series")
    frame = P(people).to.df()
    assert_that(isinstance(frame, pd.DataFrame) and list(frame.columns) == ['name', 'age', 'city'],
                "dataframe from records")
    assert_that(frame['age'].max() == 42, "dataframe carries the values")


@suite.test("to.dict builds a mapping and rejects duplicate keys")
def test_dict():
    ages = P(people).to.dict(lambda p: p['name'], lambda p: p['age'])
    assert_that(ages == {'alice': 31, 'bob': 25, 'carol': 42}, f"unexpected dict: {ages}")
    error = assert_raises(DuplicateKeyError, lambda: P(people).to.dict(lambda p: p['city']))
    assert_that(error.key == 'oslo', f"error should carry the duplicate key, got {error.key!r}")


# --- quantifiers ---

@suite.test("count, any, all and contains")
def test_quantifiers():
    en = P([1, 2, 3, 4])
    assert_that(en.to.count() == 4, "count")
    assert_that(en.to.count(lambda x: x > 2) == 2, "count with predicate")
    assert_that(en.to.any() and not empty().to.any(), "any without predicate")
    assert_that(en.to.any(lambda x: x > 3), "any with predicate")
    assert_that(en.to.all(lambda x: x > 0), "all")
    assert_that(empty().to.all(lambda x: False), "all of empty is true")
    assert_that(en.to.contains(3) and not en.to.contains(9), "contains")
    assert_that(P(['A']).to.contains('a', lambda x, y: x.lower() == y.lower()), "contains with comparer")


@suite.test("any stops pulling after the first element")
def test_any_short_circuit():
    assert_that(from_range(0).to.any(), "any terminates on an infinite source")
    assert_that(from_range(0).to.any(lambda x: x > 10), "predicate any terminates too")


# --- element access ---

@suite.test("first and first_or_default")
def test_first():
    en = P([5, 6, 7])
    assert_that(en.to.first() == 5, "first")
    assert_that(en.to.first(lambda x: x > 5) == 6, "first with predicate")
    assert_that(en.to.first_or_default(lambda x: x > 9) is None, "first_or_default falls back to None")
    assert_that(en.to.first_or_default(lambda x: x > 9, lambda: -1) == -1, "first_or_default with factory")
    error = assert_raises(EmptyInputError, lambda: empty().to.first())
    assert_that(error.message == "sequence contains no elements", f"unexpected message: {error.message}")
    error = assert_raises(EmptyInputError, lambda: en.to.first(lambda x: x > 9))
    assert_that(error.message == "no element satisfies the condition", f"unexpected message: {error.message}")


@suite.test("last and last_or_default")
def test_last():
    en = P([5, 6, 7])
    assert_that(en.to.last() == 7, "last")
    assert_that(en.to.last(lambda x: x < 7) == 6, "last with predicate")
    assert_that(empty().to.last_or_default() is None, "last_or_default on empty")
    assert_raises(EmptyInputError, lambda: empty().to.last())
    assert_that(P([None]).to.last() is None, "a None element is a real element")


@suite.test("single requires exactly one match")
def test_single():
    assert_that(P([4]).to.single() == 4, "single element")
    assert_that(P([1, 2, 3]).to.single(lambda x: x == 2) == 2, "single match")
    assert_raises(TooManyMatchesError, lambda: P([1, 2]).to.single())
    error = assert_raises(EmptyInputError, lambda: P([1, 2]).to.single(lambda x: x > 5))
    assert_that(error.message == "sequence contains no matching elements", f"unexpected message: {error.message}")
    assert_that(empty().to.single_or_default(default_factory=lambda: 0) == 0, "single_or_default on empty")
    assert_raises(TooManyMatchesError, lambda: P([1, 1]).to.single_or_default())
    assert_raises(InvalidOperationError, lambda: P([1, 1]).to.single())


@suite.test("element_at and element_at_or_default")
def test_element_at():
    en = P('abc')
    assert_that(en.to.element_at(0) == 'a' and en.to.element_at(2) == 'c', "valid indices")
    assert_raises(IndexOutOfRangeError, lambda: en.to.element_at(3))
    assert_raises(IndexError, lambda: en.to.element_at(10))
    assert_raises(ArgumentOutOfRangeError, lambda: en.to.element_at(-1))
    assert_that(en.to.element_at_or_default(5) is None, "default for out of range")
    assert_that(from_range(0).to.element_at(100) == 100, "works on infinite sources")


# --- folds ---

@suite.test("aggregate folds left, with or without seed")
def test_aggregate():
    en = P([1, 2, 3, 4])
    assert_that(en.to.aggregate(lambda acc, x: acc + x) == 10, "fold without seed")
    assert_that(en.to.aggregate(lambda acc, x: acc * x, 1) == 24, "fold with seed")
    assert_that(P(['a', 'b']).to.aggregate(lambda acc, x: acc + x, '>') == '>ab', "left to right")
    assert_that(empty().to.aggregate(lambda acc, x: acc + x, 0) == 0, "seed is returned for empty input")
    error = assert_raises(EmptyInputError, lambda: empty().to.aggregate(lambda acc, x: acc + x))
    assert_that(error.message == "cannot aggregate empty sequence without seed", "empty without seed")


@suite.test("sequence_equal compares length and elements")
def test_sequence_equal():
    assert_that(P([1, 2, 3]).to.sequence_equal([1, 2, 3]), "equal sequences")
    assert_that(not P([1, 2]).to.sequence_equal([1, 2, 3]), "different lengths")
    assert_that(not P([1, 2, None]).to.sequence_equal([1, 2]), "trailing None is an element")
    assert_that(P(['A', 'b']).to.sequence_equal(['a', 'B'], lambda x, y: x.lower() == y.lower()),
                "equality comparer")


@suite.test("terminal operators restart the pipeline on each call")
def test_terminals_restart():
    pulls = []

    def source():
        for i in range(3):
            pulls.append(i)
            yield i
    en = Enumerable(source)
    en.to.list()
    en.to.count()
    assert_that(pulls == [0, 1, 2, 0, 1, 2], f"each terminal call traverses again: {pulls}")


if __name__ == "__main__":
    suite.run(title="lazinq terminal operators test suite")
