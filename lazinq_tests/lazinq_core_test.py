import numpy as np
import suite
import lazinq
from lazinq import (
    P, p, Enumerable, MISSING, from_range, empty,
    SelectorFailedError, InvalidTypeError, ArgumentOutOfRangeError, MissingArgumentError
)

assert_that = suite.assert_that
assert_raises = suite.assert_raises

numbers = [1, 2, 3, 4, 5, 6]
words = ['apple', 'banana', 'cherry', 'date', 'elderberry']


@suite.test("where and select compose like a for-comprehension")
def test_where_select():
    result = P(numbers).where(lambda x: x % 2 == 0).select(lambda x: x * x).to.list()
    assert_that(result == [4, 16, 36], f"unexpected result: {result}")


@suite.test("where with an always-true predicate is the identity")
def test_where_identity():
    assert_that(P(words).where(lambda w: True).to.list() == words, "all elements kept in order")


@suite.test("select fails when the selector reports a missing result")
def test_select_missing():
    en = P([1, 2, 3]).select(lambda x: MISSING if x == 2 else x)
    error = assert_raises(SelectorFailedError, lambda: en.to.list())
    assert_that(error.item == 2, f"error should carry the failing item, got {error.item!r}")


@suite.test("exceptions raised by a selector propagate unchanged")
def test_select_exception_propagates():
    en = P([1, 0]).select(lambda x: 1 / x)
    assert_raises(ZeroDivisionError, lambda: en.to.list())


@suite.test("select_many flattens one level")
def test_select_many():
    result = P([[1, 2], [], [3]]).select_many(lambda xs: xs).to.list()
    assert_that(result == [1, 2, 3], f"unexpected flattening: {result}")
    result = P(['ab', 'c']).select_many(lambda s: P(s).select(str.upper)).to.list()
    assert_that(result == ['A', 'B', 'C'], "inner enumerables are flattened too")


@suite.test("select_many rejects missing or non-iterable inner results")
def test_select_many_errors():
    assert_raises(SelectorFailedError, lambda: P([1]).select_many(lambda x: None).to.list())
    assert_raises(SelectorFailedError, lambda: P([1]).select_many(lambda x: x).to.list())
    assert_raises(SelectorFailedError, lambda: P([1]).select_many(lambda x: [x, MISSING]).to.list())


@suite.test("select_with_index passes the zero-based position")
def test_select_with_index():
    result = P(['a', 'b', 'c']).select_with_index(lambda item, i: f"{i}:{item}").to.list()
    assert_that(result == ['0:a', '1:b', '2:c'], f"unexpected result: {result}")


@suite.test("take and skip split a sequence")
def test_take_skip():
    en = P(numbers)
    assert_that(en.take(2).to.list() == [1, 2], "take two")
    assert_that(en.skip(4).to.list() == [5, 6], "skip four")
    assert_that(en.take(0).to.list() == [], "take zero yields nothing")
    assert_that(en.take(100).to.list() == numbers, "take more than available")
    assert_that(en.skip(100).to.list() == [], "skip more than available")
    assert_that(en.take(3).to.list() + en.skip(3).to.list() == numbers, "take(n) ++ skip(n) == source")


@suite.test("take does not pull past the requested count")
def test_take_no_extra_pull():
    pulls = []

    def source():
        for i in range(10):
            pulls.append(i)
            yield i
    assert_that(Enumerable(source).take(3).to.list() == [0, 1, 2], "three items taken")
    assert_that(pulls == [0, 1, 2], f"only three pulls expected, got {pulls}")


@suite.test("take over an infinite source terminates")
def test_take_infinite():
    assert_that(from_range(0).select(lambda x: x * 2).take(4).to.list() == [0, 2, 4, 6], "infinite source cut")


@suite.test("count arguments are validated at call time")
def test_count_validation():
    assert_raises(ArgumentOutOfRangeError, lambda: P(numbers).take(-1))
    assert_raises(ArgumentOutOfRangeError, lambda: P(numbers).skip(-2))
    assert_raises(InvalidTypeError, lambda: P(numbers).take(1.5))
    assert_raises(InvalidTypeError, lambda: P(numbers).take(True))


@suite.test("numpy integers are accepted as counts")
def test_numpy_counts():
    assert_that(P(numbers).take(np.int64(3)).to.list() == [1, 2, 3], "numpy count for take")
    assert_that(P(numbers).skip(np.int32(4)).to.list() == [5, 6], "numpy count for skip")
    assert_raises(InvalidTypeError, lambda: P(numbers).take(np.bool_(True)))
    assert_raises(ArgumentOutOfRangeError, lambda: P(numbers).take(np.int64(-1)))


@suite.test("every factory alias is exported")
def test_factory_aliases():
    assert_that(p('ab').to.list() == ['a', 'b'], "lowercase alias")
    assert_that(all(name in lazinq.__all__ for name in ('lazinq', 'P', 'p')), "aliases in __all__")


@suite.test("take_while stops at the first failing element")
def test_take_while():
    result = P([1, 2, 5, 1, 2]).take_while(lambda x: x < 3).to.list()
    assert_that(result == [1, 2], f"unexpected result: {result}")
    assert_that(from_range(1).take_while(lambda x: x < 4).to.list() == [1, 2, 3], "works on infinite sources")


@suite.test("skip_while yields everything from the first failing element on")
def test_skip_while():
    result = P([1, 2, 5, 1, 2]).skip_while(lambda x: x < 3).to.list()
    assert_that(result == [5, 1, 2], f"unexpected result: {result}")
    assert_that(P([1, 2]).skip_while(lambda x: True).to.list() == [], "all skipped")


@suite.test("reverse, append and prepend")
def test_reverse_append_prepend():
    assert_that(P([1, 2, 3]).reverse().to.list() == [3, 2, 1], "reversed")
    assert_that(P([1, 2]).append(3).prepend(0).to.list() == [0, 1, 2, 3], "append and prepend")
    assert_that(empty().append(1).to.list() == [1], "append to empty")


@suite.test("default_if_empty produces a default only for empty sequences")
def test_default_if_empty():
    assert_that(P([1, 2]).default_if_empty(lambda: 0).to.list() == [1, 2], "non-empty unchanged")
    assert_that(empty().default_if_empty(lambda: 0).to.list() == [0], "empty gets the default")
    assert_that(empty().default_if_empty().to.list() == [None], "default factory produces None")


@suite.test("of_type keeps instances of the given type")
def test_of_type():
    mixed = [1, 'a', 2.5, 'b', None, 3]
    assert_that(P(mixed).of_type(str).to.list() == ['a', 'b'], "strings only")
    assert_that(P(mixed).of_type((int, float)).to.list() == [1, 2.5, 3], "tuple of types")
    assert_raises(InvalidTypeError, lambda: P(mixed).of_type('str'))


@suite.test("operator arguments are validated eagerly")
def test_argument_validation():
    assert_raises(MissingArgumentError, lambda: P(numbers).where(None))
    assert_raises(InvalidTypeError, lambda: P(numbers).select('x'))
    assert_raises(MissingArgumentError, lambda: P(numbers).of_type(None))


if __name__ == "__main__":
    suite.run(title="lazinq core operators test suite")
