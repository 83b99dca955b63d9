import suite
from seqkit import (
    Sequence, S, of, empty, from_iterable, from_range, count_from, repeat, generate,
    InvalidArgumentError
)

assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


def tracked(values, log, name):
    """generator that records every element it hands out"""
    for value in values:
        log.append((name, value))
        yield value


def tracked_sequence(values, log, name) -> Sequence:
    return Sequence(lambda: tracked(values, log, name))


# helper data
first_half = S([1, 2, 3])
second_half = S([4, 5, 6])
numbers = from_range(1, 10)  # 1 through 10


# concat() tests

@suite.test("concat joins sequences in order")
def test_concat_basic():
    result = first_half.concat(second_half).to.list()
    assert_equal(result, [1, 2, 3, 4, 5, 6], "should append second half after first")


@suite.test("concat keeps duplicates")
def test_concat_keeps_duplicates():
    result = of(1, 1).concat([1], of(2, 1)).to.list()
    assert_equal(result, [1, 1, 1, 2, 1], "concatenation must not deduplicate")


@suite.test("concat accepts plain iterables and empty inputs")
def test_concat_mixed_inputs():
    result = empty().concat([], (1, 2), range(3, 5), []).to.list()
    assert_equal(result, [1, 2, 3, 4], "should flatten tuples, ranges and empty lists")


@suite.test("concat with nothing to add is the original sequence")
def test_concat_no_others():
    assert_equal(first_half.concat().to.list(), [1, 2, 3], "no extra inputs should change nothing")


@suite.test("concat does not open the next input before the current one is exhausted")
def test_concat_is_lazy():
    log = []
    combined = tracked_sequence([1, 2], log, 'a').concat(tracked_sequence([3, 4], log, 'b'))
    assert_equal(log, [], "building the concatenation must not pull anything")

    cursor = iter(combined)
    assert_equal([next(cursor), next(cursor)], [1, 2], "first input comes first")
    assert_that(all(name == 'a' for name, _ in log), f"second input was touched early: {log}")

    assert_equal(next(cursor), 3, "second input follows")
    assert_equal(log[-1], ('b', 3), "second input pulled only once reached")


@suite.test("concat can be traversed more than once over stored inputs")
def test_concat_restartable():
    combined = first_half.concat(second_half)
    assert_equal(combined.to.list(), combined.to.list(), "each traversal gets a fresh cursor")


@suite.test("concat in front of an endless sequence stays usable through limit")
def test_concat_with_infinite_tail():
    result = of(-1, 0).concat(count_from(1)).limit(4).to.list()
    assert_equal(result, [-1, 0, 1, 2], "should yield the finite head, then the counter")


# limit() and skip() tests

@suite.test("limit takes leading elements")
def test_limit_basic():
    assert_equal(first_half.concat(second_half).limit(1).to.list(), [1], "should keep only the first element")


@suite.test("limit larger than the sequence keeps everything")
def test_limit_larger_than_size():
    assert_equal(first_half.limit(10).to.list(), [1, 2, 3], "nothing should be lost")


@suite.test("limit of zero is empty")
def test_limit_zero():
    assert_that(first_half.limit(0).query.is_empty(), "limit(0) should be empty")


@suite.test("limit stops pulling from the source once reached")
def test_limit_stops_pulling():
    log = []
    endless = Sequence(lambda: tracked(count_from(0), log, 'n'))
    assert_equal(endless.limit(3).to.list(), [0, 1, 2], "should take three from an endless source")
    assert_equal(len(log), 3, f"source should be pulled exactly three times, got {len(log)}")


@suite.test("limit rejects negative sizes when called")
def test_limit_negative():
    error = assert_raises(InvalidArgumentError, lambda: first_half.limit(-1))
    assert_that(isinstance(error, ValueError), "invalid argument errors are value errors")


@suite.test("skip drops leading elements")
def test_skip_basic():
    assert_equal(numbers.skip(7).to.list(), [8, 9, 10], "should keep the last three")
    assert_equal(numbers.skip(20).to.list(), [], "skipping past the end leaves nothing")
    assert_raises(InvalidArgumentError, lambda: numbers.skip(-2))


@suite.test("skip then limit windows an endless sequence")
def test_skip_limit_window():
    assert_equal(count_from(0).skip(5).limit(3).to.list(), [5, 6, 7], "should window the counter")


# partition() tests

@suite.test("partition splits into equal chunks")
def test_partition_even():
    chunks = first_half.concat(second_half).partition(2).to.list()
    assert_equal(chunks, [(1, 2), (3, 4), (5, 6)], "should produce three pairs")


@suite.test("partition puts the remainder in the last chunk")
def test_partition_remainder():
    chunks = of(1, 2, 3, 4, 5).partition(2).to.list()
    assert_equal(chunks, [(1, 2), (3, 4), (5,)], "last chunk should hold the single leftover")


@suite.test("partition chunks are immutable tuples")
def test_partition_chunks_immutable():
    chunk = of(1, 2, 3).partition(2).get.first()
    assert_that(isinstance(chunk, tuple), f"chunk should be a tuple: {type(chunk)}")
    assert_that(not hasattr(chunk, 'append'), "chunk should not be appendable")


@suite.test("partition of an empty sequence has no chunks")
def test_partition_empty():
    assert_equal(empty().partition(3).to.list(), [], "no elements, no chunks")


@suite.test("partition rejects non-positive sizes when called")
def test_partition_invalid_size():
    assert_raises(InvalidArgumentError, lambda: numbers.partition(0))
    assert_raises(InvalidArgumentError, lambda: numbers.partition(-3))


@suite.test("partition works chunk by chunk on endless sequences")
def test_partition_endless():
    chunks = count_from(0).partition(3).limit(2).to.list()
    assert_equal(chunks, [(0, 1, 2), (3, 4, 5)], "should chunk the counter lazily")


# filtering helpers

@suite.test("where filters elements")
def test_where_basic():
    evens = numbers.where(lambda x: x % 2 == 0).to.list()
    assert_equal(evens, [2, 4, 6, 8, 10], "should filter even numbers")


@suite.test("select transforms elements")
def test_select_basic():
    squares = numbers.select(lambda x: x * x).limit(4).to.list()
    assert_equal(squares, [1, 4, 9, 16], "should square the numbers")


@suite.test("of_type keeps instances of a type")
def test_of_type():
    mixed = of(1, 'hello', 2.5, None, 'world')
    assert_equal(mixed.of_type(str).to.list(), ['hello', 'world'], "should keep only strings")


@suite.test("where and select compose over endless sequences")
def test_where_select_endless():
    result = count_from(1).where(lambda x: x % 3 == 0).select(lambda x: x * 10).limit(3).to.list()
    assert_equal(result, [30, 60, 90], "should filter and project lazily")


# reverse() and unmodifiable()

@suite.test("reverse inverts encounter order")
def test_reverse():
    assert_equal(of(1, 2, 3).reverse().to.list(), [3, 2, 1], "should reverse")
    assert_equal(empty().reverse().to.list(), [], "empty stays empty")


@suite.test("reverse leaves the source list alone")
def test_reverse_does_not_mutate():
    data = [1, 2, 3]
    from_iterable(data).reverse().to.list()
    assert_equal(data, [1, 2, 3], "source list must be untouched")


@suite.test("unmodifiable views follow the source but expose no mutators")
def test_unmodifiable_view():
    data = [1, 2, 3]
    view = from_iterable(data).unmodifiable()
    data.append(4)
    assert_equal(view.to.list(), [1, 2, 3, 4], "view should reflect the live source")
    assert_that(not hasattr(view, 'append'), "view must not offer append")


# sources and restartability

@suite.test("stored collections can be traversed repeatedly")
def test_restartable_sources():
    sequence = from_iterable([1, 2, 3])
    assert_equal(sequence.to.list(), [1, 2, 3], "first traversal")
    assert_equal(sequence.to.list(), [1, 2, 3], "second traversal")


@suite.test("one-shot iterators can only be traversed once")
def test_one_shot_sources():
    sequence = from_iterable(iter([1, 2, 3]))
    assert_equal(sequence.to.list(), [1, 2, 3], "first traversal drains the iterator")
    assert_equal(sequence.to.list(), [], "nothing left for the second")


@suite.test("repeat and generate support finite and endless forms")
def test_repeat_generate():
    assert_equal(repeat('x', 3).to.list(), ['x', 'x', 'x'], "finite repeat")
    assert_equal(repeat(0).limit(2).to.list(), [0, 0], "endless repeat behind limit")

    counter = iter(range(100))
    assert_equal(generate(lambda: next(counter)).limit(3).to.list(), [0, 1, 2], "generate calls the function per element")
    assert_equal(generate(lambda: 7, 2).to.list(), [7, 7], "finite generate")


@suite.test("str renders the display string")
def test_str():
    assert_equal(str(first_half.concat(second_half)), "[1, 2, 3, 4, 5, 6]", "str should use the display format")


@suite.test("partition chunks render in tuple form")
def test_partition_display():
    chunks = first_half.concat(second_half).partition(2)
    assert_equal(str(chunks), "[(1, 2), (3, 4), (5, 6)]", "tuple chunks show as tuples")
    assert_equal(chunks.select(list).to.list(), [[1, 2], [3, 4], [5, 6]], "chunks hold the expected values")


if __name__ == "__main__":
    suite.run(title="seqkit core operations test suite")
