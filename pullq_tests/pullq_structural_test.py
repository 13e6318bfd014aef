import suite
from dgen import Tracked, naturals
from pullq import ops

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal


# --- append / prepend ---
# the names are swapped relative to the usual convention: append puts the
# element at the head, prepend at the tail. callers rely on this.

@test("append puts the element FIRST")
def test_append_inserts_at_head():
    assert_equal(list(ops.append([1, 2], 0)), [0, 1, 2], "head insertion")


@test("prepend puts the element LAST")
def test_prepend_inserts_at_tail():
    assert_equal(list(ops.prepend([1, 2], 3)), [1, 2, 3], "tail insertion")


@test("append and prepend on empty sources")
def test_append_prepend_empty():
    assert_equal(list(ops.append([], 'x')), ['x'], "append to empty")
    assert_equal(list(ops.prepend([], 'x')), ['x'], "prepend to empty")


@test("append yields its element before reading the source")
def test_append_lazy():
    source = Tracked([1, 2])
    seq = ops.append(source, 0)
    assert_equal(seq.pull().value, 0, "element first")
    assert_equal(source.pull_count, 0, "source untouched")


# --- concat ---

@test("concat yields the first source then the second")
def test_concat_basic():
    assert_equal(list(ops.concat([1, 2], ['a', 'b'])), [1, 2, 'a', 'b'], "mixed element types")


@test("concat keeps duplicates")
def test_concat_duplicates():
    assert_equal(list(ops.concat([1, 2], [2, 3])), [1, 2, 2, 3], "all elements kept")


@test("concat does not open the second source until the first is drained")
def test_concat_lazy_second():
    second = Tracked(['x'])
    seq = ops.concat([1, 2], second)
    seq.pull()
    seq.pull()
    assert_equal(second.passes, 0, "second not started")
    assert_equal(list(seq), ['x'], "then the second")


@test("concat with an endless first source never reaches the second")
def test_concat_infinite_first():
    seq = ops.take(ops.concat(naturals(), ['never']), 3)
    assert_equal(list(seq), [0, 1, 2], "prefix of the first source")


# --- skip / take ---

@test("skip and take slice the sequence")
def test_skip_take_basic():
    assert_equal(list(ops.take(ops.from_range(0, 5), 2)), [0, 1], "take 2")
    assert_equal(list(ops.skip(ops.from_range(0, 5), 2)), [2, 3, 4], "skip 2")


@test("skip more than the length is empty")
def test_skip_past_end():
    assert_equal(list(ops.skip([1, 2], 5)), [], "skipped everything")


@test("skip with non-positive count is a no-op")
def test_skip_non_positive():
    assert_equal(list(ops.skip([1, 2], 0)), [1, 2], "skip 0")
    assert_equal(list(ops.skip([1, 2], -4)), [1, 2], "negative skip")


@test("take more than the length yields everything")
def test_take_past_end():
    assert_equal(list(ops.take([1, 2], 10)), [1, 2], "take 10 of 2")


@test("take with non-positive count is empty and reads nothing")
def test_take_non_positive():
    source = Tracked([1, 2])
    assert_equal(list(ops.take(source, 0)), [], "take 0")
    assert_equal(list(ops.take([1], -1)), [], "negative take")
    assert_equal(source.pull_count, 0, "source untouched")


@test("take stops pulling once the count is reached")
def test_take_stops_pulling():
    source = Tracked([1, 2, 3, 4])
    assert_equal(list(ops.take(source, 2)), [1, 2], "two taken")
    assert_equal(source.pull_count, 2, "no extra read")


@test("take bounds an endless source")
def test_take_infinite():
    assert_equal(list(ops.take(naturals(5), 3)), [5, 6, 7], "first three")


@test("skip is deferred until the first pull")
def test_skip_lazy():
    source = Tracked([1, 2, 3])
    seq = ops.skip(source, 2)
    assert_equal(source.pull_count, 0, "nothing read yet")
    assert_equal(seq.pull().value, 3, "first survivor")


@test("take then skip over fresh sequences rebuilds the source")
def test_take_skip_partition():
    data = [4, 8, 15, 16, 23, 42]
    for n in range(len(data) + 2):
        head = list(ops.take(iter(data), n))
        tail = list(ops.skip(iter(data), n))
        assert_equal(head + tail, data, f"split at {n}")


@test("take and skip on one shared sequence see it only once")
def test_take_skip_shared_sequence():
    seq = ops.from_range(0, 5)
    assert_equal(list(ops.take(seq, 2)), [0, 1], "take consumes from the shared cursor")
    assert_equal(list(ops.skip(seq, 2)), [4], "skip continues from where take stopped")
    assert_equal(list(ops.skip(seq, 0)), [], "exhausted sequence yields nothing")


# --- reverse ---

@test("reverse yields elements last to first")
def test_reverse_basic():
    assert_equal(list(ops.reverse([0, 1, 2, 3, 4])), [4, 3, 2, 1, 0], "reversed")


@test("reverse of reverse is the original order")
def test_reverse_twice():
    data = ['q', 'w', 'e', 'r']
    assert_equal(list(ops.reverse(ops.reverse(data))), data, "double reverse")


@test("reverse of empty is empty")
def test_reverse_empty():
    assert_equal(list(ops.reverse([])), [], "empty")


@test("reverse drains the source before the first output")
def test_reverse_buffers_everything():
    source = Tracked([1, 2, 3])
    seq = ops.reverse(source)
    assert_equal(source.pull_count, 0, "nothing read on construction")
    assert_equal(seq.pull().value, 3, "last element first")
    assert_equal(source.pull_count, 3, "all read at the first pull")


if __name__ == "__main__":
    suite.main(title="pullq structural combinators test suite")
