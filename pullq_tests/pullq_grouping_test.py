import suite
from dgen import Tracked, from_schema
from pullq import ops, KeyValue, Group

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

# --- test data & schemas ---
object_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 10}),
    'name': 'word',
    'category': {'_qen_provider': 'choice', 'from': ['a', 'b', 'c']},
    'value': ('pyfloat', {'min_value': 10, 'max_value': 100}),
}


# --- group_by ---

@test("group_by buckets values under their keys in first-seen key order")
def test_group_by_basic():
    result = list(ops.group_by([1, 2, 3, 4], lambda x: x % 2))
    assert_equal(result, [KeyValue(1, [1, 3]), KeyValue(0, [2, 4])], "odd key seen first")


@test("group_by keeps source order inside each group")
def test_group_by_within_group_order():
    words = ['pear', 'plum', 'apple', 'peach', 'apricot']
    groups = dict(ops.group_by(words, lambda w: w[0]))
    assert_equal(groups, {'p': ['pear', 'plum', 'peach'], 'a': ['apple', 'apricot']}, "letter groups")
    assert_equal(list(groups), ['p', 'a'], "key order")


@test("group_by applies the value selector")
def test_group_by_value_selector():
    pairs = [('x', 1), ('y', 2), ('x', 3)]
    result = list(ops.group_by(pairs, lambda p: p[0], lambda p: p[1]))
    assert_equal(result, [KeyValue('x', [1, 3]), KeyValue('y', [2])], "selected values")


@test("group_by consumes the source when called")
def test_group_by_eager_source():
    source = Tracked([1, 2, 3])
    seq = ops.group_by(source, lambda x: x > 1)
    assert_equal(source.pull_count, 3, "source read in full")
    assert_equal(seq.pull().value, KeyValue(False, [1]), "first group")


@test("group_by on generated records covers every category")
def test_group_by_records():
    data = from_schema(object_schema, seed=42).take(60).to.list()
    groups = list(ops.group_by(data, lambda r: r['category']))
    assert_equal({g.key for g in groups}, {'a', 'b', 'c'}, "all categories present")
    for group in groups:
        assert_that(all(r['category'] == group.key for r in group.value), f"group {group.key} is pure")
    assert_equal(sum(len(g.value) for g in groups), 60, "no record lost")


@test("group_by handles empty sources and single keys")
def test_group_by_edges():
    assert_equal(list(ops.group_by([], lambda x: x)), [], "empty source")
    assert_equal(list(ops.group_by('abc', lambda c: 'k')), [KeyValue('k', ['a', 'b', 'c'])], "single key")


@test("group_by distinguishes keys by value, not by string form")
def test_group_by_native_keys():
    keys = [kv.key for kv in ops.group_by([1, '1', 1.0, 2], lambda x: x)]
    # 1 and 1.0 are the same dict key; '1' is not
    assert_equal(keys, [1, '1', 2], "native hashing")


@test("group_by requires hashable keys")
def test_group_by_unhashable():
    assert_raises(TypeError, lambda: ops.group_by([1], lambda x: [x]), "list keys")


# --- group_compared ---

@test("group_compared returns a list of groups in first-seen order")
def test_group_compared_basic():
    result = ops.group_compared([1, 2, 3, 4], lambda x: x % 2)
    assert_that(isinstance(result, list), "materialized list")
    assert_equal(result, [Group(1, [1, 3]), Group(0, [2, 4])], "groups")


@test("group_compared supports unhashable keys")
def test_group_compared_unhashable_keys():
    points = [(0, 0), (1, 1), (0, 0), (2, 2)]
    result = ops.group_compared(points, lambda p: [p[0] % 2], value_selector=lambda p: p[0])
    assert_equal([g.key for g in result], [[0], [1]], "list keys")
    assert_equal([g.value for g in result], [[0, 0, 2], [1]], "values")


@test("group_compared uses the custom comparer")
def test_group_compared_custom_comparer():
    readings = [1.00, 1.04, 2.50, 0.98, 2.52]
    close = lambda a, b: abs(a - b) < 0.1
    result = ops.group_compared(readings, lambda x: x, close)
    assert_equal([g.key for g in result], [1.00, 2.50], "representative keys")
    assert_equal([g.count for g in result], [3, 2], "group sizes")


@test("group_compared passes the existing key first")
def test_group_compared_argument_order():
    calls = []

    def comparer(existing, incoming):
        calls.append((existing, incoming))
        return existing == incoming

    ops.group_compared(['a', 'b'], lambda x: x, comparer)
    assert_equal(calls, [('a', 'b')], "existing key, then new key")


@test("group_compared default comparer is equality")
def test_group_compared_default():
    result = ops.group_compared([{'k': 1}, {'k': 1}, {'k': 2}], lambda r: dict(r))
    assert_equal(len(result), 2, "equal dict keys share a group")


@test("group_compared on empty input")
def test_group_compared_empty():
    assert_equal(ops.group_compared([], lambda x: x), [], "no groups")


@test("group_by and group_compared agree on hashable keys")
def test_group_by_matches_group_compared():
    data = from_schema(object_schema, seed=3).take(40).to.list()
    by = [(kv.key, kv.value) for kv in ops.group_by(data, lambda r: r['id'])]
    compared = [(g.key, g.value) for g in ops.group_compared(data, lambda r: r['id'])]
    assert_equal(by, compared, "same groups, same order")


@test("group_by propagates key and value selector errors")
def test_group_by_selector_errors():
    assert_raises(ZeroDivisionError, lambda: ops.group_by([1, 0], lambda x: 1 // x), "key selector")
    assert_raises(KeyError, lambda: ops.group_by([{'k': 1}], lambda r: r['k'], lambda r: r['v']), "value selector")


@test("group_compared propagates comparer errors")
def test_group_compared_comparer_error():
    def comparer(existing, incoming):
        raise RuntimeError(f"cannot compare {existing} and {incoming}")

    error = assert_raises(RuntimeError, lambda: ops.group_compared([1, 2], lambda x: x, comparer), "comparer")
    assert_equal(str(error), "cannot compare 1 and 2", "raised on the second key")


@test("group_compared default comparer merges equal numeric keys")
def test_group_compared_default_value_equality():
    result = ops.group_compared([1, 1.0, True, 2], lambda x: x)
    assert_equal([g.key for g in result], [1, 2], "1, 1.0 and True share the first key")
    assert_equal(result[0].value, [1, 1.0, True], "all three values in one group")


@test("group repr shows its values")
def test_group_repr():
    assert_equal(repr(Group('a', [1, 2])), "Group(key='a', value=[1, 2])", "repr")


if __name__ == "__main__":
    suite.main(title="pullq grouping operators test suite")
