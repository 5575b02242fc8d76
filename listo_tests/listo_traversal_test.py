import suite
from listo import L, OrderedList, Flow, TraversalOptions, empty, from_range

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

letters = ['a', 'b', 'c', 'd', 'e']


def visits(lst, **options):
    """(index, value) pairs in the order each() visits them"""
    seen = []
    lst.each(lambda value, index, context: seen.append((index, value)), **options)
    return seen


# --- each(): order, direction and step ---

@test("each visits every element forward by default")
def test_each_forward():
    assert_that(visits(L(letters)) == list(enumerate(letters)), "should visit 0..4 in order")


@test("each with reverse starts at the last index")
def test_each_reverse():
    order = [i for i, _ in visits(L(letters), reverse=True)]
    assert_that(order == [4, 3, 2, 1, 0], f"reverse order wrong: {order}")


@test("each with step skips indices in the traversal direction")
def test_each_step():
    forward = [i for i, _ in visits(L(letters), step=2)]
    backward = [i for i, _ in visits(L(letters), reverse=True, step=2)]
    assert_that(forward == [0, 2, 4], f"forward step 2 wrong: {forward}")
    assert_that(backward == [4, 2, 0], f"reverse step 2 wrong: {backward}")

    four = [i for i, _ in visits(from_range(0, 4), reverse=True, step=3)]
    assert_that(four == [3, 0], f"reverse step 3 on length 4 wrong: {four}")


@test("each accepts an options object or mapping, keywords override")
def test_each_options_forms():
    lst = L(letters)
    from_object = []
    lst.each(lambda v, i, c: from_object.append(i), TraversalOptions(reverse=True, step=2))
    from_mapping = []
    lst.each(lambda v, i, c: from_mapping.append(i), {'reverse': True})
    overridden = []
    lst.each(lambda v, i, c: overridden.append(i), TraversalOptions(reverse=True, step=2), step=1)

    assert_that(from_object == [4, 2, 0], "options object should be honoured")
    assert_that(from_mapping == [4, 3, 2, 1, 0], "mapping should be honoured")
    assert_that(overridden == [4, 3, 2, 1, 0], "keyword step should override the options object")


@test("invalid traversal options are rejected")
def test_each_invalid_options():
    with assert_raises(ValueError):
        L(1, 2, 3).each(lambda v, i, c: None, step=0)
    with assert_raises(ValueError):
        TraversalOptions(step=-1)
    with assert_raises(ValueError):
        L(1, 2, 3).each(lambda v, i, c: None, {'backwards': True})
    with assert_raises(TypeError):
        L(1, 2, 3).each(lambda v, i, c: None, [('reverse', True)])


@test("each on an empty list never calls the callback")
def test_each_empty():
    assert_that(visits(empty()) == [], "nothing to visit")
    assert_that(visits(empty(), reverse=True, step=3) == [], "nothing to visit in reverse either")


# --- context ---

@test("context exposes previous and next in traversal order")
def test_context_neighbours():
    contexts = []
    L(letters).each(lambda v, i, c: contexts.append((c.previous_index, c.previous, c.next_index, c.next)))
    assert_that(contexts[0] == (None, None, 1, 'b'), f"first context wrong: {contexts[0]}")
    assert_that(contexts[2] == (1, 'b', 3, 'd'), f"middle context wrong: {contexts[2]}")
    assert_that(contexts[4] == (3, 'd', None, None), f"last context wrong: {contexts[4]}")

    reversed_contexts = []
    L(letters).each(lambda v, i, c: reversed_contexts.append((c.previous_index, c.next_index)), reverse=True)
    assert_that(reversed_contexts[0] == (None, 3), "in reverse, next is the lower index")
    assert_that(reversed_contexts[-1] == (1, None), "in reverse, previous is the higher index")


@test("context neighbours follow the step size")
def test_context_neighbours_with_step():
    contexts = []
    L(letters).each(lambda v, i, c: contexts.append((c.previous, c.next)), step=2)
    assert_that(contexts == [(None, 'c'), ('a', 'e'), ('c', None)], f"stepped neighbours wrong: {contexts}")


@test("is_first and is_last are relative to traversal order")
def test_context_first_last():
    flags = []
    L(letters).each(lambda v, i, c: flags.append((i, c.is_first, c.is_last)), reverse=True)
    assert_that(flags[0] == (4, True, False), "last index is first in reverse")
    assert_that(flags[-1] == (0, False, True), "index 0 is last in reverse")
    assert_that(all(not f and not l for _, f, l in flags[1:-1]), "middle visits are neither first nor last")

    stepped = []
    L(1, 2, 3, 4).each(lambda v, i, c: stepped.append((i, c.is_last)), step=2)
    assert_that(stepped == [(0, False), (2, True)], "index 2 is the last visit with step 2")


@test("context carries a reference to the owning list")
def test_context_owner():
    lst = L(1, 2, 3)
    owners = []
    lst.each(lambda v, i, c: owners.append(c.list))
    assert_that(all(owner is lst for owner in owners), "context.list should be the list itself")


# --- control flow ---

@test("request_break stops after the current callback")
def test_request_break():
    seen = []

    def callback(value, index, context):
        seen.append(value)
        if value == 'c':
            context.request_break()

    L(letters).each(callback)
    assert_that(seen == ['a', 'b', 'c'], f"should stop after 'c': {seen}")


@test("each skips indices removed by the callback instead of failing")
def test_each_shrinking_list():
    lst = L(1, 2, 3, 4, 5)
    seen = []

    def callback(value, index, context):
        seen.append(value)
        lst.pop()
        if index == 2:
            assert_that(context.is_last, "the last surviving element is is_last")

    lst.each(callback)
    assert_that(seen == [1, 2, 3], f"only indices still present are visited: {seen}")
    assert_that(lst == [1, 2], f"three pops applied: {lst}")


@test("returning Flow.STOP from each behaves like request_break")
def test_flow_stop():
    seen = []

    def callback(value, index, context):
        seen.append(value)
        return Flow.STOP if index == 1 else None

    L(letters).each(callback)
    assert_that(seen == ['a', 'b'], f"should stop after index 1: {seen}")


@test("request_skip_next skips the following visit only")
def test_request_skip_next():
    seen = []

    def callback(value, index, context):
        seen.append(value)
        if value == 'b':
            context.request_skip_next()

    L(letters).each(callback)
    assert_that(seen == ['a', 'b', 'd', 'e'], f"'c' should be skipped: {seen}")


@test("Flow.SKIP_NEXT in reverse skips the next lower index")
def test_flow_skip_next_reverse():
    seen = []
    L(letters).each(lambda v, i, c: seen.append(v) or (Flow.SKIP_NEXT if v == 'e' else None), reverse=True)
    assert_that(seen == ['e', 'c', 'b', 'a'], f"'d' should be skipped: {seen}")


@test("request_continue drops the current element from map and filter")
def test_request_continue_current():
    def doubled_unless_odd(value, index, context):
        if value % 2:
            context.request_continue()
        return value * 2

    mapped = L(1, 2, 3, 4).map(doubled_unless_odd)
    assert_that(mapped == [4, 8], f"odd values should not be emitted: {mapped}")

    def keep_all_but_three(value, index, context):
        if value == 3:
            context.request_continue()
        return True

    kept = L(1, 2, 3, 4).filter(keep_all_but_three)
    assert_that(kept == [1, 2, 4], f"3 should be dropped: {kept}")


@test("callbacks may mutate later elements before they are visited")
def test_each_sees_mutation():
    lst = L(1, 2, 3)
    seen = []

    def callback(value, index, context):
        seen.append(value)
        if context.next_index is not None:
            context.list._get_data()[context.next_index] *= 10

    lst.each(callback)
    assert_that(seen == [1, 20, 30], f"mutations should be visible: {seen}")


# --- derived operations ---

@test("map collects results in traversal order")
def test_map():
    squares = L(1, 2, 3, 4).map(lambda v, i, c: v * v)
    assert_that(isinstance(squares, OrderedList), "map returns an OrderedList")
    assert_that(squares == [1, 4, 9, 16], f"squares wrong: {squares}")

    backwards = L(1, 2, 3, 4).map(lambda v, i, c: (i, v), reverse=True, step=2)
    assert_that(backwards == [(3, 4), (1, 2)], f"reverse stepped map wrong: {backwards}")


@test("map does not mutate the source list")
def test_map_is_pure():
    source = L(1, 2, 3)
    source.map(lambda v, i, c: v + 1)
    assert_that(source == [1, 2, 3], "source should be unchanged")


@test("filter keeps traversal order, not storage order")
def test_filter():
    evens = from_range(1, 10).filter(lambda v, i, c: v % 2 == 0)
    assert_that(evens == [2, 4, 6, 8, 10], f"evens wrong: {evens}")

    evens_reversed = from_range(1, 10).filter(lambda v, i, c: v % 2 == 0, reverse=True)
    assert_that(evens_reversed == [10, 8, 6, 4, 2], f"reverse evens wrong: {evens_reversed}")


@test("filter can use the context to compare neighbours")
def test_filter_with_context():
    data = L(1, 3, 2, 5, 4)
    peaks = data.filter(lambda v, i, c: (c.previous is None or v > c.previous) and (c.next is None or v > c.next))
    assert_that(peaks == [3, 5], f"local peaks wrong: {peaks}")


@test("find and find_index return the first match in traversal order")
def test_find():
    data = L(5, 12, 8, 130, 44)
    assert_that(data.find(lambda v, i, c: v > 10) == 12, "first value over 10 is 12")
    assert_that(data.find_index(lambda v, i, c: v > 10) == 1, "first index over 10 is 1")
    assert_that(data.find(lambda v, i, c: v > 10, reverse=True) == 44, "from the end it is 44")
    assert_that(data.find_index(lambda v, i, c: v > 10, reverse=True) == 4, "from the end it is index 4")


@test("find stops visiting after a match")
def test_find_short_circuits():
    calls = []

    def predicate(value, index, context):
        calls.append(index)
        return value == 'b'

    L(letters).find(predicate)
    assert_that(calls == [0, 1], f"should stop at the match: {calls}")


@test("find returns none and find_index -1 when nothing matches")
def test_find_no_match():
    assert_that(L(1, 2).find(lambda v, i, c: v > 5) is None, "no match gives none")
    assert_that(L(1, 2).find_index(lambda v, i, c: v > 5) == -1, "no match gives -1")
    assert_that(empty().find(lambda v, i, c: True) is None, "empty gives none")


@test("every and some short-circuit and handle empty lists")
def test_every_some():
    calls = []

    def positive(value, index, context):
        calls.append(index)
        return value > 0

    assert_that(L(1, -1, 2, 3).every(positive) is False, "-1 disproves every")
    assert_that(calls == [0, 1], f"every should stop at the first failure: {calls}")

    calls.clear()
    assert_that(L(-1, 2, -3).some(positive) is True, "2 proves some")
    assert_that(calls == [0, 1], f"some should stop at the first success: {calls}")

    assert_that(empty().every(positive) is True, "every on empty is true")
    assert_that(empty().some(positive) is False, "some on empty is false")


@test("reduce accumulates in traversal order")
def test_reduce():
    total = from_range(1, 5).reduce(lambda acc, v, i, c: acc + v, 0)
    assert_that(total == 15, f"sum via reduce wrong: {total}")

    joined = L(letters).reduce(lambda acc, v, i, c: acc + v, '', reverse=True)
    assert_that(joined == 'edcba', f"reverse reduce wrong: {joined}")

    stepped = L(letters).reduce(lambda acc, v, i, c: acc + [i], [], step=2)
    assert_that(stepped == [0, 2, 4], f"stepped reduce wrong: {stepped}")


@test("reduce keeps the accumulator for skipped elements")
def test_reduce_skip():
    def add_unless_negative(acc, value, index, context):
        if value < 0:
            context.request_continue()
        return acc + value

    assert_that(L(1, -5, 2).reduce(add_unless_negative, 0) == 3, "negative values should be ignored")


# --- each-based equivalents ---

@test("index_of_with_each agrees with index_of")
def test_index_of_with_each():
    data = L('x', 'y', 'x', 'z', 'x')
    for search in ['x', 'y', 'z', 'missing']:
        for start in range(-6, 6):
            assert_that(data.index_of_with_each(search, start) == data.index_of(search, start),
                        f"mismatch for {search!r} from {start}")


@test("last_index_of_with_each agrees with last_index_of")
def test_last_index_of_with_each():
    data = L('x', 'y', 'x', 'z', 'x')
    for search in ['x', 'y', 'z', 'missing']:
        assert_that(data.last_index_of_with_each(search) == data.last_index_of(search),
                    f"mismatch for {search!r}")
        for limit in range(-6, 5):
            assert_that(data.last_index_of_with_each(search, limit) == data.last_index_of(search, limit),
                        f"mismatch for {search!r} up to {limit}")
    assert_that(data.last_index_of_with_each('x') == 4, "last 'x' is at 4")


@test("reverse_with_each reverses in place like reverse")
def test_reverse_with_each():
    a, b = L(letters), L(letters)
    result = a.reverse_with_each()
    b.reverse()
    assert_that(result is a, "should return self")
    assert_that(a == b, f"should match reverse(): {a} vs {b}")


if __name__ == "__main__":
    suite.run(title="listo traversal test")
