import pytest
from kungfu import Nothing, Some

from fpx.transformers import StreamT
from fpx.typeclasses import Monoids, Reducer, futures as F, lists, options


def test_from_option_map():
    result = StreamT.from_option(Some([1, 2, 3])).map(lambda x: x * 2).unwrap()

    assert result.unwrap() == (2, 4, 6)


def test_nothing_outer_is_untouched():
    result = StreamT.from_option(Nothing()).map(lambda x: x * 2).unwrap()

    assert isinstance(result, Nothing)


def test_from_list_filter_and_peek():
    seen = []
    stream = StreamT.from_list([[1, 2], [3]]).peek(seen.append).filter(lambda x: x > 1)

    assert stream.unwrap() == [(2,), (3,)]
    assert seen == [1, 2, 3]


def test_flat_map():
    result = StreamT.from_list([[1, 2]]).flat_map(lambda x: [x, x * 10]).unwrap()

    assert result == [(1, 10, 2, 20)]


def test_flat_map_t_concatenates_inner_streams():
    stream = StreamT.from_list([[1, 2]])

    result = stream.flat_map_t(lambda x: StreamT.from_list([[x], [x + 100]])).unwrap()

    assert result == [(1, 101, 2, 102)]


def test_stream_flattens_all_outer_values():
    stream = StreamT.from_list([(1, 2), (), (3,)])

    assert list(stream.stream()) == [1, 2, 3]
    assert list(stream) == [1, 2, 3]


def test_generators_are_materialised():
    stream = StreamT.from_list([(x for x in range(3))])

    assert list(stream.stream()) == [0, 1, 2]
    assert list(stream.stream()) == [0, 1, 2]


def test_stream_requires_foldable():
    stream = StreamT.of([[1]], lists.monad_zero())

    with pytest.raises(ValueError):
        list(stream.stream())


def test_is_seq_present():
    assert StreamT.from_option(Some([1])).is_seq_present()
    assert not StreamT.from_option(Nothing()).is_seq_present()
    assert not StreamT.from_list([]).is_seq_present()


def test_from_future():
    stream = StreamT.from_future(F.completed([1, 2, 3])).map(lambda x: x + 1)

    assert stream.unwrap().result(timeout=1) == (2, 3, 4)
    assert list(stream.stream()) == [2, 3, 4]


def test_from_any_and_empty_of():
    lifted = StreamT.from_any(Some(5), options.monad(), options.foldable())
    empty = StreamT.empty_of(lists.monad(), lists.foldable())

    assert lifted.unwrap().unwrap() == (5,)
    assert empty.unwrap() == [()]
    assert list(empty.stream()) == []


def test_visit_and_unwrap_to():
    stream = StreamT.from_list([[1, 2], [3]])

    assert stream.visit(len) == [2, 1]
    assert stream.unwrap_to(len) == 2


def test_sequence_operations_apply_per_inner_stream():
    stream = StreamT.from_list([[1, 2, 3, 4], [5, 6]])

    assert stream.take(1).unwrap() == [(1,), (5,)]
    assert stream.drop(1).unwrap() == [(2, 3, 4), (6,)]
    assert stream.take_while(lambda x: x < 3).unwrap() == [(1, 2), ()]
    assert stream.drop_while(lambda x: x < 3).unwrap() == [(3, 4), (5, 6)]
    assert stream.reverse().unwrap() == [(4, 3, 2, 1), (6, 5)]
    assert stream.intersperse(0).unwrap() == [(1, 0, 2, 0, 3, 0, 4), (5, 0, 6)]
    assert stream.zip_with_index().unwrap()[1] == ((5, 0), (6, 1))
    assert stream.zip("ab").unwrap() == [((1, "a"), (2, "b")), ((5, "a"), (6, "b"))]


def test_windows_and_groups():
    stream = StreamT.from_list([[1, 2, 3]])

    windows = stream.sliding(2).unwrap()[0]
    assert [w.to_list() for w in windows] == [[1, 2], [2, 3]]
    groups = stream.grouped(2).unwrap()[0]
    assert [g.to_list() for g in groups] == [[1, 2], [3]]


def test_scan_sort_distinct_cycle():
    stream = StreamT.from_list([[3, 1, 3]])

    assert stream.scan_left(Monoids.int_sum).unwrap() == [(0, 3, 4, 7)]
    assert stream.scan_left("", lambda acc, x: acc + str(x)).unwrap() == [("", "3", "31", "313")]
    assert stream.sorted().unwrap() == [(1, 3, 3)]
    assert stream.distinct().unwrap() == [(3, 1)]
    assert stream.cycle(2).unwrap() == [(3, 1, 3, 3, 1, 3)]


def test_on_empty():
    stream = StreamT.from_list([[], [1]])

    assert stream.on_empty(0).unwrap() == [(0,), (1,)]
    with pytest.raises(LookupError):
        stream.on_empty_raise(lambda: LookupError("empty"))


def test_for_each2_on_inner():
    stream = StreamT.from_option(Some([1, 2]))

    result = stream.for_each2(lambda a: [a * 10], lambda a, b: a + b).unwrap()

    assert result.unwrap() == (11, 22)


def test_scan_with_reducer():
    stream = StreamT.from_list([[3, 1, 3]])
    summing = Reducer.from_monoid(Monoids.int_sum, int)

    assert stream.scan_left(summing).unwrap() == [(0, 3, 4, 7)]
    assert stream.scan_right(summing).unwrap() == stream.scan_right(Monoids.int_sum).unwrap()
