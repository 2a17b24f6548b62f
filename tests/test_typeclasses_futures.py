import concurrent.futures
import logging
import threading

import pytest
from kungfu import Nothing, Some

from fpx.typeclasses import Monoid, futures as F
from fpx.typeclasses import options


def test_unit():
    assert F.unit().unit("hello").result() == "hello"


def test_functor_map():
    assert F.functor().map(len, F.completed("hello")).result() == 5


def test_map_failure_fails_result():
    fut = F.map(lambda _: 1 / 0, F.completed(1))

    with pytest.raises(ZeroDivisionError):
        fut.result(timeout=1)


def test_map_propagates_source_failure():
    fut = F.map(lambda x: x + 1, F.failed(KeyError("missing")))

    assert isinstance(fut.exception(timeout=1), KeyError)


def test_applicative_ap_and_map2():
    app = F.applicative()

    assert app.ap(F.completed(lambda s: s.upper()), F.completed("a")).result() == "A"
    assert app.map2(lambda a, b: a + b, F.completed(1), F.completed(2)).result() == 3


def test_monad_flat_map():
    doubled = F.monad().flat_map(lambda i: F.completed(i * 2), F.completed(3))

    assert doubled.result(timeout=1) == 6
    assert F.monad().flatten(F.completed(F.completed("x"))).result(timeout=1) == "x"


def test_chaining_waits_for_pending_source():
    source = concurrent.futures.Future()
    chained = F.map(lambda x: x * 10, source)

    assert not chained.done()
    source.set_result(4)
    assert chained.result(timeout=1) == 40


def test_monad_zero_filter_keeps_matching_value():
    fut = F.monad_zero().filter(lambda s: s == "hello", F.completed("hello"))

    assert fut.result(timeout=1) == "hello"


def test_monad_zero_filter_rejected_never_completes():
    fut = F.monad_zero().filter(lambda s: s == "hello", F.completed("goodbye"))

    assert not fut.done()
    assert not F.monad_zero().zero().done()


def test_monad_plus_first_completed():
    slow = concurrent.futures.Future()
    fast = F.completed(10)

    assert F.monad_plus().plus(slow, fast).result(timeout=1) == 10


def test_monad_plus_custom_monoid():
    summing = Monoid(F.completed(0), lambda a, b: F.zip_with(lambda x, y: x + y, a, b))

    total = F.monad_plus(summing).sum([F.completed(1), F.completed(2), F.completed(3)])

    assert total.result(timeout=1) == 6


def test_foldable():
    fold = F.foldable()

    assert fold.fold_left("x", lambda acc, v: acc + v, F.completed("y")) == "xy"
    assert fold.fold_right("x", lambda v, acc: v + acc, F.completed("y")) == "yx"
    assert fold.to_list(F.completed(1)) == [1]


def test_traverse_with_option_applicative():
    result = F.traverse().traverse_a(options.applicative(), lambda x: Some(x + 1), F.completed(1))

    assert result.unwrap().result() == 2


def test_traverse_into_nothing():
    result = F.traverse().traverse_a(options.applicative(), lambda x: Nothing(), F.completed(1))

    assert isinstance(result, Nothing)


def test_sequence_and_traverse_fn():
    assert F.sequence([F.completed(1), F.completed(2)]).result(timeout=1) == [1, 2]
    assert F.sequence([]).result(timeout=1) == []
    assert F.traverse_fn([1, 2, 3], lambda x: F.completed(x * x)).result(timeout=1) == [1, 4, 9]


def test_sequence_fails_on_first_failure():
    fut = F.sequence([F.completed(1), F.failed(ValueError("bad"))])

    assert isinstance(fut.exception(timeout=1), ValueError)


def test_any_of_requires_futures():
    with pytest.raises(ValueError):
        F.any_of()


def test_any_of_is_thread_safe():
    sources = [concurrent.futures.Future() for _ in range(8)]
    winner = F.any_of(*sources)
    threads = [threading.Thread(target=f.set_result, args=(i,)) for i, f in enumerate(sources)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert winner.result(timeout=1) in range(8)


def test_accumulate():
    assert F.accumulate([F.completed("a"), F.completed("b")], Monoid("", str.__add__)).result(timeout=1) == "ab"


def test_instances_alias():
    from fpx.typeclasses import FutureInstances

    assert FutureInstances.monad().flat_map(lambda x: F.completed(x + 1), F.completed(1)).result() == 2


def test_cancelled_results_are_left_alone(caplog):
    calls = []
    src = concurrent.futures.Future()
    mapped = F.map(lambda x: calls.append(x) or x, src)
    chained = F.flat_map(F.completed, src)
    kept = F.filter(lambda _: True, src)

    assert mapped.cancel() and chained.cancel() and kept.cancel()
    with caplog.at_level(logging.ERROR, logger="concurrent.futures"):
        src.set_result(1)

    assert calls == []
    assert mapped.cancelled() and chained.cancelled() and kept.cancelled()
    assert not [r for r in caplog.records if r.name == "concurrent.futures"]


def test_resolve_and_reject_skip_cancelled():
    fut = concurrent.futures.Future()
    fut.cancel()

    F.resolve(fut, 1)
    F.reject(fut, ValueError("late"))
    assert fut.cancelled()

    with pytest.raises(concurrent.futures.InvalidStateError):
        F.resolve(F.completed(1), 2)
