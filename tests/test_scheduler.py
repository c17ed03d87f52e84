import time

import pytest

from structkit.scheduler import Scheduler
from structkit.uid import Uid


def past(seconds):
    return time.time() - seconds


def test_new_scheduler_is_empty():
    sched = Scheduler()
    assert sched.is_empty()
    assert len(sched) == 0


def test_add_task_counts_and_returns_distinct_ids():
    sched = Scheduler()
    first = sched.add_task(past(10), lambda p: 0, None, None, None)
    second = sched.add_task(past(5), lambda p: 0, None, None, None)
    assert len(sched) == 2
    assert not sched.is_empty()
    assert first != second


def test_run_executes_in_time_order():
    sched = Scheduler()
    order = []
    sched.add_task(past(1), order.append, "late", None, None)
    sched.add_task(past(50), order.append, "early", None, None)
    sched.add_task(past(20), order.append, "middle", None, None)
    sched.run()
    assert order == ["early", "middle", "late"]
    assert sched.is_empty()


def test_running_task_counts_in_size():
    sched = Scheduler()
    sizes = []
    sched.add_task(past(10), lambda p: sizes.append(len(sched)) or 0, None, None, None)
    sched.add_task(past(5), lambda p: 0, None, None, None)
    sched.run()
    assert sizes == [2]


def test_finished_task_is_cleaned_up_once():
    sched = Scheduler()
    cleaned = []
    sched.add_task(past(1), lambda p: 0, None, cleaned.append, "done")
    sched.run()
    assert cleaned == ["done"]


def test_task_is_rescheduled_until_it_returns_zero():
    sched = Scheduler()
    runs = []

    def repeat(params):
        runs.append(params)
        return 0.01 if len(runs) < 3 else 0

    sched.add_task(past(1), repeat, "tick", None, None)
    sched.run()
    assert runs == ["tick", "tick", "tick"]
    assert sched.is_empty()


def test_remove_queued_task():
    sched = Scheduler()
    ran = []
    keep = sched.add_task(past(2), ran.append, "keep", None, None)
    drop = sched.add_task(past(1), ran.append, "drop", None, None)
    assert sched.remove_task(drop) is True
    assert len(sched) == 1
    sched.run()
    assert ran == ["keep"]
    assert sched.remove_task(keep) is False


def test_remove_unknown_task_reports_false():
    sched = Scheduler()
    sched.add_task(past(1), lambda p: 0, None, None, None)
    assert sched.remove_task(Uid(0, 0, 0, 0)) is False
    assert len(sched) == 1


def test_stop_from_task_leaves_rest_queued():
    sched = Scheduler()
    ran = []

    def stopper(params):
        ran.append(params)
        sched.stop()
        return 0

    sched.add_task(past(10), stopper, "first", None, None)
    sched.add_task(past(5), ran.append, "second", None, None)
    sched.run()
    assert ran == ["first"]
    assert len(sched) == 1
    sched.run()
    assert ran == ["first", "second"]


def test_clear_drops_queued_tasks():
    sched = Scheduler()
    for seconds in (1, 2, 3):
        sched.add_task(past(seconds), lambda p: 0, None, None, None)
    sched.clear()
    assert sched.is_empty()


def test_task_error_propagates_and_resets_current():
    sched = Scheduler()

    def fail(params):
        raise RuntimeError("boom")

    sched.add_task(past(1), fail, None, None, None)
    with pytest.raises(RuntimeError):
        sched.run()
    assert sched.is_empty()