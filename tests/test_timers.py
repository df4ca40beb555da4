from use_cases.timers import TimerQueue


def test_advance_fires_in_due_order_with_ties_in_schedule_order():
    timers = TimerQueue(now=lambda: 0.0)
    fired = []
    timers.call_later(2.0, lambda: fired.append("late"))
    timers.call_later(1.0, lambda: fired.append("first"))
    timers.call_later(1.0, lambda: fired.append("second"))

    assert timers.advance(5) == 3
    assert fired == ["first", "second", "late"]


def test_cancelled_timer_never_fires():
    timers = TimerQueue(now=lambda: 0.0)
    fired = []
    handle = timers.call_later(1.0, lambda: fired.append("x"))
    handle.cancel()

    assert timers.advance(2) == 0
    assert fired == []
    assert not handle.pending
    assert timers.has_pending() is False


def test_callback_scheduled_by_callback_waits_for_its_own_due_time():
    timers = TimerQueue(now=lambda: 0.0)
    fired = []

    def first():
        fired.append("first")
        timers.call_later(1.0, lambda: fired.append("chained"))

    timers.call_later(1.0, first)
    timers.advance(1.5)
    assert fired == ["first"]

    timers.advance(1.0)
    assert fired == ["first", "chained"]


def test_next_due_reports_seconds_remaining():
    timers = TimerQueue(now=lambda: 0.0)
    assert timers.next_due() is None

    timers.call_later(2.0, lambda: None)
    timers.advance(0.5)
    assert timers.next_due() == 1.5


def test_run_due_follows_the_injected_clock():
    clock = [0.0]
    timers = TimerQueue(now=lambda: clock[0])
    fired = []
    timers.call_later(1.0, lambda: fired.append("x"))

    assert timers.run_due() == 0
    clock[0] = 1.0
    assert timers.run_due() == 1
    assert fired == ["x"]
