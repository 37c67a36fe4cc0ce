import threading
import time

from image_app.services.queue import RateLimitedQueue


def test_dispatches_are_spaced_from_previous_dispatch_start(clock):
    queue = RateLimitedQueue(interval=1.0, clock=clock, sleep=clock.sleep)
    starts = []

    def _task(duration):
        def _run():
            starts.append(clock())
            clock.advance(duration)
            return duration

        return _run

    # Durations below, equal to and above the interval.
    durations = [0.2, 1.0, 2.5, 0.0, 0.7]
    futures = [queue.submit(_task(d)) for d in durations]
    results = [f.result(timeout=5) for f in futures]
    queue.shutdown()

    assert results == durations
    first = starts[0]
    for k, start in enumerate(starts):
        assert start - first >= k * 1.0 - 1e-9
    for previous, current in zip(starts, starts[1:]):
        assert current - previous >= 1.0 - 1e-9
    # A slow crawl does not add a further full interval on top of its own duration.
    assert starts[3] - starts[2] == 2.5


def test_tasks_run_fifo_with_at_most_one_in_flight():
    queue = RateLimitedQueue(interval=0.0)
    order = []
    in_flight = []
    lock = threading.Lock()
    active = [0]

    def _task(index):
        def _run():
            with lock:
                active[0] += 1
                in_flight.append(active[0])
            time.sleep(0.01)
            order.append(index)
            with lock:
                active[0] -= 1
            return index

        return _run

    futures = [queue.submit(_task(i)) for i in range(6)]
    assert [f.result(timeout=5) for f in futures] == list(range(6))
    queue.shutdown()

    assert order == list(range(6))
    assert max(in_flight) == 1


def test_state_tracks_dispatch_and_in_flight(clock):
    queue = RateLimitedQueue(interval=1.0, clock=clock, sleep=clock.sleep)
    assert queue.state().last_dispatch_at is None

    observed = []
    release = threading.Event()

    def _blocking():
        observed.append(queue.state())
        release.wait(timeout=5)
        return "done"

    future = queue.submit(_blocking)
    release.set()
    assert future.result(timeout=5) == "done"
    queue.shutdown()

    assert observed[0].in_flight == 1
    assert observed[0].pending == 0
    assert observed[0].last_dispatch_at == 1_000.0
    final = queue.state()
    assert final.in_flight == 0
    assert final.pending == 0


def test_task_exception_is_delivered_through_future():
    queue = RateLimitedQueue(interval=0.0)

    def _boom():
        raise ValueError("boom")

    future = queue.submit(_boom)
    try:
        future.result(timeout=5)
    except ValueError as exc:
        assert str(exc) == "boom"
    else:
        raise AssertionError("expected ValueError")

    assert queue.submit(lambda: "next").result(timeout=5) == "next"
    queue.shutdown()
    assert queue.state().in_flight == 0


def test_real_clock_spacing_between_dispatches():
    queue = RateLimitedQueue(interval=0.05)
    starts = []

    futures = [queue.submit(lambda: starts.append(time.monotonic())) for _ in range(3)]
    for f in futures:
        f.result(timeout=5)
    queue.shutdown()

    assert starts[1] - starts[0] >= 0.05 - 1e-3
    assert starts[2] - starts[1] >= 0.05 - 1e-3
