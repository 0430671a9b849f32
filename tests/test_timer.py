from unittest.mock import patch

import pytest

from octaraster.timer import Timer

SECOND = 1_000_000_000


def make_timer(ticks, samples=10, smooth_factor=0.75):
    """Timer whose clock returns the given tick values in order."""
    clock = patch("time.perf_counter_ns", side_effect=list(ticks))
    clock.start()
    timer = Timer(samples, smooth_factor)
    return timer, clock


def test_fresh_timer_reports_zero():
    timer, clock = make_timer([0])
    clock.stop()
    assert timer.total_time() == 0.0
    assert timer.delta() == 0.0
    assert timer.smooth_delta() == 0.0
    assert timer.samples_per_second() == 0.0


def test_single_signal_measures_interval():
    timer, clock = make_timer([0, SECOND])
    timer.signal()
    clock.stop()
    assert timer.total_time() == pytest.approx(1.0)
    assert timer.delta() == pytest.approx(1.0)
    assert timer.smooth_delta() == pytest.approx(1.0)
    assert timer.samples_per_second() == pytest.approx(1.0)


def test_equal_intervals_smooth_to_the_same_delta():
    timer, clock = make_timer([0, SECOND // 2, SECOND, 3 * SECOND // 2])
    for _ in range(3):
        timer.signal()
    clock.stop()
    assert timer.delta() == pytest.approx(0.5)
    assert timer.smooth_delta() == pytest.approx(0.5)
    assert timer.total_time() == pytest.approx(1.5)


def test_smooth_delta_lies_between_recent_deltas():
    timer, clock = make_timer([0, SECOND, 3 * SECOND // 2])
    timer.signal()
    timer.signal()
    clock.stop()
    assert timer.delta() == pytest.approx(0.5)
    assert 0.5 < timer.smooth_delta() < 1.0


def test_single_sample_smoothing_follows_latest_delta():
    timer, clock = make_timer([0, SECOND, 3 * SECOND // 2], samples=1)
    timer.signal()
    timer.signal()
    clock.stop()
    assert timer.smooth_delta() == pytest.approx(timer.delta())


def test_restart_clears_totals():
    timer, clock = make_timer([0, SECOND, 5 * SECOND])
    timer.signal()
    timer.restart()
    clock.stop()
    assert timer.total_time() == 0.0
    assert timer.delta() == 0.0


def test_total_time_exact_reads_clock():
    timer, clock = make_timer([0, 2 * SECOND])
    exact = timer.total_time_exact()
    clock.stop()
    assert exact == pytest.approx(2.0)


def test_rate_not_updated_within_a_tenth_of_a_second():
    timer, clock = make_timer([0, SECOND // 20])
    timer.signal()
    clock.stop()
    assert timer.samples_per_second() == 0.0


@patch("time.sleep")
def test_throttle_below_one_hz_never_sleeps(sleep):
    timer, clock = make_timer([0, SECOND // 20, SECOND])
    timer.signal()
    timer.throttle(1)
    # The clock was not read by throttle, so the next reading is the last tick.
    exact = timer.total_time_exact()
    clock.stop()
    assert exact == pytest.approx(1.0)
    assert timer.total_time() == pytest.approx(0.05)
    assert sleep.call_count == 0


@patch("time.sleep")
def test_throttle_sleeps_while_too_fast(sleep):
    timer, clock = make_timer([0, SECOND // 20, SECOND // 20, SECOND // 5, SECOND // 2])
    timer.signal()
    timer.throttle(10)
    # Throttle read the clock twice; the next reading is the final tick.
    exact = timer.total_time_exact()
    clock.stop()
    assert exact == pytest.approx(0.5)
    assert timer.total_time() == pytest.approx(0.05)
    assert sleep.call_count == 1
    assert sleep.call_args.args[0] == 0.0