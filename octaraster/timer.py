"""Frame timer with weighted delta smoothing and rate throttling."""

from __future__ import annotations

import time
from collections import deque

_TICKS_PER_SECOND = 1_000_000_000
_MAX_SIGNAL_COUNT = 255


class Timer:
    """Tracks time between signals, in seconds.

    ``samples`` is how many recent deltas feed the smoothed delta and
    ``smooth_factor`` is how quickly older deltas lose weight.
    """

    def __init__(self, samples: int = 10, smooth_factor: float = 0.75) -> None:
        self._num_samples = max(1, samples)
        self._blend_weight = smooth_factor
        self._samples_per_second = 0.0
        self._last_second = 0.0
        self.restart()

    def restart(self) -> None:
        """Clear all signals and start counting from now."""
        self._delta = 0.0
        self._total = 0.0
        self._smooth_delta = 0.0
        self._last_second = 0.0
        self._elapsed_signals = 0
        self._start = time.perf_counter_ns()
        self._signals: deque[int] = deque([self._start], maxlen=self._num_samples + 1)
        self._signal_count = 1

    def total_time(self) -> float:
        """Seconds from the restart to the latest signal."""
        return self._total

    def total_time_exact(self) -> float:
        """Seconds from the restart to now."""
        return (time.perf_counter_ns() - self._start) / _TICKS_PER_SECOND

    def signal(self) -> None:
        """Mark the end of a cycle and update every timing value."""
        self._signals.appendleft(time.perf_counter_ns())
        self._signal_count = min(self._signal_count + 1, _MAX_SIGNAL_COUNT)
        newest = self._signals[0]
        self._total = (newest - self._start) / _TICKS_PER_SECOND
        self._delta = (newest - self._signals[1]) / _TICKS_PER_SECOND

        used = min(self._num_samples, self._signal_count - 1)
        total_weight = 0.0
        running_weight = 1.0
        total_value = 0
        signals = list(self._signals)
        for later, earlier in zip(signals[:used], signals[1:used + 1]):
            total_value += int((later - earlier) * running_weight)
            total_weight += running_weight
            running_weight *= self._blend_weight
        self._smooth_delta = (total_value / total_weight) / _TICKS_PER_SECOND

        self._elapsed_signals += 1
        since_last = self._total - self._last_second
        if since_last >= 0.1:
            self._samples_per_second = self._elapsed_signals / since_last
            self._last_second = self._total
            self._elapsed_signals = 0

    def delta(self) -> float:
        """Seconds between the last two signals."""
        return self._delta

    def smooth_delta(self) -> float:
        """Weighted average of recent deltas, newest weighted most."""
        return self._smooth_delta

    def samples_per_second(self) -> float:
        """Signal rate, re-evaluated at most ten times per second."""
        return self._samples_per_second

    def throttle(self, target_hz: float) -> None:
        """Sleep in growing steps while signals come faster than ``target_hz``."""
        if target_hz <= 1:
            return
        pause_ms = 0
        while self._current_rate() > target_hz:
            time.sleep(pause_ms / 1000.0)
            pause_ms += 1

    def _current_rate(self) -> float:
        window = self.total_time_exact() - self._last_second
        if window <= 0:
            return float("inf") if self._elapsed_signals else 0.0
        return self._elapsed_signals / window