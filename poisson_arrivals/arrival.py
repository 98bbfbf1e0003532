"""Arrival times for a Poisson process.

For a Poisson arrival process with mean inter-arrival time μ (milliseconds):
- the *inter-arrival times* are i.i.d. Exponential(1/μ)
- the arrival times are the running sum of those intervals

Example: simulate 20 events arriving once a minute on average.

    process = ArrivalProcess(60 * 1000)
    arrival_times_ms = process.arrival_times(20)

Each value is milliseconds since the Unix epoch. Firing something when the
clock passes a value is left to the caller (see `poisson_arrivals.example`).
"""

from __future__ import annotations

import math
import numbers
import time
from typing import Callable

from .errors import InvalidArgument
from .exponential import ExponentialSampler, UniformSource

Clock = Callable[[], int]

# Largest mean interval accepted; the range of a signed 64-bit millisecond count.
MAX_MEAN_ARRIVAL_INTERVAL_MS = 2**63 - 1


def wall_clock_ms() -> int:
    """Current wall-clock time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def round_half_up(x: float) -> int:
    # Python's round() is round-half-even; intervals are >= 0 so floor(x + .5)
    # rounds midpoints up.
    return int(math.floor(x + 0.5))


class ArrivalProcess:
    """Generate absolute arrival timestamps with a fixed mean interval.

    Args:
        mean_arrival_interval_ms: μ, the mean time between events. Must be > 0 and
            at most MAX_MEAN_ARRIVAL_INTERVAL_MS.
        rng: optional random source for the internal sampler (useful for
            deterministic tests).
        clock: optional callable returning the reference time in ms. Defaults
            to the wall clock.
    """

    def __init__(
        self,
        mean_arrival_interval_ms: int,
        *,
        rng: UniformSource | None = None,
        clock: Clock | None = None,
    ) -> None:
        if not mean_arrival_interval_ms > 0:
            raise InvalidArgument(
                f"mean arrival interval (ms) must be > 0 (got {mean_arrival_interval_ms!r})"
            )
        if mean_arrival_interval_ms > MAX_MEAN_ARRIVAL_INTERVAL_MS:
            raise InvalidArgument(
                f"mean arrival interval (ms) must be <= {MAX_MEAN_ARRIVAL_INTERVAL_MS}"
            )

        self._mean_arrival_interval_ms = mean_arrival_interval_ms
        self._sampler = ExponentialSampler(mean_arrival_interval_ms, rng=rng)
        self._clock = clock or wall_clock_ms

    @property
    def mean_arrival_interval_ms(self) -> int:
        return self._mean_arrival_interval_ms

    def next_interval_ms(self) -> int:
        """Sample one inter-arrival interval, rounded to whole milliseconds.

        This is a duration, not an epoch timestamp. It can be 0.
        """
        return round_half_up(self._sampler.sample())

    def intervals_ms(self, count: int) -> list[int]:
        """Return `count` independent rounded intervals, in draw order.

        Raises:
            InvalidArgument: if count <= 0. Nothing is sampled in that case.
        """
        if count <= 0:
            raise InvalidArgument(f"number of intervals must be > 0 (got {count!r})")

        return [self.next_interval_ms() for _ in range(count)]

    def arrival_times(self, count: int, initial_delay_ms: int = 0) -> list[int]:
        """Return `count` arrival times as milliseconds since the Unix epoch.

        The first arrival is one interval after `clock() + initial_delay_ms`.
        Every later arrival adds a fresh interval to the previous one, so the
        list is non-decreasing.

        Raises:
            InvalidArgument: if initial_delay_ms is not a non-negative integer or
                count <= 0. Nothing is sampled in that case.
        """
        if not isinstance(initial_delay_ms, numbers.Integral):
            raise InvalidArgument(f"initial delay must be a whole number of ms (got {initial_delay_ms!r})")
        if initial_delay_ms < 0:
            raise InvalidArgument(f"initial delay cannot be negative (got {initial_delay_ms!r})")
        if count <= 0:
            raise InvalidArgument(f"number of arrival times must be > 0 (got {count!r})")

        t = self._clock() + initial_delay_ms
        arrival_times_ms: list[int] = []
        for _ in range(count):
            # Each interval is rounded before it is accumulated.
            t += self.next_interval_ms()
            arrival_times_ms.append(t)
        return arrival_times_ms

    def __repr__(self) -> str:
        return f"ArrivalProcess(mean_arrival_interval_ms={self._mean_arrival_interval_ms!r})"
