from __future__ import annotations

# Live demonstration.
#
# Simulates a Poisson process and prints a line whenever an "event" occurs:
# - generate a batch of arrival times up front
# - poll the clock, firing every arrival time that has passed
# - sleep a little between polls

import argparse
import random
import time
from datetime import datetime
from typing import Callable

from .arrival import ArrivalProcess, Clock, wall_clock_ms
from .errors import InvalidArgument


def fire_events(
    arrival_times_ms: list[int],
    *,
    on_event: Callable[[int, int], None],
    clock: Clock = wall_clock_ms,
    sleep: Callable[[float], None] = time.sleep,
    poll_seconds: float = 0.1,
) -> None:
    """Call `on_event(index, arrival_ms)` once each arrival time has passed.

    Args:
        arrival_times_ms: non-decreasing epoch timestamps, e.g. from
            `ArrivalProcess.arrival_times`.
        on_event: callback; `index` is the position in `arrival_times_ms`.
        clock: returns the current time in ms.
        sleep: called with `poll_seconds` between polls.
        poll_seconds: how long to wait between clock checks (>= 0).
    """
    if poll_seconds < 0:
        raise InvalidArgument(f"poll_seconds must be >= 0 (got {poll_seconds!r})")

    i = 0
    while i < len(arrival_times_ms):
        now = clock()

        # Fire everything that is due; the list is ordered so stop at the
        # first arrival still in the future.
        while i < len(arrival_times_ms) and now >= arrival_times_ms[i]:
            on_event(i, arrival_times_ms[i])
            i += 1

        if i < len(arrival_times_ms):
            sleep(poll_seconds)


def _fmt_ms(epoch_ms: int) -> str:
    return datetime.fromtimestamp(epoch_ms / 1000).isoformat(sep=" ", timespec="milliseconds")


def run_example(
    *,
    mean_interval_ms: int = 5000,
    count: int = 20,
    initial_delay_ms: int = 0,
    seed: int | None = None,
    poll_seconds: float = 0.1,
) -> None:
    """Generate `count` arrivals and print each one as it happens.

    Args:
        mean_interval_ms: mean time between events.
        seed: if provided, makes the arrival times reproducible (relative to
            the start time).
    """
    rng = random.Random(seed) if seed is not None else None
    process = ArrivalProcess(mean_interval_ms, rng=rng)
    arrival_times_ms = process.arrival_times(count, initial_delay_ms=initial_delay_ms)

    print(f"[poisson] mean time between events: {process.mean_arrival_interval_ms} ms")
    print(f"[poisson] starting Poisson process at {_fmt_ms(wall_clock_ms())}")

    def on_event(i: int, arrival_ms: int) -> None:
        print(f"[poisson] event {i + 1}/{count} fired at {_fmt_ms(arrival_ms)}")

    try:
        fire_events(arrival_times_ms, on_event=on_event, poll_seconds=poll_seconds)
    except KeyboardInterrupt:
        print("[poisson] interrupted")


def add_example_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--mean-ms", type=int, default=5000, help="mean time between events (ms)")
    p.add_argument("--count", type=int, default=20, help="number of events to simulate")
    p.add_argument("--initial-delay-ms", type=int, default=0)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--poll-seconds", type=float, default=0.1)


def main() -> None:
    parser = argparse.ArgumentParser(description="Print Poisson-process events as they occur")
    add_example_args(parser)
    args = parser.parse_args()

    try:
        run_example(
            mean_interval_ms=args.mean_ms,
            count=args.count,
            initial_delay_ms=args.initial_delay_ms,
            seed=args.seed,
            poll_seconds=args.poll_seconds,
        )
    except InvalidArgument as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
