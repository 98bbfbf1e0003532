from __future__ import annotations

# Single entrypoint.
#
#     python -m poisson_arrivals.app run --mean-ms 5000 --count 20
#     python -m poisson_arrivals.app times --mean-ms 1000 --count 5 --seed 1
#     python -m poisson_arrivals.app intervals --mean-ms 5000 --count 10000 --stats
#
# `run` is the live demo; `times` and `intervals` just print numbers.

import argparse
import random
import statistics

from .arrival import ArrivalProcess
from .errors import InvalidArgument
from .example import add_example_args, run_example


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Poisson arrival-time generator - main entrypoint")
    sub = parser.add_subparsers(dest="cmd", required=True)

    def add_process_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--mean-ms", type=int, required=True, help="mean inter-arrival time (ms)")
        p.add_argument("--count", type=int, required=True)
        p.add_argument("--seed", type=int, default=None)

    p_run = sub.add_parser("run", help="Print events live as their arrival times pass")
    add_example_args(p_run)

    p_times = sub.add_parser("times", help="Print arrival times (ms since epoch), one per line")
    add_process_args(p_times)
    p_times.add_argument("--initial-delay-ms", type=int, default=0)
    p_times.add_argument(
        "--start-ms",
        type=int,
        default=None,
        help="reference time in ms (default: now)",
    )

    p_int = sub.add_parser("intervals", help="Print rounded inter-arrival intervals (ms)")
    add_process_args(p_int)
    p_int.add_argument("--stats", action="store_true", help="print a summary line at the end")

    args = parser.parse_args(argv)

    try:
        if args.cmd == "run":
            run_example(
                mean_interval_ms=args.mean_ms,
                count=args.count,
                initial_delay_ms=args.initial_delay_ms,
                seed=args.seed,
                poll_seconds=args.poll_seconds,
            )
            return

        if args.cmd == "times":
            clock = (lambda: args.start_ms) if args.start_ms is not None else None
            process = ArrivalProcess(args.mean_ms, rng=_rng(args.seed), clock=clock)
            for t in process.arrival_times(args.count, initial_delay_ms=args.initial_delay_ms):
                print(t)
            return

        if args.cmd == "intervals":
            process = ArrivalProcess(args.mean_ms, rng=_rng(args.seed))
            intervals = process.intervals_ms(args.count)
            for dt in intervals:
                print(dt)
            if args.stats:
                print(
                    f"[poisson] n={len(intervals)} mean={statistics.fmean(intervals):0.2f} "
                    f"min={min(intervals)} max={max(intervals)} (requested mean={args.mean_ms})"
                )
            return
    except InvalidArgument as e:
        parser.error(str(e))


def _rng(seed: int | None) -> random.Random | None:
    return random.Random(seed) if seed is not None else None


if __name__ == "__main__":
    main()
