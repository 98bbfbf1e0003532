import subprocess
import sys

import pytest

from poisson_arrivals.app import main


def test_app_help_runs():
    proc = subprocess.run(
        [sys.executable, "-m", "poisson_arrivals.app", "-h"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 0
    out = proc.stdout + proc.stderr
    assert "main entrypoint" in out
    assert "run" in out
    assert "times" in out
    assert "intervals" in out


def test_times_with_pinned_start_is_reproducible():
    args = [sys.executable, "-m", "poisson_arrivals.app", "times", "--mean-ms", "1000", "--count", "5"]
    args += ["--seed", "9", "--start-ms", "1000", "--initial-delay-ms", "50"]
    a = subprocess.run(args, capture_output=True, text=True, check=True).stdout
    b = subprocess.run(args, capture_output=True, text=True, check=True).stdout
    assert a == b

    times = [int(line) for line in a.split()]
    assert len(times) == 5
    assert times[0] >= 1050
    assert times == sorted(times)


def test_intervals_with_stats(capsys):
    main(["intervals", "--mean-ms", "100", "--count", "4", "--seed", "2", "--stats"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(int(x) >= 0 for x in lines[:4])
    assert lines[4].startswith("[poisson] n=4 mean=")


def test_invalid_argument_is_a_usage_error():
    proc = subprocess.run(
        [sys.executable, "-m", "poisson_arrivals.app", "times", "--mean-ms", "0", "--count", "3"],
        capture_output=True,
        text=True,
        check=False,
    )
    assert proc.returncode == 2
    assert "mean arrival interval" in proc.stderr
    assert "Traceback" not in proc.stderr


def test_intervals_count_error_uses_library_message(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["intervals", "--mean-ms", "100", "--count", "0"])
    assert exc.value.code == 2
    assert "number of intervals must be > 0 (got 0)" in capsys.readouterr().err
