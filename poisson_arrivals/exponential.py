"""Exponential distribution sampler.

For an exponential distribution with mean μ the rate parameter is λ = 1/μ.
If you expect a phone call every half hour on average, λ is 2 calls per hour.

Samples are drawn by inverse transform: with U uniform on (0, 1],
    X = -ln(U) / λ
is Exponential(λ).
"""

from __future__ import annotations

import math
import random
from typing import Protocol

from .errors import InvalidArgument


class UniformSource(Protocol):
    def random(self) -> float: ...


class ExponentialSampler:
    """Draw values from an exponential distribution with a fixed mean.

    Each sampler owns its random source, so two samplers never step on each
    other's stream. Pass `rng` (e.g. `random.Random(seed)`) for reproducible
    draws.
    """

    def __init__(self, mean: float, *, rng: UniformSource | None = None) -> None:
        try:
            mean_f = float(mean)
        except OverflowError:
            raise InvalidArgument("mean is too large to represent as a float") from None
        if not mean_f > 0 or math.isinf(mean_f):
            raise InvalidArgument(f"mean must be a positive finite number (got {mean!r})")

        self._mean = mean
        self._rate = 1 / mean_f
        self._rng = rng if rng is not None else random.Random()

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def rate(self) -> float:
        """λ, equal to 1 / mean."""
        return self._rate

    def sample(self) -> float:
        """Return a single non-negative sample.

        `random()` yields [0, 1), so `1 - random()` lies in (0, 1] and the
        logarithm is always finite.
        """
        u = 1.0 - self._rng.random()
        return -math.log(u) / self._rate

    def sample_many(self, n: int) -> list[float]:
        """Return `n` independent samples, in draw order.

        Raises:
            InvalidArgument: if n <= 0. No draws are consumed in that case.
        """
        if n <= 0:
            raise InvalidArgument(f"number of samples must be > 0 (got {n!r})")

        return [self.sample() for _ in range(n)]

    def __repr__(self) -> str:
        return f"ExponentialSampler(mean={self._mean!r})"
