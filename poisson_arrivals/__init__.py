"""Simulated arrival times for a Poisson process.

A Poisson process has i.i.d. exponentially distributed inter-arrival times.
This package samples those intervals and accumulates them into absolute
timestamps (milliseconds since the Unix epoch):
- ExponentialSampler: draws from Exponential(1/mean)
- ArrivalProcess: turns the draws into an ordered list of arrival times

Acting on the timestamps is up to the caller; `poisson_arrivals.example` shows
one way to do it.
"""

from .arrival import ArrivalProcess
from .errors import InvalidArgument
from .exponential import ExponentialSampler

__all__ = ["ArrivalProcess", "ExponentialSampler", "InvalidArgument"]
