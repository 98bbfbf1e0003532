"""Shared error type.

Every precondition failure in the package raises the same error kind.
"""

from __future__ import annotations


class InvalidArgument(ValueError):
    """A numeric argument is outside its allowed range.

    This is a programming error on the caller's side, not a transient
    condition, so nothing in the package catches it.
    """
