"""Fail-fast argument guards.

Call a guard at the top of a public function to reject bad arguments with a
consistent, typed error::

    from argcheck import check

    def resize(buffer: bytes, offset: int, count: int) -> bytes:
        check.valid_range(buffer, offset, count, "offset", "count")
        ...
"""
from __future__ import annotations

from argcheck.check import (
    has_no_nones,
    in_range,
    none_or_not_empty,
    not_blank,
    not_empty,
    not_none,
    valid_range,
)
from argcheck.errors import (
    EmptyArgumentError,
    ErrorKind,
    GuardError,
    InvalidArgumentError,
    NullArgumentError,
    OutOfRangeArgumentError,
)

__all__ = [
    "EmptyArgumentError",
    "ErrorKind",
    "GuardError",
    "InvalidArgumentError",
    "NullArgumentError",
    "OutOfRangeArgumentError",
    "has_no_nones",
    "in_range",
    "none_or_not_empty",
    "not_blank",
    "not_empty",
    "not_none",
    "valid_range",
]
