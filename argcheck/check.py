"""Precondition guards for public entry points.

Every guard returns the object it was given, unchanged, so checks can be
inlined at the assignment site::

    self._items = check.not_empty(items, "items")

or raises a ``GuardError`` subclass naming the offending parameter. Guards are
pure and never log; reporting is left to whoever catches the error.
"""
from __future__ import annotations

from collections.abc import Sequence, Sized
from typing import TypeVar

from argcheck.errors import (
    EmptyArgumentError,
    InvalidArgumentError,
    NullArgumentError,
    OutOfRangeArgumentError,
)
from argcheck.types import ComparableT

T = TypeVar("T")
SizedT = TypeVar("SizedT", bound=Sized)
SequenceT = TypeVar("SequenceT", bound=Sequence[object])

# Label cited when a guard is handed a bad label of its own.
_NAME_PARAM = "parameter_name"
_SEQUENCE_PARAM = "sequence"


def _label(name: str | None) -> str:
    """Return ``name`` if it can be cited in a message, else raise about it.

    Cites a fixed literal rather than calling back into the public guards,
    so validating a label never recurses.
    """
    if name is None:
        raise NullArgumentError(_NAME_PARAM)
    if not name.strip():
        raise EmptyArgumentError(_NAME_PARAM, f"Argument {_NAME_PARAM} is empty.")
    return name


def not_none(value: T | None, name: str) -> T:
    """Require ``value`` to be present."""
    if value is None:
        raise NullArgumentError(_label(name))
    return value


def not_empty(value: SizedT | None, name: str) -> SizedT:
    """Require a present collection with at least one item.

    Any ``Sized`` qualifies, including ``str``; use ``not_blank`` to reject
    whitespace-only text.
    """
    checked = not_none(value, name)
    if len(checked) == 0:
        label = _label(name)
        raise EmptyArgumentError(label, f"Collection argument {label} is empty.")
    return checked


def not_blank(value: str | None, name: str) -> str:
    """Require text with at least one non-whitespace character.

    The original string is returned untrimmed.
    """
    if value is None:
        raise NullArgumentError(_label(name))
    if not value.strip():
        label = _label(name)
        raise EmptyArgumentError(label, f"Argument {label} is empty.")
    return value


def none_or_not_empty(value: str | None, name: str) -> str | None:
    """Allow None, but reject the empty string.

    Whitespace-only text is accepted; only ``""`` fails.
    """
    if value is None:
        return None
    if len(value) == 0:
        label = _label(name)
        raise EmptyArgumentError(label, f"Argument {label} is empty.")
    return value


def has_no_nones(value: SequenceT | None, name: str) -> SequenceT:
    """Require a present sequence none of whose elements is None.

    An empty sequence passes. The sequence is read once and never copied.
    """
    checked = not_none(value, name)
    for index, element in enumerate(checked):
        if element is None:
            label = _label(name)
            raise InvalidArgumentError(
                label,
                f"Argument {label} contains a None element at index {index}.",
                details={"index": index},
            )
    return checked


def in_range(
    value: ComparableT,
    name: str,
    lower_bound: ComparableT,
    upper_bound: ComparableT,
) -> ComparableT:
    """Require ``lower_bound <= value <= upper_bound``.

    Returns the value; the caller keeps its own binding for later mutation.
    """
    # unordered values such as NaN fail every comparison and are rejected
    if not (lower_bound <= value <= upper_bound):
        label = _label(name)
        raise OutOfRangeArgumentError(
            label,
            f"Argument {label} must be in range [{lower_bound}, {upper_bound}].",
            actual_value=value,
            details={"lower_bound": lower_bound, "upper_bound": upper_bound},
        )
    return value


def valid_range(
    sequence: Sized | None,
    offset: int,
    count: int,
    offset_name: str,
    count_name: str,
) -> None:
    """Require ``[offset, offset + count)`` to fit inside ``sequence``.

    A missing sequence is reported against ``"sequence"``, a negative count
    against ``count_name``, and every other violation against ``offset_name``.
    """
    if sequence is None:
        raise NullArgumentError(_SEQUENCE_PARAM)

    length = len(sequence)
    if count < 0:
        label = _label(count_name)
        raise OutOfRangeArgumentError(
            label,
            f"Argument {label} must not be negative.",
            actual_value=count,
        )

    # compare by subtraction
    if offset < 0 or length - offset < count:
        label = _label(offset_name)
        raise OutOfRangeArgumentError(
            label,
            f"Argument {label} is out of range for a sequence of length {length}.",
            actual_value=offset,
            details={"length": length, "count": count},
        )


__all__ = [
    "has_no_nones",
    "in_range",
    "none_or_not_empty",
    "not_blank",
    "not_empty",
    "not_none",
    "valid_range",
]
