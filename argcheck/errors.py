from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import ClassVar, Literal

ErrorKind = Literal[
    "NULL_ARGUMENT",
    "EMPTY_ARGUMENT",
    "INVALID_ARGUMENT",
    "OUT_OF_RANGE_ARGUMENT",
]


class GuardError(ValueError):
    """Base class for a failed precondition check.

    Instances are read-only once raised: ``kind``, ``param_name``, ``message``
    and ``details`` are exposed through properties only. Subclasses pin the
    kind so callers can branch on either the class or the string code; a bare
    ``GuardError`` reports ``INVALID_ARGUMENT``.
    """

    _kind: ClassVar[ErrorKind] = "INVALID_ARGUMENT"

    def __init__(
        self,
        param_name: str,
        message: str,
        *,
        details: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self._param_name = param_name
        self._message = message
        self._details: Mapping[str, object] = MappingProxyType(dict(details or {}))

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def param_name(self) -> str:
        return self._param_name

    @property
    def message(self) -> str:
        return self._message

    @property
    def details(self) -> Mapping[str, object]:
        return self._details

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind,
            "param_name": self.param_name,
            "message": self.message,
            "details": dict(self.details),
        }

    def __reduce__(self) -> tuple[object, ...]:
        return (
            _rebuild,
            (type(self), self._param_name, self._message, dict(self._details)),
        )


def _rebuild(
    cls: type[GuardError],
    param_name: str,
    message: str,
    details: dict[str, object],
) -> GuardError:
    return cls(param_name, message, details=details)


class NullArgumentError(GuardError):
    """A required value is None."""

    _kind: ClassVar[ErrorKind] = "NULL_ARGUMENT"

    def __init__(
        self,
        param_name: str,
        message: str | None = None,
        *,
        details: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(
            param_name,
            message or f"Argument {param_name} must not be None.",
            details=details,
        )


class EmptyArgumentError(GuardError):
    """A value is present but has no items, or is blank text."""

    _kind: ClassVar[ErrorKind] = "EMPTY_ARGUMENT"


class InvalidArgumentError(GuardError):
    """A compound value breaks a structural rule, e.g. holds a None element."""

    _kind: ClassVar[ErrorKind] = "INVALID_ARGUMENT"


class OutOfRangeArgumentError(GuardError):
    """An orderable value or a computed slice lies outside its bounds."""

    _kind: ClassVar[ErrorKind] = "OUT_OF_RANGE_ARGUMENT"

    def __init__(
        self,
        param_name: str,
        message: str,
        *,
        actual_value: object = None,
        details: Mapping[str, object] | None = None,
    ) -> None:
        merged = dict(details or {})
        if actual_value is not None:
            merged.setdefault("actual_value", actual_value)
        super().__init__(param_name, message, details=merged)
        self._actual_value = actual_value

    @property
    def actual_value(self) -> object:
        return self._actual_value

    def __reduce__(self) -> tuple[object, ...]:
        return (
            _rebuild_out_of_range,
            (self._param_name, self._message, self._actual_value, dict(self._details)),
        )


def _rebuild_out_of_range(
    param_name: str,
    message: str,
    actual_value: object,
    details: dict[str, object],
) -> OutOfRangeArgumentError:
    return OutOfRangeArgumentError(
        param_name, message, actual_value=actual_value, details=details
    )


__all__ = [
    "EmptyArgumentError",
    "ErrorKind",
    "GuardError",
    "InvalidArgumentError",
    "NullArgumentError",
    "OutOfRangeArgumentError",
]
