from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, TypeVar

ComparableT = TypeVar("ComparableT", bound="Comparable")


class Comparable(Protocol):
    """Anything ordered by ``<=``; enough for inclusive bound checks."""

    def __le__(self: ComparableT, other: ComparableT, /) -> bool: ...


class LoggerProtocol(Protocol):
    """Minimal logger surface used by the HTTP handler."""

    def warning(
        self,
        msg: str,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None: ...
