from __future__ import annotations

import operator
import pickle

import pytest

from argcheck.errors import (
    EmptyArgumentError,
    GuardError,
    InvalidArgumentError,
    NullArgumentError,
    OutOfRangeArgumentError,
)


def test_kinds_are_pinned_per_class() -> None:
    assert NullArgumentError("a").kind == "NULL_ARGUMENT"
    assert EmptyArgumentError("a", "m").kind == "EMPTY_ARGUMENT"
    assert InvalidArgumentError("a", "m").kind == "INVALID_ARGUMENT"
    assert OutOfRangeArgumentError("a", "m").kind == "OUT_OF_RANGE_ARGUMENT"


def test_base_error_reports_invalid_argument() -> None:
    err = GuardError("a", "m")
    assert err.kind == "INVALID_ARGUMENT"
    assert err.to_dict()["kind"] == "INVALID_ARGUMENT"


def test_null_argument_default_message() -> None:
    err = NullArgumentError("payload")
    assert err.message == "Argument payload must not be None."
    assert str(err) == err.message


def test_fields_are_read_only() -> None:
    err = EmptyArgumentError("items", "Collection argument items is empty.")
    with pytest.raises(AttributeError):
        setattr(err, "param_name", "other")
    with pytest.raises(TypeError):
        operator.setitem(err.details, "extra", 1)


def test_details_are_copied_at_construction() -> None:
    source: dict[str, object] = {"index": 2}
    err = InvalidArgumentError("values", "bad", details=source)
    source["index"] = 99
    assert err.details["index"] == 2


def test_out_of_range_carries_actual_value() -> None:
    err = OutOfRangeArgumentError(
        "n", "Argument n must be in range [1, 2].", actual_value=7
    )
    assert err.actual_value == 7
    assert err.to_dict() == {
        "kind": "OUT_OF_RANGE_ARGUMENT",
        "param_name": "n",
        "message": "Argument n must be in range [1, 2].",
        "details": {"actual_value": 7},
    }


@pytest.mark.parametrize(
    "err",
    [
        NullArgumentError("a"),
        EmptyArgumentError("b", "Argument b is empty."),
        InvalidArgumentError("c", "bad", details={"index": 0}),
        OutOfRangeArgumentError("d", "out", actual_value=5, details={"length": 3}),
    ],
)
def test_errors_survive_pickling(err: GuardError) -> None:
    clone = pickle.loads(pickle.dumps(err))
    assert type(clone) is type(err)
    assert clone.to_dict() == err.to_dict()
