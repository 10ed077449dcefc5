from __future__ import annotations

import pytest

from filesize.core.errors import (
    FileSizeError,
    InvalidMagnitudeError,
    InvalidUnitError,
    UsageError,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (UsageError("filesize: error: bad"), 2),
        (InvalidUnitError("tb", ("bytes", "kb")), 2),
        (InvalidMagnitudeError("bad size"), 4),
    ],
)
def test_error_kinds_carry_exit_codes(error: FileSizeError, code: int) -> None:
    assert isinstance(error, FileSizeError)
    assert error.exit_code == code


def test_invalid_unit_message_lists_choices() -> None:
    error = InvalidUnitError("pb", ("bytes", "kb", "mb", "gb"))

    assert str(error) == "Invalid unit: 'pb'. Supported units: 'bytes', 'kb', 'mb', or 'gb'."


def test_usage_error_keeps_usage_text() -> None:
    error = UsageError("filesize: error: missing", "usage: filesize x\n")

    assert str(error) == "filesize: error: missing"
    assert error.usage == "usage: filesize x\n"


@pytest.mark.parametrize(
    ("supported", "choices"),
    [
        (("bytes",), "'bytes'"),
        ((), "none"),
    ],
)
def test_invalid_unit_message_with_short_choice_lists(
    supported: tuple[str, ...],
    choices: str,
) -> None:
    error = InvalidUnitError("pb", supported)

    assert str(error) == f"Invalid unit: 'pb'. Supported units: {choices}."
