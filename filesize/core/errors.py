from __future__ import annotations


class FileSizeError(Exception):
    """Base class for input problems that end the program.

    ``exit_code`` is the process status the driver returns for the error.
    """

    exit_code = 1


class UsageError(FileSizeError):
    exit_code = 2

    def __init__(self, message: str, usage: str = "") -> None:
        super().__init__(message)
        self.usage = usage


class InvalidUnitError(FileSizeError):
    exit_code = 2

    def __init__(self, unit: str, supported: tuple[str, ...]) -> None:
        quoted = [f"'{token}'" for token in supported]
        if len(quoted) > 1:
            choices = ", ".join(quoted[:-1]) + f", or {quoted[-1]}"
        else:
            choices = "".join(quoted) or "none"
        super().__init__(f"Invalid unit: '{unit}'. Supported units: {choices}.")
        self.unit = unit


class InvalidMagnitudeError(FileSizeError):
    exit_code = 4

    def __init__(self, message: str, magnitude: str = "") -> None:
        super().__init__(message)
        self.magnitude = magnitude
