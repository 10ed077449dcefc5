from __future__ import annotations

from enum import Enum


class SizeUnit(Enum):
    BYTES = ("bytes", "bytes", "bytes", 1)
    KILOBYTES = ("kb", "kilobytes", "kb", 1_000)
    MEGABYTES = ("mb", "megabytes", "mb", 1_000_000)
    GIGABYTES = ("gb", "gigabytes", "gb", 1_000_000_000)

    def __init__(self, token: str, label: str, suffix: str, factor: int) -> None:
        self.token = token
        self.label = label
        self.suffix = suffix
        self.factor = factor

    @classmethod
    def tokens(cls) -> tuple[str, ...]:
        return tuple(unit.token for unit in cls)

    @classmethod
    def from_token(cls, token: str) -> SizeUnit | None:
        wanted = token.lower()
        for unit in cls:
            if unit.token == wanted:
                return unit
        return None
