from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .size_unit import SizeUnit


@dataclass(frozen=True)
class FormattedSizes:
    bytes: str
    kilobytes: str
    megabytes: str
    gigabytes: str

    def lines(self) -> Iterator[str]:
        for unit in SizeUnit:
            yield f"   {unit.label}: {getattr(self, unit.label)}"


class SizeFormatter:
    def format(self, byte_count: int) -> FormattedSizes:
        return FormattedSizes(
            bytes=f"{byte_count} {SizeUnit.BYTES.suffix}",
            kilobytes=self._scaled(byte_count, SizeUnit.KILOBYTES),
            megabytes=self._scaled(byte_count, SizeUnit.MEGABYTES),
            gigabytes=self._scaled(byte_count, SizeUnit.GIGABYTES),
        )

    def _scaled(self, byte_count: int, unit: SizeUnit) -> str:
        return f"{byte_count / unit.factor:.2f} {unit.suffix}"
