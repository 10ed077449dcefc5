from __future__ import annotations

from typing import Protocol

from .formatter import FormattedSizes
from .raw_size import RawSize


class SizeParserProtocol(Protocol):
    def parse(self, magnitude_text: str, unit_text: str) -> RawSize:
        ...


class NormalizerProtocol(Protocol):
    def normalize(self, raw_size: RawSize) -> int:
        ...


class FormatterProtocol(Protocol):
    def format(self, byte_count: int) -> FormattedSizes:
        ...
