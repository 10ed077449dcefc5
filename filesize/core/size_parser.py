from __future__ import annotations

import math
import re

from .errors import InvalidMagnitudeError, InvalidUnitError
from .raw_size import RawSize
from .size_unit import SizeUnit


class SizeParser:
    # ASCII decimal or exponent notation, or the inf/infinity/nan words.
    _pattern = re.compile(
        r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf|infinity|nan)",
        re.IGNORECASE | re.ASCII,
    )

    @classmethod
    def parse(cls, magnitude_text: str, unit_text: str) -> RawSize:
        magnitude = cls.parse_magnitude(magnitude_text)
        unit = cls.parse_unit(unit_text)
        return RawSize(magnitude, unit)

    @classmethod
    def parse_magnitude(cls, value: str) -> float:
        if not cls._pattern.fullmatch(value):
            raise InvalidMagnitudeError(
                f"Invalid file size: could not convert string to float: {value!r}. "
                "Size cannot be a non-numeric value.",
                value,
            )
        magnitude = float(value)
        if math.isnan(magnitude):
            raise InvalidMagnitudeError(
                f"Invalid file size: {value}. Size must be a number.",
                value,
            )
        if magnitude < 0:
            raise InvalidMagnitudeError(
                "Invalid file size. Size cannot be a negative number.",
                value,
            )
        return magnitude

    @classmethod
    def parse_unit(cls, value: str) -> SizeUnit:
        unit = SizeUnit.from_token(value)
        if unit is None:
            raise InvalidUnitError(value, SizeUnit.tokens())
        return unit
