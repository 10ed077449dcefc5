from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidMagnitudeError
from .size_unit import SizeUnit


@dataclass(frozen=True)
class RawSize:
    magnitude: float
    unit: SizeUnit

    def __post_init__(self) -> None:
        if math.isnan(self.magnitude):
            raise InvalidMagnitudeError(
                f"Invalid file size: {self.magnitude}. Size must be a number.",
                str(self.magnitude),
            )
        if self.magnitude < 0:
            raise InvalidMagnitudeError(
                "Invalid file size. Size cannot be a negative number.",
                str(self.magnitude),
            )
