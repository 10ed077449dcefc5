from __future__ import annotations

from .raw_size import RawSize

# Largest count a 64-bit unsigned integer holds.
MAX_BYTE_COUNT = 2**64 - 1


class ByteNormalizer:
    def normalize(self, raw_size: RawSize) -> int:
        scaled = raw_size.magnitude * raw_size.unit.factor
        if scaled >= MAX_BYTE_COUNT:
            return MAX_BYTE_COUNT
        # Fractional bytes are truncated, never rounded.
        return int(scaled)
