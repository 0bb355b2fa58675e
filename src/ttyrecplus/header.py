# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Frame header codec.

Every ttyrec frame starts with a 12-byte header made of three unsigned
32-bit little-endian integers: seconds, microseconds and the length of
the data block that follows.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

from ttyrecplus.constants import HEADER_FORMAT, HEADER_SIZE, MICROSECONDS, U32_MAX
from ttyrecplus.errors import HeaderReconstructionError, MalformedInput

_HEADER = struct.Struct(HEADER_FORMAT)


def _check_u32(field: str, value: int) -> int:
    if not 0 <= value <= U32_MAX:
        raise HeaderReconstructionError(field, value, value & U32_MAX)
    return value


@dataclass(frozen=True)
class FrameHeader:
    """Decoded frame header."""

    seconds: int
    microseconds: int
    length: int

    @property
    def timestamp(self) -> float:
        """Header time as float seconds."""
        return self.seconds + self.microseconds / MICROSECONDS

    @classmethod
    def unpack(cls, raw: bytes) -> FrameHeader:
        """Decode a 12-byte header."""
        if len(raw) != HEADER_SIZE:
            raise MalformedInput(f"expected {HEADER_SIZE}-byte header, got {len(raw)}")
        seconds, microseconds, length = _HEADER.unpack(raw)
        return cls(seconds, microseconds, length)

    @classmethod
    def from_timestamp(cls, timestamp: float, length: int) -> FrameHeader:
        """Build a header for ``timestamp`` and a data block of ``length`` bytes.

        Microseconds are rounded; a fraction that rounds up to a full second
        is carried into the seconds field.

        Raises:
            HeaderReconstructionError: a field falls outside ``[0, 2**32 - 1]``,
                e.g. for a negative timestamp or one that is not finite.
        """
        if not math.isfinite(timestamp):
            raise HeaderReconstructionError("seconds", timestamp, 0)
        seconds = math.floor(timestamp)
        microseconds = round((timestamp - seconds) * MICROSECONDS)
        if microseconds >= MICROSECONDS:
            seconds += 1
            microseconds -= MICROSECONDS
        header = cls(seconds, microseconds, length)
        header.validate()
        return header

    def validate(self) -> None:
        """Raise HeaderReconstructionError unless every field fits in 32 bits."""
        _check_u32("seconds", self.seconds)
        _check_u32("microseconds", self.microseconds)
        _check_u32("length", self.length)

    def pack(self) -> bytes:
        """Encode to the 12-byte wire form."""
        self.validate()
        return _HEADER.pack(self.seconds, self.microseconds, self.length)


def encode_header(timestamp: float, length: int) -> bytes:
    """Shortcut for ``FrameHeader.from_timestamp(timestamp, length).pack()``."""
    return FrameHeader.from_timestamp(timestamp, length).pack()
