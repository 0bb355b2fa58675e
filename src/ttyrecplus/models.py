# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Type definitions for decoded frames and decoder state."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

# (data, timestamp, prev_timestamp) -> (data, timestamp)
FrameFilter = Callable[[bytes, float, float | None], tuple[bytes, float]]


@dataclass
class DecoderState:
    """Running state carried between frames.

    Pass one to ``FrameDecoder`` to resume a stream, or hand a finished
    decoder's ``state`` to the next decoder to chain recordings.
    """

    frame: int = 0
    prev_timestamp: float | None = None
    accum_diff: float = 0.0
    relative_time: float = 0.0


@dataclass(frozen=True)
class FrameRecord:
    """A single fully resolved frame."""

    data: bytes
    orig_timestamp: float
    diffed_timestamp: float
    timestamp: float
    prev_timestamp: float | None
    diff: float
    orig_header: bytes
    header: bytes
    frame: int
    relative_time: float

    @property
    def length(self) -> int:
        """Length of the (filtered) data block."""
        return len(self.data)
