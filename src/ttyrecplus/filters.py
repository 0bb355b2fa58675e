# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Stock frame filters.

A frame filter receives the data block, the working timestamp and the
previous frame's final timestamp (None on the first frame), and returns
the possibly rewritten ``(data, timestamp)`` pair. Timestamp changes are
folded into the decoder's drift, so later frames move with them.
"""

from __future__ import annotations

from ttyrecplus.errors import InvalidConfig
from ttyrecplus.models import FrameFilter


def identity_filter(data: bytes, timestamp: float, prev_timestamp: float | None) -> tuple[bytes, float]:
    """Return the frame unchanged."""
    return data, timestamp


def scale_time(factor: float) -> FrameFilter:
    """Stretch or shrink every inter-frame gap by ``factor``.

    ``scale_time(0.5)`` halves the gaps, ``scale_time(2)`` doubles them.
    """
    if factor < 0:
        raise InvalidConfig(f"Time scale factor must be non-negative, got {factor}")

    def _scale(data: bytes, timestamp: float, prev_timestamp: float | None) -> tuple[bytes, float]:
        if prev_timestamp is None:
            return data, timestamp
        return data, prev_timestamp + (timestamp - prev_timestamp) * factor

    return _scale


def shift_time(offset: float) -> FrameFilter:
    """Move the whole recording by ``offset`` seconds.

    Only the first frame the filter sees is moved; the decoder carries the
    offset forward as drift. That holds for resumed decoders and chained
    streams too, so build a fresh filter for each independent session.
    """
    pending = True

    def _shift(data: bytes, timestamp: float, prev_timestamp: float | None) -> tuple[bytes, float]:
        nonlocal pending
        if pending:
            pending = False
            return data, timestamp + offset
        return data, timestamp

    return _shift


def replace_data(old: bytes, new: bytes) -> FrameFilter:
    """Substitute ``old`` with ``new`` inside each data block.

    Matches split across two frames are not found.
    """
    if not old:
        raise InvalidConfig("Replacement pattern must not be empty")

    def _replace(data: bytes, timestamp: float, prev_timestamp: float | None) -> tuple[bytes, float]:
        return data.replace(old, new), timestamp

    return _replace


def compose_filters(*filters: FrameFilter) -> FrameFilter:
    """Chain filters left to right; each sees the previous one's output."""
    if not filters:
        return identity_filter
    if len(filters) == 1:
        return filters[0]

    def _composed(data: bytes, timestamp: float, prev_timestamp: float | None) -> tuple[bytes, float]:
        for frame_filter in filters:
            data, timestamp = frame_filter(data, timestamp, prev_timestamp)
        return data, timestamp

    return _composed
