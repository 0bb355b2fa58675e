# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Recording summaries."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from ttyrecplus.decoder import FrameDecoder


@dataclass
class RecordingSummary:
    """Aggregate numbers for one decoded recording."""

    frames: int = 0
    total_bytes: int = 0
    first_timestamp: float | None = None
    last_timestamp: float | None = None
    duration: float = 0.0
    longest_gap: float = 0.0
    clamped_gaps: int = 0

    @property
    def original_duration(self) -> float:
        """Wall-clock span of the recording before any clamping or filtering."""
        if self.first_timestamp is None or self.last_timestamp is None:
            return 0.0
        return self.last_timestamp - self.first_timestamp

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["original_duration"] = self.original_duration
        return data


def summarize(decoder: FrameDecoder) -> RecordingSummary:
    """Consume ``decoder`` and collect its summary.

    A gap counts as clamped when the drift-adjusted timestamp was further
    from the previous frame than the decoder's threshold allows.
    """
    summary = RecordingSummary()
    threshold = decoder.time_threshold
    start_relative = decoder.relative_time

    for record in decoder:
        if summary.first_timestamp is None:
            summary.first_timestamp = record.orig_timestamp
        summary.last_timestamp = record.orig_timestamp
        summary.frames += 1
        summary.total_bytes += len(record.data)
        summary.longest_gap = max(summary.longest_gap, record.diff)
        if (
            threshold is not None
            and record.prev_timestamp is not None
            and record.diffed_timestamp - record.prev_timestamp > threshold
        ):
            summary.clamped_gaps += 1

    summary.duration = decoder.relative_time - start_relative
    return summary
