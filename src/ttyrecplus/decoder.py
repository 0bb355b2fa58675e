# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Frame-by-frame ttyrec decoder.

``FrameDecoder`` reads one frame per ``next_frame`` call and keeps the
bookkeeping that makes timestamps consistent across frames: gaps longer
than ``time_threshold`` are clamped, timestamp edits made by the frame
filter are remembered, and both corrections are carried forward as
accumulated drift so later frames shift along with them.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import BinaryIO

from ttyrecplus.constants import HEADER_SIZE
from ttyrecplus.errors import HeaderReconstructionError, InvalidConfig, MalformedInput
from ttyrecplus.filters import identity_filter
from ttyrecplus.header import FrameHeader
from ttyrecplus.logging import get_logger
from ttyrecplus.models import DecoderState, FrameFilter, FrameRecord

logger = get_logger(__name__)


class FrameDecoder:
    """Decode frames from a binary ttyrec stream."""

    def __init__(
        self,
        stream: BinaryIO,
        *,
        time_threshold: float | None = None,
        frame_filter: FrameFilter | None = None,
        state: DecoderState | None = None,
    ) -> None:
        if time_threshold is not None and time_threshold < 0:
            raise InvalidConfig("Cannot have a negative time threshold")

        self._stream = stream
        self._time_threshold = time_threshold
        self._frame_filter = frame_filter or identity_filter
        self._state = replace(state) if state is not None else DecoderState()

    def __iter__(self) -> Iterator[FrameRecord]:
        while (record := self.next_frame()) is not None:
            yield record

    @property
    def stream(self) -> BinaryIO:
        return self._stream

    @property
    def time_threshold(self) -> float | None:
        return self._time_threshold

    @property
    def frame_filter(self) -> FrameFilter:
        return self._frame_filter

    @property
    def frame(self) -> int:
        """Number of the most recently returned frame."""
        return self._state.frame

    @property
    def prev_timestamp(self) -> float | None:
        """Final timestamp of the most recently returned frame."""
        return self._state.prev_timestamp

    @property
    def accum_diff(self) -> float:
        """Drift added to upcoming frames before clamping and filtering."""
        return self._state.accum_diff

    @property
    def relative_time(self) -> float:
        """Time elapsed since the first frame."""
        return self._state.relative_time

    @property
    def state(self) -> DecoderState:
        """Snapshot of the decoder state, suitable for seeding another decoder."""
        return replace(self._state)

    def _read_exact(self, size: int) -> bytes:
        chunks: list[bytes] = []
        remaining = size
        while remaining > 0:
            chunk = self._stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def next_frame(self) -> FrameRecord | None:
        """Read and resolve the next frame.

        Returns:
            The frame record, or None on a clean end of stream.

        Raises:
            MalformedInput: the header or data block is truncated.
            HeaderReconstructionError: the final timestamp or data length
                cannot be written back into a header.
        """
        state = self._state
        frame = state.frame + 1

        raw_header = self._read_exact(HEADER_SIZE)
        if not raw_header:
            logger.debug("ttyrec_eof", frames=state.frame)
            return None
        if len(raw_header) != HEADER_SIZE:
            logger.warning("ttyrec_malformed_input", frame=frame, part="header", got=len(raw_header))
            raise MalformedInput(f"expected {HEADER_SIZE}-byte header, got {len(raw_header)}")

        header = FrameHeader.unpack(raw_header)
        accum_diff = state.accum_diff

        orig_timestamp = header.timestamp
        diffed_timestamp = orig_timestamp + accum_diff
        timestamp = diffed_timestamp

        prev_timestamp = state.prev_timestamp
        threshold = self._time_threshold
        if threshold is not None and prev_timestamp is not None and timestamp - prev_timestamp > threshold:
            clamped = prev_timestamp + threshold
            accum_diff += clamped - timestamp
            logger.debug("ttyrec_gap_clamped", frame=frame, gap=timestamp - prev_timestamp, threshold=threshold)
            timestamp = clamped

        data = self._read_exact(header.length)
        if len(data) != header.length:
            logger.warning("ttyrec_malformed_input", frame=frame, part="data", want=header.length, got=len(data))
            raise MalformedInput(f"expected {header.length}-byte frame, got {len(data)}")

        unfiltered_timestamp = timestamp
        data, timestamp = self._frame_filter(data, timestamp, prev_timestamp)
        if timestamp != unfiltered_timestamp:
            logger.debug("ttyrec_filter_shifted_time", frame=frame, shift=timestamp - unfiltered_timestamp)
        accum_diff += timestamp - unfiltered_timestamp

        diff = timestamp - prev_timestamp if prev_timestamp is not None else 0.0
        relative_time = state.relative_time
        if frame != 1:
            relative_time += diff

        try:
            new_header = FrameHeader.from_timestamp(timestamp, len(data)).pack()
        except HeaderReconstructionError as exc:
            logger.warning("ttyrec_header_overflow", frame=frame, field=exc.field, wanted=exc.wanted)
            raise

        state.frame = frame
        state.prev_timestamp = timestamp
        state.accum_diff = accum_diff
        state.relative_time = relative_time

        return FrameRecord(
            data=data,
            orig_timestamp=orig_timestamp,
            diffed_timestamp=diffed_timestamp,
            timestamp=timestamp,
            prev_timestamp=prev_timestamp,
            diff=diff,
            orig_header=raw_header,
            header=new_header,
            frame=frame,
            relative_time=relative_time,
        )


def iter_frames_chained(
    streams: Iterable[BinaryIO],
    *,
    time_threshold: float | None = None,
    frame_filter: FrameFilter | None = None,
    state: DecoderState | None = None,
) -> Iterator[FrameRecord]:
    """Decode several recordings back to back as one continuous session.

    Each decoder starts from the previous one's final state, so frame
    numbers, drift and relative time carry over between streams.
    """
    for stream in streams:
        decoder = FrameDecoder(stream, time_threshold=time_threshold, frame_filter=frame_filter, state=state)
        yield from decoder
        state = decoder.state
