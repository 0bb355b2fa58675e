# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for writing frames back out."""

from __future__ import annotations

import gzip
import io
from pathlib import Path

from ttyrecplus.decoder import FrameDecoder
from ttyrecplus.filters import scale_time
from ttyrecplus.header import FrameHeader
from ttyrecplus.writer import write_frames, write_ttyrec


def test_unmodified_recording_is_reproduced(ttyrec_bytes, sample_frames) -> None:
    raw = ttyrec_bytes(sample_frames)
    out = io.BytesIO()

    count = write_frames(FrameDecoder(io.BytesIO(raw)), out)

    assert count == len(sample_frames)
    assert out.getvalue() == raw


def test_rewritten_recording_keeps_clamped_timing(ttyrec_stream, sample_frames) -> None:
    out = io.BytesIO()
    write_frames(FrameDecoder(ttyrec_stream(sample_frames), time_threshold=2), out)
    out.seek(0)

    records = list(FrameDecoder(out))

    assert [r.diff for r in records] == [0.0, 0.25, 0.25, 2.0]
    assert FrameHeader.unpack(records[-1].orig_header).seconds == 1_700_000_002


def test_write_ttyrec_compresses_by_suffix(tmp_path: Path, ttyrec_bytes, sample_frames) -> None:
    raw = ttyrec_bytes(sample_frames)
    path = tmp_path / "half.ttyrec.gz"

    count = write_ttyrec(path, FrameDecoder(io.BytesIO(raw), frame_filter=scale_time(0.5)))

    assert count == len(sample_frames)
    records = list(FrameDecoder(io.BytesIO(gzip.decompress(path.read_bytes()))))
    assert records[-1].relative_time == 15.25
