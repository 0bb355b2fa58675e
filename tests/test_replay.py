# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for raw extraction and timed playback."""

from __future__ import annotations

import io

import pytest

from ttyrecplus.decoder import FrameDecoder
from ttyrecplus.errors import InvalidConfig
from ttyrecplus.replay.raw import extract_raw_stream
from ttyrecplus.replay.viewer import play_frames, playback_delay


def test_extract_raw_stream(ttyrec_stream, sample_frames) -> None:
    out = io.BytesIO()

    written = extract_raw_stream(FrameDecoder(ttyrec_stream(sample_frames)), out)

    expected = b"".join(data for _, data in sample_frames)
    assert out.getvalue() == expected
    assert written == len(expected)


def test_playback_sleeps_between_frames(ttyrec_stream, sample_frames) -> None:
    out = io.BytesIO()
    delays: list[float] = []

    played = play_frames(
        FrameDecoder(ttyrec_stream(sample_frames)),
        out,
        speed=2.0,
        max_delay=5.0,
        sleep=delays.append,
    )

    assert played == 4
    assert delays == pytest.approx([0.125, 0.125, 5.0])
    assert out.getvalue() == b"".join(data for _, data in sample_frames)


@pytest.mark.parametrize(
    ("diff", "speed", "max_delay", "expected"),
    [
        (1.0, 1.0, None, 1.0),
        (1.0, 4.0, None, 0.25),
        (10.0, 1.0, 3.0, 3.0),
        (-2.0, 1.0, None, 0.0),
        (1.0, 0.0, None, 100.0),
    ],
)
def test_playback_delay(diff: float, speed: float, max_delay: float | None, expected: float) -> None:
    assert playback_delay(diff, speed=speed, max_delay=max_delay) == expected


@pytest.mark.parametrize("speed", [0.0, -1.0])
def test_playback_rejects_bad_speed(speed: float) -> None:
    with pytest.raises(InvalidConfig):
        play_frames([], io.BytesIO(), speed=speed)
