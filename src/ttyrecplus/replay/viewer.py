# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Timed playback of decoded frames."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from typing import BinaryIO

from ttyrecplus.constants import DEFAULT_PLAYBACK_SPEED, MIN_PLAYBACK_SPEED
from ttyrecplus.errors import InvalidConfig
from ttyrecplus.models import FrameRecord


def playback_delay(diff: float, *, speed: float = DEFAULT_PLAYBACK_SPEED, max_delay: float | None = None) -> float:
    """Seconds to wait before showing a frame that arrived ``diff`` after the last one."""
    delay = max(diff, 0.0) / max(speed, MIN_PLAYBACK_SPEED)
    if max_delay is not None:
        delay = min(delay, max_delay)
    return delay


def play_frames(
    frames: Iterable[FrameRecord],
    out: BinaryIO,
    *,
    speed: float = DEFAULT_PLAYBACK_SPEED,
    max_delay: float | None = None,
    sleep: Callable[[float], object] | None = None,
) -> int:
    """Write frames to ``out`` at their recorded pace.

    Frame data goes out untouched; the terminal on the other end does the
    rendering.

    Returns:
        Number of frames played
    """
    if speed <= 0:
        raise InvalidConfig(f"Playback speed must be positive, got {speed}")
    if max_delay is not None and max_delay < 0:
        raise InvalidConfig(f"Maximum delay must be non-negative, got {max_delay}")

    sleep = sleep or time.sleep
    played = 0
    for record in frames:
        delay = playback_delay(record.diff, speed=speed, max_delay=max_delay)
        if delay > 0:
            sleep(delay)
        out.write(record.data)
        out.flush()
        played += 1
    return played
