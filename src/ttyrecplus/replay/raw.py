# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Raw terminal stream extraction."""

from __future__ import annotations

from collections.abc import Iterable
from typing import BinaryIO

from ttyrecplus.models import FrameRecord


def extract_raw_stream(frames: Iterable[FrameRecord], out: BinaryIO) -> int:
    """Concatenate frame data blocks, dropping headers and timing.

    Returns:
        Number of bytes written
    """
    written = 0
    for record in frames:
        out.write(record.data)
        written += len(record.data)
    return written
