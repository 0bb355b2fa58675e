# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Write decoded frames back out as a ttyrec."""

from __future__ import annotations

import bz2
import contextlib
import gzip
import lzma
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import BinaryIO

from ttyrecplus.constants import STDIO_PATH
from ttyrecplus.errors import SourceError
from ttyrecplus.models import FrameRecord


def write_frames(frames: Iterable[FrameRecord], out: BinaryIO) -> int:
    """Write each frame's re-encoded header and data block.

    Returns:
        Number of frames written
    """
    count = 0
    for record in frames:
        out.write(record.header)
        out.write(record.data)
        count += 1
    return count


@contextlib.contextmanager
def open_output(target: str | Path) -> Iterator[BinaryIO]:
    """Open a destination for writing; ``"-"`` is standard output.

    ``.gz``, ``.bz2`` and ``.xz`` paths are compressed on the fly.
    """
    if str(target) == STDIO_PATH:
        yield sys.stdout.buffer
        sys.stdout.buffer.flush()
        return

    suffix = Path(target).suffix.lower()
    try:
        if suffix == ".gz":
            handle = gzip.open(target, "wb")
        elif suffix == ".bz2":
            handle = bz2.open(target, "wb")
        elif suffix in (".xz", ".lzma"):
            handle = lzma.open(target, "wb")
        else:
            handle = open(target, "wb")
    except OSError as exc:
        raise SourceError(f"Unable to open '{target}' for writing: {exc.strerror or exc}") from exc

    with handle:
        yield handle


def write_ttyrec(target: str | Path, frames: Iterable[FrameRecord]) -> int:
    """Write ``frames`` to ``target`` and return how many were written."""
    with open_output(target) as out:
        return write_frames(frames, out)
