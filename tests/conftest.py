# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

import io
import struct
from collections.abc import Callable, Iterator, Sequence

import pytest
import structlog

Frame = tuple[float, bytes]


def _frame_bytes(timestamp: float, data: bytes) -> bytes:
    seconds = int(timestamp)
    microseconds = round((timestamp - seconds) * 1_000_000)
    return struct.pack("<III", seconds, microseconds, len(data)) + data


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop any structlog configuration a test (or CLI run) installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def ttyrec_bytes() -> Callable[[Sequence[Frame]], bytes]:
    """Build raw ttyrec bytes from (timestamp, data) pairs."""

    def _build(frames: Sequence[Frame]) -> bytes:
        return b"".join(_frame_bytes(ts, data) for ts, data in frames)

    return _build


@pytest.fixture
def ttyrec_stream(ttyrec_bytes: Callable[[Sequence[Frame]], bytes]) -> Callable[[Sequence[Frame]], io.BytesIO]:
    """Build an in-memory ttyrec stream from (timestamp, data) pairs."""

    def _build(frames: Sequence[Frame]) -> io.BytesIO:
        return io.BytesIO(ttyrec_bytes(frames))

    return _build


@pytest.fixture
def sample_frames() -> list[Frame]:
    """A short session: prompt, command, output after a long pause."""
    return [
        (1_700_000_000.0, b"$ "),
        (1_700_000_000.25, b"ls\r\n"),
        (1_700_000_000.5, b"README  src  tests\r\n"),
        (1_700_000_030.5, b"$ "),
    ]


class TrickleReader(io.RawIOBase):
    """Binary stream that returns at most ``chunk`` bytes per read, like a pipe."""

    def __init__(self, payload: bytes, chunk: int = 5) -> None:
        self._buffer = io.BytesIO(payload)
        self._chunk = chunk

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        if size < 0 or size > self._chunk:
            size = self._chunk
        return self._buffer.read(size)


@pytest.fixture
def trickle_reader() -> type[TrickleReader]:
    return TrickleReader
