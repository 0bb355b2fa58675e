# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Input selection for ttyrec recordings.

Opens a path, standard input or an existing binary file object and, when
the bytes are compressed, wraps them in the matching decompressor so the
decoder always sees plain ttyrec frames.
"""

from __future__ import annotations

import bz2
import contextlib
import gzip
import lzma
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO

from ttyrecplus.constants import STDIO_PATH
from ttyrecplus.errors import SourceError
from ttyrecplus.logging import get_logger

logger = get_logger(__name__)

_MAGIC = (
    (b"\x1f\x8b", "gzip"),
    (b"BZh", "bzip2"),
    (b"\xfd7zXZ\x00", "xz"),
)

_SUFFIXES = {
    ".gz": "gzip",
    ".bz2": "bzip2",
    ".xz": "xz",
    ".lzma": "xz",
}

_MAGIC_PEEK = max(len(magic) for magic, _ in _MAGIC)


def detect_compression(head: bytes, name: str | None = None) -> str | None:
    """Guess the compression from the file suffix, else from leading bytes."""
    if name:
        kind = _SUFFIXES.get(Path(name).suffix.lower())
        if kind is not None:
            return kind
    for magic, kind in _MAGIC:
        if head.startswith(magic):
            return kind
    return None


def _decompress(raw: BinaryIO, kind: str | None) -> BinaryIO:
    if kind == "gzip":
        return gzip.GzipFile(fileobj=raw, mode="rb")
    if kind == "bzip2":
        return bz2.BZ2File(raw, mode="rb")
    if kind == "xz":
        return lzma.LZMAFile(raw, mode="rb")
    return raw


def _peek(raw: BinaryIO) -> bytes:
    peek = getattr(raw, "peek", None)
    if peek is not None:
        return peek(_MAGIC_PEEK)[:_MAGIC_PEEK]
    if raw.seekable():
        position = raw.tell()
        head = raw.read(_MAGIC_PEEK)
        raw.seek(position)
        return head
    return b""


@contextlib.contextmanager
def open_ttyrec(source: str | Path | BinaryIO = STDIO_PATH) -> Iterator[BinaryIO]:
    """Open a recording for decoding.

    Args:
        source: A path, ``"-"`` for standard input, or a binary file object.
            File objects are used as they are and left open.

    Yields:
        A binary stream of uncompressed ttyrec bytes.

    Raises:
        SourceError: the path cannot be opened.
    """
    if not isinstance(source, (str, Path)):
        yield source
        return

    with contextlib.ExitStack() as stack:
        if str(source) == STDIO_PATH:
            raw: BinaryIO = sys.stdin.buffer
            name = None
        else:
            try:
                raw = stack.enter_context(open(source, "rb"))
            except OSError as exc:
                raise SourceError(f"Unable to open '{source}' for reading: {exc.strerror or exc}") from exc
            name = str(source)

        kind = detect_compression(_peek(raw), name)
        if kind is not None:
            logger.debug("ttyrec_source_decompress", source=str(source), compression=kind)
            stream = stack.enter_context(_decompress(raw, kind))
        else:
            stream = raw
        yield stream
