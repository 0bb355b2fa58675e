# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy for ttyrec decoding."""

from __future__ import annotations

_FIELD_LABELS = {
    "seconds": "seconds portion of timestamp",
    "microseconds": "microseconds portion of timestamp",
    "length": "frame length",
}


class TtyrecError(Exception):
    """Base exception for ttyrec operations."""

    pass


class InvalidConfig(TtyrecError):
    """Decoder, filter or playback configured with an unusable value."""

    pass


class MalformedInput(TtyrecError):
    """Header or data block shorter than its fixed or declared length."""

    pass


class SourceError(TtyrecError):
    """Input recording could not be opened."""

    pass


class HeaderReconstructionError(TtyrecError):
    """A frame header cannot be re-encoded into 32-bit unsigned fields.

    ``written`` is what the field would actually hold once truncated to
    32 bits, so callers can show how far off the wanted value is.
    """

    def __init__(self, field: str, wanted: int | float, written: int) -> None:
        self.field = field
        self.wanted = wanted
        self.written = written
        label = _FIELD_LABELS.get(field, field)
        super().__init__(f"Unable to create a new header, {label}: want to write {wanted}, can only write {written}")
