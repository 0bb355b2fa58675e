# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Read, adjust and re-encode ttyrec terminal recordings."""

from __future__ import annotations

from ttyrecplus.decoder import FrameDecoder, iter_frames_chained
from ttyrecplus.errors import (
    HeaderReconstructionError,
    InvalidConfig,
    MalformedInput,
    SourceError,
    TtyrecError,
)
from ttyrecplus.filters import compose_filters, identity_filter, replace_data, scale_time, shift_time
from ttyrecplus.header import FrameHeader, encode_header
from ttyrecplus.models import DecoderState, FrameFilter, FrameRecord
from ttyrecplus.source import open_ttyrec
from ttyrecplus.writer import write_frames, write_ttyrec

__all__ = [
    "DecoderState",
    "FrameDecoder",
    "FrameFilter",
    "FrameHeader",
    "FrameRecord",
    "HeaderReconstructionError",
    "InvalidConfig",
    "MalformedInput",
    "SourceError",
    "TtyrecError",
    "compose_filters",
    "encode_header",
    "identity_filter",
    "iter_frames_chained",
    "open_ttyrec",
    "replace_data",
    "scale_time",
    "shift_time",
    "write_frames",
    "write_ttyrec",
]
