# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared constants for ttyrecplus."""

from __future__ import annotations

# Wire layout of a frame header: seconds, microseconds, data length
HEADER_FORMAT = "<III"
HEADER_SIZE = 12
U32_MAX = 2**32 - 1
MICROSECONDS = 1_000_000

# "-" selects standard input / standard output
STDIO_PATH = "-"

# Playback defaults
DEFAULT_PLAYBACK_SPEED = 1.0
MIN_PLAYBACK_SPEED = 0.01
