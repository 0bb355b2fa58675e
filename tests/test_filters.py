# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for stock frame filters."""

from __future__ import annotations

import pytest

from ttyrecplus.decoder import FrameDecoder
from ttyrecplus.errors import InvalidConfig
from ttyrecplus.filters import compose_filters, identity_filter, replace_data, scale_time, shift_time
from ttyrecplus.models import DecoderState


def test_identity_filter_returns_inputs() -> None:
    assert identity_filter(b"abc", 1.5, None) == (b"abc", 1.5)


def test_scale_time_leaves_first_frame() -> None:
    assert scale_time(0.5)(b"x", 10.0, None) == (b"x", 10.0)


def test_scale_time_halves_gap() -> None:
    assert scale_time(0.5)(b"x", 14.0, 10.0) == (b"x", 12.0)


def test_scale_time_rejects_negative_factor() -> None:
    with pytest.raises(InvalidConfig):
        scale_time(-1)


def test_shift_time_moves_whole_recording(ttyrec_stream) -> None:
    decoder = FrameDecoder(ttyrec_stream([(100.0, b"a"), (101.0, b"b"), (103.0, b"c")]), frame_filter=shift_time(-50))

    records = list(decoder)

    assert [r.timestamp for r in records] == pytest.approx([50.0, 51.0, 53.0])
    assert [r.diff for r in records] == pytest.approx([0.0, 1.0, 2.0])
    assert decoder.accum_diff == pytest.approx(-50.0)


def test_replace_data_substitutes_bytes() -> None:
    rename = replace_data(b"Eidolos", b"Stumbly")

    assert rename(b"Hello Eidolos, Eidolos!", 1.0, None) == (b"Hello Stumbly, Stumbly!", 1.0)


def test_replace_data_rejects_empty_pattern() -> None:
    with pytest.raises(InvalidConfig):
        replace_data(b"", b"x")


def test_compose_filters_applies_left_to_right() -> None:
    combined = compose_filters(replace_data(b"a", b"bb"), replace_data(b"b", b"c"), scale_time(2))

    assert combined(b"ab", 3.0, 2.0) == (b"ccc", 4.0)


def test_compose_filters_edge_cases() -> None:
    only = scale_time(2)

    assert compose_filters() is identity_filter
    assert compose_filters(only) is only


def test_shift_time_moves_resumed_decoder(ttyrec_stream) -> None:
    state = DecoderState(frame=3, prev_timestamp=99.0)
    decoder = FrameDecoder(ttyrec_stream([(100.0, b"a"), (101.0, b"b")]), frame_filter=shift_time(10), state=state)

    records = list(decoder)

    assert [r.timestamp for r in records] == pytest.approx([110.0, 111.0])
    assert decoder.accum_diff == pytest.approx(10.0)
