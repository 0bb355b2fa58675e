# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import contextlib
import json
import lzma
import sys
from collections.abc import Iterator

import click
from rich.console import Console
from rich.table import Table

from ttyrecplus.decoder import FrameDecoder, iter_frames_chained
from ttyrecplus.errors import TtyrecError
from ttyrecplus.filters import compose_filters, scale_time, shift_time
from ttyrecplus.logging import configure_logging
from ttyrecplus.models import FrameFilter
from ttyrecplus.replay.raw import extract_raw_stream
from ttyrecplus.replay.viewer import play_frames
from ttyrecplus.settings import Settings
from ttyrecplus.source import open_ttyrec
from ttyrecplus.stats import summarize
from ttyrecplus.writer import open_output, write_frames, write_ttyrec

console = Console()

threshold_option = click.option(
    "--threshold",
    "-t",
    type=click.FloatRange(min=0),
    default=None,
    help="Maximum gap between frames in seconds (default: TTYRECPLUS_TIME_THRESHOLD or none).",
)


@contextlib.contextmanager
def _reported_errors() -> Iterator[None]:
    try:
        yield
    except TtyrecError as exc:
        raise click.ClickException(str(exc)) from exc
    except (OSError, EOFError, lzma.LZMAError) as exc:
        raise click.ClickException(f"Unable to read input: {str(exc) or type(exc).__name__}") from exc


def _settings(ctx: click.Context) -> Settings:
    return ctx.ensure_object(dict)["settings"]


def _threshold(ctx: click.Context, threshold: float | None) -> float | None:
    return threshold if threshold is not None else _settings(ctx).time_threshold


def _format_ts(value: float | None) -> str:
    return "-" if value is None else f"{value:.6f}"


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--log-level", type=str, default=None, help="Override TTYRECPLUS_LOG_LEVEL.")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """ttyrecplus command line interface."""
    settings = Settings()
    configure_logging(settings, level=log_level)
    ctx.ensure_object(dict)["settings"] = settings


@cli.command("info")
@click.argument("source", type=click.Path(path_type=str), default="-")
@threshold_option
@click.option("--json", "as_json", is_flag=True, help="Output JSON.")
@click.pass_context
def info(ctx: click.Context, source: str, threshold: float | None, as_json: bool) -> None:
    """Summarize a recording."""
    with _reported_errors(), open_ttyrec(source) as stream:
        summary = summarize(FrameDecoder(stream, time_threshold=_threshold(ctx, threshold)))

    if as_json:
        click.echo(json.dumps(summary.as_dict(), indent=2))
        return

    click.echo(f"frames:            {summary.frames}")
    click.echo(f"bytes:             {summary.total_bytes}")
    click.echo(f"start:             {_format_ts(summary.first_timestamp)}")
    click.echo(f"end:               {_format_ts(summary.last_timestamp)}")
    click.echo(f"original duration: {summary.original_duration:.3f}s")
    click.echo(f"duration:          {summary.duration:.3f}s")
    click.echo(f"longest gap:       {summary.longest_gap:.3f}s")
    click.echo(f"clamped gaps:      {summary.clamped_gaps}")


@cli.command("frames")
@click.argument("source", type=click.Path(path_type=str), default="-")
@threshold_option
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Show at most this many frames.")
@click.pass_context
def frames(ctx: click.Context, source: str, threshold: float | None, limit: int | None) -> None:
    """List frames with their original and adjusted timing."""
    table = Table(title=source)
    table.add_column("Frame", justify="right")
    table.add_column("Original", justify="right")
    table.add_column("Timestamp", justify="right")
    table.add_column("Diff", justify="right")
    table.add_column("Relative", justify="right")
    table.add_column("Bytes", justify="right")

    with _reported_errors(), open_ttyrec(source) as stream:
        for record in FrameDecoder(stream, time_threshold=_threshold(ctx, threshold)):
            table.add_row(
                str(record.frame),
                _format_ts(record.orig_timestamp),
                _format_ts(record.timestamp),
                f"{record.diff:.6f}",
                f"{record.relative_time:.6f}",
                str(len(record.data)),
            )
            if limit is not None and record.frame >= limit:
                break

    console.print(table)


@cli.command("rewrite")
@click.argument("source", type=click.Path(path_type=str))
@click.argument("out", type=click.Path(path_type=str))
@threshold_option
@click.option("--speed", type=click.FloatRange(min=0, min_open=True), default=None, help="Divide every gap by this.")
@click.option("--shift", type=float, default=None, help="Move every timestamp by this many seconds.")
@click.pass_context
def rewrite(
    ctx: click.Context,
    source: str,
    out: str,
    threshold: float | None,
    speed: float | None,
    shift: float | None,
) -> None:
    """Re-encode a recording with clamped, scaled or shifted timing."""
    filters: list[FrameFilter] = []
    if shift is not None:
        filters.append(shift_time(shift))
    if speed is not None:
        filters.append(scale_time(1 / speed))

    with _reported_errors(), open_ttyrec(source) as stream:
        decoder = FrameDecoder(
            stream,
            time_threshold=_threshold(ctx, threshold),
            frame_filter=compose_filters(*filters),
        )
        count = write_ttyrec(out, decoder)

    click.echo(f"Wrote {count} frames to {out}", err=True)


@cli.command("cat")
@click.argument("sources", nargs=-1, required=True, type=click.Path(path_type=str))
@click.option("--output", "-o", type=click.Path(path_type=str), default="-", show_default=True)
@threshold_option
@click.pass_context
def cat(ctx: click.Context, sources: tuple[str, ...], output: str, threshold: float | None) -> None:
    """Join recordings into one, keeping timing continuous."""
    with _reported_errors(), contextlib.ExitStack() as stack:
        streams = (stack.enter_context(open_ttyrec(source)) for source in sources)
        out = stack.enter_context(open_output(output))
        write_frames(iter_frames_chained(streams, time_threshold=_threshold(ctx, threshold)), out)


@cli.command("raw")
@click.argument("source", type=click.Path(path_type=str))
@click.argument("out", type=click.Path(path_type=str), default="-")
def raw(source: str, out: str) -> None:
    """Extract the raw terminal stream without timing."""
    with _reported_errors(), open_ttyrec(source) as stream, open_output(out) as target:
        extract_raw_stream(FrameDecoder(stream), target)


@cli.command("play")
@click.argument("source", type=click.Path(path_type=str), default="-")
@threshold_option
@click.option("--speed", type=click.FloatRange(min=0, min_open=True), default=None, help="Playback speed multiplier.")
@click.option("--max-delay", type=click.FloatRange(min=0), default=None, help="Never wait longer than this.")
@click.pass_context
def play(
    ctx: click.Context,
    source: str,
    threshold: float | None,
    speed: float | None,
    max_delay: float | None,
) -> None:
    """Play a recording to the terminal."""
    settings = _settings(ctx)
    with _reported_errors(), open_ttyrec(source) as stream:
        play_frames(
            FrameDecoder(stream, time_threshold=_threshold(ctx, threshold)),
            sys.stdout.buffer,
            speed=speed if speed is not None else settings.playback_speed,
            max_delay=max_delay if max_delay is not None else settings.max_delay,
        )


if __name__ == "__main__":
    cli()
