"""
audex.pipeline - One extraction run, start to finish.

Probe, validate, extract. The run is strictly linear and stops at the
first failure; nothing is retried and no partial output is cleaned up.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich.table import Table

from audex.config import ExtractConfig, OutputFormat
from audex.extract.audio import extract_audio_stream, output_path_for
from audex.probe.models import Stream
from audex.probe.streams import probe_audio_stream
from audex.process import Runner, run_tool
from audex.utils import format_bit_rate, format_duration


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of a successful run."""

    source: Path
    output_file: Path
    format: OutputFormat
    audio_stream: Stream


def run_extraction(
    config: ExtractConfig,
    runner: Runner = run_tool,
    console=None,
) -> ExtractionResult:
    """Extract the single audio stream described by a config.

    The output directory must already exist (see prepare_output_dir).

    Args:
        config: Resolved run configuration
        runner: Tool runner, replaceable in tests
        console: Optional rich console for output

    Returns:
        ExtractionResult for the written file

    Raises:
        ProbeError: If probing fails or the stream count is not exactly one
        ExtractionError: If FFmpeg fails
        DependencyError: If a tool cannot be launched
    """
    if console:
        console.print(f"[dim]  Probing {config.input.name}...[/dim]")

    stream = probe_audio_stream(config.ffprobe_path, config.input, runner=runner)

    if console:
        console.print(stream_table(stream))
        console.print("[cyan]Extracting audio stream...[/cyan]")

    output_file = extract_audio_stream(
        config.ffmpeg_path,
        config.input,
        output_path_for(config.input, config.output, config.format),
        config.output_sample_rate,
        config.output_channels,
        runner=runner,
    )

    return ExtractionResult(
        source=config.input,
        output_file=output_file,
        format=config.format,
        audio_stream=stream,
    )


def stream_table(stream: Stream) -> Table:
    """Summarize an audio stream descriptor as a rich table."""
    table = Table(title="Audio Stream")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    duration = "-"
    if stream.duration:
        try:
            duration = format_duration(float(stream.duration))
        except ValueError:
            duration = stream.duration

    rows = [
        ("Index", stream.index),
        ("Codec", stream.codec_long_name or stream.codec_name),
        ("Sample rate", f"{stream.sample_rate} Hz" if stream.sample_rate else None),
        ("Channels", stream.channels),
        ("Sample format", stream.sample_fmt),
        ("Bit rate", format_bit_rate(stream.bit_rate)),
        ("Duration", duration),
    ]
    for field, value in rows:
        table.add_row(field, "-" if value is None else str(value))

    return table
