"""
audex.extract.audio - FFmpeg audio extraction.

The output codec is never passed explicitly: ffmpeg infers it from the
output file extension.
"""

from __future__ import annotations

import logging
from pathlib import Path

from audex.config import OutputFormat, extension_for
from audex.exceptions import ExtractionError
from audex.process import Runner, run_tool

logger = logging.getLogger(__name__)


def output_path_for(input_path: Path, output_dir: Path, fmt: OutputFormat) -> Path:
    """Derive the output file path.

    Args:
        input_path: Source media file
        output_dir: Directory the audio file is written to
        fmt: Output format

    Returns:
        ``output_dir / "<input stem>.<extension>"``
    """
    return output_dir / f"{input_path.stem}.{extension_for(fmt)}"


def build_extract_command(
    ffmpeg_path: str,
    input_path: Path,
    output_path: Path,
    sample_rate: int,
    channels: int,
) -> list[str]:
    """Build the ffmpeg command forcing channels and rate, overwriting output."""
    return [
        ffmpeg_path,
        "-i",
        str(input_path),
        "-ac",
        str(channels),
        "-ar",
        str(sample_rate),
        "-y",
        str(output_path),
    ]


def extract_audio_stream(
    ffmpeg_path: str,
    input_path: Path,
    output_path: Path,
    sample_rate: int,
    channels: int,
    runner: Runner = run_tool,
) -> Path:
    """Extract and resample the input's audio using FFmpeg.

    Any existing file at output_path is overwritten. The written file is not
    inspected afterwards.

    Args:
        ffmpeg_path: ffmpeg executable, bare name or path
        input_path: Source media file
        output_path: Destination audio file
        sample_rate: Target sample rate in Hz
        channels: Target channel count
        runner: Tool runner, replaceable in tests

    Returns:
        The output path

    Raises:
        ExtractionError: If FFmpeg exits non-zero
    """
    cmd = build_extract_command(ffmpeg_path, input_path, output_path, sample_rate, channels)
    result = runner(cmd)
    if not result.ok:
        if result.stderr:
            logger.debug("ffmpeg stderr: %s", result.stderr.strip())
        raise ExtractionError(result.returncode, result.stderr)

    return output_path
