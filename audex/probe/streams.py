"""
audex.probe.streams - Find the single audio stream of a media file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from audex.exceptions import (
    MultipleAudioStreamsError,
    NoAudioStreamError,
    ProbeExecutionError,
    ProbeFormatError,
)
from audex.probe.models import ProbeOutput, Stream
from audex.process import Runner, run_tool

logger = logging.getLogger(__name__)


def build_probe_command(ffprobe_path: str, input_path: Path) -> list[str]:
    """Build the ffprobe command that lists streams as quiet JSON."""
    return [
        ffprobe_path,
        "-v",
        "quiet",
        "-print_format",
        "json",
        "-show_streams",
        str(input_path),
    ]


def parse_probe_output(stdout: str) -> ProbeOutput:
    """Deserialize ffprobe JSON into a ProbeOutput.

    Raises:
        ProbeFormatError: If stdout is not valid JSON or lacks the expected
            structure
    """
    try:
        return ProbeOutput.model_validate_json(stdout)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first["loc"])
        detail = f"{where}: {first['msg']}" if where else first["msg"]
        raise ProbeFormatError(f"Malformed ffprobe output: {detail}") from e


def select_audio_stream(probe: ProbeOutput) -> Stream:
    """Return the only audio stream in a probe result.

    Raises:
        NoAudioStreamError: If there is no audio stream
        MultipleAudioStreamsError: If there is more than one audio stream
    """
    audio = probe.audio_streams()
    logger.debug("%d stream(s), %d audio", len(probe.streams), len(audio))

    if not audio:
        raise NoAudioStreamError("No audio streams found")
    if len(audio) > 1:
        raise MultipleAudioStreamsError(len(audio))
    return audio[0]


def probe_audio_stream(
    ffprobe_path: str,
    input_path: Path,
    runner: Runner = run_tool,
) -> Stream:
    """Probe a media file and return its single audio stream.

    Args:
        ffprobe_path: ffprobe executable, bare name or path
        input_path: Media file to inspect
        runner: Tool runner, replaceable in tests

    Returns:
        The audio stream descriptor

    Raises:
        ProbeExecutionError: If ffprobe exits non-zero
        ProbeFormatError: If its output cannot be read
        StreamCardinalityError: If the file has zero or several audio streams
    """
    result = runner(build_probe_command(ffprobe_path, input_path))
    if not result.ok:
        if result.stderr:
            logger.debug("ffprobe stderr: %s", result.stderr.strip())
        raise ProbeExecutionError(result.returncode, result.stderr)

    return select_audio_stream(parse_probe_output(result.stdout))
