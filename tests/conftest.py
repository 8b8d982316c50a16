"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import json
import subprocess
from collections.abc import Sequence
from pathlib import Path

import pytest

from audex.process import ToolResult

VIDEO_STREAM = {
    "index": 0,
    "codec_name": "h264",
    "codec_long_name": "H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10",
    "profile": "High",
    "codec_type": "video",
    "codec_tag_string": "avc1",
    "codec_tag": "0x31637661",
    "width": 1920,
    "height": 1080,
    "has_b_frames": 2,
    "pix_fmt": "yuv420p",
    "level": 40,
    "is_avc": "true",
    "nal_length_size": "4",
    "r_frame_rate": "24000/1001",
    "avg_frame_rate": "24000/1001",
    "time_base": "1/24000",
    "start_time": "0.000000",
    "duration": "62.562500",
    "bit_rate": "4872310",
    "nb_frames": "1500",
    "disposition": {"default": 1},
    "tags": {"language": "und", "handler_name": "VideoHandler"},
}

AUDIO_STREAM = {
    "index": 1,
    "codec_name": "aac",
    "codec_long_name": "AAC (Advanced Audio Coding)",
    "codec_type": "audio",
    "codec_tag_string": "mp4a",
    "codec_tag": "0x6134706d",
    "sample_fmt": "fltp",
    "sample_rate": "48000",
    "channels": 2,
    "channel_layout": "stereo",
    "bits_per_sample": 0,
    "r_frame_rate": "0/0",
    "avg_frame_rate": "0/0",
    "time_base": "1/48000",
    "start_time": "0.000000",
    "duration": "62.570667",
    "bit_rate": "128000",
    "nb_frames": "2934",
    "disposition": {"default": 1},
    "tags": {"language": "eng"},
}


def probe_json(*streams: dict) -> str:
    """Render an ffprobe -show_streams document."""
    return json.dumps({"streams": list(streams)}, indent=4)


class FakeRunner:
    """Tool runner that replays canned results and records every call."""

    def __init__(self, *results: ToolResult) -> None:
        self.results = list(results)
        self.calls: list[list[str]] = []

    def __call__(self, args: Sequence[str]) -> ToolResult:
        self.calls.append([str(a) for a in args])
        if not self.results:
            raise AssertionError(f"Unexpected tool call: {args}")
        return self.results.pop(0)


class FakeSubprocess:
    """Stand-in for subprocess.run that emulates ffprobe and ffmpeg."""

    def __init__(
        self,
        probe_stdout: str,
        probe_returncode: int = 0,
        ffmpeg_returncode: int = 0,
    ) -> None:
        self.probe_stdout = probe_stdout
        self.probe_returncode = probe_returncode
        self.ffmpeg_returncode = ffmpeg_returncode
        self.calls: list[list[str]] = []

    def __call__(self, cmd, **kwargs) -> subprocess.CompletedProcess:
        self.calls.append(list(cmd))
        tool = Path(cmd[0]).name
        if tool == "ffprobe":
            return subprocess.CompletedProcess(cmd, self.probe_returncode, self.probe_stdout, "")
        if tool == "ffmpeg":
            if self.ffmpeg_returncode == 0:
                Path(cmd[-1]).write_bytes(b"RIFF" + bytes(len(self.calls)))
                return subprocess.CompletedProcess(cmd, 0, "", "")
            return subprocess.CompletedProcess(
                cmd, self.ffmpeg_returncode, "", "Conversion failed!"
            )
        raise FileNotFoundError(cmd[0])


@pytest.fixture
def single_audio_json() -> str:
    """ffprobe output for a file with one video and one audio stream."""
    return probe_json(VIDEO_STREAM, AUDIO_STREAM)


@pytest.fixture
def dual_audio_json() -> str:
    """ffprobe output for a file with two audio tracks."""
    commentary = dict(AUDIO_STREAM, index=2, tags={"language": "eng", "title": "Commentary"})
    return probe_json(VIDEO_STREAM, AUDIO_STREAM, commentary)


@pytest.fixture
def video_only_json() -> str:
    """ffprobe output for a silent video."""
    return probe_json(VIDEO_STREAM)


@pytest.fixture
def media_file(tmp_path: Path) -> Path:
    """A placeholder input file; its contents are never decoded."""
    path = tmp_path / "media" / "interview.mkv"
    path.parent.mkdir()
    path.write_bytes(b"fake media content")
    return path


@pytest.fixture
def make_runner():
    """Factory for FakeRunner instances."""
    return FakeRunner


@pytest.fixture
def fake_subprocess(monkeypatch: pytest.MonkeyPatch, single_audio_json: str):
    """Patch subprocess.run inside audex.process; returns a configurable fake."""

    def install(
        probe_stdout: str | None = None,
        probe_returncode: int = 0,
        ffmpeg_returncode: int = 0,
    ) -> FakeSubprocess:
        fake = FakeSubprocess(
            single_audio_json if probe_stdout is None else probe_stdout,
            probe_returncode=probe_returncode,
            ffmpeg_returncode=ffmpeg_returncode,
        )
        monkeypatch.setattr("audex.process.subprocess.run", fake)
        return fake

    return install
