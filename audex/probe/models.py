"""
audex.probe.models - Typed view of ffprobe's stream listing.

Mirrors the ``-show_streams`` JSON schema. Every descriptor field is
optional and unknown fields are ignored; only codec_type drives behavior.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class Stream(BaseModel):
    """One elementary stream as reported by ffprobe."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    index: int | None = None
    codec_name: str | None = None
    codec_long_name: str | None = None
    codec_type: str | None = None
    codec_time_base: str | None = None
    codec_tag_string: str | None = None
    codec_tag: str | None = None
    width: int | None = None
    height: int | None = None
    has_b_frames: int | None = None
    pix_fmt: str | None = None
    level: int | None = None
    is_avc: str | None = None
    nal_length_size: str | None = None
    r_frame_rate: str | None = None
    avg_frame_rate: str | None = None
    time_base: str | None = None
    start_time: str | None = None
    duration: str | None = None
    bit_rate: str | None = None
    nb_frames: str | None = None
    sample_fmt: str | None = None
    sample_rate: str | None = None
    channels: int | None = None
    bits_per_sample: int | None = None

    @property
    def is_audio(self) -> bool:
        return self.codec_type == "audio"


class ProbeOutput(BaseModel):
    """Top-level ffprobe document; only the streams array is read."""

    model_config = ConfigDict(extra="ignore")

    streams: list[Stream]

    @field_validator("streams")
    @classmethod
    def require_codec_type(cls, v: list[Stream]) -> list[Stream]:
        for position, stream in enumerate(v):
            if stream.codec_type is None:
                raise ValueError(f"stream {position} has no codec_type")
        return v

    def audio_streams(self) -> list[Stream]:
        return [s for s in self.streams if s.is_audio]
