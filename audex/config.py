"""
audex.config - Run configuration, YAML defaults loading, validation.

Resolves command-line flags and an optional YAML defaults file into one
immutable ExtractConfig, and prepares the output directory.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from audex.exceptions import ConfigError


class OutputFormat(str, Enum):
    """Output container/codec, chosen by file extension alone."""

    WAV = "wav"
    MP3 = "mp3"
    OPUS = "opus"

    @property
    def extension(self) -> str:
        return extension_for(self)


FORMAT_EXTENSIONS: dict[OutputFormat, str] = {
    OutputFormat.WAV: "wav",
    OutputFormat.MP3: "mp3",
    OutputFormat.OPUS: "opus",
}


def extension_for(fmt: OutputFormat) -> str:
    """Return the output file extension for a format."""
    return FORMAT_EXTENSIONS[fmt]


DEFAULTS: dict[str, Any] = {
    "ffprobe_path": "ffprobe",
    "ffmpeg_path": "ffmpeg",
    "format": OutputFormat.WAV,
    "output_sample_rate": 16000,
    "output_channels": 1,
}

# Keys a YAML defaults file may set; input and output are per-run only.
FILE_KEYS = frozenset(DEFAULTS)


class ExtractConfig(BaseModel):
    """Resolved configuration for one extraction run."""

    model_config = ConfigDict(frozen=True)

    input: Path
    output: Path
    ffprobe_path: str = "ffprobe"
    ffmpeg_path: str = "ffmpeg"
    format: OutputFormat = OutputFormat.WAV
    output_sample_rate: int = Field(default=16000, gt=0)
    output_channels: int = Field(default=1, gt=0)

    @field_validator("format", mode="before")
    @classmethod
    def normalize_format(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.lower()
        return v


def load_defaults_file(path: Path) -> dict[str, Any]:
    """Load a YAML defaults file.

    Args:
        path: Path to the YAML file

    Returns:
        Mapping of recognized keys to values

    Raises:
        ConfigError: If the file is missing, unreadable, or has unknown keys
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    unknown = sorted(set(raw) - FILE_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    return raw


def merge_config(overrides: dict[str, Any], base: dict[str, Any]) -> dict[str, Any]:
    """Merge overrides onto base. None values never override."""
    merged = base.copy()
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def build_config(
    cli_values: dict[str, Any],
    config_file: Path | None = None,
) -> ExtractConfig:
    """Resolve defaults, the optional YAML file, and CLI flags into a config.

    Args:
        cli_values: Values from the command line; None means "not given"
        config_file: Optional YAML defaults file

    Returns:
        Validated ExtractConfig

    Raises:
        ConfigError: If any value fails validation
    """
    layered = DEFAULTS.copy()
    if config_file is not None:
        layered = merge_config(load_defaults_file(config_file), layered)
    layered = merge_config(cli_values, layered)

    try:
        return ExtractConfig(**layered)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e


def prepare_output_dir(path: Path) -> Path:
    """Create the output directory and any missing parents.

    Raises:
        ConfigError: If the directory cannot be created
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Cannot create output directory {path}: {e}") from e
    return path
