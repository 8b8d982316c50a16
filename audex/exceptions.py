"""
audex.exceptions - Custom exception classes.

All Audex-specific exceptions inherit from AudexError.
"""


class AudexError(Exception):
    """Base exception for all Audex errors."""

    pass


class ConfigError(AudexError):
    """Argument, config file, or output directory error."""

    pass


class ProbeError(AudexError):
    """Stream probing error."""

    pass


class ProbeExecutionError(ProbeError):
    """ffprobe exited with a non-zero status."""

    def __init__(self, returncode: int, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"ffprobe failed with status: {returncode}")


class ProbeFormatError(ProbeError):
    """ffprobe output could not be read as a stream listing."""

    pass


class StreamCardinalityError(ProbeError):
    """The input does not carry exactly one audio stream."""

    pass


class NoAudioStreamError(StreamCardinalityError):
    """No audio stream in the input."""

    pass


class MultipleAudioStreamsError(StreamCardinalityError):
    """More than one audio stream in the input."""

    def __init__(self, count: int, message: str | None = None):
        self.count = count
        super().__init__(message or f"More than one audio stream found ({count})")


class ExtractionError(AudexError):
    """ffmpeg exited with a non-zero status."""

    def __init__(self, returncode: int, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"ffmpeg failed with status: {returncode}")


class DependencyError(AudexError):
    """Required external tool missing or not executable."""

    def __init__(self, dependency: str, message: str, install_hint: str | None = None):
        self.dependency = dependency
        self.message = message
        self.install_hint = install_hint
        super().__init__(f"{dependency}: {message}")
