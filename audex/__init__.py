"""
Audex - single audio stream extraction toolkit.

Probes a media file with ffprobe, checks that it carries exactly one audio
stream, then re-encodes that stream with ffmpeg into WAV, MP3 or Opus at a
chosen sample rate and channel count.
"""

__version__ = "0.1.0"
