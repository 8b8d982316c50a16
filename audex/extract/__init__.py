"""
audex.extract - Audio extraction with ffmpeg.

Re-encodes the input's audio into a WAV, MP3 or Opus file at the requested
sample rate and channel count.
"""

from __future__ import annotations
