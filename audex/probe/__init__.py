"""
audex.probe - Stream inspection via ffprobe.

Runs ffprobe against the input, reads its JSON stream listing into typed
descriptors, and selects the single audio stream.
"""

from __future__ import annotations
