"""Library domain - decoded tracks and the track loader.

This domain handles:
- Decoding audio files into in-memory tracks (soundfile)
- Reading tag metadata (Mutagen)
- Producing playable sample streams with a known duration
"""

from .loader import display_name, load_queue, load_track, read_tags
from .models import SampleStream, Track, UNKNOWN

__all__ = [
    "display_name",
    "load_queue",
    "load_track",
    "read_tags",
    "SampleStream",
    "Track",
    "UNKNOWN",
]
