"""
Music library domain models.

Contains the decoded track and the playable sample stream it produces.
"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

UNKNOWN = "Unknown"


class SampleStream:
    """Playable float32 PCM stream over a decoded track.

    Frames are read sequentially with read(); once exhausted, read()
    returns a short (possibly empty) block.
    """

    def __init__(self, samples: np.ndarray, sample_rate: int):
        self._samples = samples
        self._pos = 0
        self.sample_rate = sample_rate
        self.channels = samples.shape[1]

    @property
    def total_frames(self) -> int:
        return self._samples.shape[0]

    @property
    def total_duration(self) -> Optional[float]:
        """Length of the stream in seconds, None when it cannot be derived."""
        if self.sample_rate <= 0:
            return None
        return self.total_frames / self.sample_rate

    @property
    def exhausted(self) -> bool:
        return self._pos >= self.total_frames

    def read(self, frames: int) -> np.ndarray:
        """Return the next block of up to `frames` frames, shape (n, channels)."""
        block = self._samples[self._pos:self._pos + frames]
        self._pos += block.shape[0]
        return block


@dataclass(frozen=True)
class Track:
    """A decoded audio item with metadata.

    Immutable once loaded. Missing title/artist/album read back as "Unknown".
    """
    samples: np.ndarray = field(repr=False, compare=False)  # shape (frames, channels), float32
    sample_rate: int
    bit_depth: int
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    year: Optional[int] = None
    track_number: Optional[int] = None

    @property
    def channels(self) -> int:
        return self.samples.shape[1]

    @property
    def display_title(self) -> str:
        return self.title or UNKNOWN

    @property
    def display_artist(self) -> str:
        return self.artist or UNKNOWN

    @property
    def display_album(self) -> str:
        return self.album or UNKNOWN

    def source(self) -> SampleStream:
        """Materialize a fresh playable stream positioned at the start."""
        return SampleStream(self.samples, self.sample_rate)
