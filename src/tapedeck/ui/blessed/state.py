"""Display state - derived fresh from transport state for every render."""

from dataclasses import dataclass, field

from tapedeck.domain.playback.queue import Queue
from tapedeck.domain.playback.transport import PlaybackState


@dataclass(frozen=True)
class DisplayState:
    """Everything the renderer needs for one frame. Never stored between frames."""
    title: str
    artist: str
    album: str
    format_line: str
    position: int  # 0-based index of the current track
    count: int
    playing: bool
    elapsed: float
    total: float
    volume: int
    listing: list[str] = field(default_factory=list)

    @property
    def progress(self) -> float:
        """Fraction of the track played, clamped to [0, 1]."""
        if self.total <= 0:
            return 0.0
        return max(0.0, min(1.0, self.elapsed / self.total))


def format_audio_line(channels: int, sample_rate: int, bit_depth: int,
                      year: int | None = None, track_number: int | None = None) -> str:
    """e.g. "2ch  44100 Hz  16-bit  (1997)  #3"."""
    parts = [f"{channels}ch", f"{sample_rate} Hz", f"{bit_depth}-bit"]
    if year:
        parts.append(f"({year})")
    if track_number:
        parts.append(f"#{track_number}")
    return "  ".join(parts)


def build_display_state(queue: Queue, playback: PlaybackState, volume: int) -> DisplayState:
    """Derive the frame state from queue, playback state and volume."""
    track, idx = queue.current()
    return DisplayState(
        title=track.display_title,
        artist=track.display_artist,
        album=track.display_album,
        format_line=format_audio_line(
            track.channels, track.sample_rate, track.bit_depth, track.year, track.track_number
        ),
        position=idx,
        count=len(queue),
        playing=playback.playing,
        elapsed=playback.elapsed,
        total=playback.total,
        volume=volume,
        listing=queue.listing(),
    )
