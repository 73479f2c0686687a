"""
Track loading: decode audio files into in-memory tracks.

Decoding is delegated to soundfile (libsndfile handles wav/flac/ogg/mp3);
tag metadata is read with Mutagen.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Optional

import soundfile as sf
from loguru import logger
from mutagen import File as MutagenFile
from mutagen import MutagenError

from tapedeck.core.errors import DecodeError

from .models import Track

# libsndfile subtype -> bits per sample; compressed formats decode to 16-bit
SUBTYPE_BIT_DEPTH = {
    "PCM_S8": 8,
    "PCM_U8": 8,
    "PCM_16": 16,
    "PCM_24": 24,
    "PCM_32": 32,
    "FLOAT": 32,
    "DOUBLE": 64,
}
DEFAULT_BIT_DEPTH = 16


def get_tag_value(audio_file: Any, tag_names: list[str]) -> Optional[str]:
    """Get tag value, trying multiple possible tag names."""
    for tag_name in tag_names:
        try:
            value = audio_file.get(tag_name)
            if value:
                # Handle different formats
                if isinstance(value, list) and value:
                    return str(value[0])
                return str(value)
        except (KeyError, ValueError):
            # Some formats (like Vorbis) raise ValueError for non-existent keys
            continue
    return None


def _parse_leading_int(value: Optional[str]) -> Optional[int]:
    """Parse "2019-03-01" or "3/12" style tags into their leading integer."""
    if not value:
        return None
    digits = ""
    for char in value.strip():
        if not char.isdigit():
            break
        digits += char
    return int(digits) if digits else None


def read_tags(path: str) -> dict[str, Any]:
    """Read title/artist/album/year/track number tags; missing tags are None."""
    try:
        audio_file = MutagenFile(path, easy=True)
    except (MutagenError, OSError) as e:
        logger.debug(f"No readable tags in {path}: {e}")
        return {}
    if audio_file is None:
        return {}

    return {
        "title": get_tag_value(audio_file, ["title", "TIT2", "\xa9nam"]),
        "artist": get_tag_value(audio_file, ["artist", "TPE1", "\xa9ART"]),
        "album": get_tag_value(audio_file, ["album", "TALB", "\xa9alb"]),
        "year": _parse_leading_int(get_tag_value(audio_file, ["date", "year", "TDRC"])),
        "track_number": _parse_leading_int(get_tag_value(audio_file, ["tracknumber", "TRCK"])),
    }


def load_track(path: str) -> Track:
    """Decode a file into a Track.

    Raises:
        DecodeError: If the file cannot be read or decoded
    """
    try:
        info = sf.info(path)
        samples, sample_rate = sf.read(path, dtype="float32", always_2d=True)
    except (sf.LibsndfileError, RuntimeError, OSError) as e:
        raise DecodeError(path, e) from e

    tags = read_tags(path)
    return Track(
        samples=samples,
        sample_rate=sample_rate,
        bit_depth=SUBTYPE_BIT_DEPTH.get(info.subtype, DEFAULT_BIT_DEPTH),
        **tags,
    )


def load_queue(paths: list[str], max_workers: Optional[int] = None) -> list[tuple[Track, str]]:
    """
    Decode all files concurrently, keeping argument order.

    Files that fail to decode are logged and dropped.

    Args:
        paths: Input file paths in queue order
        max_workers: Decoder thread count (default: executor default)

    Returns:
        List of (track, source_path) pairs for the files that loaded
    """
    def _try_load(path: str) -> Optional[Track]:
        try:
            return load_track(path)
        except DecodeError as e:
            logger.warning(f"Dropping {path} from queue: {e.cause}")
            return None

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(_try_load, paths))

    loaded = [(track, path) for track, path in zip(results, paths) if track is not None]
    logger.info(f"Loaded {len(loaded)}/{len(paths)} tracks")
    return loaded


def display_name(path: str) -> str:
    """Queue listing label for a source path."""
    return Path(path).name
