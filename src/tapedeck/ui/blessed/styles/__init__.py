"""Text formatting for the blessed UI."""

from .formatting import BLOCKS, format_time, format_volume, render_gauge, truncate
from .palette import STYLES, paint

__all__ = ["STYLES", "paint", "BLOCKS", "format_time", "format_volume", "render_gauge", "truncate"]
