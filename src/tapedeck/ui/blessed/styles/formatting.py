"""Formatting helper functions."""

# Eighth-width blocks, 1/8 through 8/8
BLOCKS = ("▏", "▎", "▍", "▌", "▋", "▊", "▉", "█")
ELLIPSIS = "..."


def format_time(seconds: float) -> str:
    """
    Format seconds as MM:SS.

    Args:
        seconds: Time in seconds

    Returns:
        Zero-padded minutes and seconds, e.g. "03:07"
    """
    whole = max(0, int(seconds))
    return f"{whole // 60:02d}:{whole % 60:02d}"


def render_gauge(fraction: float, width: int) -> str:
    """
    Render a bar at 1/8-character resolution.

    Args:
        fraction: Filled share, clamped to [0, 1]
        width: Gauge width in cells

    Returns:
        Exactly `width` characters, filled from the left
    """
    if width <= 0:
        return ""
    fraction = max(0.0, min(1.0, fraction))
    eighths = round(fraction * width * 8)
    full, rem = divmod(eighths, 8)
    bar = BLOCKS[-1] * full
    if rem:
        bar += BLOCKS[rem - 1]
    return bar.ljust(width)


def format_volume(volume: int, width: int = 5) -> str:
    """Volume gauge followed by the right-aligned percentage, e.g. "█████ 100%"."""
    return f"{render_gauge(volume / 100, width)} {volume:3d}%"


def truncate(text: str, width: int) -> str:
    """Cut text to `width` characters, ending in "..." when shortened."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= len(ELLIPSIS):
        return text[:width]
    return text[:width - len(ELLIPSIS)] + ELLIPSIS
