"""Layout calculation functions."""

PLAY_LABEL = "PLAY"
PAUSE_LABEL = "PAUSE"
LABEL_WIDTH = max(len(PLAY_LABEL), len(PAUSE_LABEL))
TIMESTAMP_WIDTH = 5  # MM:SS
VOLUME_WIDTH = 10  # 5-cell gauge, space, "100%"
METADATA_ROWS = 5  # title, artist, album, format line, position

MIN_WIDTH = 30
MIN_HEIGHT = 9


def fits(width: int, height: int) -> bool:
    return width >= MIN_WIDTH and height >= MIN_HEIGHT


def calculate_layout(width: int, height: int) -> dict[str, int]:
    """
    Pure function: calculate positions for all regions.

    Args:
        width: Terminal width in columns
        height: Terminal height in rows

    Returns:
        Dictionary with region positions and sizes
    """
    first_row = 1
    first_col = 2
    last_row = height - 2
    last_col = width - 3
    usable_cols = last_col - first_col

    progress_x = first_col + LABEL_WIDTH + 1
    progress_width = max(0, usable_cols - LABEL_WIDTH - 1 - 2 - TIMESTAMP_WIDTH)

    queue_y = first_row + METADATA_ROWS + 1
    queue_height = max(0, last_row - 1 - queue_y)

    return {
        "left": first_col,
        "metadata_y": first_row,
        "metadata_width": max(0, usable_cols - VOLUME_WIDTH - 2),
        "volume_x": first_col + usable_cols - VOLUME_WIDTH,
        "queue_y": queue_y,
        "queue_height": queue_height,
        "queue_width": usable_cols,
        "playback_y": last_row,
        "progress_x": progress_x,
        "progress_width": progress_width,
        "timestamp_x": progress_x + progress_width + 2,
    }
