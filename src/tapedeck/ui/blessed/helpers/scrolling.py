"""Pure helper for scrolling list panels."""


def compute_scroll_window(
    selected_idx: int, total_items: int, visible_rows: int
) -> tuple[int, int]:
    """
    Compute the start and end indices for a scrollable window.

    Keeps the selected item visible, centred when possible.

    Args:
        selected_idx: Index of the highlighted item
        total_items: Total number of items
        visible_rows: Number of rows available

    Returns:
        Tuple of (start_idx, end_idx) for the visible window
    """
    if visible_rows <= 0:
        return 0, 0
    if total_items <= visible_rows:
        return 0, total_items

    half_window = visible_rows // 2
    start_idx = max(0, selected_idx - half_window)
    end_idx = min(total_items, start_idx + visible_rows)

    # Adjust if we're at the end
    if end_idx - start_idx < visible_rows:
        start_idx = max(0, end_idx - visible_rows)

    return start_idx, end_idx
