"""Tests for layout and frame rendering."""

import pytest
from blessed import Terminal

from tapedeck.ui.blessed.components.frame import render_frame
from tapedeck.ui.blessed.components.layout import MIN_HEIGHT, MIN_WIDTH, calculate_layout
from tapedeck.ui.blessed.state import DisplayState
from tapedeck.ui.blessed.styles.formatting import BLOCKS


@pytest.fixture
def term():
    # No styling: formatters return plain text
    return Terminal(force_styling=None)


def make_display(**overrides) -> DisplayState:
    values = dict(
        title="So What",
        artist="Miles Davis",
        album="Kind of Blue",
        format_line="2ch  44100 Hz  16-bit  (1959)  #1",
        position=0,
        count=3,
        playing=False,
        elapsed=3.0,
        total=10.0,
        volume=100,
        listing=["01 - So What.flac", "02 - Freddie Freeloader.flac", "03 - Blue in Green.flac"],
    )
    values.update(overrides)
    return DisplayState(**values)


class TestCalculateLayout:
    def test_standard_terminal(self):
        layout = calculate_layout(80, 24)
        assert layout["left"] == 2
        assert layout["metadata_y"] == 1
        assert layout["playback_y"] == 22
        assert layout["queue_y"] == 7
        assert layout["queue_height"] == 14

    def test_rows_end_on_same_column(self):
        """Volume gauge and timestamp both end at the right margin."""
        for width in (30, 80, 200):
            layout = calculate_layout(width, 24)
            assert layout["volume_x"] + 10 == width - 3
            assert layout["timestamp_x"] + 5 == width - 3

    def test_resize_scales_progress_bar(self):
        narrow = calculate_layout(40, 12)
        wide = calculate_layout(120, 12)
        assert wide["progress_width"] - narrow["progress_width"] == 80


class TestRenderFrame:
    def test_exact_height(self, term):
        for height in (MIN_HEIGHT, 24, 50):
            assert len(render_frame(term, make_display(), 80, height, use_colors=False)) == height

    def test_metadata_rows(self, term):
        rows = render_frame(term, make_display(), 80, 24, use_colors=False)
        assert rows[1].startswith("  So What")
        assert rows[1].endswith(BLOCKS[-1] * 5 + " 100%")
        assert len(rows[1]) == 77
        assert rows[2] == "  Miles Davis"
        assert rows[3] == "  Kind of Blue"
        assert rows[4] == "  2ch  44100 Hz  16-bit  (1959)  #1"
        assert rows[5] == "  01 / 03"

    def test_paused_playback_row(self, term):
        rows = render_frame(term, make_display(), 80, 24, use_colors=False)
        row = rows[22]
        assert row.startswith("  PAUSE ")
        assert row.endswith("  00:03")
        assert len(row) == 77

    def test_playing_label(self, term):
        rows = render_frame(term, make_display(playing=True), 80, 24, use_colors=False)
        assert rows[22].startswith("  PLAY  ")

    def test_progress_fill(self, term):
        display = make_display(elapsed=5.0, total=10.0)
        row = render_frame(term, display, 80, 24, use_colors=False)[22]
        gauge = row[8:8 + 62]
        assert gauge == BLOCKS[-1] * 31 + " " * 31

    def test_elapsed_clamped_to_total(self, term):
        display = make_display(elapsed=12.4, total=10.0)
        assert render_frame(term, display, 80, 24, use_colors=False)[22].endswith("00:10")

    def test_queue_panel_marks_current(self, term):
        rows = render_frame(term, make_display(position=1), 80, 24, use_colors=False)
        assert rows[7] == "  Queue"
        assert rows[8] == "    01. 01 - So What.flac"
        assert rows[9] == "  ▶ 02. 02 - Freddie Freeloader.flac"
        assert rows[6] == ""

    def test_queue_panel_hidden(self, term):
        rows = render_frame(term, make_display(), 80, 24, use_colors=False, show_queue=False)
        assert all(row == "" for row in rows[6:22])

    def test_long_title_truncated(self, term):
        display = make_display(title="x" * 200)
        row = render_frame(term, display, 80, 24, use_colors=False)[1]
        assert "..." in row
        assert len(row) == 77

    def test_too_small(self, term):
        rows = render_frame(term, make_display(), MIN_WIDTH - 1, 5, use_colors=False)
        assert len(rows) == 5
        assert rows[0].startswith("Terminal too small")
        assert len(rows[0]) <= MIN_WIDTH - 1
        assert rows[1:] == [""] * 4

    def test_same_state_same_frame(self, term):
        """Rendering is a pure function of the display state and size."""
        display = make_display()
        assert render_frame(term, display, 80, 24) == render_frame(term, display, 80, 24)

    def test_colors_off_without_styling(self, term):
        display = make_display()
        assert render_frame(term, display, 80, 24, use_colors=True) == render_frame(
            term, display, 80, 24, use_colors=False
        )
