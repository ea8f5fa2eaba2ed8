"""Tests for the compositor module."""
import io

import pytest
from speedread.compositor import (
    BAR_EMPTY,
    BAR_FILLED,
    CLEAR_SCREEN,
    DIM,
    EOL,
    RESET,
    STATUS_ROWS,
    TerminalCompositor,
    context_line,
    fit_rows,
    render_progress_bar,
    status_line,
)
from speedread.models import Word
from speedread.rendering import WordRenderer


def make_compositor(context=False, size=(80, 24)):
    renderer = WordRenderer(focal=True, focal_color_code="\033[31m", reference_len=8)
    out = io.StringIO()
    comp = TerminalCompositor(renderer, context=context, out=out, size_fn=lambda: size)
    return comp, out


WORDS = [Word(w) for w in "Hello world. Testing one two.".split()]


class TestRenderProgressBar:
    """Tests for render_progress_bar function."""

    def test_half_way(self):
        """Test a bar at 50%."""
        bar = render_progress_bar(50, 5, 10)
        # 50 - 2 brackets - len(" 50%") = 44 cells
        assert bar == "[" + BAR_FILLED * 22 + BAR_EMPTY * 22 + "] 50%"

    def test_complete(self):
        """Test a full bar."""
        bar = render_progress_bar(30, 4, 4)
        assert bar.endswith("] 100%")
        assert BAR_EMPTY not in bar

    def test_minimum_bar_width(self):
        """Test that the bar never drops below 10 cells."""
        bar = render_progress_bar(5, 1, 10)
        assert bar.count(BAR_FILLED) + bar.count(BAR_EMPTY) == 10

    def test_fits_terminal_width(self):
        """Test that the bar uses exactly the terminal width when wide enough."""
        assert len(render_progress_bar(80, 1, 3)) == 80


class TestStatusLine:
    """Tests for status_line function."""

    def test_running(self):
        """Test the status line while reading."""
        line = status_line(200, 650, paused=False)
        assert line.startswith("200 WPM | 3m 15s left")
        assert "PAUSED" not in line

    def test_paused(self):
        """Test the status line while paused."""
        assert "PAUSED" in status_line(200, 10, paused=True)


class TestContextLine:
    """Tests for context_line function."""

    def test_dimmed_and_centered(self):
        """Test dim styling and centering."""
        line = context_line(Word("next"), 20)
        assert line == " " * 8 + DIM + "next" + RESET

    def test_wide_word_not_negative_padding(self):
        """Test that padding is never negative."""
        assert context_line("abcdefghij", 4).startswith(DIM)


class TestTerminalCompositor:
    """Tests for TerminalCompositor class."""

    def test_frame_starts_with_clear(self):
        """Test that every frame clears the screen first."""
        comp, _ = make_compositor()
        assert comp.compose(WORDS, 0, 600, False).startswith(CLEAR_SCREEN)

    def test_only_crlf_line_endings(self):
        """Test that no bare newline is emitted in raw mode."""
        comp, _ = make_compositor(context=True)
        frame = comp.compose(WORDS, 2, 600, False)
        assert "\n" not in frame.replace(EOL, "")

    def test_status_region(self):
        """Test that the progress bar and status line close the frame."""
        comp, _ = make_compositor()
        frame = comp.compose(WORDS, 4, 600, False)
        last_two = frame.split(EOL)[-2:]
        assert last_two[0].endswith("] 100%")
        assert last_two[1].startswith("600 WPM | 0s left")

    def test_context_words(self):
        """Test that neighbours are shown dimmed when context is enabled."""
        comp, _ = make_compositor(context=True)
        frame = comp.compose(WORDS, 2, 600, False)
        assert DIM + "world." + RESET in frame
        assert DIM + "one" + RESET in frame

    def test_context_edges(self):
        """Test that the first and last words have a single neighbour."""
        comp, _ = make_compositor(context=True)
        assert comp.compose(WORDS, 0, 600, False).count(DIM) == 1
        assert comp.compose(WORDS, 4, 600, False).count(DIM) == 1

    def test_no_context_by_default(self):
        """Test that neighbours are hidden by default."""
        comp, _ = make_compositor()
        assert DIM not in comp.compose(WORDS, 2, 600, False)

    def test_draw_single_write(self):
        """Test that draw writes the composed frame."""
        comp, out = make_compositor()
        comp.draw(WORDS, 1, 300, True)
        assert out.getvalue() == comp.compose(WORDS, 1, 300, True)
        assert "PAUSED" in out.getvalue()

    def test_clear_and_write_lines(self):
        """Test clearing and plain line output."""
        comp, out = make_compositor()
        comp.clear()
        comp.write_lines(["one", "two"])
        assert out.getvalue() == CLEAR_SCREEN + "one" + EOL + "two" + EOL

    @pytest.mark.parametrize("size", [(20, 6), (80, 24), (200, 60)])
    def test_uses_size_fn(self, size):
        """Test that the frame is sized from the size function."""
        comp, _ = make_compositor(size=size)
        frame = comp.compose(WORDS, 0, 600, False)
        bar_line = frame.split(EOL)[-2]
        assert len(bar_line) == max(size[0], 10 + 2 + len(" 20%"))

    @pytest.mark.parametrize("size", [(80, 8), (80, 10), (40, 12), (120, 30)])
    def test_frame_fits_terminal_height(self, size):
        """Test that short terminals never scroll, context rows included."""
        comp, _ = make_compositor(context=True, size=size)
        frame = comp.compose(WORDS, 2, 600, False)
        rows = frame[len(CLEAR_SCREEN):].split(EOL)
        assert len(rows) <= size[1]
        assert DIM + "world." + RESET in frame
        assert DIM + "one" + RESET in frame

    def test_roomy_terminal_keeps_padding(self):
        """Test that the word keeps its vertical centering when it fits."""
        comp, _ = make_compositor()
        rendered = comp.renderer.render(WORDS[0], 80, 24)
        frame = comp.compose(WORDS, 0, 600, False)
        assert len(frame[len(CLEAR_SCREEN):].split(EOL)) == len(rendered) + STATUS_ROWS


class TestFitRows:
    """Tests for fit_rows function."""

    def test_fits_unchanged(self):
        rows = ["", "a", "b"]
        assert fit_rows(rows, 5) == rows

    def test_padding_dropped_first(self):
        """Test that leading blank rows go before glyph rows."""
        assert fit_rows(["", "", "a", "b"], 3) == ["", "a", "b"]

    def test_glyph_rows_cut_from_bottom(self):
        """Test that glyph rows are cut from the bottom once padding is gone."""
        assert fit_rows(["", "a", "b", "c"], 2) == ["a", "b"]

    def test_at_least_one_row(self):
        assert fit_rows(["", "a", "b"], -3) == ["a"]
