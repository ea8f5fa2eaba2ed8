#!/usr/bin/env python3
"""Screen compositing for speedread.

This module assembles a full frame (rendered word, optional context
words, progress bar and status line) and writes it to the terminal in a
single write. Lines end in CR/LF because the terminal is in raw mode.
"""
from __future__ import annotations

import sys
from typing import Callable, List, Optional, Sequence, TextIO, Tuple, Union

from .logging_utils import format_time_remaining
from .models import Word
from .rendering import WordRenderer
from .system import get_terminal_size


CLEAR_SCREEN = "\033[2J\033[H"
DIM = "\033[2m"
RESET = "\033[0m"
EOL = "\r\n"

MIN_BAR_WIDTH = 10
BAR_FILLED = "█"
BAR_EMPTY = "░"

CONTROL_HINTS = "Space, ↑↓, ←→, 0-9 jump"
PAUSED_HINTS = "PAUSED (space, ↑↓, ←→, 0-9)"

# blank separator, progress bar and status line below the word
STATUS_ROWS = 3


def fit_rows(rows: List[str], limit: int) -> List[str]:
    """Shrink rendered rows to at most `limit` (minimum 1) rows.

    Leading blank padding rows are dropped first, then rows from the bottom.
    """
    limit = max(1, limit)
    overflow = len(rows) - limit
    if overflow <= 0:
        return rows
    lead = 0
    while lead < len(rows) and not rows[lead]:
        lead += 1
    rows = rows[min(lead, overflow):]
    return rows[:limit]


# ============================================================
# Status Region
# ============================================================

def render_progress_bar(width: int, current: int, total: int) -> str:
    """Render a progress bar such as "[████░░░░] 50%" sized to the terminal.

    Args:
        width: Terminal columns
        current: Words shown so far (1-based position)
        total: Total words

    Returns:
        Progress bar string; the bar itself is never narrower than 10 cells
    """
    total = max(1, total)
    current = max(0, min(current, total))
    percent_str = f" {current * 100 // total}%"
    bar_width = max(MIN_BAR_WIDTH, width - 2 - len(percent_str))
    filled = bar_width * current // total
    return "[" + BAR_FILLED * filled + BAR_EMPTY * (bar_width - filled) + "]" + percent_str


def status_line(wpm: int, remaining_words: int, *, paused: bool) -> str:
    """Build the WPM / time-left line with control hints."""
    left = format_time_remaining(remaining_words, wpm)
    if paused:
        return f"{wpm} WPM | {left} left - {PAUSED_HINTS}"
    return f"{wpm} WPM | {left} left - {CONTROL_HINTS}"


def context_line(word: Union[Word, str], term_width: int) -> str:
    """Center a neighbouring word in dim text."""
    text = str(word)
    padding = max(0, (term_width - len(text)) // 2)
    return " " * padding + DIM + text + RESET


# ============================================================
# Compositor
# ============================================================

class TerminalCompositor:
    """Paint frames for the playback loop.

    The compositor is the only writer to the screen.
    """

    def __init__(
        self,
        renderer: WordRenderer,
        *,
        context: bool = False,
        out: Optional[TextIO] = None,
        size_fn: Callable[[], Tuple[int, int]] = get_terminal_size,
    ) -> None:
        self.renderer = renderer
        self.context = context
        self.out = out if out is not None else sys.stdout
        self.size_fn = size_fn

    def compose(self, words: Sequence[Word], index: int, wpm: int, paused: bool) -> str:
        """Build the full frame for words[index], screen clear included."""
        term_width, term_height = self.size_fn()
        total = len(words)
        word = words[index]

        before: List[str] = []
        after: List[str] = []
        if self.context and index > 0:
            before.append(context_line(words[index - 1], term_width))
        if self.context and index < total - 1:
            after.append(context_line(words[index + 1], term_width))

        rows = self.renderer.render(word, term_width, term_height)
        rows = fit_rows(rows, term_height - STATUS_ROWS - len(before) - len(after))
        lines = before + rows + after

        frame = CLEAR_SCREEN + "".join(line + EOL for line in lines)
        frame += EOL + render_progress_bar(term_width, index + 1, total)
        frame += EOL + status_line(wpm, total - index - 1, paused=paused)
        return frame

    def draw(self, words: Sequence[Word], index: int, wpm: int, paused: bool) -> None:
        self.out.write(self.compose(words, index, wpm, paused))
        self.out.flush()

    def clear(self) -> None:
        self.out.write(CLEAR_SCREEN)
        self.out.flush()

    def write_lines(self, lines: Sequence[str]) -> None:
        """Write plain lines with raw-mode safe line endings."""
        self.out.write("".join(line + EOL for line in lines))
        self.out.flush()
