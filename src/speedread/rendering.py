#!/usr/bin/env python3
"""Word rendering for speedread.

This module turns a single word into block-glyph rows sized for the
terminal:
- Optimal Recognition Point (ORP) selection
- Uniform scale computation shared across a session
- Integer nearest-neighbor magnification
- ORP-centered placement and focal color highlighting
"""
from __future__ import annotations

from typing import List, Union

from .glyphs import CHAR_WIDTH, FONT_HEIGHT, lookup, normalize_row
from .models import Word, upper_chars


# ============================================================
# Constants
# ============================================================

# fraction of usable terminal height the word may occupy
TARGET_HEIGHT_PERCENT = 0.5

# columns/rows kept free around the word
MARGIN = 4

MIN_SCALE = 1.0
MAX_SCALE = 3.0

ANSI_RESET = "\033[0m"


# ============================================================
# ORP
# ============================================================

def calculate_orp(word_len: int) -> int:
    """Return the Optimal Recognition Point index for a word length.

    The focal point sits slightly left of center and moves right as
    words get longer.

    Args:
        word_len: Word length in characters

    Returns:
        0-based index of the character the eye should fixate on
    """
    if word_len <= 1:
        return 0
    if word_len <= 5:
        return 1
    if word_len <= 9:
        return 2
    if word_len <= 13:
        return 3
    return 4


# ============================================================
# Scaling
# ============================================================

def compute_scale(word_len: int, term_width: int, term_height: int, reference_len: int) -> float:
    """Compute the display scale for a word.

    The base scale is shared by every word of the session: the smaller of a
    height-based scale and a width-based scale for the reference length. A
    word that still overflows at the base scale is shrunk on its own.

    Args:
        word_len: Length of the word being rendered
        term_width: Terminal columns
        term_height: Terminal rows
        reference_len: Reference word length for the width-based scale

    Returns:
        Scale factor clamped to [1.0, 3.0]
    """
    max_text_width = term_width - MARGIN
    max_text_height = term_height - MARGIN

    height_scale = max_text_height * TARGET_HEIGHT_PERCENT / FONT_HEIGHT
    width_scale = max_text_width / float(max(1, reference_len) * CHAR_WIDTH)
    base_scale = min(height_scale, width_scale)

    scale = base_scale
    total_width = word_len * CHAR_WIDTH
    if total_width > 0 and total_width * base_scale > max_text_width:
        scale = max_text_width / float(total_width)

    return max(MIN_SCALE, min(MAX_SCALE, scale))


def scale_factor(scale: float) -> int:
    """Round a scale to the nearest integer magnification (at least 1)."""
    return max(1, int(scale + 0.5))


def scale_up(lines: List[str], factor: int) -> List[str]:
    """Magnify rows by repeating each character and each row `factor` times."""
    if factor <= 1:
        return list(lines)
    result: List[str] = []
    for line in lines:
        scaled = "".join(ch * factor for ch in line)
        result.extend([scaled] * factor)
    return result


# ============================================================
# Row Building
# ============================================================

def render_base_rows(text: str) -> List[str]:
    """Concatenate glyph rows for each character at base size.

    Args:
        text: Text to render (expected uppercase)

    Returns:
        FONT_HEIGHT rows, each len(text) * CHAR_WIDTH columns wide
    """
    rows: List[str] = []
    for row in range(FONT_HEIGHT):
        parts = []
        for ch in text:
            glyph = lookup(ch)
            parts.append(normalize_row(glyph[row]) if row < len(glyph) else " " * CHAR_WIDTH)
        rows.append("".join(parts))
    return rows


def colorize_orp_column(line: str, start_col: int, end_col: int, color_code: str) -> str:
    """Wrap the column range [start_col, end_col) of a line in a color escape.

    Lines that do not reach start_col are returned unchanged.
    """
    if start_col < 0 or start_col >= len(line):
        return line
    end_col = min(end_col, len(line))
    return line[:start_col] + color_code + line[start_col:end_col] + ANSI_RESET + line[end_col:]


# ============================================================
# Word Rendering
# ============================================================

def render_word(
    word: Union[Word, str],
    term_width: int,
    term_height: int,
    *,
    focal: bool,
    focal_color_code: str,
    reference_len: int,
) -> List[str]:
    """Render a word as scaled, centered block-glyph rows.

    Args:
        word: Word to render (case is ignored)
        term_width: Terminal columns
        term_height: Terminal rows
        focal: If True, center on the ORP character and highlight it
        focal_color_code: ANSI color escape for the ORP highlight
        reference_len: Reference word length for uniform scaling

    Returns:
        Rows to print, top padding included; never wider than the terminal
        (color escapes aside) and never taller than it
    """
    text = upper_chars(str(word))
    word_len = len(text)
    orp_index = calculate_orp(word_len)

    scale = compute_scale(word_len, term_width, term_height, reference_len)
    factor = scale_factor(scale)

    lines = render_base_rows(text or " ")
    if scale > 1.0:
        lines = scale_up(lines, factor)

    scaled_char_width = CHAR_WIDTH * factor
    line_width = len(lines[0])

    if focal:
        orp_center_col = orp_index * scaled_char_width + scaled_char_width // 2
        padding = term_width // 2 - orp_center_col
    else:
        padding = (term_width - line_width) // 2
    padding = max(0, padding)

    max_width = max(0, term_width)
    out: List[str] = []
    for line in lines:
        line = (" " * padding + line)[:max_width]
        if focal and word_len > 0:
            orp_start = padding + orp_index * scaled_char_width
            line = colorize_orp_column(line, orp_start, orp_start + scaled_char_width, focal_color_code)
        out.append(line)

    max_rows = max(1, term_height)
    if len(out) > max_rows:
        out = out[:max_rows]
    if len(out) < term_height:
        top_padding = (term_height - len(out)) // 2
        out = [""] * top_padding + out
    return out


class WordRenderer:
    """Render words with settings fixed for a reading session."""

    def __init__(self, *, focal: bool, focal_color_code: str, reference_len: int) -> None:
        self.focal = focal
        self.focal_color_code = focal_color_code
        self.reference_len = max(1, reference_len)

    def render(self, word: Union[Word, str], term_width: int, term_height: int) -> List[str]:
        return render_word(
            word,
            term_width,
            term_height,
            focal=self.focal,
            focal_color_code=self.focal_color_code,
            reference_len=self.reference_len,
        )
