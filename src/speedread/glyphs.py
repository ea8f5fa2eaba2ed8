#!/usr/bin/env python3
"""Block-glyph font for speedread.

Every glyph is FONT_HEIGHT rows of exactly CHAR_WIDTH columns. The table is
built once at import and exposed read-only.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple


FONT_HEIGHT = 5
CHAR_WIDTH = 9

Glyph = Tuple[str, ...]


_FONT: Dict[str, Glyph] = {
    "A": (
        "  █████  ",
        " ██   ██ ",
        " ███████ ",
        " ██   ██ ",
        " ██   ██ ",
    ),
    "B": (
        " ██████  ",
        " ██   ██ ",
        " ██████  ",
        " ██   ██ ",
        " ██████  ",
    ),
    "C": (
        "  █████  ",
        " ██      ",
        " ██      ",
        " ██      ",
        "  █████  ",
    ),
    "D": (
        " ██████  ",
        " ██   ██ ",
        " ██   ██ ",
        " ██   ██ ",
        " ██████  ",
    ),
    "E": (
        " ███████ ",
        " ██      ",
        " █████   ",
        " ██      ",
        " ███████ ",
    ),
    "F": (
        " ███████ ",
        " ██      ",
        " █████   ",
        " ██      ",
        " ██      ",
    ),
    "G": (
        "  █████  ",
        " ██      ",
        " ██  ███ ",
        " ██   ██ ",
        "  █████  ",
    ),
    "H": (
        " ██   ██ ",
        " ██   ██ ",
        " ███████ ",
        " ██   ██ ",
        " ██   ██ ",
    ),
    "I": (
        " ███████ ",
        "   ██    ",
        "   ██    ",
        "   ██    ",
        " ███████ ",
    ),
    "J": (
        " ███████ ",
        "     ██  ",
        "     ██  ",
        " ██  ██  ",
        "  ████   ",
    ),
    "K": (
        " ██   ██ ",
        " ██  ██  ",
        " █████   ",
        " ██  ██  ",
        " ██   ██ ",
    ),
    "L": (
        " ██      ",
        " ██      ",
        " ██      ",
        " ██      ",
        " ███████ ",
    ),
    "M": (
        " ██   ██ ",
        " ███ ███ ",
        " ██ █ ██ ",
        " ██   ██ ",
        " ██   ██ ",
    ),
    "N": (
        " ██   ██ ",
        " ███  ██ ",
        " ██ █ ██ ",
        " ██  ███ ",
        " ██   ██ ",
    ),
    "O": (
        "  █████  ",
        " ██   ██ ",
        " ██   ██ ",
        " ██   ██ ",
        "  █████  ",
    ),
    "P": (
        " ██████  ",
        " ██   ██ ",
        " ██████  ",
        " ██      ",
        " ██      ",
    ),
    "Q": (
        "  █████  ",
        " ██   ██ ",
        " ██   ██ ",
        " ██  ██  ",
        "  ████ █ ",
    ),
    "R": (
        " ██████  ",
        " ██   ██ ",
        " ██████  ",
        " ██  ██  ",
        " ██   ██ ",
    ),
    "S": (
        "  █████  ",
        " ██      ",
        "  █████  ",
        "      ██ ",
        "  █████  ",
    ),
    "T": (
        " ███████ ",
        "   ██    ",
        "   ██    ",
        "   ██    ",
        "   ██    ",
    ),
    "U": (
        " ██   ██ ",
        " ██   ██ ",
        " ██   ██ ",
        " ██   ██ ",
        "  █████  ",
    ),
    "V": (
        " ██   ██ ",
        " ██   ██ ",
        " ██   ██ ",
        "  ██ ██  ",
        "   ███   ",
    ),
    "W": (
        " ██   ██ ",
        " ██   ██ ",
        " ██ █ ██ ",
        " ███ ███ ",
        " ██   ██ ",
    ),
    "X": (
        " ██   ██ ",
        "  ██ ██  ",
        "   ███   ",
        "  ██ ██  ",
        " ██   ██ ",
    ),
    "Y": (
        " ██   ██ ",
        "  ██ ██  ",
        "   ███   ",
        "   ██    ",
        "   ██    ",
    ),
    "Z": (
        " ███████ ",
        "     ██  ",
        "   ██    ",
        "  ██     ",
        " ███████ ",
    ),
    "0": (
        "  █████  ",
        " ██  ███ ",
        " ██ █ ██ ",
        " ███  ██ ",
        "  █████  ",
    ),
    "1": (
        "   ██    ",
        "  ███    ",
        "   ██    ",
        "   ██    ",
        " ███████ ",
    ),
    "2": (
        "  █████  ",
        " ██   ██ ",
        "    ██   ",
        "  ██     ",
        " ███████ ",
    ),
    "3": (
        "  █████  ",
        "      ██ ",
        "   ████  ",
        "      ██ ",
        "  █████  ",
    ),
    "4": (
        " ██   ██ ",
        " ██   ██ ",
        " ███████ ",
        "      ██ ",
        "      ██ ",
    ),
    "5": (
        " ███████ ",
        " ██      ",
        " ██████  ",
        "      ██ ",
        " ██████  ",
    ),
    "6": (
        "  █████  ",
        " ██      ",
        " ██████  ",
        " ██   ██ ",
        "  █████  ",
    ),
    "7": (
        " ███████ ",
        "     ██  ",
        "    ██   ",
        "   ██    ",
        "   ██    ",
    ),
    "8": (
        "  █████  ",
        " ██   ██ ",
        "  █████  ",
        " ██   ██ ",
        "  █████  ",
    ),
    "9": (
        "  █████  ",
        " ██   ██ ",
        "  ██████ ",
        "      ██ ",
        "  █████  ",
    ),
    ".": (
        "         ",
        "         ",
        "         ",
        "         ",
        "   ██    ",
    ),
    ",": (
        "         ",
        "         ",
        "         ",
        "   ██    ",
        "  ██     ",
    ),
    "!": (
        "   ██    ",
        "   ██    ",
        "   ██    ",
        "         ",
        "   ██    ",
    ),
    "?": (
        "  █████  ",
        " ██   ██ ",
        "    ██   ",
        "         ",
        "    ██   ",
    ),
    "'": (
        "   ██    ",
        "  ██     ",
        "         ",
        "         ",
        "         ",
    ),
    '"': (
        " ██  ██  ",
        " ██  ██  ",
        "         ",
        "         ",
        "         ",
    ),
    "-": (
        "         ",
        "         ",
        " ███████ ",
        "         ",
        "         ",
    ),
    " ": (
        "         ",
        "         ",
        "         ",
        "         ",
        "         ",
    ),
}

FONT: Mapping[str, Glyph] = MappingProxyType(_FONT)
BLANK_GLYPH: Glyph = FONT[" "]


def lookup(ch: str) -> Glyph:
    """Return the glyph for a character, or the blank glyph if unsupported.

    Letters are matched case-insensitively.
    """
    return FONT.get(ch.upper(), BLANK_GLYPH)


def normalize_row(row: str) -> str:
    """Pad or truncate a glyph row to exactly CHAR_WIDTH columns."""
    if len(row) < CHAR_WIDTH:
        return row + " " * (CHAR_WIDTH - len(row))
    return row[:CHAR_WIDTH]
