#!/usr/bin/env python3
"""Data models for speedread.

This module contains the data classes shared across the application:
- TOOL_VERSION: Version constant
- ResolvedConfig: Reader settings dataclass
- Word: A single token of the document being read
"""
from __future__ import annotations

from dataclasses import dataclass


# ============================================================
# Versioning
# ============================================================

TOOL_VERSION = "0.3.0"


# ============================================================
# Configuration
# ============================================================

@dataclass
class ResolvedConfig:
    """Resolved configuration for a reading session.

    This dataclass contains all settings that control pacing,
    focal highlighting and how words are scaled on screen.
    """
    # pacing
    wpm: int = 200
    punct_pause_ms: int = 0

    # focal point (ORP) highlighting
    focal: bool = True
    focal_color: str = "red"

    # show dimmed previous/next words
    context: bool = False

    # uniform scale reference: "longest" word in document or "fixed" length
    scale_ref: str = "longest"


# ============================================================
# Words
# ============================================================

SENTENCE_ENDINGS = ".!?"
PUNCTUATION = ".,!?;:\"'"

PUNCT_NONE = "none"
PUNCT_GENERAL = "general"
PUNCT_SENTENCE = "sentence"


def upper_chars(text: str) -> str:
    """Uppercase one character at a time so the length never changes.

    Characters whose uppercase form is several characters long (such as
    "\u00df" -> "SS") are kept as they are.
    """
    out = []
    for ch in text:
        up = ch.upper()
        out.append(up if len(up) == 1 else ch)
    return "".join(out)


@dataclass(frozen=True)
class Word:
    """A whitespace-delimited token, stored exactly as written.

    Attributes:
        text: The token text (case preserved)
    """
    text: str

    @property
    def upper(self) -> str:
        """Uppercase form used for rendering."""
        return upper_chars(self.text)

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def punct_class(self) -> str:
        """Trailing punctuation class: none, general or sentence."""
        if not self.text:
            return PUNCT_NONE
        last = self.text[-1]
        if last in SENTENCE_ENDINGS:
            return PUNCT_SENTENCE
        if last in PUNCTUATION:
            return PUNCT_GENERAL
        return PUNCT_NONE

    def __str__(self) -> str:
        return self.text
