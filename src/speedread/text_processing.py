#!/usr/bin/env python3
"""Text processing utilities for speedread.

This module splits raw text into word tokens and classifies their
trailing punctuation for pacing.
"""
from __future__ import annotations

from typing import List, Sequence, Union

from .models import PUNCT_GENERAL, PUNCT_SENTENCE, Word


class EmptyInputError(ValueError):
    """Raised when the input text contains no words."""


# ============================================================
# Tokenizing
# ============================================================

def split_words(text: str) -> List[str]:
    """Split text on runs of whitespace.

    Punctuation stays attached to its word and case is preserved.

    Args:
        text: Raw input text

    Returns:
        List of non-empty tokens in reading order
    """
    return [w for w in text.split() if w]


def tokenize(text: str) -> List[Word]:
    """Tokenize raw text into Word objects.

    Args:
        text: Raw input text

    Returns:
        Ordered list of words

    Raises:
        EmptyInputError: If the text has no tokens
    """
    words = [Word(w) for w in split_words(text or "")]
    if not words:
        raise EmptyInputError("no words found in input")
    return words


# ============================================================
# Punctuation
# ============================================================

def _as_word(word: Union[Word, str]) -> Word:
    return word if isinstance(word, Word) else Word(word)


def ends_with_sentence(word: Union[Word, str]) -> bool:
    """Check if a word ends a sentence (. ! ?)."""
    return _as_word(word).punct_class == PUNCT_SENTENCE


def ends_with_punctuation(word: Union[Word, str]) -> bool:
    """Check if a word ends in any pause-worthy punctuation, sentence enders included."""
    return _as_word(word).punct_class in (PUNCT_GENERAL, PUNCT_SENTENCE)


def find_max_word_len(words: Sequence[Union[Word, str]]) -> int:
    """Find the length of the longest word.

    Args:
        words: Word sequence

    Returns:
        Longest length in characters, at least 1
    """
    longest = max((len(str(w)) for w in words), default=0)
    return max(1, longest)
