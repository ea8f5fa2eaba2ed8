"""speedread - terminal RSVP speed reader.

This package shows text one word at a time as large block-glyph letters,
centered on the word's optimal recognition point, at a pace the reader
controls from the keyboard.
"""
from .cli import main
from .models import TOOL_VERSION

__version__ = TOOL_VERSION
__all__ = ["main", "__version__"]
