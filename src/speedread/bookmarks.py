#!/usr/bin/env python3
"""Reading position bookmarks for speedread.

Bookmarks are stored as a JSON object mapping absolute file paths to
word indices. Only local files are bookmarked. Any failure to read or
write the store behaves as "no bookmark".
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable, Dict, Optional

from .sources import is_url
from .system import ensure_parent_dir, user_config_dir


BOOKMARK_FILENAME = "bookmarks.json"


def default_bookmark_path() -> Optional[Path]:
    """Return ~/.config/speedread/bookmarks.json, or None without a home dir."""
    try:
        return user_config_dir() / BOOKMARK_FILENAME
    except (RuntimeError, KeyError, OSError):
        return None


def should_bookmark(source: Optional[str]) -> bool:
    """Only local files get bookmarks (not URLs or stdin)."""
    return bool(source) and not is_url(source)


def _key_for(filename: str) -> str:
    return os.path.abspath(filename)


class BookmarkStore:
    """JSON-backed bookmark store.

    Args:
        path: Store location; defaults to default_bookmark_path()
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path if path is not None else default_bookmark_path()

    def load_all(self) -> Dict[str, int]:
        """Read every bookmark; malformed or missing stores read as empty."""
        if self.path is None:
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        if not isinstance(data, dict):
            return {}
        out: Dict[str, int] = {}
        for k, v in data.items():
            if isinstance(v, int) and not isinstance(v, bool):
                out[str(k)] = v
        return out

    def get(self, filename: Optional[str]) -> int:
        """Return the saved index for a file, or 0 if there is none."""
        if not filename:
            return 0
        return self.load_all().get(_key_for(filename), 0)

    def save(self, filename: Optional[str], position: int) -> None:
        """Save a position for a file; a position of 0 or less removes it."""
        if self.path is None or not filename:
            return
        bookmarks = self.load_all()
        key = _key_for(filename)
        if position <= 0:
            bookmarks.pop(key, None)
        else:
            bookmarks[key] = int(position)

        try:
            ensure_parent_dir(self.path)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(json.dumps(bookmarks, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError:
            return


def prompt_resume(saved: int, total: int, ask: Optional[Callable[[str], str]] = None) -> bool:
    """Ask whether to resume from a saved position.

    Args:
        saved: Saved word index
        total: Total words in the document
        ask: Prompt function (defaults to the builtin input)

    Returns:
        True on an empty answer or "y"/"yes"; False otherwise or on EOF
    """
    if ask is None:
        ask = input
    pct = saved / float(total) * 100 if total else 0.0
    try:
        answer = ask(f"Found bookmark at word {saved + 1}/{total} ({pct:.0f}%). Resume? [Y/n] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("", "y", "yes")
