#!/usr/bin/env python3
"""System utilities for speedread.

This module provides system-level utilities including:
- File system operations
- Per-user configuration location
- Terminal size probing
"""
from __future__ import annotations

import shutil
from pathlib import Path
from typing import Tuple


APP_NAME = "speedread"

DEFAULT_TERMINAL_SIZE = (80, 24)


# ============================================================
# File System Utilities
# ============================================================

def ensure_parent_dir(path: Path) -> None:
    """Ensure that a file's parent directory exists, creating it if needed.

    Args:
        path: Path to a file whose parent directory should exist
    """
    parent = path.parent
    if parent and not parent.exists():
        parent.mkdir(parents=True, exist_ok=True)


def user_config_dir() -> Path:
    """Return the per-user configuration directory (~/.config/speedread).

    Raises:
        RuntimeError: If the home directory cannot be determined
    """
    return Path.home() / ".config" / APP_NAME


# ============================================================
# Terminal
# ============================================================

def get_terminal_size() -> Tuple[int, int]:
    """Get the terminal size as (columns, rows).

    Returns:
        Terminal size, or 80x24 if it cannot be determined
    """
    size = shutil.get_terminal_size(fallback=DEFAULT_TERMINAL_SIZE)
    cols = size.columns if size.columns > 0 else DEFAULT_TERMINAL_SIZE[0]
    rows = size.lines if size.lines > 0 else DEFAULT_TERMINAL_SIZE[1]
    return cols, rows
