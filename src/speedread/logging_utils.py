#!/usr/bin/env python3
"""Logging and formatting utilities for speedread.

This module provides logging functions and the time formatting helpers
used by the status line and the session summary.
"""
from __future__ import annotations

import sys


# ============================================================
# Logging
# ============================================================

def log(msg: str, *, quiet: bool = False) -> None:
    """Print a log message to stdout unless quiet mode is enabled.

    Args:
        msg: Message to log
        quiet: If True, suppress output
    """
    if not quiet:
        print(msg, flush=True)


def warn(msg: str, *, quiet: bool = False) -> None:
    """Print a warning message to stderr unless quiet mode is enabled.

    Args:
        msg: Warning message to display
        quiet: If True, suppress output
    """
    if not quiet:
        print(f"WARNING: {msg}", file=sys.stderr, flush=True)


def die(msg: str, code: int = 1) -> int:
    """Print an error message to stderr and return an exit code.

    Args:
        msg: Error message to display
        code: Exit code to return (default: 1)

    Returns:
        The exit code provided
    """
    print(f"ERROR: {msg}", file=sys.stderr, flush=True)
    return code


# ============================================================
# Time Formatting
# ============================================================

def format_duration(seconds: float) -> str:
    """Format a duration in seconds as HH:MM:SS or MM:SS.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string (e.g., "1:23:45" or "23:45")
    """
    seconds = max(0, int(round(seconds)))
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    if h > 0:
        return f"{h:d}:{m:02d}:{s:02d}"
    return f"{m:d}:{s:02d}"


def format_time_remaining(remaining_words: int, wpm: int) -> str:
    """Estimate reading time left at the current pace.

    Args:
        remaining_words: Words still to be shown
        wpm: Current words per minute

    Returns:
        "42s", "3m 5s" or "1h 12m"; empty string if wpm is not positive
    """
    if wpm <= 0:
        return ""
    seconds = max(0, remaining_words) * 60 // wpm
    if seconds < 60:
        return f"{seconds}s"
    minutes, secs = divmod(seconds, 60)
    if minutes < 60:
        return f"{minutes}m {secs}s"
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m"
