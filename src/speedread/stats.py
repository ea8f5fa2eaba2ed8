#!/usr/bin/env python3
"""Session statistics for speedread.

Tracks wall time, paused time and words shown so the actual reading
speed can be reported when a session completes.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from .logging_utils import format_duration


@dataclass
class SessionSummary:
    """Final figures for a reading session.

    Attributes:
        words_read: Words shown for their full delay
        total_seconds: Wall time from start to finish
        paused_seconds: Time spent paused
        active_seconds: Wall time minus paused time
        actual_wpm: words_read per active minute
    """
    words_read: int
    total_seconds: float
    paused_seconds: float
    active_seconds: float
    actual_wpm: int


class SessionStats:
    """Accumulate timing for one playback session."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.started = clock()
        self.paused_seconds = 0.0
        self.words_read = 0
        self._pause_started: Optional[float] = None
        self._summary: Optional[SessionSummary] = None

    @property
    def is_paused(self) -> bool:
        return self._pause_started is not None

    def begin_pause(self) -> None:
        if self._pause_started is None:
            self._pause_started = self._clock()

    def end_pause(self) -> None:
        if self._pause_started is not None:
            self.paused_seconds += self._clock() - self._pause_started
            self._pause_started = None

    def record_word(self) -> None:
        self.words_read += 1

    def finalize(self) -> SessionSummary:
        """Close the session and compute the summary.

        Calling finalize again returns the first summary unchanged.
        """
        if self._summary is not None:
            return self._summary
        self.end_pause()
        total = max(0.0, self._clock() - self.started)
        active = max(0.0, total - self.paused_seconds)
        actual_wpm = int(self.words_read * 60.0 / active) if active > 0 else 0
        self._summary = SessionSummary(
            words_read=self.words_read,
            total_seconds=total,
            paused_seconds=self.paused_seconds,
            active_seconds=active,
            actual_wpm=actual_wpm,
        )
        return self._summary


def format_summary(summary: SessionSummary) -> List[str]:
    """Format the end-of-session report, one entry per line."""
    return [
        "Session Complete!",
        "─────────────────",
        f"Words read:    {summary.words_read}",
        f"Total time:    {format_duration(summary.total_seconds)}",
        f"Time paused:   {format_duration(summary.paused_seconds)}",
        f"Active time:   {format_duration(summary.active_seconds)}",
        f"Actual WPM:    {summary.actual_wpm}",
    ]
