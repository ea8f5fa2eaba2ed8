#!/usr/bin/env python3
"""Playback engine for speedread.

This module provides:
- Atomic scalar cells used to share state with the key listener
- PlaybackState: current index, words per minute and paused flag
- Per-word delay computation
- PlaybackController: the timed display/advance loop

Two actors touch PlaybackState concurrently: the controller loop and the
input listener thread. Each field is its own atomic cell; there is no
lock spanning fields, so a reader may see a new index with an old wpm.
The controller advances with compare-and-swap so a jump made by the
listener during a word's delay is never overwritten.
"""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .config import clamp_wpm
from .models import PUNCT_GENERAL, PUNCT_SENTENCE, Word
from .stats import SessionStats, SessionSummary


# ============================================================
# Constants
# ============================================================

# reference word length; longer words get extra time
AVERAGE_WORD_LEN = 5
EXTRA_PER_CHAR = 0.08

SENTENCE_PAUSE = 0.150
PAUSE_POLL_INTERVAL = 0.100

STATE_RUNNING = "running"
STATE_PAUSED = "paused"
STATE_TERMINATED = "terminated"

COMPLETED = "completed"
INTERRUPTED = "interrupted"


# ============================================================
# Atomic Cells
# ============================================================

class AtomicInt:
    """An integer cell with atomic load/store/compare-and-swap."""

    def __init__(self, value: int = 0) -> None:
        self._value = int(value)
        self._lock = threading.Lock()

    def load(self) -> int:
        with self._lock:
            return self._value

    def store(self, value: int) -> None:
        with self._lock:
            self._value = int(value)

    def compare_and_swap(self, expected: int, new: int) -> bool:
        """Set the value to `new` only if it currently equals `expected`.

        Returns:
            True if the swap happened
        """
        with self._lock:
            if self._value != expected:
                return False
            self._value = int(new)
            return True

    def update(self, fn: Callable[[int], int]) -> int:
        """Atomically replace the value with fn(value) and return it."""
        with self._lock:
            self._value = int(fn(self._value))
            return self._value


class AtomicBool:
    """A boolean cell with atomic load/store/toggle."""

    def __init__(self, value: bool = False) -> None:
        self._value = bool(value)
        self._lock = threading.Lock()

    def load(self) -> bool:
        with self._lock:
            return self._value

    def store(self, value: bool) -> None:
        with self._lock:
            self._value = bool(value)

    def toggle(self) -> bool:
        with self._lock:
            self._value = not self._value
            return self._value


# ============================================================
# Shared State
# ============================================================

class PlaybackState:
    """Shared playback state.

    Invariants: 0 <= index < total and MIN_WPM <= wpm <= MAX_WPM.

    Args:
        total: Number of words in the document (must be positive)
        start_index: Initial position, clamped into range
        wpm: Initial words per minute, clamped into range
    """

    def __init__(self, total: int, start_index: int = 0, wpm: int = 200) -> None:
        if total <= 0:
            raise ValueError("PlaybackState needs at least one word")
        self.total = total
        self.index = AtomicInt(self._clamp_index(start_index))
        self.wpm = AtomicInt(clamp_wpm(wpm))
        self.paused = AtomicBool(False)

    def _clamp_index(self, index: int) -> int:
        return max(0, min(self.total - 1, index))

    def step(self, delta: int) -> int:
        """Move the index by delta, clamped to the first/last word."""
        return self.index.update(lambda i: self._clamp_index(i + delta))

    def jump_to_percent(self, digit: int) -> int:
        """Jump to digit * 10% of the document (0 -> start, 9 -> 90%)."""
        target = self._clamp_index(self.total * (digit * 10) // 100)
        self.index.store(target)
        return target

    def adjust_wpm(self, delta: int) -> int:
        return self.wpm.update(lambda w: clamp_wpm(w + delta))

    def toggle_pause(self) -> bool:
        return self.paused.toggle()

    def try_advance(self, expected: int) -> bool:
        """Advance from `expected` to the next word unless the index moved.

        Returns:
            True if the index was advanced
        """
        if expected + 1 >= self.total:
            return False
        return self.index.compare_and_swap(expected, expected + 1)


# ============================================================
# Pacing
# ============================================================

def word_delay(word: Word, wpm: int, punct_pause_ms: int = 0) -> float:
    """Compute how long a word stays on screen.

    Args:
        word: Word being shown
        wpm: Current words per minute
        punct_pause_ms: Extra pause after non-sentence punctuation

    Returns:
        Delay in seconds: 60/wpm, stretched 8% per character beyond 5,
        plus 150ms after a sentence end or punct_pause_ms after other
        punctuation
    """
    delay = 60.0 / max(1, wpm)
    if word.length > AVERAGE_WORD_LEN:
        delay *= 1.0 + (word.length - AVERAGE_WORD_LEN) * EXTRA_PER_CHAR

    punct = word.punct_class
    if punct == PUNCT_SENTENCE:
        delay += SENTENCE_PAUSE
    elif punct == PUNCT_GENERAL and punct_pause_ms > 0:
        delay += punct_pause_ms / 1000.0
    return delay


# ============================================================
# Controller
# ============================================================

@dataclass
class PlaybackResult:
    """How a playback session ended.

    Attributes:
        reason: COMPLETED or INTERRUPTED
        index: Index of the word on screen when playback stopped
        summary: Session statistics
    """
    reason: str
    index: int
    summary: SessionSummary


class PlaybackController:
    """Run the timed display loop over a word sequence.

    The loop renders the current word, waits for its delay and then
    advances by one word unless the listener moved the index meanwhile.
    While paused it repaints every PAUSE_POLL_INTERVAL so navigation made
    during the pause shows up immediately.

    Args:
        words: Tokenized document
        state: Shared playback state
        compositor: Object with a draw(words, index, wpm, paused) method
        stats: Session statistics accumulator
        punct_pause_ms: Extra delay after non-sentence punctuation
        wait: Sleep function taking seconds and returning True if playback
            should stop; defaults to waiting on the controller's stop event
    """

    def __init__(
        self,
        words: Sequence[Word],
        state: PlaybackState,
        compositor,
        stats: Optional[SessionStats] = None,
        *,
        punct_pause_ms: int = 0,
        wait: Optional[Callable[[float], bool]] = None,
    ) -> None:
        if len(words) != state.total:
            raise ValueError("state.total does not match the word count")
        self.words = words
        self.state = state
        self.compositor = compositor
        self.stats = stats if stats is not None else SessionStats()
        self.punct_pause_ms = punct_pause_ms
        self.phase = STATE_RUNNING
        self._stop = threading.Event()
        self._wait = wait if wait is not None else self._stop.wait

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def stop(self) -> None:
        """Request termination; wakes a pending wait immediately."""
        self._stop.set()

    def _sleep(self, seconds: float) -> bool:
        return bool(self._wait(seconds)) or self._stop.is_set()

    def _finish(self, reason: str) -> PlaybackResult:
        self.phase = STATE_TERMINATED
        return PlaybackResult(reason=reason, index=self.state.index.load(), summary=self.stats.finalize())

    def _pause_loop(self) -> bool:
        """Repaint while paused. Returns True if a stop arrived."""
        self.phase = STATE_PAUSED
        self.stats.begin_pause()
        try:
            while self.state.paused.load():
                i = self.state.index.load()
                self.compositor.draw(self.words, i, self.state.wpm.load(), True)
                if self._sleep(PAUSE_POLL_INTERVAL):
                    return True
            return False
        finally:
            self.stats.end_pause()
            self.phase = STATE_RUNNING

    def run(self) -> PlaybackResult:
        """Play until the last word has been shown or stop() is called."""
        last = self.state.total - 1
        while True:
            if self._stop.is_set():
                return self._finish(INTERRUPTED)

            if self.state.paused.load():
                if self._pause_loop():
                    return self._finish(INTERRUPTED)
                continue

            i = self.state.index.load()
            word = self.words[i]
            wpm = self.state.wpm.load()
            self.compositor.draw(self.words, i, wpm, False)

            if self._sleep(word_delay(word, wpm, self.punct_pause_ms)):
                return self._finish(INTERRUPTED)
            self.stats.record_word()

            if i >= last:
                # finished unless the reader navigated away during the delay
                if self.state.index.compare_and_swap(i, i):
                    return self._finish(COMPLETED)
                continue
            self.state.try_advance(i)
