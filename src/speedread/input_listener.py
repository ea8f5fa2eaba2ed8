#!/usr/bin/env python3
"""Keyboard listener for speedread.

Reads raw bytes from the controlling terminal on a background thread and
applies them to the shared PlaybackState.

Keys:
- Up / Down arrows: +/- 25 WPM
- Right / Left arrows: next / previous word
- Space: pause / resume
- 0-9: jump to 0%, 10%, ... 90%
- Ctrl-C: interrupt (save position and exit)
"""
from __future__ import annotations

import errno
import os
import threading
from typing import Callable, List, Optional

from .config import WPM_STEP
from .playback import PlaybackState


ESC = 0x1B
CTRL_C = 0x03
SPACE = ord(" ")

ACTION_FASTER = "faster"
ACTION_SLOWER = "slower"
ACTION_FORWARD = "forward"
ACTION_REWIND = "rewind"
ACTION_TOGGLE_PAUSE = "toggle_pause"
ACTION_JUMP = "jump"
ACTION_INTERRUPT = "interrupt"

READ_SIZE = 32

# pause before retrying a failed read
READ_RETRY_DELAY = 0.05

# the terminal is gone; reading again would fail forever
FATAL_READ_ERRNOS = (errno.EBADF, errno.EIO)


class InputListener:
    """Apply keystrokes from a terminal descriptor to playback state.

    Args:
        fd: File descriptor of the controlling terminal (in raw mode)
        state: Shared playback state
        on_interrupt: Called once when Ctrl-C is read
        read: Read function with the os.read signature
    """

    def __init__(
        self,
        fd: int,
        state: PlaybackState,
        on_interrupt: Callable[[], None],
        read: Callable[[int, int], bytes] = os.read,
    ) -> None:
        self.fd = fd
        self.state = state
        self.on_interrupt = on_interrupt
        self._read = read
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def handle_bytes(self, data: bytes) -> List[str]:
        """Apply one read's worth of input.

        A single read may hold several keys (fast typing); each is applied
        in order. Nothing after Ctrl-C is processed.

        Args:
            data: Bytes returned by a single read

        Returns:
            Names of the actions taken; ignored keys are left out
        """
        actions: List[str] = []
        pos = 0
        while pos < len(data):
            if data[pos] == ESC:
                if data[pos + 1:pos + 2] == b"[" and pos + 2 < len(data):
                    action = self._handle_arrow(data[pos + 2])
                    pos += 3
                else:
                    action = None
                    pos += 1
            else:
                action = self._handle_key(data[pos])
                pos += 1
            if action is not None:
                actions.append(action)
            if action == ACTION_INTERRUPT:
                break
        return actions

    def _handle_arrow(self, b: int) -> Optional[str]:
        key = chr(b)
        if key == "A":
            self.state.adjust_wpm(WPM_STEP)
            return ACTION_FASTER
        if key == "B":
            self.state.adjust_wpm(-WPM_STEP)
            return ACTION_SLOWER
        if key == "C":
            self.state.step(1)
            return ACTION_FORWARD
        if key == "D":
            self.state.step(-1)
            return ACTION_REWIND
        return None

    def _handle_key(self, b: int) -> Optional[str]:
        if b == SPACE:
            self.state.toggle_pause()
            return ACTION_TOGGLE_PAUSE
        if ord("0") <= b <= ord("9"):
            self.state.jump_to_percent(b - ord("0"))
            return ACTION_JUMP
        if b == CTRL_C:
            self._stop.set()
            self.on_interrupt()
            return ACTION_INTERRUPT
        return None

    def run(self) -> None:
        """Blocking read loop; returns after Ctrl-C, stop() or a closed or hung-up terminal."""
        while not self._stop.is_set():
            try:
                data = self._read(self.fd, READ_SIZE)
            except InterruptedError:
                continue
            except OSError as e:
                if e.errno in FATAL_READ_ERRNOS:
                    return
                if self._stop.wait(READ_RETRY_DELAY):
                    return
                continue
            if self._stop.is_set():
                return
            if not data:
                if self._stop.wait(READ_RETRY_DELAY):
                    return
                continue
            self.handle_bytes(data)

    def start(self) -> threading.Thread:
        """Run the listener on a daemon thread."""
        self._thread = threading.Thread(target=self.run, name="speedread-input", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self) -> None:
        """Ask the loop to exit after its current read returns."""
        self._stop.set()
