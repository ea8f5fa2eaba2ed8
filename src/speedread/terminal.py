#!/usr/bin/env python3
"""Raw terminal access for speedread.

The controlling terminal is opened on its own (not through stdin) so
keys still work when the text is piped in.
"""
from __future__ import annotations

import os
import termios
import tty
from typing import List, Optional


TTY_PATH = "/dev/tty"


class RawTerminal:
    """Put the controlling terminal in raw mode and restore it afterwards.

    Usage:
        with RawTerminal() as term:
            os.read(term.fd, 3)

    Raises:
        OSError: If the terminal device cannot be opened
        termios.error: If the terminal attributes cannot be changed
    """

    def __init__(self, path: str = TTY_PATH) -> None:
        self.path = path
        self.fd: Optional[int] = None
        self._saved: Optional[List] = None

    def open(self) -> "RawTerminal":
        self.fd = os.open(self.path, os.O_RDWR | os.O_NOCTTY)
        try:
            self._saved = termios.tcgetattr(self.fd)
            tty.setraw(self.fd)
        except (termios.error, OSError):
            os.close(self.fd)
            self.fd = None
            raise
        return self

    def restore(self) -> None:
        """Restore the saved terminal mode. Safe to call more than once."""
        if self.fd is None or self._saved is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
        finally:
            self._saved = None

    def close(self) -> None:
        self.restore()
        if self.fd is not None:
            fd, self.fd = self.fd, None
            os.close(fd)

    def __enter__(self) -> "RawTerminal":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
