"""
Terminal Keyboard - raw key capture on POSIX terminals.

Puts stdin into cbreak mode with signal generation turned off, so Ctrl-C
arrives as a key instead of SIGINT, and waits for keys with select().
"""
import logging
import os
import select
import sys
import termios
import tty
from typing import Optional, TextIO

from ..core.input_interface import InputSource
from ..game.controls import QUIT_TOKEN

logger = logging.getLogger(__name__)


ESCAPE = b"\x1b"
CTRL_C = b"\x03"
MAX_SEQUENCE_LENGTH = 16

# ANSI arrow key sequences
ESCAPE_SEQUENCES = {
    b"\x1b[A": "UP",
    b"\x1b[B": "DOWN",
    b"\x1b[C": "RIGHT",
    b"\x1b[D": "LEFT",
    b"\x1bOA": "UP",
    b"\x1bOB": "DOWN",
    b"\x1bOC": "RIGHT",
    b"\x1bOD": "LEFT",
}


def decode_key(data: bytes) -> Optional[str]:
    """
    Turn the bytes of one key press into a token.

    Args:
        data: A single byte, or a full escape sequence

    Returns:
        Token name ("UP", "w", "CTRL_C", ...) or None for undecodable input
    """
    if data == CTRL_C:
        return QUIT_TOKEN
    if data in ESCAPE_SEQUENCES:
        return ESCAPE_SEQUENCES[data]
    if data.startswith(ESCAPE):
        return "ESCAPE"
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


class TerminalKeyboard(InputSource):
    """Reads key presses from a terminal file descriptor."""

    def __init__(self, stream: TextIO = sys.stdin):
        """
        Initialize the keyboard.

        Args:
            stream: Terminal input stream (stdin by default)
        """
        self.stream = stream
        self.fd: Optional[int] = None
        self._saved_attrs: Optional[list] = None

    @property
    def capturing(self) -> bool:
        return self._saved_attrs is not None

    def start(self) -> None:
        """Switch the terminal to cbreak mode without signal keys."""
        if self.capturing:
            return
        self.fd = self.stream.fileno()
        self._saved_attrs = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)

        attrs = termios.tcgetattr(self.fd)
        attrs[3] &= ~termios.ISIG
        termios.tcsetattr(self.fd, termios.TCSADRAIN, attrs)
        logger.debug("Keyboard capture started on fd %d", self.fd)

    def stop(self) -> None:
        """Restore the terminal attributes saved by ``start``."""
        if not self.capturing:
            return
        termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_attrs)
        self._saved_attrs = None
        logger.debug("Keyboard capture released")

    def _readable(self, timeout: float) -> bool:
        readable, _, _ = select.select([self.fd], [], [], max(0.0, timeout))
        return bool(readable)

    def read_token(self, timeout: float) -> Optional[str]:
        """Wait up to ``timeout`` seconds for a key press."""
        if not self._readable(timeout):
            return None

        data = os.read(self.fd, 1)
        if data == ESCAPE:
            data += self._read_escape_tail()
        return decode_key(data)

    def _read_escape_tail(self) -> bytes:
        """
        Read the rest of an escape sequence already in the buffer.

        CSI sequences (ESC [ ...) run up to a final byte in 0x40-0x7E, so
        modified keys such as Ctrl+Left (ESC [ 1 ; 5 D) are consumed whole.
        SS3 sequences (ESC O x) carry exactly one more byte.
        """
        if not self._readable(0):
            return b""
        tail = os.read(self.fd, 1)
        if tail == b"O":
            if self._readable(0):
                tail += os.read(self.fd, 1)
        elif tail == b"[":
            while len(tail) < MAX_SEQUENCE_LENGTH and self._readable(0):
                byte = os.read(self.fd, 1)
                tail += byte
                if not byte or 0x40 <= byte[0] <= 0x7E:
                    break
        return tail
