"""Display bounds detection."""
import sys
from typing import TextIO

from rich.console import Console

from ..game.types import Bounds


class TerminalNotFoundError(RuntimeError):
    """Raised when no usable terminal is attached."""


def detect_bounds(console: Console, status_rows: int = 1, stdin: TextIO = sys.stdin) -> Bounds:
    """
    Measure the terminal and derive the playable grid.

    Args:
        console: Console writing to the terminal
        status_rows: Rows kept free below the grid for the status line
        stdin: Stream the keyboard will read from

    Returns:
        Bounds of width x (height - status_rows)

    Raises:
        TerminalNotFoundError: If input or output is not a terminal, or the
            terminal leaves no room for the grid
    """
    if not console.is_terminal or not stdin.isatty():
        raise TerminalNotFoundError("Cannot detect terminal.")

    width, height = console.size
    rows = height - status_rows
    # Snake and food need two distinct cells
    if width < 1 or rows < 1 or width * rows < 2:
        raise TerminalNotFoundError(
            f"Terminal too small: {width}x{height} with {status_rows} status row(s)"
        )
    return Bounds(width, rows)
