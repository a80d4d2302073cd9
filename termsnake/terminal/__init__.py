"""
Terminal I/O for termsnake: bounds detection, keyboard capture and drawing.
"""

from .display import TerminalNotFoundError, detect_bounds
from .keyboard import TerminalKeyboard, decode_key
from .renderer import TerminalRenderer, status_text

__all__ = [
    'TerminalNotFoundError',
    'detect_bounds',
    'TerminalKeyboard',
    'decode_key',
    'TerminalRenderer',
    'status_text',
]
