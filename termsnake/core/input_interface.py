"""
Abstract input source interface for termsnake.

An input source turns raw key events into tokens (see
``termsnake.game.controls``).
"""

from abc import ABC, abstractmethod
from typing import Optional


class InputSource(ABC):
    """
    Abstract keyboard-like input source.

    ``read_token`` is the only blocking call in the game loop; it doubles as
    the scheduler's timed wait.
    """

    @abstractmethod
    def start(self) -> None:
        """Begin capturing input."""
        pass

    @abstractmethod
    def read_token(self, timeout: float) -> Optional[str]:
        """
        Wait up to ``timeout`` seconds for one input token.

        Args:
            timeout: Maximum wait in seconds (0 polls)

        Returns:
            The token, or None if nothing arrived in time
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Release input capture."""
        pass
