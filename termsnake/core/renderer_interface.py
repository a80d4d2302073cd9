"""
Abstract renderer interface for termsnake.

Renderers draw a game snapshot once per tick. They never schedule ticks.
"""

from abc import ABC, abstractmethod

from ..game.types import GameState


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers receive the live GameState by reference and must not mutate it.
    """

    def start(self) -> None:
        """Take over the display. Called once before the first render."""
        pass

    @abstractmethod
    def render(self, state: GameState) -> None:
        """
        Draw the game state.

        Args:
            state: Current game state
        """
        pass

    def close(self) -> None:
        """Give the display back and restore its previous state."""
        pass
