"""
Terminal Renderer - Rich-based full-screen drawing of the game grid.

Draws one character cell per grid cell on the alternate screen, plus a
status row below the grid. Frames are refreshed only when ``render`` is
called; the renderer has no timer of its own.
"""
import json
from typing import Dict, List, Optional

from rich.console import Console
from rich.live import Live
from rich.text import Text

from ..core.renderer_interface import RendererInterface
from ..game.types import GameState, Point, StopReason
from ..utils.config_loader import DisplayConfig


STOP_MESSAGES = {
    StopReason.QUIT: "QUIT",
    StopReason.SELF_COLLISION: "GAME OVER - the snake ran into itself",
    StopReason.BOARD_FULL: "YOU WIN - the board is full",
}


def status_text(state: GameState, show_debug: bool = False) -> str:
    """
    Build the status row for a state.

    Args:
        state: Current game state
        show_debug: Append a raw dump of the state

    Returns:
        Single-line status string
    """
    snake = state.snake
    parts = [f"Length {len(snake)}", snake.direction.name]
    if not state.game.playing and state.game.stop_reason is not None:
        parts.append(STOP_MESSAGES[state.game.stop_reason])
    else:
        parts.append("WASD/arrows to steer, Ctrl-C to quit")

    line = " | ".join(parts)
    if show_debug:
        line += " | " + json.dumps(state.to_dict(), separators=(",", ":"))
    return line


class TerminalRenderer(RendererInterface):
    """
    Renders the Snake game to the terminal with Rich.

    Body cells and the food cell are drawn as coloured blanks on a solid
    background.
    """

    def __init__(self, console: Console, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            console: Console attached to the terminal
            config: Colours and debug toggle
        """
        self.console = console
        self.config = config or DisplayConfig()
        self.live: Optional[Live] = None

        self._background = f"on {self.config.background_color}"
        self._snake_style = f"on {self.config.snake_color}"
        self._food_style = f"on {self.config.food_color}"

    def start(self) -> None:
        """Switch to the alternate screen and hide the cursor."""
        if self.live:
            return
        self.live = Live(
            console=self.console,
            screen=True,
            auto_refresh=False,
            transient=False,
            vertical_overflow="crop",
        )
        self.live.start()

    def close(self) -> None:
        """Leave the alternate screen and show the cursor again."""
        if self.live:
            self.live.stop()
            self.live = None

    def render(self, state: GameState) -> None:
        """Draw the state if the display is active."""
        if self.live:
            self.live.update(self.build_frame(state), refresh=True)

    def _cell_styles(self, state: GameState) -> Dict[Point, str]:
        styles = {segment: self._snake_style for segment in state.snake.body}
        styles[state.food.position] = self._food_style
        return styles

    def build_frame(self, state: GameState) -> Text:
        """
        Build the full frame: one text row per grid row, then the status row.

        Consecutive cells with the same style are merged into one span.
        """
        bounds = state.game.bounds
        styles = self._cell_styles(state)
        frame = Text(no_wrap=True, overflow="crop", end="")

        for y in range(bounds.y):
            runs: List[List] = []
            for x in range(bounds.x):
                style = styles.get(Point(x, y), self._background)
                if runs and runs[-1][0] == style:
                    runs[-1][1] += 1
                else:
                    runs.append([style, 1])
            for style, length in runs:
                frame.append(" " * length, style=style)
            frame.append("\n")

        status = status_text(state, self.config.show_debug)
        frame.append(status[:bounds.x], style="bold white on grey23")
        return frame
