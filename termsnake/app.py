"""
Application entry point - detect the terminal, build the game, play it.
"""
import logging
import random
from typing import Optional

from rich.console import Console

from .engine.session import GameSession
from .game.snake_game import SnakeGame
from .game.types import GameState, StopReason
from .terminal.display import TerminalNotFoundError, detect_bounds
from .terminal.keyboard import TerminalKeyboard
from .terminal.renderer import TerminalRenderer
from .utils.config_loader import Config, load_config
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)


def summary_line(state: GameState) -> str:
    """One-line result printed after the terminal is restored."""
    reason = state.game.stop_reason
    length = len(state.snake)
    if reason == StopReason.SELF_COLLISION:
        return f"[bold red]Game over![/] The snake ran into itself at length {length}."
    if reason == StopReason.BOARD_FULL:
        return f"[bold green]Board full![/] Final length {length}."
    return f"Quit at length {length}."


def main(config: Optional[Config] = None, console: Optional[Console] = None) -> int:
    """
    Run one game in the current terminal.

    Returns:
        Process exit status: 0 after a normal end, 1 if no terminal was found
    """
    config = config or load_config()
    setup_logging(config.logging)
    console = console or Console()

    try:
        bounds = detect_bounds(console, config.game.status_rows)
    except TerminalNotFoundError as e:
        logger.error("Startup aborted: %s", e)
        Console(stderr=True).print(f"[bold red]Error:[/] {e}")
        return 1

    logger.info("Detected terminal %dx%d, grid %dx%d", *console.size, bounds.x, bounds.y)

    game = SnakeGame.new(bounds, random.Random(config.game.seed))
    session = GameSession(
        game,
        TerminalKeyboard(),
        TerminalRenderer(console, config.display),
        tick_interval=config.game.tick_interval_ms / 1000,
        exit_grace=config.game.exit_grace_ms / 1000,
    )
    session.run()

    console.print(summary_line(game.state))
    return 0
