"""
Game Session - connects a SnakeGame to its input source, renderer and
scheduler, and tears them down in order when play ends.
"""
import logging
import time
from typing import Callable, Optional

from ..core.input_interface import InputSource
from ..core.renderer_interface import RendererInterface
from ..game.snake_game import SnakeGame
from ..game.types import StopReason
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)


class GameSession:
    """
    One run of the game from first frame to terminal restoration.

    The session stops the scheduler as soon as ``game.playing`` goes false,
    whether from the quit token or from a collision detected on a tick.
    """

    def __init__(
        self,
        game: SnakeGame,
        input_source: InputSource,
        renderer: RendererInterface,
        tick_interval: float = 0.05,
        exit_grace: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the session.

        Args:
            game: Game to drive
            input_source: Keyboard or other token source
            renderer: Drawing collaborator, called once per tick
            tick_interval: Seconds between ticks
            exit_grace: Seconds to wait after restoring the terminal
            clock: Monotonic time source for the scheduler
            sleep: Used for the exit grace wait
        """
        if exit_grace < 0:
            raise ValueError(f"Exit grace must not be negative, got {exit_grace}")

        self.game = game
        self.input_source = input_source
        self.renderer = renderer
        self.exit_grace = exit_grace
        self.sleep = sleep
        self.scheduler = TickScheduler(
            input_source,
            on_tick=self._on_tick,
            on_input=self._on_input,
            interval=tick_interval,
            clock=clock,
        )

    def _on_input(self, token: str) -> None:
        self.game.handle_input(token)
        if not self.game.playing:
            self.scheduler.stop()

    def _on_tick(self) -> None:
        self.game.tick()
        self.renderer.render(self.game.state)
        if not self.game.playing:
            self.scheduler.stop()

    def run(self) -> Optional[StopReason]:
        """
        Play until the game stops, then shut down.

        Returns:
            Why the game stopped (None if the loop was interrupted by an
            exception, which is re-raised after shutdown)
        """
        self.input_source.start()
        try:
            self.renderer.start()
            self.renderer.render(self.game.state)
            self.scheduler.run()
        finally:
            self.shutdown()
        return self.game.state.game.stop_reason

    def shutdown(self) -> None:
        """
        Release input, restore the terminal, then wait the grace interval.

        Each step runs even if the one before it raised.
        """
        logger.info("Shutting down after %d ticks", self.scheduler.tick_count)
        try:
            self.input_source.stop()
        finally:
            try:
                self.renderer.close()
            finally:
                self.sleep(self.exit_grace)
