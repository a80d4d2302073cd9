"""
Snake Game Core - state store and per-tick transitions, no rendering.

Self-collision compares the moved head with the moved body minus its head,
not with the body as it was before the move. The tail segment dropped by a
non-growing move is already gone, so entering the cell it left is allowed.

A run has two states. RUNNING (``game.playing`` is True) accepts input and
advances on every tick. STOPPED is terminal: input and ticks are ignored.
"""
import logging
import random
from dataclasses import dataclass
from typing import Optional, Dict, Any

from .collision import self_collision
from .controls import is_quit_token, resolve_direction
from .motion import advance
from .spawner import random_location, spawn_food
from .types import Bounds, Direction, Food, Game, GameState, Snake, StopReason

logger = logging.getLogger(__name__)


@dataclass
class TickResult:
    """Outcome of a single tick."""
    eaten: bool = False
    collided: bool = False
    playing: bool = True


class SnakeGame:
    """
    Owns the authoritative GameState and applies input and ticks to it.

    Self-collision is checked after the move: the new head is compared with
    every other segment of the moved body, so a head entering the cell the
    tail just left is safe. A detected collision stops the run on the same
    tick.
    """

    def __init__(self, state: GameState, rng: Optional[random.Random] = None):
        """
        Wrap an existing state.

        Args:
            state: Initial game state
            rng: Random source for food respawns
        """
        self.state = state
        self.rng = rng or random.Random()

    @classmethod
    def new(cls, bounds: Bounds, rng: Optional[random.Random] = None) -> "SnakeGame":
        """
        Build a fresh game with a random one-segment snake.

        Head and food are drawn uniformly from the grid and the food is
        re-rolled until it differs from the head. The starting direction is
        drawn uniformly from the four cardinals.
        """
        rng = rng or random.Random()
        head = random_location(bounds, rng)
        food = spawn_food(bounds, [head], rng)
        if food is None:
            raise ValueError(f"Grid {bounds.x}x{bounds.y} has no room for food")

        direction = rng.choice(list(Direction))
        state = GameState(
            snake=Snake(body=[head], direction=direction),
            food=Food(position=food),
            game=Game(bounds=bounds),
        )
        logger.info(
            "New game on %dx%d grid: head=(%d, %d) food=(%d, %d) direction=%s",
            bounds.x, bounds.y, head.x, head.y, food.x, food.y, direction.name,
        )
        return cls(state, rng)

    @property
    def playing(self) -> bool:
        return self.state.game.playing

    def stop(self, reason: StopReason) -> None:
        """Move to the terminal STOPPED state. Later calls are ignored."""
        if not self.state.game.playing:
            return
        self.state.game.playing = False
        self.state.game.stop_reason = reason
        logger.info(
            "Game stopped: %s (length %d after %d ticks)",
            reason.value, len(self.state.snake), self.state.ticks,
        )

    def handle_input(self, token: str) -> None:
        """
        Apply one input token.

        The quit token stops the game; direction tokens update the snake's
        direction subject to the reversal guard; anything else is ignored.
        """
        if not self.playing:
            return

        if is_quit_token(token):
            self.stop(StopReason.QUIT)
            return

        snake = self.state.snake
        resolved = resolve_direction(token, snake.direction)
        if resolved != snake.direction:
            logger.debug("Direction %s -> %s", snake.direction.name, resolved.name)
            snake.direction = resolved

    def tick(self) -> TickResult:
        """
        Advance the game by one step.

        Returns:
            TickResult describing what happened
        """
        if not self.playing:
            return TickResult(playing=False)

        state = self.state
        state.ticks += 1
        eaten = advance(state)

        if self_collision(state.snake):
            self.stop(StopReason.SELF_COLLISION)
            return TickResult(eaten=eaten, collided=True, playing=False)

        if eaten:
            food = spawn_food(state.game.bounds, state.snake.body, self.rng)
            if food is None:
                self.stop(StopReason.BOARD_FULL)
                return TickResult(eaten=True, playing=False)
            state.food.position = food
            logger.info(
                "Food eaten, length %d, new food at (%d, %d)",
                len(state.snake), food.x, food.y,
            )

        return TickResult(eaten=eaten)

    def get_state(self) -> Dict[str, Any]:
        """Get the current state as plain data."""
        return self.state.to_dict()
