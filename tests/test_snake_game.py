"""
Tests for the game state store and per-tick orchestration.

Self-collision policy: the check runs after the move, comparing the new
head with the moved body minus the head. It is not compared with the body
as it stood before the move, so entering the cell the tail just vacated is
safe. A hit stops the game on that same tick. It does not lag a tick
behind, and the run does not continue after a collision.
"""

import random

import pytest

from conftest import make_state
from termsnake.game.controls import QUIT_TOKEN
from termsnake.game.snake_game import SnakeGame
from termsnake.game.types import Bounds, Direction, Point, StopReason


class TestNewGame:
    """Tests for initial state construction."""

    def test_single_segment_body(self, rng):
        """Test the snake starts as one segment equal to the head."""
        game = SnakeGame.new(Bounds(10, 8), rng)
        snake = game.state.snake

        assert len(snake.body) == 1
        assert snake.body[0] == snake.head

    def test_starts_playing(self, rng):
        """Test a new game is RUNNING with no stop reason."""
        game = SnakeGame.new(Bounds(10, 8), rng)

        assert game.playing is True
        assert game.state.game.stop_reason is None
        assert game.state.game.bounds == Bounds(10, 8)

    def test_food_never_on_head(self):
        """Test init exclusivity across many seeds on a tiny board."""
        for seed in range(200):
            game = SnakeGame.new(Bounds(2, 1), random.Random(seed))
            assert game.state.food.position != game.state.snake.head

    def test_positions_in_bounds(self):
        """Test head and food are drawn inside the grid."""
        bounds = Bounds(3, 2)
        for seed in range(100):
            state = SnakeGame.new(bounds, random.Random(seed)).state
            assert bounds.contains(state.snake.head)
            assert bounds.contains(state.food.position)

    def test_all_directions_possible(self):
        """Test the starting direction is drawn from all four cardinals."""
        directions = {
            SnakeGame.new(Bounds(5, 5), random.Random(seed)).state.snake.direction
            for seed in range(100)
        }

        assert directions == set(Direction)

    def test_single_cell_board_rejected(self, rng):
        """Test a board with no room for food cannot start."""
        with pytest.raises(ValueError):
            SnakeGame.new(Bounds(1, 1), rng)


class TestHandleInput:
    """Tests for input events."""

    def test_direction_token_turns(self, rng):
        """Test a perpendicular token changes direction."""
        game = SnakeGame(make_state([(2, 2)], Direction.RIGHT, food=(0, 0)), rng)

        game.handle_input("w")

        assert game.state.snake.direction == Direction.UP

    def test_reversal_rejected_then_moves_left(self, rng):
        """Test a RIGHT token is ignored while moving LEFT and the next tick goes left."""
        game = SnakeGame(make_state([(3, 2), (2, 2)], Direction.LEFT, food=(0, 0)), rng)

        game.handle_input("RIGHT")
        game.tick()

        assert game.state.snake.direction == Direction.LEFT
        assert game.state.snake.head == Point(1, 2)

    def test_unknown_token_ignored(self, rng):
        """Test unknown tokens change nothing."""
        game = SnakeGame(make_state([(2, 2)], Direction.DOWN, food=(0, 0)), rng)
        before = game.get_state()

        game.handle_input("q")

        assert game.get_state() == before

    def test_quit_token_stops(self, rng):
        """Test the quit token moves the game to STOPPED."""
        game = SnakeGame(make_state([(2, 2)], Direction.DOWN, food=(0, 0)), rng)

        game.handle_input(QUIT_TOKEN)

        assert game.playing is False
        assert game.state.game.stop_reason == StopReason.QUIT

    def test_input_ignored_when_stopped(self, rng):
        """Test STOPPED has no outgoing transitions."""
        game = SnakeGame(make_state([(2, 2)], Direction.DOWN, food=(0, 0)), rng)
        game.stop(StopReason.QUIT)

        game.handle_input("a")

        assert game.state.snake.direction == Direction.DOWN


class TestTick:
    """Tests for the tick transition."""

    def test_growth_scenario(self, rng):
        """Test eating on a 5x5 board grows the body and respawns food."""
        game = SnakeGame(make_state([(2, 2)], Direction.RIGHT, food=(3, 2)), rng)

        result = game.tick()

        assert result.eaten is True
        assert result.playing is True
        assert game.state.snake.head == Point(3, 2)
        assert game.state.snake.body == [Point(2, 2), Point(3, 2)]
        assert game.state.food.position not in game.state.snake.body

    def test_wrap_scenario(self, rng):
        """Test a wrapped slide on a 3x3 board."""
        game = SnakeGame(make_state([(1, 1), (2, 1)], Direction.RIGHT, food=(0, 0), bounds=(3, 3)), rng)

        result = game.tick()

        assert result.eaten is False
        assert game.state.snake.head == Point(0, 1)
        assert game.state.snake.body == [Point(2, 1), Point(0, 1)]
        assert game.state.food.position == Point(0, 0)

    def test_respawn_avoids_whole_body(self):
        """Test respawned food never lands on any body segment."""
        for seed in range(50):
            body = [(0, 0), (1, 0), (2, 0), (2, 1), (1, 1)]
            game = SnakeGame(make_state(body, Direction.LEFT, food=(0, 1), bounds=(3, 3)), random.Random(seed))

            game.tick()

            assert game.state.food.position not in game.state.snake.body

    def test_self_collision_stops_on_same_tick(self, rng):
        """Test turning into the body is detected right after the move."""
        # Head at (1, 1) moving UP into (1, 0), which stays occupied
        body = [(0, 0), (1, 0), (2, 0), (2, 1), (1, 1)]
        game = SnakeGame(make_state(body, Direction.UP, food=(4, 4)), rng)

        result = game.tick()

        assert result.collided is True
        assert result.playing is False
        assert game.state.game.stop_reason == StopReason.SELF_COLLISION

    def test_following_the_tail_is_safe(self, rng):
        """Test entering the cell the tail just left is not a collision."""
        body = [(1, 2), (1, 1), (2, 1), (2, 2)]
        game = SnakeGame(make_state(body, Direction.LEFT, food=(4, 4)), rng)

        result = game.tick()

        assert result.collided is False
        assert game.playing is True
        assert game.state.snake.head == Point(1, 2)

    def test_stopped_game_does_not_move(self, rng):
        """Test ticks are no-ops after the game stops."""
        game = SnakeGame(make_state([(2, 2)], Direction.RIGHT, food=(0, 0)), rng)
        game.stop(StopReason.QUIT)

        result = game.tick()

        assert result.playing is False
        assert game.state.snake.head == Point(2, 2)
        assert game.state.ticks == 0

    def test_board_full_stops(self, rng):
        """Test filling the last free cell ends the game."""
        game = SnakeGame(make_state([(0, 0)], Direction.RIGHT, food=(1, 0), bounds=(2, 1)), rng)

        result = game.tick()

        assert result.eaten is True
        assert result.playing is False
        assert game.state.game.stop_reason == StopReason.BOARD_FULL

    def test_first_stop_reason_wins(self, rng):
        """Test stopping twice keeps the original reason."""
        game = SnakeGame(make_state([(2, 2)], Direction.RIGHT, food=(0, 0)), rng)

        game.stop(StopReason.SELF_COLLISION)
        game.stop(StopReason.QUIT)

        assert game.state.game.stop_reason == StopReason.SELF_COLLISION

    def test_tick_counter(self, rng):
        """Test each running tick is counted."""
        game = SnakeGame(make_state([(2, 2)], Direction.RIGHT, food=(0, 0)), rng)

        for _ in range(3):
            game.tick()

        assert game.state.ticks == 3


def test_get_state_dump(rng):
    """Test the plain-data dump used by the debug status line."""
    game = SnakeGame(make_state([(1, 2), (2, 2)], Direction.RIGHT, food=(4, 0)), rng)

    state = game.get_state()

    assert state["snake"]["head"] == {"x": 2, "y": 2}
    assert state["snake"]["direction"] == "RIGHT"
    assert state["food"]["position"] == {"x": 4, "y": 0}
    assert state["game"] == {"playing": True, "bounds": {"x": 5, "y": 5}, "stop_reason": None}
