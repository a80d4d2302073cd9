"""
Motion Engine - moves the snake one cell per tick.

The board wraps on both axes independently: leaving one edge re-enters on
the opposite edge of the same axis.
"""
from .collision import food_collision
from .types import Bounds, Direction, GameState, Point


def _wrap(value: int, bound: int) -> int:
    if value >= bound:
        return 0
    if value < 0:
        return bound - 1
    return value


def next_head(head: Point, direction: Direction, bounds: Bounds) -> Point:
    """
    Compute where the head lands after one step.

    Args:
        head: Current head position
        direction: Direction of travel
        bounds: Grid size used for wrap-around

    Returns:
        The wrapped candidate head
    """
    dx, dy = direction.delta
    return Point(_wrap(head.x + dx, bounds.x), _wrap(head.y + dy, bounds.y))


def advance(state: GameState) -> bool:
    """
    Move the snake in place by one cell.

    The body grows by one when the new head lands on the food and slides
    (tail dropped) otherwise. Food is left for the caller to respawn.

    Returns:
        True if the food was eaten
    """
    snake = state.snake
    candidate = next_head(snake.head, snake.direction, state.game.bounds)
    eaten = food_collision(candidate, state.food.position)

    if not eaten:
        snake.body.pop(0)
    snake.body.append(candidate)

    return eaten
