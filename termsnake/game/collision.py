"""Collision Detector - pure point-equality checks."""
from .types import Point, Snake


def same_cell(entity: Point, target: Point) -> bool:
    """Check whether two points occupy the same grid cell."""
    return entity.x == target.x and entity.y == target.y


def food_collision(head: Point, food: Point) -> bool:
    """Check whether the head sits on the food."""
    return same_cell(head, food)


def self_collision(snake: Snake) -> bool:
    """
    Check whether the head overlaps any other body segment.

    The last segment is the head itself and is skipped.
    """
    head = snake.head
    return any(same_cell(head, segment) for segment in snake.body[:-1])
