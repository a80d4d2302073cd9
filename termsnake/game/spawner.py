"""
Food Spawner - random in-bounds coordinates with an exclusivity re-roll.
"""
import random
from typing import Collection, Optional

from .types import Bounds, Point


def random_location(bounds: Bounds, rng: Optional[random.Random] = None) -> Point:
    """
    Draw a point uniformly from the grid.

    Args:
        bounds: Exclusive grid size
        rng: Random source (defaults to the module-level generator)

    Returns:
        A point with 0 <= x < bounds.x and 0 <= y < bounds.y
    """
    rng = rng or random
    return Point(rng.randrange(bounds.x), rng.randrange(bounds.y))


def spawn_food(
    bounds: Bounds,
    occupied: Collection[Point],
    rng: Optional[random.Random] = None,
) -> Optional[Point]:
    """
    Place food at a random location not in ``occupied``.

    Re-rolls until clear; after ``bounds.cells`` misses it scans the grid
    for the first free cell instead.

    Returns:
        The food position, or None if every cell is occupied
    """
    blocked = set(occupied)
    if len(blocked) >= bounds.cells:
        return None

    for _ in range(bounds.cells):
        point = random_location(bounds, rng)
        if point not in blocked:
            return point

    # Fallback: nearly full board
    for x in range(bounds.x):
        for y in range(bounds.y):
            point = Point(x, y)
            if point not in blocked:
                return point
    return None
