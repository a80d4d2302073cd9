"""
Direction Resolver - maps input tokens to cardinal directions.

Tokens are the names the keyboard reader produces: single characters for
letter keys, upper-case words for arrow keys and CTRL_C for the quit chord.
"""
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .types import Direction


# Read-only synonym table, built once at import
DIRECTION_SYNONYMS: Mapping[Direction, Tuple[str, ...]] = MappingProxyType({
    Direction.UP: ("W", "w", "UP"),
    Direction.DOWN: ("S", "s", "DOWN"),
    Direction.LEFT: ("A", "a", "LEFT"),
    Direction.RIGHT: ("D", "d", "RIGHT"),
})

QUIT_TOKEN = "CTRL_C"

_TOKEN_TO_DIRECTION: Mapping[str, Direction] = MappingProxyType({
    token: direction
    for direction, tokens in DIRECTION_SYNONYMS.items()
    for token in tokens
})


def is_quit_token(token: str) -> bool:
    """Check whether a token asks to end the game."""
    return token == QUIT_TOKEN


def direction_for_token(token: str) -> Optional[Direction]:
    """Look up the direction a token names, or None if it names none."""
    return _TOKEN_TO_DIRECTION.get(token)


def resolve_direction(token: str, current: Direction) -> Direction:
    """
    Resolve an input token against the current direction.

    Args:
        token: Raw input token
        current: Direction the snake is moving in

    Returns:
        The requested direction, or ``current`` when the token is unknown
        or would reverse the snake onto itself
    """
    requested = direction_for_token(token)
    if requested is None or requested == current.opposite:
        return current
    return requested
