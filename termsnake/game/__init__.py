"""
Snake game core: data model, direction resolver, motion, collisions,
food spawning and the per-tick state store.
"""

from .types import Bounds, Direction, Food, Game, GameState, Point, Snake, StopReason
from .controls import DIRECTION_SYNONYMS, QUIT_TOKEN, is_quit_token, resolve_direction
from .collision import food_collision, self_collision
from .motion import advance, next_head
from .spawner import random_location, spawn_food
from .snake_game import SnakeGame, TickResult

__all__ = [
    'Bounds',
    'Direction',
    'Food',
    'Game',
    'GameState',
    'Point',
    'Snake',
    'StopReason',
    'DIRECTION_SYNONYMS',
    'QUIT_TOKEN',
    'is_quit_token',
    'resolve_direction',
    'food_collision',
    'self_collision',
    'advance',
    'next_head',
    'random_location',
    'spawn_food',
    'SnakeGame',
    'TickResult',
]
