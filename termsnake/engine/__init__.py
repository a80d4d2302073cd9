"""
Game loop for termsnake: the tick scheduler and the session that owns it.
"""

from .scheduler import TickScheduler
from .session import GameSession

__all__ = [
    'TickScheduler',
    'GameSession',
]
