"""
Game data model - points, directions, snake, food and the aggregate state.
"""
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Dict, Any, Optional, Tuple


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def opposite(self) -> "Direction":
        """The direction pointing the other way."""
        return Direction((self + 2) % 4)

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit displacement (dx, dy); y grows downwards."""
        return _DELTAS[self]


_DELTAS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}


@dataclass(frozen=True)
class Point:
    """A point on the game grid."""
    x: int
    y: int

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class Bounds:
    """Exclusive per-axis size of the playable grid."""
    x: int
    y: int

    def __post_init__(self):
        if self.x < 1 or self.y < 1:
            raise ValueError(f"Bounds must be at least 1x1, got {self.x}x{self.y}")

    def contains(self, point: Point) -> bool:
        """Check whether a point lies inside the grid."""
        return 0 <= point.x < self.x and 0 <= point.y < self.y

    @property
    def cells(self) -> int:
        return self.x * self.y

    def to_dict(self) -> Dict[str, int]:
        return {"x": self.x, "y": self.y}


class StopReason(Enum):
    """Why a run ended."""
    QUIT = "quit"
    SELF_COLLISION = "self_collision"
    BOARD_FULL = "board_full"


@dataclass
class Snake:
    """
    The snake: body segments ordered tail-first, head-last.

    The head is always the last body segment.
    """
    body: List[Point]
    direction: Direction

    def __post_init__(self):
        if not self.body:
            raise ValueError("Snake body needs at least one segment")

    @property
    def head(self) -> Point:
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "head": self.head.to_dict(),
            "body": [p.to_dict() for p in self.body],
            "direction": self.direction.name,
        }


@dataclass
class Food:
    """The single food item on the board."""
    position: Point

    def to_dict(self) -> Dict[str, Any]:
        return {"position": self.position.to_dict()}


@dataclass
class Game:
    """Run flags and board bounds."""
    bounds: Bounds
    playing: bool = True
    stop_reason: Optional[StopReason] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "playing": self.playing,
            "bounds": self.bounds.to_dict(),
            "stop_reason": self.stop_reason.value if self.stop_reason else None,
        }


@dataclass
class GameState:
    """Complete mutable game snapshot."""
    snake: Snake
    food: Food
    game: Game
    ticks: int = field(default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Get the state as plain data, used for the debug dump."""
        return {
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
            "game": self.game.to_dict(),
            "ticks": self.ticks,
        }
