"""
Pytest configuration and fixtures for termsnake tests.

Provides stand-ins for the terminal: a fake clock, a scripted input source
and a renderer that records frames, so the game loop can run headless.
"""

import random
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from termsnake.core.input_interface import InputSource
from termsnake.core.renderer_interface import RendererInterface
from termsnake.game.types import Bounds, Direction, Food, Game, GameState, Point, Snake


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedInput(InputSource):
    """
    Input source that delivers tokens at fixed clock times.

    Waiting without a token advances the fake clock by the full timeout.
    """

    def __init__(self, clock: FakeClock, events: List[Tuple[float, str]], calls: Optional[list] = None):
        self.clock = clock
        self.events = sorted(events)
        self.calls = calls if calls is not None else []
        self.waits: List[float] = []

    def start(self) -> None:
        self.calls.append("input.start")

    def stop(self) -> None:
        self.calls.append("input.stop")

    def read_token(self, timeout: float) -> Optional[str]:
        self.waits.append(timeout)
        deadline = self.clock.now + timeout
        if self.events and self.events[0][0] <= deadline:
            at, token = self.events.pop(0)
            self.clock.now = max(self.clock.now, at)
            return token
        self.clock.now = deadline
        return None


class RecordingRenderer(RendererInterface):
    """Renderer that keeps a plain-data copy of every frame."""

    def __init__(self, calls: Optional[list] = None):
        self.calls = calls if calls is not None else []
        self.frames: List[dict] = []

    def start(self) -> None:
        self.calls.append("renderer.start")

    def render(self, state: GameState) -> None:
        self.frames.append(state.to_dict())

    def close(self) -> None:
        self.calls.append("renderer.close")


def make_state(
    body: List[Tuple[int, int]],
    direction: Direction,
    food: Tuple[int, int],
    bounds: Tuple[int, int] = (5, 5),
) -> GameState:
    """Build a GameState from plain tuples."""
    return GameState(
        snake=Snake(body=[Point(x, y) for x, y in body], direction=direction),
        food=Food(position=Point(*food)),
        game=Game(bounds=Bounds(*bounds)),
    )


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def clock():
    """Fake clock starting at zero."""
    return FakeClock()


@pytest.fixture
def calls():
    """Shared list recording lifecycle calls in order."""
    return []


@pytest.fixture
def renderer(calls):
    """Recording renderer."""
    return RecordingRenderer(calls)


@pytest.fixture
def scripted_input(clock, calls):
    """Factory for scripted input sources sharing the fake clock."""
    def _make(events=()):
        return ScriptedInput(clock, list(events), calls)
    return _make
