"""
Tick Scheduler - single-threaded loop that interleaves input and ticks.

The scheduler owns the tick timer. Each pass either runs a due tick or waits
for input until the tick is due, so callbacks never overlap and the game
state needs no locking. The next tick is armed after the current tick's
callback returns, which makes the effective period ``interval`` plus the
time spent in the callback.
"""
import logging
import time
from typing import Callable, Optional

from ..core.input_interface import InputSource

logger = logging.getLogger(__name__)


class TickScheduler:
    """Drives tick and input callbacks from one thread until stopped."""

    def __init__(
        self,
        input_source: InputSource,
        on_tick: Callable[[], None],
        on_input: Callable[[str], None],
        interval: float = 0.05,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the scheduler.

        Args:
            input_source: Source waited on between ticks
            on_tick: Called once per tick
            on_input: Called with each input token
            interval: Delay in seconds between the end of one tick and the
                start of the next
            clock: Monotonic time source
        """
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")

        self.input_source = input_source
        self.on_tick = on_tick
        self.on_input = on_input
        self.interval = interval
        self.clock = clock

        self.running = False
        self.tick_count = 0
        self.next_tick_at: Optional[float] = None

    def stop(self) -> None:
        """Stop after the callback currently running returns."""
        self.running = False

    def run(self) -> None:
        """Run until ``stop`` is called from a callback."""
        self.running = True
        self.next_tick_at = self.clock() + self.interval
        logger.debug("Scheduler started, interval %.3fs", self.interval)

        while self.running:
            now = self.clock()
            if now >= self.next_tick_at:
                self.on_tick()
                self.tick_count += 1
                self.next_tick_at = self.clock() + self.interval
                continue

            token = self.input_source.read_token(self.next_tick_at - now)
            if token is not None:
                self.on_input(token)

        logger.debug("Scheduler stopped after %d ticks", self.tick_count)
