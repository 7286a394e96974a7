"""
Scheduler loop that owns the growth state and drives the engine.

    host = GrowthHost(config)
    host.resize(1000, 800)      # seeds the first circle
    host.run(max_steps=50)      # sleep(delay); tick(); repeat
"""

import enum
import logging
import time
from typing import Callable, List, Optional

from circlegrowth.config import Config
from circlegrowth.engine import GrowthState, advance
from circlegrowth.geometry import Point, Viewport, as_viewport

logger = logging.getLogger(__name__)


class HostState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    SEEDED = "seeded"
    GROWING = "growing"


class GrowthHost:
    """
    Holds the circles, the step counter and the viewport, and advances the
    engine once per tick. Listeners are called with the new GrowthState after
    every tick and after (re)seeding.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config or Config()
        self.viewport = Viewport(0.0, 0.0)
        self.state = GrowthState.empty()
        self.listeners: List[Callable[[GrowthState], None]] = []
        self._sleep = sleep
        self._running = False

    @property
    def status(self) -> HostState:
        if not self.state.is_seeded:
            return HostState.UNINITIALIZED
        if self.state.step <= 1:
            return HostState.SEEDED
        return HostState.GROWING

    @property
    def circles(self):
        return self.state.circles

    def subscribe(self, listener: Callable[[GrowthState], None]) -> None:
        self.listeners.append(listener)

    def _notify(self) -> None:
        for listener in self.listeners:
            listener(self.state)

    def resize(self, width: float, height: float) -> None:
        """
        Update the viewport. The first non-empty viewport seeds the circles;
        later resizes keep them unless host.reseed_on_resize is set.
        Existing circles are never re-validated against the new bounds.
        """
        self.viewport = as_viewport((width, height))
        logger.debug(f"Viewport resized to {self.viewport.width}x{self.viewport.height}")

        if self.viewport.is_empty():
            return
        if self.state.is_seeded and not self.config.host.reseed_on_resize:
            return
        self.seed()

    def seed(self) -> None:
        self.state = GrowthState.seeded(self.viewport, self.config.host.seed_mode)
        logger.info(
            f"Seeded {len(self.state.circles)} circle(s) in a "
            f"{self.viewport.width}x{self.viewport.height} viewport"
        )
        self._notify()

    def tick(self) -> Optional[Point]:
        """
        Run one generation step. Returns the last circle added, or None when
        nothing was added (not seeded yet, or no candidate left).
        """
        if not self.state.is_seeded or self.viewport.is_empty():
            logger.debug("Tick skipped: viewport not ready")
            return None

        before = len(self.state.circles)
        self.state = advance(self.state, self.viewport, self.config.engine)
        added = len(self.state.circles) - before

        if added:
            logger.debug(
                f"Step {self.state.step - 1}: added {added} circle(s), "
                f"total {len(self.state.circles)}"
            )
        else:
            logger.debug(f"Step {self.state.step - 1}: no candidates left")

        self._notify()
        return self.state.circles[-1] if added else None

    def run(self, max_steps: Optional[int] = None, stop_when_packed: bool = False) -> GrowthState:
        """
        Tick repeatedly, sleeping host.step_delay seconds before each tick,
        until stop() is called or max_steps ticks have run.
        """
        self._running = True
        ticks = 0
        try:
            while self._running and (max_steps is None or ticks < max_steps):
                self._sleep(self.config.host.step_delay)
                added = self.tick()
                ticks += 1
                if stop_when_packed and added is None and self.state.is_seeded:
                    logger.info(f"Viewport packed after {ticks} ticks")
                    break
        finally:
            self._running = False

        logger.info(
            f"Stopped after {ticks} ticks: {len(self.state.circles)} circles, step {self.state.step}"
        )
        return self.state

    def stop(self) -> None:
        self._running = False
