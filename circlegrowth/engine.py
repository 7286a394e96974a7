"""
Step engine: from the current circles to the next circle center.

The engine keeps no state of its own. The caller owns the circle sequence
and the step counter and passes them in on every tick:

    state = GrowthState.seeded(viewport)
    while running:
        state = advance(state, viewport)

Each tick:
  1) border intersections of every circle (circle order, then edge order)
  2) circle-circle intersections of every pair i < j
  3) filter every raw point against the circles that existed at the start
     of the tick and the candidates already accepted
  4) pick one candidate with index = (step * multiplier) % len(candidates)
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from circlegrowth.config import EngineConfig
from circlegrowth.geometry import Point, as_point, as_viewport
from circlegrowth.intersections import (
    circle_border_intersections,
    circle_circle_intersections,
    is_candidate,
)

logger = logging.getLogger(__name__)

_DEFAULT_ENGINE = EngineConfig()


@dataclass(frozen=True)
class GrowthState:
    """Circle sequence plus step counter, replaced (never mutated) every tick."""

    circles: Tuple[Point, ...] = field(default_factory=tuple)
    step: int = 0

    @classmethod
    def empty(cls) -> "GrowthState":
        return cls()

    @classmethod
    def seeded(cls, viewport, mode: str = "corner") -> "GrowthState":
        return cls(circles=tuple(seed_circles(viewport, mode)), step=1)

    @property
    def is_seeded(self) -> bool:
        return len(self.circles) > 0


def seed_circles(viewport, mode: str = "corner") -> List[Point]:
    """
    Initial circles for a viewport. The top-left corner always comes first.
    """
    width, height = as_viewport(viewport)
    if mode == "corner":
        return [Point(0.0, 0.0)]
    if mode == "corners":
        return [
            Point(0.0, 0.0),
            Point(width, 0.0),
            Point(width, height),
            Point(0.0, height),
        ]
    raise ValueError(f"Unknown seed mode: {mode!r}")


def format_points(points: Sequence[Point], label: str = "Candidates") -> str:
    """
    Text block listing points, one per line:

    Candidates:  [
        (0.0, 40.0),
        (40.0, 0.0)
    ]
    """
    lines = [f"{label}:  ["]
    for i, (x, y) in enumerate(points):
        comma = "," if i < len(points) - 1 else ""
        lines.append(f"    ({x!r}, {y!r}){comma}")
    lines.append("]")
    return "\n".join(lines)


def _check_inputs(circles, viewport, step):
    if step < 0:
        raise ValueError(f"step must be >= 0, got {step}")
    return [as_point(c) for c in circles], as_viewport(viewport)


def _collect(circles: List[Point], viewport, config: EngineConfig) -> List[Point]:
    # circles and viewport already coerced by _check_inputs
    radius, tol = config.radius, config.tolerance

    candidates: List[Point] = []

    def consider(points):
        for pos in points:
            if is_candidate(
                pos,
                circles,
                candidates,
                viewport,
                radius=radius,
                tol=tol,
                check_bounds=config.check_bounds,
            ):
                candidates.append(pos)

    for idx, circle in enumerate(circles):
        hits = circle_border_intersections(circle, viewport, radius=radius, tol=tol)
        logger.debug(
            f"Circle {idx} at ({circle.x}, {circle.y}) -> {len(hits)} border intersections"
        )
        consider(hits)

    for i in range(len(circles)):
        for j in range(i + 1, len(circles)):
            hits = circle_circle_intersections(
                circles[i], circles[j], radius=radius, tol=tol
            )
            if hits:
                logger.debug(f"Circle {i} & {j} -> {len(hits)} intersections")
            consider(hits)

    return candidates


def collect_candidates(
    circles: Sequence[Point],
    viewport,
    config: Optional[EngineConfig] = None,
) -> List[Point]:
    """
    All legal next-circle centers for the current circles, in discovery order:
    border intersections first, circle-circle intersections second.
    """
    circles, viewport = _check_inputs(circles, viewport, 0)
    return _collect(circles, viewport, config or _DEFAULT_ENGINE)


def select_index(step: int, count: int, multiplier: int = _DEFAULT_ENGINE.selection_multiplier):
    """Deterministic pick in [0, count), or None if there is nothing to pick."""
    if count <= 0:
        return None
    return (step * multiplier) % count


def next_circle(
    circles: Sequence[Point],
    viewport,
    step: int,
    config: Optional[EngineConfig] = None,
) -> Optional[Point]:
    """
    The center to append at this step, or None when no candidate is left.

    Same (circles, viewport, step, config) always gives the same answer.
    """
    config = config or _DEFAULT_ENGINE
    circles, viewport = _check_inputs(circles, viewport, step)

    candidates = _collect(circles, viewport, config)
    logger.debug(format_points(candidates))

    index = select_index(step, len(candidates), config.selection_multiplier)
    if index is None:
        logger.debug(f"Step {step}: no candidates left")
        return None

    selected = candidates[index]
    logger.debug(f"Step {step}: selected candidate {index} of {len(candidates)}: {selected}")
    return selected


def advance(
    state: GrowthState,
    viewport,
    config: Optional[EngineConfig] = None,
) -> GrowthState:
    """
    One tick: the returned state holds the old circles plus at most one new
    center, and step + 1.

    With config.place_all_candidates every candidate of the tick is appended
    instead of a single selected one.
    """
    config = config or _DEFAULT_ENGINE
    logger.debug(f"=== Step {state.step} === ({len(state.circles)} circles)")

    if config.place_all_candidates:
        circles, viewport = _check_inputs(state.circles, viewport, state.step)
        added = _collect(circles, viewport, config)
    else:
        selected = next_circle(state.circles, viewport, state.step, config)
        added = [] if selected is None else [selected]

    return GrowthState(circles=tuple(state.circles) + tuple(added), step=state.step + 1)
