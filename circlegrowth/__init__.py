"""
circlegrowth: grow a circle pattern by placing each new circle on an
intersection point of the existing ones and the viewport borders.
"""

from circlegrowth.config import Config, EngineConfig, HostConfig, RenderConfig, load_config
from circlegrowth.engine import (
    GrowthState,
    advance,
    collect_candidates,
    next_circle,
    seed_circles,
    select_index,
)
from circlegrowth.geometry import RADIUS, TOLERANCE, Point, Viewport, distance, round_coord
from circlegrowth.host import GrowthHost, HostState
from circlegrowth.intersections import (
    circle_border_intersections,
    circle_circle_intersections,
    circle_exists,
    is_candidate,
    is_point_covered,
    is_within_bounds,
)

__version__ = "0.1.0"

__all__ = [
    "Config",
    "EngineConfig",
    "HostConfig",
    "RenderConfig",
    "load_config",
    "GrowthState",
    "advance",
    "collect_candidates",
    "next_circle",
    "seed_circles",
    "select_index",
    "RADIUS",
    "TOLERANCE",
    "Point",
    "Viewport",
    "distance",
    "round_coord",
    "GrowthHost",
    "HostState",
    "circle_border_intersections",
    "circle_circle_intersections",
    "circle_exists",
    "is_candidate",
    "is_point_covered",
    "is_within_bounds",
]
