"""
Geometric primitives shared by the intersection engine.

Conventions:
- Coordinates live in viewport pixel space: (0, 0) is the top-left corner,
  x grows to the right and y grows downwards.
- Every circle has the same radius. The radius is not stored per circle,
  it is passed around as a keyword argument (default RADIUS).
- Every computed coordinate goes through round_coord() before it is compared
  or stored, so floating point noise does not defeat the tolerance checks.
"""

import math
from typing import NamedTuple

RADIUS = 40.0
TOLERANCE = 0.1

# Knuth multiplicative hash constant used to pick one candidate per step.
SELECTION_MULTIPLIER = 2654435761


class Point(NamedTuple):
    x: float
    y: float


class Viewport(NamedTuple):
    width: float
    height: float

    def is_empty(self):
        return self.width <= 0 or self.height <= 0


def round_coord(n):
    """
    Round a coordinate to 2 decimal places, halves going up (towards +inf).
    """
    return math.floor(n * 100 + 0.5) / 100


def distance(a, b):
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def as_point(p):
    """Coerce an (x, y) pair into a Point, rejecting NaN/inf coordinates."""
    x, y = float(p[0]), float(p[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"Point coordinates must be finite, got ({x}, {y})")
    return Point(x, y)


def as_viewport(dims):
    """Coerce a (width, height) pair into a Viewport."""
    width, height = float(dims[0]), float(dims[1])
    if not (math.isfinite(width) and math.isfinite(height)):
        raise ValueError(f"Viewport dimensions must be finite, got {width}x{height}")
    if width < 0 or height < 0:
        raise ValueError(f"Viewport dimensions must be >= 0, got {width}x{height}")
    return Viewport(width, height)
