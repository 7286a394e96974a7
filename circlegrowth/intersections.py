"""
Intersection points and candidate predicates for equal-radius circles.

Two sources of candidate centers:
  - border intersections: where a circle's circumference crosses one of the
    four viewport edges (restricted to the finite edge segment)
  - circle-circle intersections: where two circumferences cross

A candidate only becomes a new circle if it passes every predicate in the
"CANDIDATE FILTERING" section below (see is_candidate).
"""

import logging
import math

from circlegrowth.geometry import RADIUS, TOLERANCE, Point, distance, round_coord

logger = logging.getLogger(__name__)


# ————————————————————————————————————————————————————————————————
# BORDER INTERSECTIONS
# ————————————————————————————————————————————————————————————————


def _edge_crossings(d, center_along, edge_length, radius, tol):
    """
    Offsets along one edge where a circle at perpendicular distance `d`
    crosses it. Returns the along-edge coordinates that stay inside
    [0, edge_length]; the "minus" crossing comes first.
    """
    if not (0 <= d <= radius):
        return []
    offset = math.sqrt(radius * radius - d * d)
    if abs(offset) <= tol:
        # tangent: single touching point, never emitted
        return []
    along = []
    if center_along - offset >= 0:
        along.append(center_along - offset)
    if center_along + offset <= edge_length:
        along.append(center_along + offset)
    return along


def circle_border_intersections(center, viewport, radius=RADIUS, tol=TOLERANCE):
    """
    Points where the circumference of `center` crosses the viewport edges.

    Edges are visited in the order left (x=0), right (x=width), top (y=0),
    bottom (y=height). Each edge contributes at most two points, so a circle
    near a corner of a small viewport can yield up to 8.

    Parameters
    ----------
    center : Point
        Circle center.
    viewport : Viewport
        Current (width, height).

    Returns
    -------
    list[Point]
        Rounded intersection points, possibly empty.
    """
    cx, cy = center
    width, height = viewport
    points = []

    # Left border (x = 0)
    for y in _edge_crossings(cx, cy, height, radius, tol):
        points.append(Point(round_coord(0), round_coord(y)))

    # Right border (x = width)
    for y in _edge_crossings(width - cx, cy, height, radius, tol):
        points.append(Point(round_coord(width), round_coord(y)))

    # Top border (y = 0)
    for x in _edge_crossings(cy, cx, width, radius, tol):
        points.append(Point(round_coord(x), round_coord(0)))

    # Bottom border (y = height)
    for x in _edge_crossings(height - cy, cx, width, radius, tol):
        points.append(Point(round_coord(x), round_coord(height)))

    return points


# ————————————————————————————————————————————————————————————————
# CIRCLE-CIRCLE INTERSECTIONS
# ————————————————————————————————————————————————————————————————


def circle_circle_intersections(c1, c2, radius=RADIUS, tol=TOLERANCE):
    """
    Intersections between two circles of the same radius.

    Returns [] when the centers are (almost) coincident or when the circles
    are at least 2*radius - tol apart. Tangent circles are deliberately
    reported as not intersecting. Otherwise returns two rounded points, the
    one on the left of the c1 -> c2 direction first.
    """
    dx = c2[0] - c1[0]
    dy = c2[1] - c1[1]
    d = math.hypot(dx, dy)

    if d >= radius * 2 - tol:
        return []
    if d < tol:
        return []

    a = d / 2
    h = math.sqrt(radius * radius - a * a)

    xm = (c1[0] + c2[0]) / 2
    ym = (c1[1] + c2[1]) / 2

    rx = -(dy / d) * h
    ry = (dx / d) * h
    return [
        Point(round_coord(xm + rx), round_coord(ym + ry)),
        Point(round_coord(xm - rx), round_coord(ym - ry)),
    ]


# ————————————————————————————————————————————————————————————————
# CANDIDATE FILTERING
# ————————————————————————————————————————————————————————————————


def circle_exists(pos, circles, tol=TOLERANCE):
    """
    True if some center in `circles` is within `tol` of `pos` on both axes.
    This is a square neighbourhood, not a radial one.
    """
    return any(
        abs(c[0] - pos[0]) < tol and abs(c[1] - pos[1]) < tol for c in circles
    )


def is_point_covered(pos, circles, radius=RADIUS, tol=TOLERANCE):
    """
    True if `pos` lies strictly inside one of the circles.
    Points on a circumference (distance ~ radius) are not covered.
    """
    return any(distance(pos, c) < radius - tol for c in circles)


def is_within_bounds(pos, viewport):
    width, height = viewport
    return 0 <= pos[0] <= width and 0 <= pos[1] <= height


def is_candidate(
    pos,
    circles,
    accepted,
    viewport,
    radius=RADIUS,
    tol=TOLERANCE,
    check_bounds=True,
):
    """
    Decide whether `pos` may become the next circle center.

    Rules, in order:
      1) not a duplicate of an existing circle
      2) not a duplicate of a candidate already accepted in this step
      3) inside the viewport (skipped when check_bounds is False)
      4) not strictly inside any existing circle
    """
    if circle_exists(pos, circles, tol=tol):
        return False
    if circle_exists(pos, accepted, tol=tol):
        return False
    if check_bounds and not is_within_bounds(pos, viewport):
        return False
    return not is_point_covered(pos, circles, radius=radius, tol=tol)
