"""
Plane geometry used by the cell model.

Everything here is a pure function of its arguments:
- Angle wrapping into (-π, π]
- Distances and angles between points
- The area-conserving absorption rule for two overlapping circles

The absorption rule
-------------------
Two circles with radii r1 ≥ r2 whose centers are d apart overlap when
d ≤ r1 + r2. We want new radii R and d - R (so the circles end up tangent)
with the same combined area:

    R² + (d - R)² = r1² + r2² = a

which solves to

    R = (d + √(2a - d²)) / 2

When d² < a the smaller radius d - R would be negative. It is clamped to 0:
the small circle vanishes entirely. In that regime R² ≤ a, so a full
absorption never creates area, but it can lose some.
"""

from __future__ import annotations
import math

Point = tuple[float, float]

TWO_PI = 2.0 * math.pi


def normalize_radians(theta: float) -> float:
    """
    Wrap an angle into (-π, π].

    Idempotent: normalize_radians(normalize_radians(x)) == normalize_radians(x).
    """
    if -math.pi < theta <= math.pi:
        return theta
    wrapped = math.pi - (math.pi - theta) % TWO_PI
    # Float modulo can land exactly on -π for inputs just above an odd multiple of π
    if wrapped <= -math.pi:
        wrapped += TWO_PI
    return wrapped


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(q[0] - p[0], q[1] - p[1])


def angle_between(origin: Point, target: Point) -> float:
    """
    Direction of the vector from origin to target, in (-π, π].

    The zero vector has no direction; 0.0 is returned so headings never
    become NaN.
    """
    dx = target[0] - origin[0]
    dy = target[1] - origin[1]
    if dx == 0.0 and dy == 0.0:
        return 0.0
    return normalize_radians(math.atan2(dy, dx))


def absorbed_radii(d: float, r1: float, r2: float) -> tuple[float, float]:
    """
    Radii of two overlapping circles after the larger absorbs the smaller.

    Args:
        d: Distance between the centers (assumed ≤ r1 + r2)
        r1: Radius of the absorbing circle
        r2: Radius of the absorbed circle

    Returns:
        (new_r1, new_r2), both non-negative, with new_r1 + new_r2 == d
        whenever the absorbed circle survives. When d - new_r1 < 0 the
        absorbed radius is clamped to 0 (full absorption).
    """
    a = r1 * r1 + r2 * r2
    # 2a - d² ≥ (r1 - r2)² under the overlap condition; only rounding can push it below 0
    radicand = max(0.0, 2.0 * a - d * d)
    new_r1 = (d + math.sqrt(radicand)) / 2.0
    return new_r1, max(0.0, d - new_r1)
