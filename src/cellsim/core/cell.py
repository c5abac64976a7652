"""
Cell: a circular organism that wanders, grows and absorbs its neighbours.

A cell owns ONLY semantic state:
- position (the center of its circle)
- radius (0 means inert: fully absorbed, but still part of the population)
- heading (direction of travel, radians in (-π, π])
- color (fixed at construction, only the renderer cares)

It holds no reference to other cells or to anything drawn on screen.
Randomness is injected: move_toward() takes the wiggle as an argument, so
the same inputs always give the same motion.
"""

from __future__ import annotations
import logging
import math

from cellsim.core.geometry import (
    Point,
    absorbed_radii,
    angle_between,
    distance,
    normalize_radians,
)

logger = logging.getLogger(__name__)

Color = tuple[float, float, float]

WIGGLINESS = 0.2  # Width of the random heading jitter per tick (radians)
WANDER_SCALE = 60000.0  # Distance at which the pull to the center reaches tanh(1)
STEP_LENGTH = 1.0  # Distance travelled per move


class Cell:
    """
    One circular cell.

    Motion is a biased random walk: a unit step along the heading, then the
    heading jitters randomly and turns slightly toward the center of gravity.
    The turn strength is tanh(distance / wander_scale), so the pull is
    negligible near the center and only matters far away.
    """

    def __init__(
        self,
        position: Point,
        radius: float,
        heading: float = 0.0,
        color: Color = (1.0, 1.0, 1.0),
    ):
        self.px: float = float(position[0])
        self.py: float = float(position[1])
        self._radius = 0.0
        self.radius = radius
        self.heading: float = normalize_radians(heading)
        self._color: Color = tuple(color)

    def __repr__(self) -> str:
        return (
            f"Cell(position=({self.px:.2f}, {self.py:.2f}), "
            f"radius={self._radius:.3f}, heading={self.heading:.3f})"
        )

    @property
    def position(self) -> Point:
        """Current center (x, y)."""
        return self.px, self.py

    @property
    def color(self) -> Color:
        return self._color

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        """
        Shared radius setter used by growth and absorption.

        Negative values are clamped to 0. The center is the position, so a
        size change never shifts the circle.
        """
        self._radius = max(0.0, float(value))

    @property
    def diameter(self) -> float:
        return 2.0 * self._radius

    @property
    def area(self) -> float:
        return math.pi * self._radius ** 2

    @property
    def is_inert(self) -> bool:
        """True once the cell has been fully absorbed."""
        return self._radius == 0.0

    def move_toward(
        self,
        center_of_gravity: Point,
        wiggle: float = 0.0,
        wander_scale: float = WANDER_SCALE,
    ) -> None:
        """
        Advance one step and steer gently toward the center of gravity.

        Args:
            center_of_gravity: Point the cell is weakly drawn to
            wiggle: Random heading jitter for this step, normally drawn
                uniformly from [-WIGGLINESS/2, WIGGLINESS/2] by the caller
            wander_scale: Distance scale of the centering pull
        """
        if self.is_inert:
            return

        self.px += STEP_LENGTH * math.cos(self.heading)
        self.py += STEP_LENGTH * math.sin(self.heading)

        dist_to_center = distance(self.position, center_of_gravity)
        angle_to_center = angle_between(self.position, center_of_gravity)
        turn_bias = normalize_radians(angle_to_center - self.heading)

        self.heading = normalize_radians(
            self.heading
            + wiggle
            + turn_bias * math.tanh(dist_to_center / wander_scale)
        )

    def grow(self, amount: float) -> None:
        """Increase the radius by amount. Inert cells stay inert."""
        if self.is_inert:
            return
        self.radius = self._radius + amount

    def distance_to(self, other: Cell) -> float:
        return distance(self.position, other.position)

    def overlap_with(self, other: Cell) -> float:
        """Sum of radii minus center distance; negative when apart."""
        return self._radius + other._radius - self.distance_to(other)

    def interact_with(self, other: Cell) -> None:
        """
        Let two cells interact.

        If both are alive and touching (overlap ≥ 0), the larger absorbs the
        smaller: while the smaller survives, total area is conserved and the
        circles end up tangent. Otherwise the smaller becomes inert.
        On equal radii, other absorbs self.
        """
        if self.is_inert or other.is_inert:
            return
        if self.overlap_with(other) < 0:
            return

        if self._radius > other._radius:
            self.absorb(other)
        else:
            other.absorb(self)

    def absorb(self, other: Cell) -> None:
        """Take area from other until the two circles are tangent."""
        d = self.distance_to(other)
        new_radius, other_radius = absorbed_radii(d, self._radius, other._radius)

        self.radius = new_radius
        other.radius = other_radius

        if other.is_inert:
            logger.debug("%r fully absorbed %r", self, other)
