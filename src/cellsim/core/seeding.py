"""
Population seeding: the one place where cells get their initial state.

Each cell gets an independent random center, radius, heading and color.
Centers are drawn so the whole disk starts inside the world bounds.
"""

from __future__ import annotations
import math
from typing import TYPE_CHECKING

import numpy as np
from matplotlib.colors import hsv_to_rgb

from cellsim.core.cell import Cell, Color

if TYPE_CHECKING:
    from cellsim.core.simulation import SimulationConfig


SATURATION_MIN = 0.1
SATURATION_SPREAD = 0.5


def random_color(rng: np.random.Generator) -> Color:
    """Random hue, moderate saturation, full brightness, as RGB in [0, 1]."""
    hue = rng.random()
    saturation = rng.random() * SATURATION_SPREAD + SATURATION_MIN
    r, g, b = hsv_to_rgb((hue, saturation, 1.0))
    return float(r), float(g), float(b)


def seed_cells(config: "SimulationConfig", rng: np.random.Generator) -> list[Cell]:
    """
    Create the initial population.

    Args:
        config: World bounds, population size and radius range
        rng: Random source (all draws come from here)

    Returns:
        List of config.n_cells cells in creation order
    """
    cells = []
    for _ in range(config.n_cells):
        radius = float(rng.integers(config.min_radius, config.max_radius, endpoint=True))
        x = radius + rng.random() * (config.width - 2 * radius)
        y = radius + rng.random() * (config.height - 2 * radius)
        heading = rng.random() * 2 * math.pi
        cells.append(Cell((x, y), radius, heading=heading, color=random_color(rng)))
    return cells
