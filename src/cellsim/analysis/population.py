"""
Population diagnostics.

Read-only summaries of a cell population: how many are alive, how much
area they cover, and whether any live pairs are still overlapping after
interactions were resolved.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import numpy as np
from scipy.spatial.distance import pdist

if TYPE_CHECKING:
    from cellsim.core.cell import Cell


def live_cells(cells: Sequence["Cell"]) -> list["Cell"]:
    """Cells that have not been fully absorbed."""
    return [c for c in cells if not c.is_inert]


def total_area(cells: Sequence["Cell"]) -> float:
    """Combined area of all cells."""
    return float(sum(c.area for c in cells))


def radius_summary(cells: Sequence["Cell"]) -> dict:
    """
    Count, mean and max radius of the live cells.

    Mean and max are 0.0 when no cell is alive.
    """
    radii = np.array([c.radius for c in cells if not c.is_inert], dtype=np.float64)
    if radii.size == 0:
        return {"count": 0, "mean": 0.0, "max": 0.0}
    return {
        "count": int(radii.size),
        "mean": float(radii.mean()),
        "max": float(radii.max()),
    }


def count_overlaps(cells: Sequence["Cell"], tolerance: float = 1e-9) -> int:
    """
    Number of live pairs whose circles overlap by more than tolerance.

    Tangent circles (overlap == 0) are not counted.
    """
    alive = live_cells(cells)
    if len(alive) < 2:
        return 0

    centers = np.array([c.position for c in alive], dtype=np.float64)
    radii = np.array([c.radius for c in alive], dtype=np.float64)

    distances = pdist(centers)
    # Radius sums in the same condensed (i < j) order as pdist
    i, j = np.triu_indices(len(alive), k=1)
    overlap = radii[i] + radii[j] - distances
    return int(np.count_nonzero(overlap > tolerance))
