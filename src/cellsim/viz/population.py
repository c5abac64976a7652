"""
Static snapshots of a cell population.

Draws each live cell as a filled circle on axes spanning the world bounds,
for saving figures from demos and headless runs.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from matplotlib.collections import PatchCollection
from matplotlib.patches import Circle
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from cellsim.core.cell import Cell


def plot_population(
    cells: Sequence["Cell"],
    bounds: tuple[float, float],
    title: str = "Cell Population",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 8),
    edgecolor: str = "none",
) -> tuple[Figure, Axes]:
    """
    Plot the live cells of a population.

    Args:
        cells: Cells to draw (inert cells are skipped)
        bounds: World (width, height)
        title: Plot title
        ax: Existing axes (creates new figure if None)
        figsize: Figure size if creating new figure
        edgecolor: Circle outline color

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    alive = [c for c in cells if not c.is_inert]
    circles = [Circle(c.position, c.radius) for c in alive]
    collection = PatchCollection(
        circles,
        facecolors=[c.color for c in alive],
        edgecolors=edgecolor,
    )
    ax.add_collection(collection)

    width, height = bounds
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect("equal")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
