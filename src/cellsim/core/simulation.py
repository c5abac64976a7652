"""
Simulation driver: owns the population and advances it one tick at a time.

One tick:
1. Compute the center of gravity (midpoint of the world bounds)
2. For each cell in order: move toward the center, then grow
3. Resolve every unordered pair (i < j) with interact_with, brute force O(n²)

Rendering is NOT part of a tick. run() is the outer loop that ticks, hands
the geometry to a renderer and pauses, until a tick budget runs out or
stop() is called.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Sequence
import logging

import numpy as np

from cellsim.core.cell import Cell, WANDER_SCALE, WIGGLINESS
from cellsim.core.geometry import Point
from cellsim.core.seeding import seed_cells
from cellsim.analysis.population import live_cells, radius_summary, total_area
from cellsim.viz.renderer import create_shapes, sync_shapes

if TYPE_CHECKING:
    from cellsim.viz.renderer import Renderer

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Tunables of the cell absorption world."""

    width: float = 800.0  # World width
    height: float = 800.0  # World height
    n_cells: int = 200  # Initial population size
    growth_rate: float = 0.02  # Radius added to every live cell per tick
    wiggliness: float = WIGGLINESS  # Heading jitter range per tick (radians)
    wander_scale: float = WANDER_SCALE  # Distance scale of the centering pull
    pause_ms: float = 10.0  # Pacing delay between rendered ticks
    min_radius: int = 2  # Smallest initial radius
    max_radius: int = 6  # Largest initial radius (inclusive)
    seed: int | None = None  # Random seed (None = fresh entropy)
    log_interval: int = 1000  # Ticks between DEBUG population summaries

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"World bounds must be positive, got {self.width}x{self.height}"
            )
        if self.n_cells < 0:
            raise ValueError(f"n_cells must be non-negative, got {self.n_cells}")
        if self.min_radius < 0 or self.min_radius > self.max_radius:
            raise ValueError(
                f"Invalid radius range [{self.min_radius}, {self.max_radius}]"
            )
        if 2 * self.max_radius > min(self.width, self.height):
            raise ValueError(
                f"max_radius={self.max_radius} does not fit in "
                f"{self.width}x{self.height} bounds"
            )
        if self.growth_rate < 0:
            raise ValueError(f"growth_rate must be non-negative, got {self.growth_rate}")
        if self.wander_scale <= 0:
            raise ValueError(f"wander_scale must be positive, got {self.wander_scale}")
        if self.pause_ms < 0:
            raise ValueError(f"pause_ms must be non-negative, got {self.pause_ms}")


@dataclass
class Simulation:
    """
    The cell absorption world.

    The cell list is fixed at construction: it is never reordered and cells
    are never removed. Absorbed cells stay in place with radius 0.
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)
    cells: list[Cell] | None = None
    rng: np.random.Generator | None = None

    # Simulation state
    current_tick: int = field(default=0, init=False)
    _stop_requested: bool = field(default=False, init=False)

    def __post_init__(self):
        """Seed the population unless cells were given."""
        if self.rng is None:
            self.rng = np.random.default_rng(self.config.seed)
        if self.cells is None:
            self.cells = seed_cells(self.config, self.rng)
            logger.info(
                "Seeded %d cells in %gx%g world",
                len(self.cells), self.config.width, self.config.height,
            )
        else:
            self.cells = list(self.cells)

    @property
    def bounds(self) -> tuple[float, float]:
        """World (width, height)."""
        return self.config.width, self.config.height

    @property
    def center_of_gravity(self) -> Point:
        """Midpoint of the world bounds (not the centroid of the cells)."""
        return self.config.width / 2.0, self.config.height / 2.0

    @property
    def stopped(self) -> bool:
        return self._stop_requested

    def stop(self) -> None:
        """Ask run() to return before its next tick."""
        self._stop_requested = True

    def tick(self) -> None:
        """Advance the world by one tick (no rendering)."""
        center = self.center_of_gravity
        half_wiggle = self.config.wiggliness / 2.0

        for cell in self.cells:
            if cell.is_inert:
                continue
            wiggle = self.rng.uniform(-half_wiggle, half_wiggle)
            cell.move_toward(center, wiggle=wiggle, wander_scale=self.config.wander_scale)
            cell.grow(self.config.growth_rate)

        self.resolve_interactions()
        self.current_tick += 1

    def resolve_interactions(self) -> None:
        """Let every unordered pair of cells interact exactly once."""
        cells = self.cells
        n = len(cells)
        for i in range(n):
            cell0 = cells[i]
            for j in range(i + 1, n):
                cell0.interact_with(cells[j])

    def run(self, renderer: "Renderer | None" = None, n_ticks: int | None = None) -> dict:
        """
        Drive the simulation loop.

        Each iteration ticks, pushes every cell's geometry to the renderer,
        presents a frame and pauses for config.pause_ms. The loop ends after
        n_ticks iterations, or when stop() has been called, whichever comes
        first. With n_ticks=None it only ends through stop().

        Args:
            renderer: Rendering collaborator (None = no rendering, no pacing)
            n_ticks: Number of ticks to run (None = until stopped)

        Returns:
            Statistics dictionary
        """
        self._stop_requested = False
        handles = create_shapes(renderer, self.cells) if renderer is not None else []
        logger.info(
            "Running %s ticks on %d cells",
            "unbounded" if n_ticks is None else n_ticks, len(self.cells),
        )

        ticks_run = 0
        while not self._stop_requested and (n_ticks is None or ticks_run < n_ticks):
            self.tick()
            ticks_run += 1

            if renderer is not None:
                sync_shapes(renderer, handles, self.cells)
                renderer.present()
                renderer.pause_for(self.config.pause_ms)

            if self.config.log_interval and self.current_tick % self.config.log_interval == 0:
                summary = radius_summary(self.cells)
                logger.debug(
                    "tick %d: %d live cells, mean radius %.2f, max radius %.2f",
                    self.current_tick, summary["count"], summary["mean"], summary["max"],
                )

        stats = self.statistics()
        stats["n_ticks"] = ticks_run
        logger.info(
            "Stopped after %d ticks: %d live cells", ticks_run, stats["live_cells"]
        )
        return stats

    def statistics(self) -> dict:
        """Population summary at the current tick."""
        summary = radius_summary(self.cells)
        return {
            "current_tick": self.current_tick,
            "live_cells": len(live_cells(self.cells)),
            "total_area": total_area(self.cells),
            "max_radius": summary["max"],
        }

    def snapshot(self) -> np.ndarray:
        """Read-only geometry, one (x, y, radius) row per cell in order."""
        geometry = np.array(
            [(c.px, c.py, c.radius) for c in self.cells], dtype=np.float64
        ).reshape(len(self.cells), 3)
        geometry.setflags(write=False)
        return geometry


def create_simulation(
    n_cells: int = 200,
    width: float = 800.0,
    height: float = 800.0,
    seed: int | None = None,
    cells: Sequence[Cell] | None = None,
) -> Simulation:
    """
    Convenience factory for a simulation with default tunables.

    Args:
        n_cells: Population size (ignored when cells are given)
        width, height: World bounds
        seed: Random seed for seeding and motion
        cells: Optional explicit population
    """
    config = SimulationConfig(width=width, height=height, n_cells=n_cells, seed=seed)
    return Simulation(config=config, cells=list(cells) if cells is not None else None)
