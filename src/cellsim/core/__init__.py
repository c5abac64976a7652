"""
Core simulation primitives.

- Geometry helpers (angle wrapping, distances, the absorption rule)
- Cell: the entity model (motion, growth, pairwise interaction)
- Seeding: the initial random population
- Simulation: the tick driver and its run loop

This layer knows NOTHING about drawing. Rendering collaborators live in
cellsim.viz and only ever see geometry.
"""

from cellsim.core.geometry import normalize_radians, distance, angle_between, absorbed_radii
from cellsim.core.cell import Cell, WIGGLINESS, WANDER_SCALE
from cellsim.core.seeding import seed_cells, random_color
from cellsim.core.simulation import Simulation, SimulationConfig, create_simulation

__all__ = [
    "normalize_radians",
    "distance",
    "angle_between",
    "absorbed_radii",
    "Cell",
    "WIGGLINESS",
    "WANDER_SCALE",
    "seed_cells",
    "random_color",
    "Simulation",
    "SimulationConfig",
    "create_simulation",
]
