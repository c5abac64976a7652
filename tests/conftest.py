"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest
import numpy as np


@pytest.fixture
def small_world_config():
    """Configuration for a small 200x200 world with 20 cells."""
    from cellsim.core import SimulationConfig
    return SimulationConfig(
        width=200.0,
        height=200.0,
        n_cells=20,
        seed=7,
    )


@pytest.fixture
def default_config():
    """The default 800x800, 200-cell world."""
    from cellsim.core import SimulationConfig
    return SimulationConfig(seed=42)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
