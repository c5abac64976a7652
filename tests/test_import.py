"""Basic import tests to verify package structure."""


def test_import_cellsim():
    """Verify main package imports."""
    import cellsim
    assert cellsim.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from cellsim import core
    assert hasattr(core, "Cell")
    assert hasattr(core, "Simulation")


def test_import_viz():
    """Verify viz module structure exists."""
    from cellsim import viz
    assert hasattr(viz, "MatplotlibRenderer")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from cellsim import analysis
    assert hasattr(analysis, "__doc__")


def test_core_does_not_load_pyplot():
    """Importing and running the core must not pull in a GUI backend."""
    import subprocess
    import sys

    code = (
        "import sys\n"
        "from cellsim.core import Simulation, SimulationConfig\n"
        "from cellsim.viz.renderer import HeadlessRenderer\n"
        "sim = Simulation(config=SimulationConfig(n_cells=5, seed=0))\n"
        "sim.run(renderer=HeadlessRenderer(*sim.bounds), n_ticks=3)\n"
        "assert 'matplotlib.pyplot' not in sys.modules, 'pyplot was imported'\n"
    )
    result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True)
    assert result.returncode == 0, result.stderr
