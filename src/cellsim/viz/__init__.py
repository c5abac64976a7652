"""
Visualization utilities.

- Renderer protocol and the render-sync step used by the run loop
- Live matplotlib and headless renderers
- Static population snapshots
"""

from cellsim.viz.renderer import (
    Renderer,
    MatplotlibRenderer,
    HeadlessRenderer,
    create_shapes,
    sync_shapes,
)

from cellsim.viz.population import (
    plot_population,
    save_figure,
)

__all__ = [
    "Renderer",
    "MatplotlibRenderer",
    "HeadlessRenderer",
    "create_shapes",
    "sync_shapes",
    "plot_population",
    "save_figure",
]
