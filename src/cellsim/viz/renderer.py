"""
Rendering collaborators for the simulation loop.

The driver never touches drawing objects directly. It talks to a Renderer
through a handful of calls (create a shape, move it, resize it, present a
frame, pause), and sync_shapes() maps each cell to its shape handle by
index once per tick.

Two renderers are provided:
- MatplotlibRenderer: live window with one Circle patch per cell
- HeadlessRenderer: keeps geometry in memory, never draws or sleeps

pyplot is only imported once a window is opened, so the simulation core
can use the render-sync helpers without a GUI backend.
"""

from __future__ import annotations
from typing import Any, Callable, Protocol, Sequence, TYPE_CHECKING

from matplotlib.patches import Circle
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from cellsim.core.cell import Cell, Color
    from cellsim.core.geometry import Point


BACKGROUND_COLOR = "white"


class Renderer(Protocol):
    """Protocol for the drawing surface the simulation renders onto."""

    width: float
    height: float

    def create_shape(self, center: "Point", diameter: float, color: "Color") -> Any:
        """Add a circle to the surface and return a handle for it."""
        ...

    def set_shape_center(self, handle: Any, point: "Point") -> None:
        ...

    def set_shape_size(self, handle: Any, diameter: float) -> None:
        ...

    def present(self) -> None:
        """Flush one frame."""
        ...

    def pause_for(self, milliseconds: float) -> None:
        """Yield to the environment between ticks."""
        ...


def create_shapes(renderer: Renderer, cells: Sequence["Cell"]) -> list[Any]:
    """Create one shape per cell; handles are returned in cell order."""
    return [
        renderer.create_shape(cell.position, cell.diameter, cell.color)
        for cell in cells
    ]


def sync_shapes(renderer: Renderer, handles: Sequence[Any], cells: Sequence["Cell"]) -> None:
    """Push every cell's current center and size to its shape."""
    if len(handles) != len(cells):
        raise ValueError(
            f"Got {len(handles)} shape handles for {len(cells)} cells"
        )
    for handle, cell in zip(handles, cells):
        renderer.set_shape_center(handle, cell.position)
        renderer.set_shape_size(handle, cell.diameter)


class MatplotlibRenderer:
    """
    Live matplotlib window.

    Handles are indices into self.patches. The axes span exactly the world
    bounds with y pointing down, like a screen canvas.
    """

    def __init__(
        self,
        width: float,
        height: float,
        title: str = "Cell Absorption",
        figsize: tuple[float, float] = (8, 8),
    ):
        self.width = width
        self.height = height
        self.patches: list[Circle] = []

        import matplotlib.pyplot as plt

        self.fig: Figure
        self.ax: Axes
        self.fig, self.ax = plt.subplots(figsize=figsize)
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(title)
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_aspect("equal")
        self.ax.set_facecolor(BACKGROUND_COLOR)
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        self.ax.set_title(title)

    def create_shape(self, center: "Point", diameter: float, color: "Color") -> int:
        circle = Circle(center, diameter / 2.0, facecolor=color, edgecolor="none")
        self.ax.add_patch(circle)
        self.patches.append(circle)
        return len(self.patches) - 1

    def set_shape_center(self, handle: int, point: "Point") -> None:
        self.patches[handle].set_center(point)

    def set_shape_size(self, handle: int, diameter: float) -> None:
        self.patches[handle].set_radius(diameter / 2.0)

    def present(self) -> None:
        self.fig.canvas.draw_idle()

    def pause_for(self, milliseconds: float) -> None:
        import matplotlib.pyplot as plt

        plt.pause(milliseconds / 1000.0)

    def on_close(self, callback: Callable[[], None]) -> None:
        """Call callback when the window is closed."""
        self.fig.canvas.mpl_connect("close_event", lambda event: callback())

    def close(self) -> None:
        import matplotlib.pyplot as plt

        plt.close(self.fig)


class HeadlessRenderer:
    """
    Renderer without a display.

    Stores the latest (center, diameter, color) per handle and counts
    presented frames. pause_for only records the requested delay.
    """

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        self.centers: list["Point"] = []
        self.diameters: list[float] = []
        self.colors: list["Color"] = []
        self.frames = 0
        self.paused_ms = 0.0

    def create_shape(self, center: "Point", diameter: float, color: "Color") -> int:
        self.centers.append(tuple(center))
        self.diameters.append(diameter)
        self.colors.append(color)
        return len(self.centers) - 1

    def set_shape_center(self, handle: int, point: "Point") -> None:
        self.centers[handle] = tuple(point)

    def set_shape_size(self, handle: int, diameter: float) -> None:
        self.diameters[handle] = diameter

    def present(self) -> None:
        self.frames += 1

    def pause_for(self, milliseconds: float) -> None:
        self.paused_ms += milliseconds
