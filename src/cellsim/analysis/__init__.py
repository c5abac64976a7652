"""
Analysis layer: read-only diagnostics computed from a cell population.

The core never depends on these for its own decisions; the driver only
uses them to report statistics.
"""

from cellsim.analysis.population import (
    live_cells,
    total_area,
    radius_summary,
    count_overlaps,
)

__all__ = [
    "live_cells",
    "total_area",
    "radius_summary",
    "count_overlaps",
]
