"""Command-line entry point for the cell absorption simulation.

Runs the simulation in a matplotlib window by default, or without any
display when --headless is given. The only world settings exposed are the
population size and the canvas dimensions.
"""

from __future__ import annotations
import argparse
import logging
from typing import Sequence

from cellsim.core.simulation import Simulation, SimulationConfig
from cellsim.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cellsim",
        description="Cells wander, grow and absorb each other on contact.",
    )
    parser.add_argument(
        "--cells", type=int, default=200,
        help="Initial population size (default: 200)",
    )
    parser.add_argument(
        "--width", type=float, default=800.0,
        help="Canvas width (default: 800)",
    )
    parser.add_argument(
        "--height", type=float, default=800.0,
        help="Canvas height (default: 800)",
    )
    parser.add_argument(
        "--ticks", type=int, default=None,
        help="Stop after this many ticks (default: run until the window is closed)",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for reproducible runs",
    )
    parser.add_argument(
        "--headless", action="store_true",
        help="Run without opening a window (requires --ticks)",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--log-file", default=None,
        help="Also write logs to this file",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.headless and args.ticks is None:
        parser.error("--headless needs --ticks, there is no window to close")
    if args.ticks is not None and args.ticks < 0:
        parser.error("--ticks must be non-negative")

    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        config = SimulationConfig(
            width=args.width,
            height=args.height,
            n_cells=args.cells,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))

    simulation = Simulation(config=config)

    renderer = None
    if not args.headless:
        from cellsim.viz.renderer import MatplotlibRenderer

        renderer = MatplotlibRenderer(config.width, config.height)
        renderer.on_close(simulation.stop)

    try:
        stats = simulation.run(renderer=renderer, n_ticks=args.ticks)
    except KeyboardInterrupt:
        logger.info("Interrupted at tick %d", simulation.current_tick)
        stats = simulation.statistics()
    finally:
        if renderer is not None:
            renderer.close()

    logger.info(
        "Final state: tick %d, %d live cells, total area %.1f, largest radius %.2f",
        stats["current_tick"], stats["live_cells"], stats["total_area"], stats["max_radius"],
    )
    return 0
