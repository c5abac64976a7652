#!/usr/bin/env python3
"""
Demo: Population Coarsening by Absorption

Runs the default world headless and shows how touching cells merge:
1. Seed 200 small cells in an 800x800 world
2. Run in stages, recording live count and total area
3. Plot snapshots of the population and the live-cell curve

Absorption never adds area, so only growth makes the world fuller.

Output: output/demo_coarsening/coarsening.png
"""

import matplotlib.pyplot as plt
from pathlib import Path

from cellsim.core import Simulation, SimulationConfig
from cellsim.analysis import count_overlaps
from cellsim.viz import plot_population, save_figure


def main():
    print("=" * 60)
    print("  CELL POPULATION COARSENING")
    print("=" * 60)

    config = SimulationConfig(width=800, height=800, n_cells=200, seed=42)
    sim = Simulation(config=config)

    print(f"\n1. Seeded {len(sim.cells)} cells in {config.width:g}x{config.height:g} world")
    print(f"   Initial total area: {sim.statistics()['total_area']:.1f}")

    stages = [0, 250, 1000, 3000]
    fig, axes = plt.subplots(1, len(stages) + 1, figsize=(5 * (len(stages) + 1), 5))

    ticks, live = [0], [sim.statistics()["live_cells"]]

    print("\n2. Running...")
    for k, stage in enumerate(stages):
        while sim.current_tick < stage:
            sim.tick()
            if sim.current_tick % 50 == 0:
                stats = sim.statistics()
                ticks.append(stats["current_tick"])
                live.append(stats["live_cells"])

        stats = sim.statistics()
        print(f"   tick {stats['current_tick']:5d}: {stats['live_cells']:3d} live, "
              f"area {stats['total_area']:9.1f}, max radius {stats['max_radius']:6.2f}, "
              f"overlapping pairs {count_overlaps(sim.cells)}")
        plot_population(sim.cells, sim.bounds, title=f"tick {stage}", ax=axes[k])

    ax = axes[-1]
    ax.plot(ticks, live, color="steelblue", linewidth=2)
    ax.set_title("Live cells")
    ax.set_xlabel("tick")
    ax.set_ylabel("count")
    ax.grid(True, alpha=0.3)

    fig.suptitle("Cell Absorption: coarsening over time", fontsize=14, fontweight="bold")
    fig.tight_layout()

    output_dir = Path("output/demo_coarsening")
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "coarsening.png"
    save_figure(fig, output_path, dpi=150)
    plt.close()
    print(f"\n3. Saved: {output_path}")

    print("\n" + "=" * 60)
    print("  SUMMARY")
    print("=" * 60)
    print(f"  • Live cells: {live[0]} → {live[-1]}")
    print(f"  • Merges never add area; only growth ({config.growth_rate}/tick) does")
    print(f"  • A grown cell can overlap a pair already visited; it merges next tick")
    print("=" * 60)


if __name__ == "__main__":
    main()
