#!/usr/bin/env python3
"""Console script to run the forest fire simulation."""

import argparse
import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import CellState, ForestFireModel, SimulationConfig, build_model
from forest_fire.config import (
    DEFAULT_BURN_DURATION,
    DEFAULT_PERLIN_SCALE,
    DEFAULT_SUSCEPTIBILITY,
    DEFAULT_TREE_DENSITY,
)
from forest_fire.placement import IGNITION_MODES, PLACEMENT_STRATEGIES

SYMBOLS = {
    CellState.Uncaught: "🌲",
    CellState.Catching: "✨",
    CellState.Burning: "🔥",
    CellState.Burnt: "⬛",
}
NO_TREE = "  "


def print_grid(model: ForestFireModel) -> None:
    """
    Print a simple representation of the grid to console.

    Args:
        model: The ForestFireModel instance to visualize
    """
    grid_str = ""
    for y in range(model.height):
        for x in range(model.width):
            state = model.state_at((x, y))
            grid_str += NO_TREE if state is None else SYMBOLS[state.kind]
        grid_str += "\n"
    print(grid_str)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a forest fire simulation in the console.")
    parser.add_argument("--width", type=int, default=20)
    parser.add_argument("--height", type=int, default=20)
    parser.add_argument("--susceptibility", type=float, default=DEFAULT_SUSCEPTIBILITY)
    parser.add_argument("--burn-duration", type=int, default=DEFAULT_BURN_DURATION)
    parser.add_argument("--placement", choices=sorted(PLACEMENT_STRATEGIES), default="uniform")
    parser.add_argument("--density", type=float, default=DEFAULT_TREE_DENSITY)
    parser.add_argument("--perlin-scale", type=float, default=DEFAULT_PERLIN_SCALE)
    parser.add_argument("--ignition", choices=IGNITION_MODES, default="random")
    parser.add_argument("--seed", default="")
    parser.add_argument("--max-ticks", type=int, default=500)
    parser.add_argument("--quiet", action="store_true", help="Only print the final grid")
    parser.add_argument("--verbose", action="store_true", help="Log every tick")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the forest fire simulation."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    config = SimulationConfig(
        grid_width=args.width,
        grid_height=args.height,
        susceptibility=args.susceptibility,
        burn_duration=args.burn_duration,
        placement=args.placement,
        tree_density=args.density,
        perlin_scale=args.perlin_scale,
        ignition=args.ignition,
        seed=args.seed,
    )
    try:
        model = build_model(config)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    print("--- INITIAL STATE ---")
    print_grid(model)

    while not model.steady_state() and model.current_tick < args.max_ticks:
        model.tick()
        if not args.quiet:
            print(f"\n--- TICK {model.current_tick} ---")
            print_grid(model)

    if args.quiet:
        print_grid(model)

    if model.steady_state():
        print(f"\nFire has been extinguished after {model.current_tick} ticks.")
    else:
        print(f"\nStopped after {model.current_tick} ticks, fire still active.")
    counts = model.state_counts()
    for kind in CellState:
        print(f"  {kind.name}: {counts[kind]}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
