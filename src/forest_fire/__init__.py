"""
Forest Fire Simulation using Stochastic Cellular Automata.

Fire spreads over a grid of trees one tick at a time; each burning tree
ignites its uncaught neighbours with a fixed susceptibility probability.
Runs are fully reproducible from a seed string.
"""

from .geometry import GridPosition, MOORE_OFFSETS, neighbors
from .state import CellState, TreeState, UNCAUGHT, CATCHING, BURNT
from .model import ForestFireModel, SimulationInvariantError
from .placement import Placement, uniform_placement, perlin_placement, center_ignition, with_center_ignition
from .seeding import seed_from_string, rng_from_string, random_seed_string
from .config import SimulationConfig, build_model

__version__ = "0.1.0"

__all__ = [
    "GridPosition",
    "MOORE_OFFSETS",
    "neighbors",
    "CellState",
    "TreeState",
    "UNCAUGHT",
    "CATCHING",
    "BURNT",
    "ForestFireModel",
    "SimulationInvariantError",
    "Placement",
    "uniform_placement",
    "perlin_placement",
    "center_ignition",
    "with_center_ignition",
    "seed_from_string",
    "rng_from_string",
    "random_seed_string",
    "SimulationConfig",
    "build_model",
]
