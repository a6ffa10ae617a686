"""Tree placement strategies.

A placement decides which grid cells hold a tree and where the fire starts.
Strategies draw from the random source handed to them, so passing the same
seeded source always yields the same forest.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Tuple

import numpy as np

from .geometry import GridPosition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    """Trees and ignition points for a new simulation."""

    trees: FrozenSet[GridPosition]
    ignitions: Tuple[GridPosition, ...]

    def __post_init__(self):
        if not self.ignitions:
            raise ValueError("A placement needs at least one ignition point.")


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        logger.error(f"Invalid grid dimensions {width}x{height}")
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}.")


def random_ignition(width: int, height: int, rng: random.Random) -> GridPosition:
    """Pick a uniformly random cell; x is drawn before y."""
    return GridPosition(rng.randrange(width), rng.randrange(height))


def center_ignition(width: int, height: int) -> GridPosition:
    """Return the middle cell, rounding down on even dimensions."""
    return GridPosition(width // 2, height // 2)


def with_center_ignition(placement: Placement, width: int, height: int) -> Placement:
    """Move the fire start of ``placement`` to the middle cell, planting a tree there."""
    ignition = center_ignition(width, height)
    return Placement(placement.trees | {ignition}, (ignition,))


def uniform_placement(width: int, height: int, density: float, rng: random.Random) -> Placement:
    """
    Place each tree independently with probability ``density``.

    Cells are visited column by column (x outer, y inner), then one random
    cell is chosen as the ignition point. The ignition cell always gets a
    tree, whether or not one was drawn there.

    Args:
        width: Grid width in cells
        height: Grid height in cells
        density: Probability of a tree in each cell, in [0, 1]
        rng: Seeded random source

    Returns:
        Placement with the sampled trees and a single ignition point
    """
    _check_dimensions(width, height)
    if not 0.0 <= density <= 1.0:
        logger.error(f"Invalid tree density {density}")
        raise ValueError(f"Tree density must be within [0, 1], got {density}.")

    trees = set()
    for x in range(width):
        for y in range(height):
            if rng.random() < density:
                trees.add(GridPosition(x, y))
    ignition = random_ignition(width, height, rng)
    trees.add(ignition)
    logger.debug(f"Uniform placement: {len(trees)} trees, ignition at {tuple(ignition)}")
    return Placement(frozenset(trees), (ignition,))


def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * t * (t * (t * 6 - 15) + 10)


def perlin_noise(width: int, height: int, scale: float, rng: random.Random) -> np.ndarray:
    """
    Sample 2D Perlin noise on a (height, width) grid.

    Cell (x, y) is sampled at (x / scale, y / scale) in lattice space, so a
    larger scale gives larger patches. Values lie roughly in [-0.7, 0.7].
    The gradient lattice is seeded from ``rng``.
    """
    if scale <= 0:
        logger.error(f"Invalid noise scale {scale}")
        raise ValueError(f"Noise scale must be positive, got {scale}.")

    np_rng = np.random.default_rng(rng.getrandbits(64))
    xs = np.arange(width) / scale
    ys = np.arange(height) / scale
    px, py = np.meshgrid(xs, ys)

    # One random unit gradient per lattice corner
    lattice_w = int(np.floor(xs[-1])) + 2
    lattice_h = int(np.floor(ys[-1])) + 2
    angles = np_rng.uniform(0.0, 2.0 * np.pi, size=(lattice_h, lattice_w))
    gradients = np.stack((np.cos(angles), np.sin(angles)), axis=-1)

    x0 = np.floor(px).astype(int)
    y0 = np.floor(py).astype(int)
    fx = px - x0
    fy = py - y0

    def corner(dx: int, dy: int) -> np.ndarray:
        g = gradients[y0 + dy, x0 + dx]
        return g[..., 0] * (fx - dx) + g[..., 1] * (fy - dy)

    u = _fade(fx)
    v = _fade(fy)
    top = corner(0, 0) + u * (corner(1, 0) - corner(0, 0))
    bottom = corner(0, 1) + u * (corner(1, 1) - corner(0, 1))
    return top + v * (bottom - top)


def perlin_placement(
    width: int,
    height: int,
    scale: float,
    rng: random.Random,
    threshold: float = 0.0,
) -> Placement:
    """
    Place trees where a Perlin noise field rises above ``threshold``.

    This produces coherent groves and clearings instead of the salt-and-pepper
    look of uniform placement.

    Args:
        width: Grid width in cells
        height: Grid height in cells
        scale: Noise feature size in cells (must be positive)
        rng: Seeded random source
        threshold: Noise value a cell must exceed to hold a tree

    Returns:
        Placement with the noise-derived trees and a single ignition point
    """
    _check_dimensions(width, height)
    field = perlin_noise(width, height, scale, rng)
    trees = {GridPosition(int(x), int(y)) for y, x in np.argwhere(field > threshold)}
    ignition = random_ignition(width, height, rng)
    trees.add(ignition)
    logger.debug(f"Perlin placement: {len(trees)} trees, ignition at {tuple(ignition)}")
    return Placement(frozenset(trees), (ignition,))


PLACEMENT_STRATEGIES: Dict[str, Callable[..., Placement]] = {
    "uniform": uniform_placement,
    "perlin": perlin_placement,
}

IGNITION_MODES = ("random", "center")
