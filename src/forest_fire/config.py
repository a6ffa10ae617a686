"""Simulation parameters, their defaults and validation."""

import logging
from dataclasses import dataclass
from typing import NoReturn, Tuple

from .model import ForestFireModel
from .placement import IGNITION_MODES, PLACEMENT_STRATEGIES, with_center_ignition
from .seeding import rng_from_string

logger = logging.getLogger(__name__)

# ============================================================================
# DEFAULT SIMULATION PARAMETERS
# ============================================================================

DEFAULT_GRID_SIZE: int = 100                        # Grid width and height in cells
DEFAULT_SUSCEPTIBILITY: float = 0.35                # Per-neighbour ignition probability
DEFAULT_BURN_DURATION: int = 5                      # Ticks a tree burns for
DEFAULT_TREE_DENSITY: float = 0.45                  # Uniform placement density
DEFAULT_PERLIN_SCALE: float = 15.0                  # Perlin placement feature size
DEFAULT_PLACEMENT: str = "uniform"
DEFAULT_IGNITION: str = "random"                    # Fire start, random cell or grid centre

# ============================================================================
# ALLOWED RANGES
# ============================================================================

GRID_SIZE_RANGE: Tuple[int, int] = (1, 1000)
PERLIN_SCALE_RANGE: Tuple[float, float] = (0.0, 50.0)


@dataclass
class SimulationConfig:
    """Everything needed to start a reproducible simulation."""

    grid_width: int = DEFAULT_GRID_SIZE
    grid_height: int = DEFAULT_GRID_SIZE
    susceptibility: float = DEFAULT_SUSCEPTIBILITY
    burn_duration: int = DEFAULT_BURN_DURATION
    placement: str = DEFAULT_PLACEMENT
    tree_density: float = DEFAULT_TREE_DENSITY
    perlin_scale: float = DEFAULT_PERLIN_SCALE
    ignition: str = DEFAULT_IGNITION
    seed: str = ""

    def validate(self) -> None:
        """
        Check every parameter is within its allowed range.

        Raises:
            ValueError: describing the first invalid parameter
        """
        low, high = GRID_SIZE_RANGE
        for name in ("grid_width", "grid_height"):
            value = getattr(self, name)
            if not low <= value <= high:
                self._fail(f"{name} must be within [{low}, {high}], got {value}")
        if not 0.0 <= self.susceptibility <= 1.0:
            self._fail(f"susceptibility must be within [0, 1], got {self.susceptibility}")
        if self.burn_duration < 1:
            self._fail(f"burn_duration must be at least 1, got {self.burn_duration}")
        if self.placement not in PLACEMENT_STRATEGIES:
            self._fail(
                f"placement must be one of {sorted(PLACEMENT_STRATEGIES)}, got {self.placement!r}"
            )
        if not 0.0 <= self.tree_density <= 1.0:
            self._fail(f"tree_density must be within [0, 1], got {self.tree_density}")
        low_scale, high_scale = PERLIN_SCALE_RANGE
        # Zero is excluded, noise is sampled at x / scale
        if not low_scale < self.perlin_scale <= high_scale:
            self._fail(
                f"perlin_scale must be within ({low_scale}, {high_scale}], got {self.perlin_scale}"
            )
        if self.ignition not in IGNITION_MODES:
            self._fail(f"ignition must be one of {list(IGNITION_MODES)}, got {self.ignition!r}")

    @staticmethod
    def _fail(message: str) -> NoReturn:
        logger.error(message)
        raise ValueError(message)


def build_model(config: SimulationConfig) -> ForestFireModel:
    """
    Validate ``config`` and create a model ready to tick.

    The random source derived from the seed string first places the trees
    and is then handed over to the model, so one seed reproduces both the
    forest and the fire.
    """
    config.validate()
    rng = rng_from_string(config.seed)

    if config.placement == "perlin":
        placement = PLACEMENT_STRATEGIES["perlin"](
            config.grid_width, config.grid_height, config.perlin_scale, rng
        )
    else:
        placement = PLACEMENT_STRATEGIES["uniform"](
            config.grid_width, config.grid_height, config.tree_density, rng
        )
    if config.ignition == "center":
        placement = with_center_ignition(placement, config.grid_width, config.grid_height)

    logger.info(f"Building {config.placement} forest with seed {config.seed!r}")
    return ForestFireModel(
        width=config.grid_width,
        height=config.grid_height,
        susceptibility=config.susceptibility,
        burn_duration=config.burn_duration,
        trees=placement.trees,
        ignitions=placement.ignitions,
        rng=rng,
    )
