"""Forest fire spread model implementation."""

import logging
import random
from typing import Dict, Iterable, Iterator, List, NoReturn, Optional, Set, Tuple

import numpy as np
from mesa import Model

from .geometry import GridPosition
from .state import BURNT, CATCHING, UNCAUGHT, CellState, TreeState

logger = logging.getLogger(__name__)


class SimulationInvariantError(RuntimeError):
    """Raised when the active set and the cell map disagree."""


class ForestFireModel(Model):
    """Stochastic fire spread over a grid of trees.

    Only trees are stored: ``trees`` maps a position to its TreeState, and a
    position missing from it has no tree. Trees that are catching or burning
    are tracked in the active set so a tick only visits the fire front.
    """

    def __init__(
        self,
        width: int,
        height: int,
        susceptibility: float,
        burn_duration: int,
        trees: Iterable[Tuple[int, int]],
        ignitions: Iterable[Tuple[int, int]],
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        """
        Initialize the forest fire model.

        Args:
            width: Width of the grid (number of cells)
            height: Height of the grid (number of cells)
            susceptibility: Probability that a burning tree ignites an uncaught neighbour in one tick
            burn_duration: Number of ticks a tree burns for
            trees: Positions holding a tree
            ignitions: Positions set on fire at the start (at least one)
            rng: Seeded random source owned by the model from now on
            seed: Seed for Mesa's own random source, used when ``rng`` is not given
        """
        super().__init__(seed=seed)
        if rng is not None:
            self.random = rng

        self.width = width
        self.height = height
        self.susceptibility = susceptibility
        self.burn_duration = burn_duration
        self.current_tick = 0

        self.trees: Dict[GridPosition, TreeState] = {
            GridPosition(*pos): UNCAUGHT for pos in trees
        }
        ignition_points = sorted({GridPosition(*pos) for pos in ignitions})
        if not ignition_points:
            logger.error("At least one ignition point is required")
            raise ValueError("At least one ignition point is required.")

        self.active: Set[GridPosition] = set()
        for pos in ignition_points:
            self.trees[pos] = CATCHING
            self.active.add(pos)

        self.running = True
        logger.info(
            f"Forest {width}x{height} created with {len(self.trees)} trees, "
            f"{len(ignition_points)} ignition point(s), susceptibility {susceptibility}, "
            f"burn duration {burn_duration}"
        )

    def steady_state(self) -> bool:
        """Return True once no tree is catching or burning."""
        return not self.active

    def step(self):
        """Advance one tick; Mesa's ``running`` follows the fire."""
        self.tick()
        self.running = not self.steady_state()

    def tick(self) -> None:
        """
        Execute one tick of the simulation.

        Every active tree is evaluated against the state at the start of the
        tick; transitions are collected in a changeset and applied together at
        the end, so updates are simultaneous.
        """
        was_steady = self.steady_state()
        changeset: List[Tuple[GridPosition, TreeState]] = []
        remain_uncaught = self._propagate(changeset)

        # Draws happen only after every burning neighbour has been accounted for
        for pos in sorted(remain_uncaught):
            if not self.random.random() < remain_uncaught[pos]:
                changeset.append((pos, CATCHING))

        self._commit(changeset)
        self.current_tick += 1

        logger.debug(
            f"Tick {self.current_tick}: {len(changeset)} transitions, {len(self.active)} active"
        )
        if self.steady_state() and not was_steady:
            logger.info(f"Fire extinguished after {self.current_tick} ticks")

    def _propagate(self, changeset: List[Tuple[GridPosition, TreeState]]) -> Dict[GridPosition, float]:
        """Walk the active set and return the probability of each neighbour staying uncaught."""
        remain_uncaught: Dict[GridPosition, float] = {}
        for pos in sorted(self.active):
            state = self.trees.get(pos)
            if state is None:
                self._invariant_violation(f"Active position {pos} has no tree")

            if state.kind is CellState.Catching:
                changeset.append((pos, TreeState.burning(self.current_tick + self.burn_duration)))
            elif state.kind is CellState.Burning:
                for neighbour in pos.neighbors():
                    if self.trees.get(neighbour) == UNCAUGHT:
                        prev_prob = remain_uncaught.get(neighbour, 1.0)
                        remain_uncaught[neighbour] = prev_prob * (1.0 - self.susceptibility)
                if self.current_tick >= state.extinguish_tick:
                    changeset.append((pos, BURNT))
            else:
                self._invariant_violation(f"Active position {pos} is {state}")
        return remain_uncaught

    def _commit(self, changeset: List[Tuple[GridPosition, TreeState]]) -> None:
        for pos, state in changeset:
            self.trees[pos] = state
            if state.kind is CellState.Catching:
                self.active.add(pos)
            elif state.kind is CellState.Burnt:
                self.active.discard(pos)

    def _invariant_violation(self, message: str) -> NoReturn:
        logger.critical(message)
        raise SimulationInvariantError(message)

    def cells(self) -> Iterator[Tuple[GridPosition, TreeState]]:
        """Iterate (position, state) pairs of every tree in ascending position order."""
        for pos in sorted(self.trees):
            yield pos, self.trees[pos]

    def state_at(self, pos: Tuple[int, int]) -> Optional[TreeState]:
        """Return the state of the tree at ``pos``, or None if there is no tree."""
        return self.trees.get(GridPosition(*pos))

    @property
    def active_cells(self) -> Tuple[GridPosition, ...]:
        return tuple(sorted(self.active))

    def state_counts(self) -> Dict[CellState, int]:
        """Count trees per state."""
        counts = {kind: 0 for kind in CellState}
        for state in self.trees.values():
            counts[state.kind] += 1
        return counts

    def to_array(self) -> np.ndarray:
        """
        Build a (height, width) array of state codes.

        Cells without a tree hold 0, trees hold their CellState value.
        Trees placed outside the grid bounds are left out.
        """
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        for (x, y), state in self.trees.items():
            if x < self.width and y < self.height:
                grid[y, x] = state.kind.value
        return grid

    def __str__(self) -> str:
        counts = self.state_counts()
        summary = ", ".join(f"{kind.name}={count}" for kind, count in counts.items())
        return f"ForestFireModel(tick={self.current_tick}, {summary})"
