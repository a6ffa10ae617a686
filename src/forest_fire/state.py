"""Fire states of a single tree."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CellState(Enum):
    """Possible fire states of a tree.

    Values follow the only direction a tree may move in, so ``a.value < b.value``
    means ``a`` comes before ``b``. Zero is kept free for "no tree" in grids.
    """
    Uncaught = 1
    Catching = 2
    Burning = 3
    Burnt = 4


@dataclass(frozen=True)
class TreeState:
    """State of a tree, with the extinguish tick carried by burning trees."""

    kind: CellState
    extinguish_tick: Optional[int] = None

    def __post_init__(self):
        if (self.kind is CellState.Burning) != (self.extinguish_tick is not None):
            raise ValueError("Only burning trees carry an extinguish tick")

    @classmethod
    def burning(cls, extinguish_tick: int) -> "TreeState":
        """Create a burning state that turns to burnt at ``extinguish_tick``."""
        return cls(CellState.Burning, extinguish_tick)

    @property
    def is_active(self) -> bool:
        """
        Check if the tree is on fire.

        Returns:
            True if the tree is catching or burning
        """
        return self.kind in (CellState.Catching, CellState.Burning)

    def __str__(self) -> str:
        if self.kind is CellState.Burning:
            return f"{self.kind.name}({self.extinguish_tick})"
        return self.kind.name


UNCAUGHT = TreeState(CellState.Uncaught)
CATCHING = TreeState(CellState.Catching)
BURNT = TreeState(CellState.Burnt)
