"""Grid coordinates and the Moore neighborhood."""

from typing import Iterator, NamedTuple, Tuple


# Offset order is fixed so neighbor accumulation happens in the same order every run.
MOORE_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 1),
    (1, 1),
    (1, -1),
)


class GridPosition(NamedTuple):
    """A cell coordinate on the grid.

    Being a tuple, positions compare first by ``x`` and then by ``y``, which
    gives the total order used to iterate cells deterministically.
    """

    x: int
    y: int

    def neighbors(self) -> Iterator["GridPosition"]:
        """Iterate the Moore neighborhood of this position."""
        return neighbors(self)


def neighbors(pos: Tuple[int, int]) -> Iterator[GridPosition]:
    """
    Yield the up to 8 cells surrounding ``pos``.

    Coordinates that would become negative are skipped. There is no upper
    bound check: positions past the grid edge are just absent from the cell
    map, so a lookup treats them as "no tree there".

    Args:
        pos: (x, y) coordinate of the centre cell

    Yields:
        Neighboring GridPosition objects in MOORE_OFFSETS order
    """
    x, y = pos
    for dx, dy in MOORE_OFFSETS:
        nx, ny = x + dx, y + dy
        if nx >= 0 and ny >= 0:
            yield GridPosition(nx, ny)
