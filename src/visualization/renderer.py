"""Grid rendering functionality for the forest fire simulation.

This module provides the GridRenderer class which fits the grid into a
rectangle of the window and draws every tree in the color of its state.
"""

from typing import TYPE_CHECKING, Tuple

import pygame

from forest_fire.state import CellState, TreeState
from .colors import (
    Color,
    GROUND_COLOR,
    UNCAUGHT_COLOR,
    CATCHING_COLOR,
    BURNING_COLOR,
    BURNT_COLOR,
)

if TYPE_CHECKING:
    from forest_fire.model import ForestFireModel


class GridRenderer:
    """Renders the forest onto a Pygame surface.

    Cells are square; the grid is scaled to the largest cell size that fits
    the available area and centred in it. Cells without a tree show the
    ground color.

    Attributes:
        area: Rectangle of the surface reserved for the grid.
    """

    STATE_COLORS = {
        CellState.Uncaught: UNCAUGHT_COLOR,
        CellState.Catching: CATCHING_COLOR,
        CellState.Burning: BURNING_COLOR,
        CellState.Burnt: BURNT_COLOR,
    }

    def __init__(self, area: pygame.Rect) -> None:
        """Initialize the grid renderer.

        Args:
            area: Rectangle of the surface the grid is drawn into.
        """
        self.area = area

    def get_cell_color(self, state: TreeState) -> Color:
        return self.STATE_COLORS[state.kind]

    def grid_params(self, model: "ForestFireModel") -> Tuple[float, pygame.Rect]:
        """Compute the cell size and the centred rectangle covered by the grid.

        Args:
            model: The model whose grid dimensions are used.

        Returns:
            Tuple of (cell size in pixels, grid rectangle).
        """
        step = min(self.area.width / model.width, self.area.height / model.height)
        grid_w = step * model.width
        grid_h = step * model.height
        left = self.area.x + (self.area.width - grid_w) / 2
        top = self.area.y + (self.area.height - grid_h) / 2
        return step, pygame.Rect(int(left), int(top), int(grid_w), int(grid_h))

    def draw(self, screen: pygame.Surface, model: "ForestFireModel") -> None:
        """Draw the ground and every tree."""
        step, grid_rect = self.grid_params(model)
        screen.fill(GROUND_COLOR, grid_rect)

        for (x, y), state in model.cells():
            left = int(grid_rect.x + x * step)
            top = int(grid_rect.y + y * step)
            right = int(grid_rect.x + (x + 1) * step)
            bottom = int(grid_rect.y + (y + 1) * step)
            pygame.draw.rect(
                screen,
                self.get_cell_color(state),
                (left, top, max(1, right - left), max(1, bottom - top)),
            )
