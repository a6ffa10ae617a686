"""UI components for the forest fire visualization.

This module contains the info panel showing simulation status and the
speed control slider.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from forest_fire.state import CellState
from .colors import WHITE, PANEL_COLOR, BURNING_COLOR

if TYPE_CHECKING:
    from forest_fire.model import ForestFireModel


class InfoPanel:
    """Displays simulation information below the grid.

    Shows the current tick, run status, tree counts per state, the seed
    and the keyboard shortcuts.

    Attributes:
        font: Main font for primary information.
        small_font: Smaller font for secondary information.
    """

    KEY_HELP = (
        "SPACE = Pause / Continue",
        "S = Step (paused)",
        "R = Restart   N = New seed",
        "ESC = Quit",
    )

    def __init__(self) -> None:
        """Initialize the info panel with fonts."""
        self.font = pygame.font.Font(None, 30)
        self.small_font = pygame.font.Font(None, 22)

    def draw(
        self,
        screen: pygame.Surface,
        model: "ForestFireModel",
        paused: bool,
        seed: str,
        fps: int,
        rect: pygame.Rect,
    ) -> None:
        """Draw the panel into ``rect``."""
        pygame.draw.rect(screen, PANEL_COLOR, rect)
        padding = 15

        tick_text = self.font.render(f"Tick: {model.current_tick}", True, WHITE)
        screen.blit(tick_text, (rect.x + padding, rect.y + padding))

        if model.steady_state():
            status = "EXTINGUISHED"
        else:
            status = "PAUSED" if paused else "RUNNING"
        status_text = self.font.render(status, True, WHITE)
        screen.blit(status_text, (rect.centerx - status_text.get_width() // 2, rect.y + padding))

        counts = model.state_counts()
        counts_line = "   ".join(f"{kind.name}: {counts[kind]}" for kind in CellState)
        screen.blit(self.small_font.render(counts_line, True, WHITE), (rect.x + padding, rect.y + 50))
        seed_line = f"Seed: {seed!r}   Speed: {fps} FPS"
        screen.blit(self.small_font.render(seed_line, True, WHITE), (rect.x + padding, rect.y + 72))

        for i, line in enumerate(self.KEY_HELP):
            text = self.small_font.render(line, True, WHITE)
            screen.blit(text, (rect.right - text.get_width() - padding, rect.y + 10 + i * 22))


class SpeedSlider:
    """Interactive slider for controlling simulation speed.

    Allows the user to adjust the FPS (frames per second), and so the ticks
    per second, by clicking and dragging a handle along a horizontal bar.

    Attributes:
        x: X coordinate of the slider's left edge.
        y: Y coordinate of the slider's top edge.
        width: Width of the slider bar in pixels.
        height: Height of the slider bar in pixels.
        min_val: Minimum value (FPS).
        max_val: Maximum value (FPS).
    """

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        min_val: int,
        max_val: int
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.min_val = min_val
        self.max_val = max_val

    def draw(self, screen: pygame.Surface, current_val: int) -> None:
        bar_rect = pygame.Rect(self.x, self.y, self.width, self.height)
        pygame.draw.rect(screen, (20, 20, 20), bar_rect, border_radius=6)
        pygame.draw.rect(screen, (70, 70, 70), bar_rect, 2, border_radius=6)

        ratio = (current_val - self.min_val) / (self.max_val - self.min_val)
        handle_x = self.x + int(ratio * self.width)
        handle_y = self.y + self.height // 2
        pygame.draw.circle(screen, BURNING_COLOR, (handle_x, handle_y), self.height // 2 + 3)

    def handle_click(self, mouse_x: int, mouse_y: int) -> Optional[int]:
        """Map a mouse position to an FPS value, or None when outside the bar."""
        # easier grab area
        grab_margin = 20
        if not (self.x - grab_margin <= mouse_x <= self.x + self.width + grab_margin):
            return None
        if not (self.y - grab_margin <= mouse_y <= self.y + self.height + grab_margin):
            return None

        ratio = (mouse_x - self.x) / self.width
        new_val = self.min_val + ratio * (self.max_val - self.min_val)

        return max(self.min_val, min(self.max_val, int(new_val)))
