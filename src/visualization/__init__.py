"""Visualization package for the forest fire simulation using Pygame."""

from .colors import *
from .renderer import GridRenderer
from .ui import InfoPanel, SpeedSlider

__all__ = [
    # Renderer and UI components
    'GridRenderer',
    'InfoPanel',
    'SpeedSlider',

    # Tree state colors
    'UNCAUGHT_COLOR',
    'CATCHING_COLOR',
    'BURNING_COLOR',
    'BURNT_COLOR',

    # Background and UI colors
    'GROUND_COLOR',
    'WHITE',
    'PANEL_COLOR',

    # Default parameters
    'DEFAULT_GRID_AREA',
    'DEFAULT_PANEL_HEIGHT',
    'DEFAULT_FPS',

    # FPS limits
    'MIN_FPS',
    'MAX_FPS',
]
