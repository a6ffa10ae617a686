"""Color definitions and constants for the forest fire visualization.

This module contains all RGB color tuples and default window values
used throughout the Pygame visualization.
"""

from typing import Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# TREE STATE COLORS
# ============================================================================

UNCAUGHT_COLOR: Color = (0, 100, 0)                 # darkgreen
CATCHING_COLOR: Color = (139, 0, 0)                 # darkred (just ignited)
BURNING_COLOR: Color = (255, 0, 0)                  # red (on fire)
BURNT_COLOR: Color = (160, 160, 160)                # gray (burnt out)

# ============================================================================
# BACKGROUND AND UI COLORS
# ============================================================================

GROUND_COLOR: Color = (0x36, 0x24, 0x19)            # dark brown, cells without a tree
WHITE: Color = (255, 255, 255)                      # Window background
PANEL_COLOR: Color = (80, 0, 0)                     # Info panel background

# ============================================================================
# DEFAULT WINDOW PARAMETERS
# ============================================================================

DEFAULT_GRID_AREA: int = 700                        # Side of the square grid area in pixels
DEFAULT_PANEL_HEIGHT: int = 140                     # Height of the info panel in pixels
DEFAULT_FPS: int = 30                               # Default frames per second

# ============================================================================
# FPS SLIDER LIMITS
# ============================================================================

MIN_FPS: int = 1                                    # Minimum simulation speed
MAX_FPS: int = 60                                   # Maximum simulation speed
