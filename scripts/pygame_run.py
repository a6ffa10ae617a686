#!/usr/bin/env python3
"""Pygame visualization launcher for the forest fire simulation.

Draws the forest every frame and advances the simulation by one tick per
frame while it is running and the fire is still active.

Usage:
    python scripts/pygame_run.py [--width 100] [--height 100] [--seed text]
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import SimulationConfig, build_model, random_seed_string
from forest_fire.config import (
    DEFAULT_BURN_DURATION,
    DEFAULT_GRID_SIZE,
    DEFAULT_PERLIN_SCALE,
    DEFAULT_SUSCEPTIBILITY,
    DEFAULT_TREE_DENSITY,
)
from forest_fire.placement import IGNITION_MODES, PLACEMENT_STRATEGIES

from visualization import (
    GridRenderer,
    InfoPanel,
    SpeedSlider,
    WHITE,
    DEFAULT_GRID_AREA,
    DEFAULT_PANEL_HEIGHT,
    DEFAULT_FPS,
    MIN_FPS,
    MAX_FPS,
)

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Main simulation runner with Pygame visualization.

    Handles the main loop, event processing, and coordination between
    the forest fire model and visualization components.

    Attributes:
        config: Parameters the current model was built from.
        model: The forest fire simulation model.
        screen: Pygame display surface.
        clock: Pygame clock for FPS control.
        renderer: Grid renderer for drawing cells.
        info_panel: UI panel for displaying simulation info.
        slider: Speed control slider.
        paused: Whether the simulation is paused.
        current_fps: Current frames per second setting.
        dragging_slider: Whether the user is dragging the speed slider.
    """

    def __init__(self, config: SimulationConfig) -> None:
        """Initialize the simulation runner.

        Args:
            config: Simulation parameters; an empty seed is replaced by a random one.
        """
        if not config.seed:
            config = replace(config, seed=random_seed_string())
        self.config = config
        self.model = build_model(config)

        window_width = DEFAULT_GRID_AREA
        window_height = DEFAULT_GRID_AREA + DEFAULT_PANEL_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption("Forest Fire")
        self.clock = pygame.time.Clock()

        self.renderer = GridRenderer(pygame.Rect(0, 0, DEFAULT_GRID_AREA, DEFAULT_GRID_AREA))
        self.panel_rect = pygame.Rect(0, DEFAULT_GRID_AREA, window_width, DEFAULT_PANEL_HEIGHT)
        self.info_panel = InfoPanel()
        self.slider = SpeedSlider(
            x=15,
            y=self.panel_rect.y + 105,
            width=300,
            height=16,
            min_val=MIN_FPS,
            max_val=MAX_FPS
        )

        self.paused = True
        self.current_fps = DEFAULT_FPS
        self.dragging_slider = False

    def restart(self, new_seed: bool = False) -> None:
        """Rebuild the model, keeping the seed unless ``new_seed`` is set."""
        if new_seed:
            self.config = replace(self.config, seed=random_seed_string())
        self.model = build_model(self.config)
        self.paused = True

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input events.

        Args:
            event: The keyboard event to process.

        Returns:
            False if the simulation should quit, True otherwise.
        """
        if event.key == pygame.K_ESCAPE:
            return False

        elif event.key == pygame.K_SPACE:
            self.paused = not self.paused

        elif event.key == pygame.K_s:
            if self.paused and not self.model.steady_state():
                self.model.tick()

        elif event.key == pygame.K_r:
            self.restart()

        elif event.key == pygame.K_n:
            self.restart(new_seed=True)

        return True

    def _handle_slider_events(self, event: pygame.event.Event) -> None:
        """Handle slider interaction events.

        Args:
            event: The mouse event to process.
        """
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:  # Left click
                new_fps = self.slider.handle_click(*event.pos)
                if new_fps is not None:
                    self.dragging_slider = True
                    self.current_fps = new_fps

        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1:
                self.dragging_slider = False

        elif event.type == pygame.MOUSEMOTION:
            if self.dragging_slider:
                new_fps = self.slider.handle_click(*event.pos)
                if new_fps is not None:
                    self.current_fps = new_fps

    def _update_simulation(self) -> None:
        """Advance the simulation by one tick if running."""
        if self.paused:
            return

        if self.model.steady_state():
            self.paused = True
            return
        self.model.tick()

    def _render(self) -> None:
        """Render all visual components to the screen."""
        self.screen.fill(WHITE)
        self.renderer.draw(self.screen, self.model)
        self.info_panel.draw(
            self.screen,
            self.model,
            self.paused,
            self.config.seed,
            self.current_fps,
            self.panel_rect,
        )
        self.slider.draw(self.screen, self.current_fps)
        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the user quits."""
        running = True

        while running:
            self._render()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    if not self._handle_keyboard_events(event):
                        running = False

                else:
                    self._handle_slider_events(event)

            self._update_simulation()
            self.clock.tick(self.current_fps)

        pygame.quit()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive forest fire simulation.")
    parser.add_argument("--width", type=int, default=DEFAULT_GRID_SIZE)
    parser.add_argument("--height", type=int, default=DEFAULT_GRID_SIZE)
    parser.add_argument("--susceptibility", type=float, default=DEFAULT_SUSCEPTIBILITY)
    parser.add_argument("--burn-duration", type=int, default=DEFAULT_BURN_DURATION)
    parser.add_argument("--placement", choices=sorted(PLACEMENT_STRATEGIES), default="uniform")
    parser.add_argument("--density", type=float, default=DEFAULT_TREE_DENSITY)
    parser.add_argument("--perlin-scale", type=float, default=DEFAULT_PERLIN_SCALE)
    parser.add_argument("--ignition", choices=IGNITION_MODES, default="random")
    parser.add_argument("--seed", default="")
    return parser.parse_args(argv)


def main() -> None:
    """Main entry point for the Pygame visualization."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    args = parse_args()
    config = SimulationConfig(
        grid_width=args.width,
        grid_height=args.height,
        susceptibility=args.susceptibility,
        burn_duration=args.burn_duration,
        placement=args.placement,
        tree_density=args.density,
        perlin_scale=args.perlin_scale,
        ignition=args.ignition,
        seed=args.seed,
    )
    try:
        runner = SimulationRunner(config)
    except ValueError as exc:
        logger.error(f"Cannot start simulation: {exc}")
        sys.exit(2)
    runner.run()


if __name__ == "__main__":
    main()
