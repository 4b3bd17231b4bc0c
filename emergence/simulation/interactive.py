"""
Interactive simulation with pygame GUI.
"""

import logging
import sys
from typing import Optional

import pygame

from ..core.config import (
    SimulationConfig, SimulationParameters, PARAMETER_CONTROLS,
)
from ..core.state import create_state, step, set_population, resize_world
from .rendering import Glyph, control_lines, draw_flock, draw_help, draw_text_block


logger = logging.getLogger(__name__)

SELECT_KEYS = {
    pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2,
    pygame.K_4: 3, pygame.K_5: 4, pygame.K_6: 5,
}


class Simulation:
    """
    Interactive flocking simulation with pygame visualization.

    The keyboard acts as the slider panel: one parameter is selected at a
    time and UP/DOWN moves it by its step within its control range.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 params: Optional[SimulationParameters] = None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
            params: Initial parameters (uses defaults if None)
        """
        pygame.init()

        self.config = config if config else SimulationConfig()
        self.state = create_state(self.config, params)

        self.screen = pygame.display.set_mode(
            (self.config.screenWidth, self.config.screenHeight), pygame.RESIZABLE
        )
        pygame.display.set_caption("Emergence - Boids")
        self.clock = pygame.time.Clock()

        self.glyph = Glyph(self.config.glyph)
        self.selected = 0
        self.show_help = False
        self.running = True

    def update(self) -> None:
        """Update simulation state for one frame."""
        step(self.state)

    def draw(self) -> None:
        """Render the current frame."""
        self.screen.fill(self.config.backgroundColor)
        draw_flock(self.screen, self.state.views, self.glyph, self.config.boidSize)

        lines = control_lines(self.state.params, self.selected, self.state.autopilot)
        lines.append(f"  Glyph: {self.glyph.value}")
        lines.append(f"  Update: {'sequential' if self.state.sequential else 'snapshot'}")
        lines.append(f"  FPS: {int(self.clock.get_fps())}")
        lines.append("  H: help")
        draw_text_block(self.screen, lines, (10, 10), self.config.textColor)

        if self.show_help:
            draw_help(self.screen, self.config.textColor)

        pygame.display.flip()

    def run(self) -> None:
        """Run the simulation main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self._handle_resize(event.w, event.h)
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key)

            self.update()
            self.draw()
            self.clock.tick(self.config.fpsTarget)

        pygame.quit()
        sys.exit()

    def _handle_resize(self, width: int, height: int) -> None:
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        resize_world(self.state, width, height)
        logger.debug("World resized to %dx%d", width, height)

    def adjust_selected(self, direction: int) -> None:
        """Move the selected parameter one step up (+1) or down (-1)."""
        control = PARAMETER_CONTROLS[self.selected]
        current = getattr(self.state.params, control.key)
        value = control.clamp(current + direction * control.step)

        if control.key == "populationSize":
            set_population(self.state, int(round(value)))
        else:
            setattr(self.state.params, control.key, value)

    def _handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key in SELECT_KEYS:
            self.selected = SELECT_KEYS[key]
        elif key == pygame.K_TAB:
            self.selected = (self.selected + 1) % len(PARAMETER_CONTROLS)
        elif key == pygame.K_UP:
            self.adjust_selected(1)
        elif key == pygame.K_DOWN:
            self.adjust_selected(-1)
        elif key == pygame.K_a:
            self.state.autopilot = not self.state.autopilot
            print(f"Auto-pilot: {'ON' if self.state.autopilot else 'OFF'}")
        elif key == pygame.K_g:
            self.glyph = self.glyph.next()
        elif key == pygame.K_m:
            self.state.sequential = not self.state.sequential
            print(f"Update mode: {'SEQUENTIAL' if self.state.sequential else 'SNAPSHOT'}")
        elif key == pygame.K_r:
            self.state.flock.reset(self.state.params.populationSize)
        elif key == pygame.K_h:
            self.show_help = not self.show_help
