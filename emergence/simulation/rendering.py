"""
Drawing helpers for boids and overlays.

Nothing here changes simulation state; it only consumes BoidViews and
parameter values.
"""

import math
from enum import Enum
from typing import Iterable, List, Sequence

import pygame

from ..core.agents.boid import BoidView
from ..core.config import PARAMETER_CONTROLS, SimulationParameters


class Glyph(Enum):
    """Shape used to draw a boid."""

    TRIANGLE = "triangle"
    CIRCLE = "circle"
    CROSS = "cross"
    LETTER = "letter"

    def next(self) -> "Glyph":
        members = list(Glyph)
        return members[(members.index(self) + 1) % len(members)]


AGITATED_OUTLINE = (255, 255, 255)
HELP_TEXT = [
    "About This Simulation",
    "",
    "Each boid follows three local rules: alignment, cohesion and separation.",
    "The flocking you see is emergent; there is no leader.",
    "",
    "Controls",
    "  TAB / 1-6   select a parameter",
    "  UP / DOWN   adjust the selected parameter",
    "  A           toggle auto-pilot (drives the first four parameters)",
    "  G           cycle boid glyph",
    "  M           toggle sequential / snapshot update",
    "  R           respawn the flock",
    "  H           show / hide this help",
    "  ESC         quit",
]

_font_cache = {}


def get_font(size: int) -> pygame.font.Font:
    # Fonts die with pygame.font.quit(); rebuild the cache after a re-init
    if not pygame.font.get_init():
        pygame.font.init()
        _font_cache.clear()
    if size not in _font_cache:
        _font_cache[size] = pygame.font.Font(None, size)
    return _font_cache[size]


def hue_color(hue: float, saturation: float = 90, value: float = 90) -> pygame.Color:
    """Convert an HSB hue (degrees) to a pygame colour."""
    color = pygame.Color(0, 0, 0)
    color.hsva = (hue % 360, saturation, value, 100)
    return color


def triangle_points(view: BoidView, size: float) -> List[pygame.Vector2]:
    """Triangle pointing along the heading, ``size`` wide and ``4 * size`` long."""
    angle = view.heading + math.pi / 2
    corners = [
        pygame.Vector2(0, -size * 2),
        pygame.Vector2(-size, size * 2),
        pygame.Vector2(size, size * 2),
    ]
    return [view.position + corner.rotate_rad(angle) for corner in corners]


def draw_boid(surface: pygame.Surface, view: BoidView, glyph: Glyph, size: int = 5) -> None:
    """
    Draw one boid.

    Args:
        surface: Pygame surface to draw on
        view: Render state of the boid
        glyph: Shape to draw
        size: Base glyph size in pixels
    """
    color = hue_color(view.hue)
    center = (int(view.position.x), int(view.position.y))

    if glyph is Glyph.TRIANGLE:
        points = triangle_points(view, size)
        pygame.draw.polygon(surface, color, points)
        if view.agitated:
            pygame.draw.polygon(surface, AGITATED_OUTLINE, points, 1)
    elif glyph is Glyph.CIRCLE:
        pygame.draw.circle(surface, color, center, size)
        if view.agitated:
            pygame.draw.circle(surface, AGITATED_OUTLINE, center, size + 2, 1)
    elif glyph is Glyph.CROSS:
        x, y = center
        pygame.draw.line(surface, color, (x - size, y - size), (x + size, y + size), 2)
        pygame.draw.line(surface, color, (x + size, y - size), (x - size, y + size), 2)
    else:
        letter = "!" if view.agitated else "v"
        text = get_font(size * 4).render(letter, True, color)
        text = pygame.transform.rotate(text, -math.degrees(view.heading + math.pi / 2))
        surface.blit(text, text.get_rect(center=center))


def draw_flock(surface: pygame.Surface, views: Iterable[BoidView], glyph: Glyph, size: int = 5) -> None:
    for view in views:
        draw_boid(surface, view, glyph, size)


def control_lines(params: SimulationParameters, selected: int, autopilot: bool) -> List[str]:
    """Text lines of the parameter readout, marking the selected control."""
    lines = []
    for idx, control in enumerate(PARAMETER_CONTROLS):
        value = getattr(params, control.key)
        marker = ">" if idx == selected else " "
        if control.step >= 1:
            text = f"{marker} {control.label}: {value:.0f}"
        else:
            text = f"{marker} {control.label}: {value:.1f}"
        lines.append(text)
    lines.append(f"  Auto-Pilot: {'ON' if autopilot else 'OFF'}")
    return lines


def draw_text_block(surface: pygame.Surface, lines: Sequence[str], origin, color,
                    font_size: int = 24, line_height: int = 25) -> None:
    font = get_font(font_size)
    x, y = origin
    for text in lines:
        surface.blit(font.render(text, True, color), (x, y))
        y += line_height


def draw_help(surface: pygame.Surface, color) -> None:
    """Draw the help popup over a dimmed background."""
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 190))
    surface.blit(overlay, (0, 0))

    width, height = surface.get_size()
    box = pygame.Rect(0, 0, min(700, width - 40), 25 * len(HELP_TEXT) + 40)
    box.center = (width // 2, height // 2)
    pygame.draw.rect(surface, (40, 40, 40), box, border_radius=10)
    draw_text_block(surface, HELP_TEXT, (box.x + 20, box.y + 20), color)
