# MIT License (see LICENSE)
"""
Pygame renderer.

Draws rings as polyline arcs with the gap left open and balls as filled
circles. Requires the optional `viewer` extra (pygame).

Angles follow the simulation's screen convention (y down), so an arc point at
angle θ is (cx + r cos θ, cy + r sin θ) with no sign flip.
"""
from __future__ import annotations
import colorsys
import math
import random

import pygame

from ..types import RingBoundary, Projectile
from ..core.invariants import solid_arc
from .adapter import RendererAdapter

BACKGROUND = (255, 255, 255)
RING_COLOR = (52, 152, 219)
BALL_COLOR = (231, 76, 60)


class PygameRenderer(RendererAdapter):
    """
    Render onto a pygame surface.

    Args:
        surface: Target surface, usually the display surface.
        ring_width: Stroke width of rings in pixels.
        random_ring_colors: Give every ring a random bright hue (multi-ring
                            look) instead of the single ring colour.
        seed: Seed for the colour picker.
        flip: Call pygame.display.flip() at the end of each frame.

    `offset_y` is subtracted from every world y before drawing; set it each
    frame (see `scroll_offset`) to scroll down a tall ring stack.
    """

    def __init__(
        self,
        surface: pygame.Surface,
        ring_width: int = 5,
        random_ring_colors: bool = False,
        seed: int | None = None,
        flip: bool = True,
    ):
        self.surface = surface
        self.ring_width = ring_width
        self.random_ring_colors = random_ring_colors
        self.flip = flip
        self.offset_y = 0.0
        self._colors: dict[int, tuple[int, int, int]] = {}
        self._random = random.Random(seed)

    def ring_color(self, ring: RingBoundary) -> tuple[int, int, int]:
        """Colour of a ring, picked once per ring id."""
        if not self.random_ring_colors:
            return RING_COLOR
        if ring.id not in self._colors:
            r, g, b = colorsys.hsv_to_rgb(self._random.random(), 0.75, 1.0)
            self._colors[ring.id] = (int(255 * r), int(255 * g), int(255 * b))
        return self._colors[ring.id]

    def begin_frame(self, tick: int) -> None:
        self.surface.fill(BACKGROUND)

    def draw_ring(self, ring: RingBoundary) -> None:
        start, end = solid_arc(ring)
        # ~2 px per segment
        n = max(8, int(ring.radius * (end - start) / 2))
        cy = ring.y - self.offset_y
        points = []
        for i in range(n + 1):
            theta = start + (end - start) * i / n
            points.append((ring.x + ring.radius * math.cos(theta), cy + ring.radius * math.sin(theta)))
        pygame.draw.lines(self.surface, self.ring_color(ring), False, points, self.ring_width)

    def draw_projectile(self, projectile: Projectile) -> None:
        center = (int(projectile.x), int(projectile.y - self.offset_y))
        pygame.draw.circle(self.surface, BALL_COLOR, center, int(projectile.radius))

    def end_frame(self) -> None:
        if self.flip:
            pygame.display.flip()

    def forget(self) -> None:
        """Drop cached ring colours (after a reset)."""
        self._colors.clear()
