from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import pygame
from pygame import Color

from ..sim.core.domain import Domain

Point = Tuple[float, float]

BACKGROUND = Color("whitesmoke")
DEBUG_COLOR = Color("red")
MARKER_COLOR = Color("black")
# Trails blend over the background and over each other.
TRAIL_ALPHA = 0.25


def fade(color: Color, factor: float) -> Color:
    return Color(color.r, color.g, color.b, int(color.a * factor))


class Painter:
    """Draws sketch geometry onto a surface. Sketch space is y-up, x in [0, width]."""

    def __init__(self, surface: pygame.Surface, domain: Domain, font: Optional[pygame.font.Font] = None):
        self.surface = surface
        self.domain = domain
        self._font = font

    def to_screen(self, point: Point) -> Tuple[float, float]:
        return (point[0] - self.domain.left, self.domain.top - point[1])

    def clear(self, color: Color = BACKGROUND) -> None:
        self.surface.fill(color)

    def trail(self, color: Color, points: Sequence[Point]) -> None:
        if len(points) < 2:
            return
        screen_points = [self.to_screen(point) for point in points]
        left = math.floor(min(x for x, _ in screen_points)) - 1
        top = math.floor(min(y for _, y in screen_points)) - 1
        width = math.ceil(max(x for x, _ in screen_points)) - left + 2
        height = math.ceil(max(y for _, y in screen_points)) - top + 2
        layer = pygame.Surface((width, height), pygame.SRCALPHA)
        local_points = [(x - left, y - top) for x, y in screen_points]
        pygame.draw.lines(layer, fade(color, TRAIL_ALPHA), False, local_points)
        self.surface.blit(layer, (left, top))

    def segment(self, color: Color, start: Point, end: Point, width: int = 1) -> None:
        pygame.draw.line(self.surface, color, self.to_screen(start), self.to_screen(end), width)

    def marker(self, point: Point) -> None:
        pygame.draw.circle(self.surface, MARKER_COLOR, self.to_screen(point), 5)

    def label(self, text: str, point: Point) -> None:
        if self._font is None:
            return
        rendered = self._font.render(text, True, DEBUG_COLOR)
        self.surface.blit(rendered, rendered.get_rect(center=self.to_screen(point)))
