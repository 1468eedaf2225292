from __future__ import annotations

import pygame
from pygame import Color

from trailsketch.app.render import BACKGROUND, Painter, fade
from trailsketch.app.window import build_sketch, dispatch_key
from trailsketch.config import DomainConfig, SketchConfig
from trailsketch.sim.core.controller import SimulationController
from trailsketch.sim.core.domain import Domain
from trailsketch.strips import StripsModel


def _painter(width: int = 100, height: int = 50) -> Painter:
    surface = pygame.Surface((width, height), 0, 32)
    painter = Painter(surface, Domain.from_config(DomainConfig(width=width, height=height)))
    painter.clear()
    return painter


def test_sketch_space_maps_to_screen_with_y_up():
    painter = _painter()

    assert painter.to_screen((0.0, 25.0)) == (0.0, 0.0)
    assert painter.to_screen((100.0, -25.0)) == (100.0, 50.0)
    assert painter.to_screen((50.0, 0.0)) == (50.0, 25.0)


def _close_to(actual, expected, tolerance: int = 3) -> bool:
    return all(abs(a - e) <= tolerance for a, e in zip(actual, expected))


def test_trail_blends_walker_color_at_quarter_alpha():
    painter = _painter()

    painter.trail(Color(200, 100, 0), [(10.0, 0.0), (90.0, 0.0)])

    # whitesmoke (245, 245, 245) under (200, 100, 0) at alpha 64
    assert _close_to(tuple(painter.surface.get_at((50, 25)))[:3], (234, 209, 184))
    assert painter.surface.get_at((50, 5)) == BACKGROUND


def test_overlapping_trails_accumulate():
    painter = _painter()
    trail = [(10.0, 0.0), (90.0, 0.0)]

    painter.trail(Color(0, 0, 255), trail)
    once = painter.surface.get_at((50, 25))
    painter.trail(Color(0, 0, 255), trail)
    twice = painter.surface.get_at((50, 25))

    assert twice.r < once.r < BACKGROUND.r


def test_single_point_trail_and_fontless_label_draw_nothing():
    painter = _painter()

    painter.trail(Color(255, 0, 0), [(50.0, 0.0)])
    painter.label("3", (50.0, 0.0))

    assert painter.surface.get_at((50, 25)) == BACKGROUND


def test_fade_scales_only_alpha():
    assert fade(Color(100, 200, 40, 200), 0.25) == Color(100, 200, 40, 50)


def test_walker_population_renders_onto_surface():
    controller = SimulationController(SketchConfig(seed=4, domain=DomainConfig(width=200, height=100)))
    painter = _painter(200, 100)
    for _ in range(5):
        controller.tick()

    controller.draw(painter)

    surface = painter.surface
    assert any(surface.get_at((x, y)) != BACKGROUND for x in range(200) for y in range(100))


class _FakeSketch:
    name = "fake"

    def __init__(self):
        self.calls = []

    def reset(self):
        self.calls.append("reset")

    def request_capture(self):
        self.calls.append("capture")

    def toggle_debug(self):
        self.calls.append("debug")
        return True


def test_keys_dispatch_to_sketch():
    sketch = _FakeSketch()

    assert dispatch_key(sketch, pygame.K_SPACE) is True
    assert dispatch_key(sketch, pygame.K_s) is True
    assert dispatch_key(sketch, pygame.K_d) is True
    assert dispatch_key(sketch, pygame.K_x) is True
    assert dispatch_key(sketch, pygame.K_ESCAPE) is False
    assert sketch.calls == ["reset", "capture", "debug"]


def test_build_sketch_follows_mode():
    assert isinstance(build_sketch(SketchConfig(seed=1)), SimulationController)
    assert isinstance(build_sketch(SketchConfig(seed=1, mode="strips")), StripsModel)
