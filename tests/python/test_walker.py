from __future__ import annotations

from pygame import Color
from pygame.math import Vector2

from trailsketch.config import DynamicsConfig, DomainConfig
from trailsketch.sim.core.domain import Domain
from trailsketch.sim.core.walker import MoveableWalker, StaticWalker, TickContext, WalkerKind


class _RecordingPainter:
    def __init__(self):
        self.calls = []

    def trail(self, color, points):
        self.calls.append(("trail", tuple(points)))

    def label(self, text, point):
        self.calls.append(("label", text, point))

    def marker(self, point):
        self.calls.append(("marker", point))


def _context() -> TickContext:
    return TickContext(domain=Domain.from_config(DomainConfig()), dynamics=DynamicsConfig())


def test_walkers_use_slots_and_isolate_defaults():
    a = MoveableWalker.spawn(1, Color(1, 2, 3), Vector2(1.0, 1.0), 5)
    b = MoveableWalker.spawn(2, Color(1, 2, 3), Vector2(2.0, 2.0), 5)

    assert not hasattr(a, "__dict__")
    assert hasattr(StaticWalker, "__slots__")
    a.direction_bias.x = 1.5
    assert b.direction_bias.x == 0.0
    assert a.kind is WalkerKind.MOVEABLE
    assert StaticWalker(id=0, position=Vector2()).kind is WalkerKind.STATIC


def test_spawn_copies_position_for_the_trail():
    position = Vector2(5.0, 5.0)
    walker = MoveableWalker.spawn(0, Color(0, 0, 0), position, 3)
    position.x = 99.0

    assert walker.position == Vector2(5.0, 5.0)
    assert walker.trail.points() == ((5.0, 5.0),)


def test_apply_force_scales_by_inverse_mass():
    walker = MoveableWalker.spawn(0, Color(0, 0, 0), Vector2(), 3)
    walker.apply_force(0.5, -0.25, 10.0)
    walker.apply_force(0.5, 0.0, 10.0)

    assert walker.acceleration == Vector2(10.0, -2.5)


def test_static_walker_is_inert():
    anchor = StaticWalker(id=3, position=Vector2(10.0, -4.0))
    anchor.start_rebound()
    anchor.apply_force(100.0, 100.0, 10.0)
    anchor.update(_context())

    assert anchor.position == Vector2(10.0, -4.0)
    assert anchor.velocity == Vector2()


def test_draw_emits_trail_and_debug_label():
    walker = MoveableWalker.spawn(4, Color(200, 0, 0), Vector2(1.0, 2.0), 3)
    walker.trail.push(Vector2(3.0, 4.0))
    painter = _RecordingPainter()

    walker.draw(painter, include_debug=False)
    assert painter.calls == [("trail", ((1.0, 2.0), (3.0, 4.0)))]

    painter.calls.clear()
    walker.draw(painter, include_debug=True)
    assert painter.calls[-1] == ("label", "4", (3.0, 4.0))


def test_static_walker_draws_marker_only_in_debug():
    anchor = StaticWalker(id=0, position=Vector2(7.0, 8.0))
    painter = _RecordingPainter()

    anchor.draw(painter, include_debug=False)
    assert painter.calls == []
    anchor.draw(painter, include_debug=True)
    assert painter.calls == [("marker", (7.0, 8.0))]
