from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Protocol, Sequence, Tuple, Union

from pygame import Color
from pygame.math import Vector2

from ...config import DynamicsConfig
from ..systems import integrator
from .domain import Domain
from .trail import Trail

Point = Tuple[float, float]


class WalkerKind(str, Enum):
    MOVEABLE = "moveable"
    STATIC = "static"


class Painter(Protocol):
    def trail(self, color: Color, points: Sequence[Point]) -> None: ...

    def label(self, text: str, point: Point) -> None: ...

    def marker(self, point: Point) -> None: ...


@dataclass(frozen=True, slots=True)
class TickContext:
    domain: Domain
    dynamics: DynamicsConfig


@dataclass(slots=True)
class MoveableWalker:
    kind: ClassVar[WalkerKind] = WalkerKind.MOVEABLE

    id: int
    color: Color
    position: Vector2
    trail: Trail
    velocity: Vector2 = field(default_factory=Vector2)
    acceleration: Vector2 = field(default_factory=Vector2)
    direction_bias: Vector2 = field(default_factory=Vector2)

    @classmethod
    def spawn(
        cls,
        walker_id: int,
        color: Color,
        position: Vector2,
        max_path_length: int,
        velocity: Optional[Vector2] = None,
        direction_bias: Optional[Vector2] = None,
    ) -> "MoveableWalker":
        return cls(
            id=walker_id,
            color=Color(color),
            position=Vector2(position),
            trail=Trail(position, max_path_length),
            velocity=Vector2(velocity) if velocity is not None else Vector2(),
            direction_bias=Vector2(direction_bias) if direction_bias is not None else Vector2(),
        )

    def start_rebound(self) -> None:
        self.acceleration.update(self.direction_bias)

    def apply_force(self, fx: float, fy: float, force_scale: float) -> None:
        acceleration = self.acceleration
        acceleration.update(acceleration.x + fx * force_scale, acceleration.y + fy * force_scale)

    def update(self, context: TickContext) -> None:
        integrator.integrate(self, context)

    def draw(self, painter: Painter, include_debug: bool) -> None:
        painter.trail(self.color, self.trail.points())
        if include_debug:
            newest = self.trail.newest
            painter.label(str(self.id), (newest.x, newest.y))


@dataclass(slots=True)
class StaticWalker:
    """Fixed anchor. Takes part in pair resolution with zero velocity and never moves."""

    kind: ClassVar[WalkerKind] = WalkerKind.STATIC

    id: int
    position: Vector2
    color: Color = field(default_factory=lambda: Color(0, 0, 0))
    velocity: Vector2 = field(default_factory=Vector2, init=False)

    def start_rebound(self) -> None:
        pass

    def apply_force(self, fx: float, fy: float, force_scale: float) -> None:
        pass

    def update(self, context: TickContext) -> None:
        pass

    def draw(self, painter: Painter, include_debug: bool) -> None:
        if include_debug:
            painter.marker((self.position.x, self.position.y))


Walker = Union[MoveableWalker, StaticWalker]
