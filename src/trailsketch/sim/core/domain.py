from __future__ import annotations

from dataclasses import dataclass

from ...config import DomainConfig

LEFT = (-1.0, 0.0)
RIGHT = (1.0, 0.0)
UP = (0.0, 1.0)
DOWN = (0.0, -1.0)


@dataclass(frozen=True, slots=True)
class Domain:
    """Sketch rectangle: x runs over [0, width], y over [-height/2, height/2], y up."""

    width: float
    height: float

    @classmethod
    def from_config(cls, config: DomainConfig) -> "Domain":
        return cls(width=float(config.width), height=float(config.height))

    @property
    def left(self) -> float:
        return 0.0

    @property
    def right(self) -> float:
        return self.width

    @property
    def bottom(self) -> float:
        return -self.height / 2.0

    @property
    def top(self) -> float:
        return self.height / 2.0

    def contains_x(self, x: float) -> bool:
        return self.left <= x <= self.right

    def contains_y(self, y: float) -> bool:
        return self.bottom <= y <= self.top

    def contains(self, x: float, y: float) -> bool:
        return self.contains_x(x) and self.contains_y(y)
