from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from pygame import Color

from .rng import DeterministicRng
from .sim.utils.math2d import _clamp_value


@dataclass(frozen=True, slots=True)
class Hsl:
    hue: float
    saturation: float
    lightness: float

    def to_color(self, alpha: float = 1.0) -> Color:
        color = Color(0, 0, 0)
        color.hsla = (
            self.hue % 360.0,
            _clamp_value(self.saturation, 0.0, 1.0) * 100.0,
            _clamp_value(self.lightness, 0.0, 1.0) * 100.0,
            _clamp_value(alpha, 0.0, 1.0) * 100.0,
        )
        return color


def _lerp_hue(start: float, end: float, t: float) -> float:
    delta = (end - start + 180.0) % 360.0 - 180.0
    return (start + delta * t) % 360.0


class Gradient:
    def __init__(self, stops: Sequence[Hsl]):
        if not stops:
            raise ValueError("Gradient needs at least one stop")
        self._stops = tuple(stops)

    @property
    def stops(self) -> tuple[Hsl, ...]:
        return self._stops

    def sample(self, t: float) -> Hsl:
        stops = self._stops
        segments = len(stops) - 1
        if segments == 0:
            return stops[0]
        pos = _clamp_value(t, 0.0, 1.0) * segments
        index = min(int(pos), segments - 1)
        local = pos - index
        start = stops[index]
        end = stops[index + 1]
        return Hsl(
            hue=_lerp_hue(start.hue, end.hue, local),
            saturation=start.saturation + (end.saturation - start.saturation) * local,
            lightness=start.lightness + (end.lightness - start.lightness) * local,
        )

    def take(self, count: int) -> List[Hsl]:
        if count <= 0:
            return []
        if count == 1:
            return [self._stops[0]]
        return [self.sample(i / (count - 1)) for i in range(count)]

    def colors(self, count: int, alpha: float = 1.0) -> List[Color]:
        return [hsl.to_color(alpha) for hsl in self.take(count)]


def complement(rng: DeterministicRng) -> Gradient:
    saturation = rng.next_float() * 0.5 + 0.5
    start = Hsl(rng.next_float() * 360.0, saturation, rng.next_float() * 0.5 + 0.5)
    end = Hsl(start.hue + 180.0, saturation, rng.next_float() * 0.5 + 0.5)
    return Gradient([start, end])


def split_complement(rng: DeterministicRng) -> Gradient:
    saturation = rng.next_float() * 0.5 + 0.5
    lightness = rng.next_float() * 0.5 + 0.25
    start = Hsl(rng.next_float() * 360.0, saturation, lightness)
    # both flanking stops are darkened by the same factor
    mid = Hsl(start.hue + 150.0, start.saturation, start.lightness * lightness)
    end = Hsl(start.hue + 210.0, start.saturation, start.lightness * lightness)
    return Gradient([start, mid, end])
