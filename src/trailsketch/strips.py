from __future__ import annotations

import logging
import math
from typing import Iterator, List, Optional, Tuple

from pygame import Color

from .config import SketchConfig
from .palettes import split_complement
from .rng import DeterministicRng
from .sim.core.flags import CaptureFlag
from .utils import lerp

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


def strip_offset(total: int, index: int, strip_width: float) -> float:
    """Vertical centre of strip ``index`` when ``total`` strips are stacked."""
    return (index - total / 2.0 + 0.5) * strip_width * 2.0


class StripsModel:
    """Vertical colour strips drawn as a sine ribbon whose phases drift every tick."""

    name = "strips"

    def __init__(self, config: SketchConfig, rng: Optional[DeterministicRng] = None):
        self.config = config
        self.debug = config.debug
        self.tick_count = 0
        self._rng = rng if rng is not None else DeterministicRng(config.seed)
        self._capture = CaptureFlag()
        self.frequency = 0.0
        self.palette: List[Color] = []
        self.phases: List[float] = []
        self.speeds: List[float] = []
        self.reset()

    def reset(self) -> None:
        max_frequency = self.config.strips.max_frequency
        self.frequency = math.floor(self._rng.next_float() * max_frequency / 2.0 + max_frequency / 2.0)
        self.palette = split_complement(self._rng).colors(int(self.frequency))
        self.phases = [self._rng.next_float() for _ in self.palette]
        self.speeds = [self._rng.next_float() / 100.0 for _ in self.palette]
        self.tick_count = 0
        logger.info("Reset strips: frequency=%d strips=%d", self.frequency, len(self.palette))

    def tick(self) -> None:
        self.phases = [phase + speed for phase, speed in zip(self.phases, self.speeds)]
        self.tick_count += 1

    def segments(self) -> Iterator[Tuple[Color, Point, Point]]:
        strips = self.config.strips
        width = self.config.domain.width
        half = strips.strip_width
        total = len(self.palette)
        samples = max(1, strips.samples)
        for step in range(samples):
            t = step / samples
            x = lerp(0.0, width, t)
            wave = math.sin(t * self.frequency * math.tau) * strips.amplitude
            for index, (color, phase) in enumerate(zip(self.palette, self.phases)):
                y = wave * math.cos(t + phase) + strip_offset(total, index, half)
                yield color, (x, y - half), (x, y + half)

    def request_capture(self) -> None:
        self._capture.request()

    def consume_capture(self) -> bool:
        return self._capture.consume()

    def toggle_debug(self) -> bool:
        self.debug = not self.debug
        return self.debug

    def draw(self, painter) -> None:
        for color, start, end in self.segments():
            painter.segment(color, start, end, 2)
        if self.debug:
            x = self.config.domain.width / 2.0
            total = len(self.palette)
            for index in range(total):
                y = strip_offset(total, index, self.config.strips.strip_width)
                painter.label(str(index), (x, y))
                painter.label(str(index % 2), (x + 30.0, y))
