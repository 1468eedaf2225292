from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class WalkerView:
    id: int
    kind: str
    color: Tuple[int, int, int, int]
    position: Point
    trail: Tuple[Point, ...]


@dataclass(frozen=True, slots=True)
class Snapshot:
    tick: int
    debug: bool
    walkers: Tuple[WalkerView, ...]
