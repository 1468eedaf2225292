from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    population: int
    pair_checks: int
    interactions: int
    average_speed: float
    max_speed: float
    max_trail: int
    tick_duration_ms: float = 0.0
