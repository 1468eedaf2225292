from __future__ import annotations

from typing import Tuple

from ..types.metrics import TickMetrics


def create_metrics(
    tick: int,
    pair_checks: int,
    interactions: int,
    duration_ms: float,
    stats: Tuple[int, float, float, int],
) -> TickMetrics:
    population, average_speed, max_speed, max_trail = stats
    return TickMetrics(
        tick=tick,
        population=population,
        pair_checks=pair_checks,
        interactions=interactions,
        average_speed=average_speed,
        max_speed=max_speed,
        max_trail=max_trail,
        tick_duration_ms=duration_ms,
    )
