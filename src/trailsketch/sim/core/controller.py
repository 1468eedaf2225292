from __future__ import annotations

import logging
import math
from enum import Enum
from time import perf_counter
from typing import Optional

from ...config import SketchConfig
from ...palettes import split_complement
from ...rng import DeterministicRng
from ..systems import forces, metrics as metrics_system
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, WalkerView
from .domain import Domain
from .flags import CaptureFlag
from .population import Population, sample_size
from .walker import Painter, TickContext, Walker, WalkerKind

logger = logging.getLogger(__name__)


class TickInProgressError(RuntimeError):
    pass


class Phase(str, Enum):
    IDLE = "Idle"
    RESOLVING = "Resolving"
    INTEGRATING = "Integrating"


class SimulationController:
    name = "walkers"

    def __init__(self, config: SketchConfig, rng: Optional[DeterministicRng] = None):
        self.config = config
        self.domain = Domain.from_config(config.domain)
        self.debug = config.debug
        self.phase = Phase.IDLE
        self.tick_count = 0
        self._rng = rng if rng is not None else DeterministicRng(config.seed)
        self._context = TickContext(domain=self.domain, dynamics=config.dynamics)
        self._capture = CaptureFlag()
        self._metrics: TickMetrics | None = None
        self._population = Population()
        self.reset()

    @property
    def population(self) -> Population:
        return self._population

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def reset(self, size: Optional[int] = None) -> Population:
        if self.phase is not Phase.IDLE:
            raise TickInProgressError(f"Cannot reset while {self.phase.value}")
        if size is None:
            size = sample_size(self._rng, self.config.population)
        palette = split_complement(self._rng)
        population = Population.spawn(self._rng, self.config.population, self.domain, palette, size)
        self.install(population)
        logger.info("Reset walker population to %d walkers", len(population))
        return population

    def install(self, population: Population) -> None:
        """Swap in a whole population. Only legal between ticks."""
        if self.phase is not Phase.IDLE:
            raise TickInProgressError(f"Cannot replace the population while {self.phase.value}")
        self._population = population
        self.tick_count = 0
        self._metrics = None

    def tick(self) -> TickMetrics:
        if self.phase is not Phase.IDLE:
            raise TickInProgressError(f"Tick requested while {self.phase.value}")
        start = perf_counter()
        walkers = self._population.walkers
        dynamics = self.config.dynamics
        try:
            self.phase = Phase.RESOLVING
            for walker in walkers:
                walker.start_rebound()
            pair_checks, interactions = forces.resolve_pairs(walkers, dynamics)

            self.phase = Phase.INTEGRATING
            context = self._context
            for walker in walkers:
                walker.update(context)
        finally:
            self.phase = Phase.IDLE

        self.tick_count += 1
        elapsed_ms = (perf_counter() - start) * 1000.0
        metrics = metrics_system.create_metrics(
            self.tick_count, pair_checks, interactions, elapsed_ms, self._population_stats()
        )
        self._metrics = metrics
        logger.debug(
            "tick=%d population=%d interactions=%d/%d avg_speed=%.3f",
            metrics.tick,
            metrics.population,
            metrics.interactions,
            metrics.pair_checks,
            metrics.average_speed,
        )
        return metrics

    def request_capture(self) -> None:
        self._capture.request()

    def consume_capture(self) -> bool:
        return self._capture.consume()

    def toggle_debug(self) -> bool:
        self.debug = not self.debug
        return self.debug

    def draw(self, painter: Painter) -> None:
        for walker in self._population:
            walker.draw(painter, self.debug)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            tick=self.tick_count,
            debug=self.debug,
            walkers=tuple(self._walker_view(walker) for walker in self._population),
        )

    @staticmethod
    def _walker_view(walker: Walker) -> WalkerView:
        position = (walker.position.x, walker.position.y)
        if walker.kind is WalkerKind.MOVEABLE:
            trail = walker.trail.points()
        else:
            trail = (position,)
        color = walker.color
        return WalkerView(
            id=walker.id,
            kind=walker.kind.value,
            color=(color.r, color.g, color.b, color.a),
            position=position,
            trail=trail,
        )

    def _population_stats(self) -> tuple[int, float, float, int]:
        population = len(self._population)
        if population == 0:
            return (0, 0.0, 0.0, 0)
        speed_sum = 0.0
        max_speed = 0.0
        max_trail = 0
        for walker in self._population:
            velocity = walker.velocity
            speed = math.hypot(velocity.x, velocity.y)
            speed_sum += speed
            if speed > max_speed:
                max_speed = speed
            if walker.kind is WalkerKind.MOVEABLE and len(walker.trail) > max_trail:
                max_trail = len(walker.trail)
        return (population, speed_sum / population, max_speed, max_trail)
