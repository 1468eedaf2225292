from __future__ import annotations

from typing import Iterator, List, Sequence

from pygame.math import Vector2

from ...config import PopulationConfig
from ...palettes import Gradient
from ...rng import DeterministicRng
from .domain import Domain
from .walker import MoveableWalker, Walker


def sample_size(rng: DeterministicRng, config: PopulationConfig) -> int:
    return rng.next_int_between(config.min_walkers, config.max_walkers)


class Population:
    """Walkers of one run. Read-only to everything but the controller, which swaps it out whole."""

    __slots__ = ("_walkers",)

    def __init__(self, walkers: Sequence[Walker] = ()) -> None:
        self._walkers: tuple[Walker, ...] = tuple(walkers)

    @classmethod
    def spawn(
        cls,
        rng: DeterministicRng,
        config: PopulationConfig,
        domain: Domain,
        palette: Gradient,
        size: int,
    ) -> "Population":
        if size < 0:
            raise ValueError(f"Population size must be non-negative, got {size}")
        colors = palette.colors(size)
        walkers: List[Walker] = []
        for walker_id in range(size):
            position = Vector2(
                rng.next_range(domain.left, domain.right),
                rng.next_range(domain.bottom, domain.top),
            )
            velocity = rng.next_unit_circle() * rng.next_range(0.0, config.initial_speed)
            bias = rng.next_unit_circle() * config.direction_bias
            walkers.append(
                MoveableWalker.spawn(
                    walker_id,
                    colors[walker_id],
                    position,
                    config.max_path_length,
                    velocity=velocity,
                    direction_bias=bias,
                )
            )
        return cls(walkers)

    @property
    def walkers(self) -> tuple[Walker, ...]:
        return self._walkers

    def __len__(self) -> int:
        return len(self._walkers)

    def __iter__(self) -> Iterator[Walker]:
        return iter(self._walkers)

    def __getitem__(self, index: int) -> Walker:
        return self._walkers[index]
