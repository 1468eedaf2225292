from __future__ import annotations

import math
from typing import TYPE_CHECKING, Sequence, Tuple

from ...config import DynamicsConfig
from ..utils.math2d import _clamp_length_xy_f, _safe_normalize_xy

if TYPE_CHECKING:
    from ..core.walker import Walker


def repulsion_magnitude(distance: float, dynamics: DynamicsConfig) -> float:
    """Unclamped push strength for a pair already inside the effective distance."""
    personal_space = dynamics.personal_space
    if distance > personal_space:
        return distance
    return personal_space - distance


def repulsion_xy(a: Walker, b: Walker, dynamics: DynamicsConfig) -> Tuple[float, float]:
    """Force along the pair's relative velocity, clamped to ``max_force``.

    ``a`` receives the negated force and ``b`` the force itself (see
    :func:`resolve_pairs`). Pairs beyond ``max_effective_distance`` and pairs
    moving with equal velocities resolve to zero.
    """
    a_pos = a.position
    b_pos = b.position
    dx = a_pos.x - b_pos.x
    dy = a_pos.y - b_pos.y
    dist_sq = dx * dx + dy * dy
    max_distance = dynamics.max_effective_distance
    if dist_sq > max_distance * max_distance:
        return 0.0, 0.0

    a_vel = a.velocity
    b_vel = b.velocity
    rel_x = b_vel.x - a_vel.x
    rel_y = b_vel.y - a_vel.y
    dir_x, dir_y = _safe_normalize_xy(rel_x, rel_y)
    if dir_x == 0.0 and dir_y == 0.0:
        return 0.0, 0.0

    magnitude = repulsion_magnitude(math.sqrt(dist_sq), dynamics)
    return _clamp_length_xy_f(dir_x * magnitude, dir_y * magnitude, dynamics.max_force)


def resolve_pairs(walkers: Sequence[Walker], dynamics: DynamicsConfig) -> Tuple[int, int]:
    """Apply repulsion over every unordered pair. Returns ``(pair_checks, interactions)``."""
    count = len(walkers)
    force_scale = dynamics.force_scale
    energetic = dynamics.energetic
    pair_checks = 0
    interactions = 0
    for i in range(count):
        a = walkers[i]
        for j in range(i + 1, count):
            b = walkers[j]
            pair_checks += 1
            fx, fy = repulsion_xy(a, b, dynamics)
            if fx == 0.0 and fy == 0.0:
                continue
            interactions += 1
            a.apply_force(-fx, -fy, force_scale)
            b.apply_force(fx * energetic, fy * energetic, force_scale)
    return pair_checks, interactions
