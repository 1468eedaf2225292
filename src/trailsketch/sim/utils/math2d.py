from __future__ import annotations

import math


def _safe_normalize_xy(x: float, y: float) -> tuple[float, float]:
    magnitude_sq = x * x + y * y
    if magnitude_sq < 1e-12:
        return 0.0, 0.0
    inv = 1.0 / math.sqrt(magnitude_sq)
    return x * inv, y * inv


def _clamp_length_xy_f(x: float, y: float, max_length: float) -> tuple[float, float]:
    if max_length <= 0.0:
        return 0.0, 0.0
    magnitude_sq = x * x + y * y
    max_sq = max_length * max_length
    if magnitude_sq <= max_sq:
        return x, y
    if magnitude_sq <= 1e-18:
        return 0.0, 0.0
    inv = max_length / math.sqrt(magnitude_sq)
    return x * inv, y * inv


def _clamp_value(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))
