from __future__ import annotations


def lerp(a: float, b: float, t: float) -> float:
    """Weighted blend where ``t`` is the weight of ``a``: t=1 gives a, t=0 gives b."""
    return t * a + (1.0 - t) * b
