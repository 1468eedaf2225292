from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, Tuple

from pygame.math import Vector2


class Trail:
    """Oldest-first history of positions, capped at ``max_length`` entries."""

    __slots__ = ("_points",)

    def __init__(self, start: Vector2, max_length: int) -> None:
        if max_length < 1:
            raise ValueError(f"Trail length must be at least 1, got {max_length}")
        self._points: Deque[Vector2] = deque(maxlen=max_length)
        self._points.append(Vector2(start))

    @property
    def newest(self) -> Vector2:
        return self._points[-1]

    @property
    def oldest(self) -> Vector2:
        return self._points[0]

    def push(self, point: Vector2) -> None:
        # deque drops from the front once maxlen is reached
        self._points.append(Vector2(point))

    def points(self) -> Tuple[Tuple[float, float], ...]:
        return tuple((point.x, point.y) for point in self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Vector2]:
        return iter(self._points)
