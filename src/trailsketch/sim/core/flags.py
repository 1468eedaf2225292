from __future__ import annotations

import threading


class CaptureFlag:
    """Set by input handling, consumed by the render step once per request.

    Input and render callbacks may run on different threads, so test-and-clear
    happens under a lock.
    """

    __slots__ = ("_lock", "_pending")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending = False

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending

    def request(self) -> None:
        with self._lock:
            self._pending = True

    def consume(self) -> bool:
        with self._lock:
            pending = self._pending
            self._pending = False
            return pending
