from __future__ import annotations

import itertools
import threading


class SequentialIdProvider:
    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def generate(self) -> int:
        with self._lock:
            return next(self._counter)
