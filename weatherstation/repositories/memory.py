from __future__ import annotations

import threading

from weatherstation.models.weather import Reading


class InMemoryReadingRepository:
    """Append-only reading store. Readers always receive copies."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._readings: list[Reading] = []

    def append(self, reading: Reading) -> None:
        with self._lock:
            self._readings.append(reading)

    def latest(self) -> Reading | None:
        with self._lock:
            if not self._readings:
                return None
            return self._readings[-1]

    def history(self) -> list[Reading]:
        with self._lock:
            return list(self._readings)

    def count(self) -> int:
        with self._lock:
            return len(self._readings)
