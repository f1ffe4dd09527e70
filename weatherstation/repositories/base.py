from __future__ import annotations

from typing import Protocol

from weatherstation.models.weather import Reading


class ReadingRepository(Protocol):
    def append(self, reading: Reading) -> None: ...

    def latest(self) -> Reading | None: ...

    def history(self) -> list[Reading]: ...

    def count(self) -> int: ...
