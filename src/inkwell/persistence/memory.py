"""In-memory persistence, for tests and dry runs."""

from __future__ import annotations

from inkwell.persistence.result import SaveResult


class MemoryStrategy:
    """Keep every saved payload in a list.

    Not thread-safe.
    """

    __slots__ = ("_history", "name")

    def __init__(self, name: str = "memory") -> None:
        self.name = name
        self._history: list[str] = []

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    @property
    def last(self) -> str | None:
        return self._history[-1] if self._history else None

    def save(self, data: str) -> SaveResult:
        self._history.append(data)
        return SaveResult.success(self.name, len(data))

    def load(self) -> str | None:
        return self.last
