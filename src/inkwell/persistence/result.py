"""Outcome of a persistence call.

Strategies report failures as values rather than exceptions so a caller can
inspect, log or retry without a try/except around every save.

Example:
    >>> result = strategy.save("Hello")
    >>> if not result:
    ...     print(result.error.kind, result.error)
"""

from __future__ import annotations

from dataclasses import dataclass

from inkwell.errors import PersistenceError


@dataclass(frozen=True, slots=True)
class SaveResult:
    """Immutable save outcome.

    ``ok`` is True exactly when ``error`` is None; any other combination
    raises ValueError.

    Attributes:
        ok: True when the backend accepted the full payload
        destination: Human-readable target (file path, table/record, ...)
        length: Number of characters handed to the backend
        error: Classified failure, None on success

    """

    ok: bool
    destination: str
    length: int = 0
    error: PersistenceError | None = None

    def __post_init__(self) -> None:
        if self.ok != (self.error is None):
            raise ValueError(
                f"SaveResult(ok={self.ok}) requires error to be "
                f"{'None' if self.ok else 'set'}, got {self.error!r}"
            )

    @classmethod
    def success(cls, destination: str, length: int) -> SaveResult:
        return cls(ok=True, destination=destination, length=length)

    @classmethod
    def failure(cls, error: PersistenceError) -> SaveResult:
        return cls(ok=False, destination=error.destination or "", error=error)

    def raise_for_error(self) -> None:
        """Raise the carried error, if any."""
        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.ok
