"""Exception classes for Inkwell.

Provides standardized exceptions for error handling throughout Inkwell.

Two families exist:
- Contract errors (ElementError, RenderError, ConfigError) are raised and
  propagate to the caller. They indicate a programming mistake.
- Persistence errors (StorageIOError, StorageBackendError) are recoverable.
  Strategies never raise them from save(); they travel inside a SaveResult.
"""

from __future__ import annotations


class InkwellError(Exception):
    """Base exception for all Inkwell errors.
    
    Subclass this for specific error categories.
    """

    pass


class ElementError(InkwellError, TypeError):
    """Object offered to a Document does not provide ``render() -> str``."""

    def __init__(self, obj: object) -> None:
        self.obj = obj
        if isinstance(obj, type):
            message = f"{obj.__name__} is a class, not a document element instance"
        else:
            message = f"{type(obj).__name__} is not a document element (missing render())"
        super().__init__(message)


class RenderError(InkwellError):
    """Error during rendering.
    
    Raised when an element breaks the render contract, e.g. returns
    something other than a string. Never recovered from internally.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        self.position = position
        location = f" (element {position})" if position is not None else ""
        super().__init__(f"{message}{location}")


class ConfigError(InkwellError, ValueError):
    """Invalid storage configuration."""

    pass


class PersistenceError(InkwellError):
    """Base for classified save failures.
    
    Attributes:
        kind: Short classification ("io", "backend")
        destination: Human-readable target the save was aimed at
    """

    kind: str = "persistence"

    def __init__(self, message: str, destination: str | None = None) -> None:
        self.message = message
        self.destination = destination
        target = f"{destination}: " if destination else ""
        super().__init__(f"{target}{message}")


class StorageIOError(PersistenceError):
    """File-system write failed (unwritable path, missing directory, ...)."""

    kind = "io"


class StorageBackendError(PersistenceError):
    """External store unreachable or rejected the write."""

    kind = "backend"
