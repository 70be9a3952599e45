"""Protocols for Inkwell.

Defines the two seams of the system: what a document element must provide,
and what a persistence backend must provide. Neither Document, the
renderers nor DocumentEditor ever branch on a concrete implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from inkwell.persistence.result import SaveResult


@runtime_checkable
class DocumentElement(Protocol):
    """Protocol for document content.

    Implementations must be pure: render() depends only on the element's own
    payload and has no side effects.

    """

    def render(self) -> str:
        """Return this element's flat textual form."""
        ...


class PersistenceStrategy(Protocol):
    """Protocol for rendered-payload sinks.

    Implementations hold only the configuration needed to reach their
    backend. Backend failures are reported through the returned SaveResult,
    never raised.

    Thread Safety:
        Not required. save() performs blocking I/O; callers wanting
        non-blocking behavior offload the call themselves.

    """

    def save(self, data: str) -> SaveResult:
        """Durably store the full rendered payload.

        Args:
            data: Complete rendered document

        Returns:
            SaveResult describing success or the classified failure

        """
        ...


__all__ = ["DocumentElement", "PersistenceStrategy"]
