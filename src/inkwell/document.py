"""Append-only document container.

A Document owns an ordered sequence of elements. Insertion order is
meaningful, duplicates are allowed, and the only mutation is append.

Thread Safety:
    Not thread-safe. Appends must be serialized by the caller when a
    Document is shared; concurrent renders (pure reads) are fine as long
    as no append is in progress.

Example:
    >>> from inkwell.elements import NewLine, Text
    >>> doc = Document()
    >>> doc.add_element(Text("A"))
    >>> doc.add_element(NewLine())
    >>> len(doc)
    2
"""

from __future__ import annotations

from collections.abc import Iterator

from inkwell.errors import ElementError
from inkwell.protocols import DocumentElement


class Document:
    """Ordered, append-only sequence of document elements."""

    __slots__ = ("_elements",)

    def __init__(self) -> None:
        self._elements: list[DocumentElement] = []

    def add_element(self, element: DocumentElement) -> None:
        """Append an element to the end of the document.

        Args:
            element: Any object providing ``render() -> str``

        Raises:
            ElementError: If ``element`` does not provide render(), or is a
                class rather than an instance
        """
        if isinstance(element, type) or not isinstance(element, DocumentElement):
            raise ElementError(element)
        self._elements.append(element)

    def get_elements(self) -> tuple[DocumentElement, ...]:
        """Return a read-only snapshot of the elements in insertion order."""
        return tuple(self._elements)

    @property
    def elements(self) -> tuple[DocumentElement, ...]:
        """Read-only snapshot of the elements (same as get_elements())."""
        return tuple(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[DocumentElement]:
        return iter(tuple(self._elements))

    def __repr__(self) -> str:
        return f"Document({list(self._elements)!r})"
