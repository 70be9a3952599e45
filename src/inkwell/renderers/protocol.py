"""DocumentRenderer protocol — stable interface for document renderers.

Any renderer that implements ``render(doc) -> str`` conforms to this protocol.
The built-in ``PlainTextRenderer`` is the reference implementation.

Example:
    from inkwell.renderers.protocol import DocumentRenderer

    def export(renderer: DocumentRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from inkwell.document import Document


class DocumentRenderer(Protocol):
    """Protocol for document renderers.

    Implementations must be stateless: the same Document always renders to
    the same string, and rendering never mutates the Document.

    """

    def render(self, doc: Document) -> str:
        """Render a Document to a string.

        Args:
            doc: The document to render.

        Returns:
            Rendered string output.

        """
        ...
