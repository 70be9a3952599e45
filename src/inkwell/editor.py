"""DocumentEditor — the caller-facing edit/save facade.

Composes a Document (owned), a renderer and an injected persistence strategy
(shared, owned by the caller). The editor never looks at which strategy it
holds; swapping backends means constructing a new editor.

Example:
    >>> from inkwell import DocumentEditor, MemoryStrategy
    >>> store = MemoryStrategy()
    >>> editor = DocumentEditor(store)
    >>> editor.add_text("Hello")
    >>> editor.add_tab_space()
    >>> editor.add_text("World")
    >>> editor.add_new_line()
    >>> editor.save().ok
    True
    >>> store.last
    'Hello\\tWorld\\n'

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inkwell.document import Document
from inkwell.elements import Image, NewLine, TabSpace, Text
from inkwell.renderers.plain import PlainTextRenderer
from inkwell.utils.logger import get_logger

if TYPE_CHECKING:
    from inkwell.persistence.result import SaveResult
    from inkwell.protocols import DocumentElement, PersistenceStrategy
    from inkwell.renderers.protocol import DocumentRenderer

logger = get_logger(__name__)


class DocumentEditor:
    """Edit a document and save its rendered form.

    Args:
        strategy: Where save() sends the rendered payload
        renderer: How the document is flattened (PlainTextRenderer if None)

    Thread Safety:
        Not thread-safe; see Document.

    """

    __slots__ = ("_document", "_renderer", "_strategy")

    def __init__(
        self,
        strategy: PersistenceStrategy,
        *,
        renderer: DocumentRenderer | None = None,
    ) -> None:
        self._strategy = strategy
        self._renderer = renderer if renderer is not None else PlainTextRenderer()
        self._document = Document()

    @property
    def document(self) -> Document:
        return self._document

    @property
    def renderer(self) -> DocumentRenderer:
        return self._renderer

    @property
    def strategy(self) -> PersistenceStrategy:
        return self._strategy

    def add(self, element: DocumentElement) -> None:
        """Append any element providing ``render() -> str``."""
        self._document.add_element(element)
        logger.debug(
            "Appended %s at position %d", type(element).__name__, len(self._document) - 1
        )

    def add_text(self, content: str) -> None:
        self.add(Text(content))

    def add_image(self, ref: str) -> None:
        self.add(Image(ref))

    def add_new_line(self) -> None:
        self.add(NewLine())

    def add_tab_space(self) -> None:
        self.add(TabSpace())

    def render(self) -> str:
        """Render the document without saving it."""
        return self._renderer.render(self._document)

    def save(self) -> SaveResult:
        """Render the document and hand the payload to the strategy.

        The strategy's result is returned unmodified. A failed save leaves
        the document untouched, so calling save() again is a retry.

        Raises:
            RenderError: If an element breaks the render contract
        """
        payload = self.render()
        result = self._strategy.save(payload)
        if result.ok:
            logger.info("Saved %d characters to %s", result.length, result.destination)
        else:
            logger.warning("Save failed (%s): %s", result.error.kind, result.error)
        return result

    def __repr__(self) -> str:
        return f"DocumentEditor(strategy={self._strategy!r}, elements={len(self._document)})"
