"""Plain text renderer — flat concatenation of element renders.

Every element contributes exactly its own render() output; the renderer adds
no separators. Line breaks and tabs come from NewLine and TabSpace elements.

Example:
    >>> from inkwell import Document, Text, TabSpace
    >>> doc = Document()
    >>> doc.add_element(Text("Hello"))
    >>> doc.add_element(TabSpace())
    >>> PlainTextRenderer().render(doc)
    'Hello\\t'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inkwell.errors import RenderError
from inkwell.stringbuilder import StringBuilder
from inkwell.utils.logger import get_logger

if TYPE_CHECKING:
    from inkwell.document import Document

logger = get_logger(__name__)


class PlainTextRenderer:
    """Render a Document to a single flat string.

    Stateless; one instance can be shared freely.
    """

    __slots__ = ()

    def render(self, doc: Document) -> str:
        """Render document elements in order.

        Raises:
            RenderError: If an element's render() does not return a string
        """
        sb = StringBuilder()
        for position, element in enumerate(doc.get_elements()):
            out = element.render()
            if not isinstance(out, str):
                raise RenderError(
                    f"{type(element).__name__}.render() returned "
                    f"{type(out).__name__}, expected str",
                    position=position,
                )
            sb.append(out)
        result = sb.build()
        logger.debug("Rendered %d elements into %d characters", len(doc), len(result))
        return result
