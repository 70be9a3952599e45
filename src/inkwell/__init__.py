"""
Inkwell — Composable documents with pluggable persistence

Documents are ordered sequences of small immutable elements (text runs,
images, line breaks, tabs). A renderer flattens them into a single string
and a persistence strategy stores that string in a file, a SQL database or
memory.

Quick Start:
    >>> from inkwell import DocumentEditor, FileStrategy
    >>> editor = DocumentEditor(FileStrategy("hello.txt"))
    >>> editor.add_text("Hello")
    >>> editor.add_tab_space()
    >>> editor.add_text("World")
    >>> editor.add_new_line()
    >>> result = editor.save()
    >>> result.ok
    True

Custom Elements:
    >>> from dataclasses import dataclass
    >>>
    >>> @dataclass(frozen=True)
    ... class Rule:
    ...     def render(self) -> str:
    ...         return "----"
    >>>
    >>> editor.add(Rule())

Installation:
    pip install inkwell
"""

from inkwell.config import StorageConfig, create_strategy
from inkwell.document import Document
from inkwell.editor import DocumentEditor
from inkwell.elements import (
    IMAGE_TOKEN,
    NEWLINE_MARKER,
    TAB_MARKER,
    Element,
    Image,
    NewLine,
    TabSpace,
    Text,
)
from inkwell.errors import (
    ConfigError,
    ElementError,
    InkwellError,
    PersistenceError,
    RenderError,
    StorageBackendError,
    StorageIOError,
)
from inkwell.persistence import DatabaseStrategy, FileStrategy, MemoryStrategy, SaveResult
from inkwell.protocols import DocumentElement, PersistenceStrategy
from inkwell.renderers import DocumentRenderer, PlainTextRenderer

__version__ = "0.1.0"

_DEFAULT_RENDERER = PlainTextRenderer()


def render(doc: Document) -> str:
    """Render a Document to plain text.

    Args:
        doc: Document to render

    Returns:
        Concatenation of every element's render() output, in order

    Example:
        >>> doc = Document()
        >>> doc.add_element(Text("A"))
        >>> doc.add_element(NewLine())
        >>> doc.add_element(Text("B"))
        >>> render(doc)
        'A\\nB'
    """
    return _DEFAULT_RENDERER.render(doc)


__all__ = [
    "IMAGE_TOKEN",
    "NEWLINE_MARKER",
    "TAB_MARKER",
    "ConfigError",
    "DatabaseStrategy",
    "Document",
    "DocumentEditor",
    "DocumentElement",
    "DocumentRenderer",
    "Element",
    "ElementError",
    "FileStrategy",
    "Image",
    "InkwellError",
    "MemoryStrategy",
    "NewLine",
    "PersistenceError",
    "PersistenceStrategy",
    "PlainTextRenderer",
    "RenderError",
    "SaveResult",
    "StorageBackendError",
    "StorageConfig",
    "StorageIOError",
    "TabSpace",
    "Text",
    "__version__",
    "create_strategy",
    "render",
]
