"""Document elements for Inkwell.

All elements are frozen dataclasses with slots, like the rest of Inkwell's
value types:
- Immutability: an element can be shared between documents safely
- Equality by payload: duplicates are just equal values
- Polymorphism: every element renders itself, no type switch needed

Element Variants:
Element (base)
├── Text       content unchanged
├── Image      "[image: <ref>]"
├── NewLine    "\\n"
└── TabSpace   "\\t"

Rendering depends only on the element's own payload, never on the
surrounding document.

Example:
    >>> Text("Hello").render()
    'Hello'
    >>> Image("figures/cat.png").render()
    '[image: figures/cat.png]'

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

NEWLINE_MARKER = "\n"
TAB_MARKER = "\t"
IMAGE_TOKEN = "[image: {ref}]"


@dataclass(frozen=True, slots=True)
class Element(ABC):
    """Base class for built-in document elements.

    Subclasses must implement render(). Third-party elements do not need to
    inherit from this class; anything satisfying the DocumentElement
    protocol is accepted by a Document.

    """

    @abstractmethod
    def render(self) -> str: ...


@dataclass(frozen=True, slots=True)
class Text(Element):
    """Run of plain text, rendered verbatim."""

    content: str

    def render(self) -> str:
        return self.content


@dataclass(frozen=True, slots=True)
class Image(Element):
    """Image reference.

    The reference is not validated; an empty or missing-file reference still
    renders a placeholder token.

    """

    ref: str

    def render(self) -> str:
        return IMAGE_TOKEN.format(ref=self.ref)


@dataclass(frozen=True, slots=True)
class NewLine(Element):
    """Line break."""

    def render(self) -> str:
        return NEWLINE_MARKER


@dataclass(frozen=True, slots=True)
class TabSpace(Element):
    """Tab space."""

    def render(self) -> str:
        return TAB_MARKER


__all__ = [
    "IMAGE_TOKEN",
    "NEWLINE_MARKER",
    "TAB_MARKER",
    "Element",
    "Image",
    "NewLine",
    "TabSpace",
    "Text",
]
