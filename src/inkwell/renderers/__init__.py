"""Inkwell renderers.

Renderers convert a Document into a flat textual payload.

Available Renderers:
- PlainTextRenderer: Concatenates element renders using StringBuilder

Thread Safety:
All renderers use StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from inkwell.renderers.plain import PlainTextRenderer
from inkwell.renderers.protocol import DocumentRenderer

__all__ = ["DocumentRenderer", "PlainTextRenderer"]
