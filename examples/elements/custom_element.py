"""Add your own element type — no changes to Document, renderer or editor."""

from dataclasses import dataclass

from inkwell import DocumentEditor, MemoryStrategy


@dataclass(frozen=True, slots=True)
class HorizontalRule:
    width: int = 20

    def render(self) -> str:
        return "-" * self.width


editor = DocumentEditor(MemoryStrategy())
editor.add_text("Title")
editor.add_new_line()
editor.add(HorizontalRule())
editor.add_new_line()
print(editor.render())
