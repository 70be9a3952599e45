"""Build a document and print its rendered form — no storage needed."""

from inkwell import DocumentEditor, MemoryStrategy

editor = DocumentEditor(MemoryStrategy())
editor.add_text("Hello")
editor.add_tab_space()
editor.add_text("World")
editor.add_new_line()
print(repr(editor.render()))
