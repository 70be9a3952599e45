"""Save the same document to a file and to SQLite by swapping the strategy."""

import tempfile
from pathlib import Path

from inkwell import DatabaseStrategy, DocumentEditor, FileStrategy


def build(editor: DocumentEditor) -> DocumentEditor:
    editor.add_text("Quarterly report")
    editor.add_new_line()
    editor.add_image("charts/revenue.png")
    editor.add_new_line()
    return editor


with tempfile.TemporaryDirectory() as tmp:
    file_strategy = FileStrategy(Path(tmp) / "report.txt")
    db_strategy = DatabaseStrategy(f"sqlite:///{Path(tmp) / 'reports.db'}", record="q3")

    for strategy in (file_strategy, db_strategy):
        result = build(DocumentEditor(strategy)).save()
        print(f"{type(strategy).__name__}: ok={result.ok} -> {result.destination}")

    assert file_strategy.load() == db_strategy.load()
    db_strategy.dispose()

    # Failures come back as values; the document is untouched and can be re-saved.
    broken = DocumentEditor(FileStrategy(Path(tmp) / "missing" / "report.txt"))
    result = build(broken).save()
    print(f"failed: kind={result.error.kind} error={result.error}")
