"""Tests for the DocumentEditor facade."""

import logging
from pathlib import Path

import pytest

from inkwell import (
    DatabaseStrategy,
    DocumentEditor,
    FileStrategy,
    Image,
    MemoryStrategy,
    NewLine,
    PlainTextRenderer,
    SaveResult,
    StorageIOError,
    TabSpace,
    Text,
)


class RecordingStrategy:
    """Strategy double that records payloads and returns a canned result."""

    def __init__(self, result: SaveResult | None = None) -> None:
        self.payloads: list[str] = []
        self.result = result

    def save(self, data: str) -> SaveResult:
        self.payloads.append(data)
        return self.result or SaveResult.success("recording", len(data))


# =========================================================================
# Editing
# =========================================================================


class TestEditing:
    """Tests for the add_* methods and render()."""

    def test_starts_empty(self) -> None:
        editor = DocumentEditor(MemoryStrategy())
        assert len(editor.document) == 0
        assert editor.render() == ""

    def test_add_methods_append_matching_elements(self) -> None:
        editor = DocumentEditor(MemoryStrategy())
        editor.add_text("Hello")
        editor.add_image("cat.png")
        editor.add_new_line()
        editor.add_tab_space()
        assert editor.document.get_elements() == (
            Text("Hello"),
            Image("cat.png"),
            NewLine(),
            TabSpace(),
        )

    def test_generic_add(self) -> None:
        class Rule:
            def render(self) -> str:
                return "----"

        editor = DocumentEditor(MemoryStrategy())
        editor.add_text("a")
        editor.add(Rule())
        assert editor.render() == "a----"

    def test_hello_world_scenario(self) -> None:
        editor = DocumentEditor(MemoryStrategy())
        editor.add_text("Hello")
        editor.add_tab_space()
        editor.add_text("World")
        editor.add_new_line()
        assert editor.render() == "Hello\tWorld\n"

    def test_default_renderer(self) -> None:
        assert isinstance(DocumentEditor(MemoryStrategy()).renderer, PlainTextRenderer)

    def test_custom_renderer(self) -> None:
        class Upper:
            def render(self, doc) -> str:
                return "".join(e.render() for e in doc.get_elements()).upper()

        store = MemoryStrategy()
        editor = DocumentEditor(store, renderer=Upper())
        editor.add_text("shout")
        editor.save()
        assert store.last == "SHOUT"


# =========================================================================
# Saving
# =========================================================================


class TestSave:
    """Tests for save() forwarding and logging."""

    def test_forwards_rendered_payload(self) -> None:
        strategy = RecordingStrategy()
        editor = DocumentEditor(strategy)
        editor.add_text("A")
        editor.add_new_line()
        editor.add_text("B")
        editor.save()
        assert strategy.payloads == ["A\nB"]

    def test_returns_strategy_result_unmodified(self) -> None:
        canned = SaveResult.success("somewhere", 999)
        editor = DocumentEditor(RecordingStrategy(canned))
        assert editor.save() is canned

    def test_inconsistent_result_rejected_at_construction(self) -> None:
        class Careless:
            def save(self, data: str) -> SaveResult:
                return SaveResult(ok=False, destination="x")

        editor = DocumentEditor(Careless())
        with pytest.raises(ValueError):
            editor.save()

    def test_failure_result_returned_unmodified(self) -> None:
        canned = SaveResult.failure(StorageIOError("nope", destination="x"))
        editor = DocumentEditor(RecordingStrategy(canned))
        assert editor.save() is canned

    def test_save_empty_document(self) -> None:
        strategy = RecordingStrategy()
        DocumentEditor(strategy).save()
        assert strategy.payloads == [""]

    def test_save_twice_sends_same_payload(self) -> None:
        strategy = RecordingStrategy()
        editor = DocumentEditor(strategy)
        editor.add_image("a.png")
        editor.save()
        editor.save()
        assert strategy.payloads == ["[image: a.png]", "[image: a.png]"]

    def test_strategy_is_the_injected_instance(self) -> None:
        store = MemoryStrategy()
        assert DocumentEditor(store).strategy is store

    def test_logs_success(self, caplog: pytest.LogCaptureFixture) -> None:
        editor = DocumentEditor(MemoryStrategy())
        editor.add_text("abc")
        with caplog.at_level(logging.INFO, logger="inkwell"):
            editor.save()
        assert "Saved 3 characters to memory" in caplog.text

    def test_logs_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        canned = SaveResult.failure(StorageIOError("nope", destination="x"))
        editor = DocumentEditor(RecordingStrategy(canned))
        with caplog.at_level(logging.WARNING, logger="inkwell"):
            editor.save()
        assert "Save failed (io)" in caplog.text


# =========================================================================
# Failure isolation
# =========================================================================


class TestFailureIsolation:
    """A failed save leaves the document intact and can be retried."""

    def test_unencodable_save_keeps_file_and_document(self, tmp_path: Path) -> None:
        target = tmp_path / "doc.txt"
        target.write_text("previous", encoding="ascii")
        editor = DocumentEditor(FileStrategy(target, encoding="ascii"))
        editor.add_text("café")

        result = editor.save()
        assert isinstance(result.error, StorageIOError)
        assert target.read_text(encoding="ascii") == "previous"
        assert editor.document.get_elements() == (Text("café"),)

    def test_failed_file_save_can_be_retried(self, tmp_path: Path) -> None:
        target = tmp_path / "out" / "doc.txt"
        editor = DocumentEditor(FileStrategy(target))
        editor.add_text("Hello")
        editor.add_new_line()
        before = editor.document.get_elements()

        first = editor.save()
        assert not first.ok
        assert isinstance(first.error, StorageIOError)
        assert editor.document.get_elements() == before

        target.parent.mkdir()
        second = editor.save()
        assert second.ok
        assert target.read_text() == "Hello\n"

    def test_failed_database_save_can_be_retried(self, tmp_path: Path) -> None:
        db_dir = tmp_path / "db"
        strategy = DatabaseStrategy(f"sqlite:///{db_dir / 'docs.db'}")
        try:
            editor = DocumentEditor(strategy)
            editor.add_text("x")
            assert not editor.save().ok
            assert len(editor.document) == 1

            db_dir.mkdir()
            assert editor.save().ok
            assert strategy.load() == "x"
        finally:
            strategy.dispose()


# =========================================================================
# Strategy substitutability
# =========================================================================


class TestSubstitutability:
    """Swapping strategies changes only the destination."""

    def test_payload_independent_of_strategy(self, tmp_path: Path) -> None:
        def build(strategy) -> DocumentEditor:
            editor = DocumentEditor(strategy)
            editor.add_text("Hello")
            editor.add_tab_space()
            editor.add_image("logo.svg")
            editor.add_new_line()
            return editor

        file_strategy = FileStrategy(tmp_path / "doc.txt")
        db_strategy = DatabaseStrategy(f"sqlite:///{tmp_path / 'docs.db'}")
        try:
            assert build(file_strategy).save().ok
            assert build(db_strategy).save().ok
            assert file_strategy.load() == db_strategy.load() == "Hello\t[image: logo.svg]\n"
        finally:
            db_strategy.dispose()

    def test_repr(self) -> None:
        editor = DocumentEditor(MemoryStrategy())
        editor.add_text("a")
        assert "elements=1" in repr(editor)
