"""Tests for document element variants."""

from dataclasses import FrozenInstanceError

import pytest

from inkwell import (
    IMAGE_TOKEN,
    NEWLINE_MARKER,
    TAB_MARKER,
    DocumentElement,
    Element,
    Image,
    NewLine,
    TabSpace,
    Text,
)


class TestRender:
    """Tests for each variant's render() output."""

    def test_text_renders_content_unchanged(self) -> None:
        assert Text("Hello, World").render() == "Hello, World"

    def test_text_keeps_whitespace_and_markers(self) -> None:
        assert Text("  a\tb\n").render() == "  a\tb\n"

    def test_empty_text(self) -> None:
        assert Text("").render() == ""

    def test_image_placeholder(self) -> None:
        assert Image("figures/cat.png").render() == "[image: figures/cat.png]"

    def test_image_matches_token_template(self) -> None:
        assert Image("x").render() == IMAGE_TOKEN.format(ref="x")

    def test_image_with_empty_reference(self) -> None:
        assert Image("").render() == "[image: ]"

    def test_new_line(self) -> None:
        assert NewLine().render() == NEWLINE_MARKER == "\n"

    def test_tab_space(self) -> None:
        assert TabSpace().render() == TAB_MARKER == "\t"

    def test_render_is_repeatable(self) -> None:
        image = Image("a.png")
        assert image.render() == image.render()


class TestValueSemantics:
    """Elements are immutable values."""

    def test_frozen(self) -> None:
        text = Text("a")
        with pytest.raises(FrozenInstanceError):
            text.content = "b"  # type: ignore[misc]

    def test_equal_payloads_compare_equal(self) -> None:
        assert Text("a") == Text("a")
        assert NewLine() == NewLine()
        assert TabSpace() == TabSpace()
        assert Image("a") != Image("b")

    def test_variants_are_distinct(self) -> None:
        assert NewLine() != TabSpace()

    def test_hashable(self) -> None:
        assert len({Text("a"), Text("a"), NewLine()}) == 2


class TestProtocol:
    """Verify DocumentElement protocol conformance."""

    @pytest.mark.parametrize("element", [Text("a"), Image("b"), NewLine(), TabSpace()])
    def test_builtin_variants_conform(self, element: Element) -> None:
        assert isinstance(element, DocumentElement)

    def test_third_party_element_conforms(self) -> None:
        class Rule:
            def render(self) -> str:
                return "----"

        assert isinstance(Rule(), DocumentElement)

    def test_plain_object_does_not_conform(self) -> None:
        assert not isinstance(object(), DocumentElement)
        assert not isinstance("text", DocumentElement)

    def test_base_element_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Element()  # type: ignore[abstract]
