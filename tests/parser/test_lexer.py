"""Tests for the markup lexer."""

import pytest

from quickreact.errors import QRSyntaxError
from quickreact.lang.element import TagKind
from quickreact.lang.lexer import Lexer, normalize_tag_body, tokenize


class TestNormalizeTagBody:
    """Test tag body normalization."""

    def test_collapses_whitespace(self):
        assert normalize_tag_body("  App   form\n\trouter ") == ["App", "form", "router"]

    def test_removes_spacing_around_commas(self):
        tokens = normalize_tag_body("App hooks=useState , useEffect")
        assert tokens == ["App", "hooks=useState,useEffect"]

    def test_strips_quotes(self):
        assert normalize_tag_body("Form fetch='post' forminputs=\"text\"") == [
            "Form",
            "fetch=post",
            "forminputs=text",
        ]

    def test_blank_body(self):
        assert normalize_tag_body("   ") == []


class TestTagKinds:
    """Test open, close and self-closing detection."""

    def test_open_close_and_self_closing(self):
        tags = tokenize("<App><Header/></App>")
        assert [tag.kind for tag in tags] == [TagKind.OPEN, TagKind.SELF_CLOSING, TagKind.CLOSE]
        assert [tag.name for tag in tags] == ["App", "Header", "/App"]

    def test_self_closing_with_space(self):
        (tag,) = tokenize("<Footer link />")
        assert tag.kind is TagKind.SELF_CLOSING
        assert tag.tokens == ["Footer", "link"]

    def test_offsets(self):
        source = "  <App>"
        (tag,) = tokenize(source)
        assert source[tag.start:tag.end] == "<App>"

    def test_text_between_tags_is_ignored(self):
        tags = tokenize("hello <App> some text </App> bye")
        assert [tag.name for tag in tags] == ["App", "/App"]

    def test_empty_fragments_are_skipped(self):
        tags = tokenize("<><App></App></>")
        assert [tag.name for tag in tags] == ["App", "/App"]

    def test_whitespace_only_tag_is_skipped(self):
        assert tokenize("<   >") == []

    def test_multiline_tag(self):
        (tag,) = tokenize("<App\n   useState*2\n   form\n>")
        assert tag.tokens == ["App", "useState*2", "form"]

    def test_empty_source(self):
        assert tokenize("") == []


class TestLexerErrors:
    """Test unbalanced bracket diagnostics."""

    def test_missing_closing_bracket(self):
        with pytest.raises(QRSyntaxError, match="missing a closing '>'"):
            tokenize("<App")

    def test_nested_opening_bracket(self):
        """A second '<' before the first '>' means the first tag never closed."""
        with pytest.raises(QRSyntaxError, match="missing a closing '>'"):
            tokenize("<App <Header/>")

    def test_missing_opening_bracket(self):
        with pytest.raises(QRSyntaxError, match="missing an opening '<'"):
            tokenize("App></App>")

    def test_error_carries_snippet(self):
        with pytest.raises(QRSyntaxError) as exc_info:
            tokenize("<App><Header")
        assert exc_info.value.snippet == "<Header"
        assert "Reference: <Header" in str(exc_info.value)

    def test_lexer_instances_are_independent(self):
        first = Lexer("<App>").tokenize()
        second = Lexer("<Main></Main>").tokenize()
        assert len(first) == 1
        assert len(second) == 2
