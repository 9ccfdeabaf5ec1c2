"""Lexer for QuickReact markup.

Scans the source for ``<...>`` spans and turns each into a ``RawTag`` with a
normalized token list. The first token of every tag is the element name;
the attribute resolver interprets the rest.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from quickreact.errors import QRSyntaxError, reference_snippet

from .element import TagKind

SNIPPET_LENGTH = 80

_COMMA_SPACING = re.compile(r"\s*,\s*")
_QUOTES = re.compile(r"['\"]")
_WHITESPACE = re.compile(r"\s+")


@dataclass
class RawTag:
    """One lexed tag: its kind, normalized tokens and source offsets."""

    kind: TagKind
    tokens: List[str] = field(default_factory=list)
    start: int = 0
    end: int = 0

    @property
    def name(self) -> str:
        return self.tokens[0] if self.tokens else ""


def normalize_tag_body(body: str) -> List[str]:
    """Normalize a tag body and split it into tokens.

    Whitespace around commas is removed, quotes are stripped, whitespace runs
    collapse to one space and the result is trimmed before splitting.
    """
    text = _COMMA_SPACING.sub(",", body)
    text = _QUOTES.sub("", text)
    text = _WHITESPACE.sub(" ", text).strip()
    if not text:
        return []
    return text.split(" ")


class Lexer:
    """Single-use scanner holding the cursor for one markup document."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0
        self.tags: List[RawTag] = []

    def tokenize(self) -> List[RawTag]:
        """Scan the whole source and return the tags in document order."""
        while self.pos < len(self.source):
            tag = self._next_tag()
            if tag is None:
                break
            if tag.tokens:
                self.tags.append(tag)
        return self.tags

    def _next_tag(self) -> Optional[RawTag]:
        code = self.source
        while True:
            start = code.find("<", self.pos)
            end = code.find(">", self.pos)

            if start == -1 and end == -1:
                self.pos = len(code)
                return None
            if start == -1 or (end != -1 and end < start):
                raise QRSyntaxError(
                    "The markup code is missing an opening '<' character.",
                    snippet=reference_snippet(code, self.pos, SNIPPET_LENGTH),
                )
            if end == -1:
                raise QRSyntaxError(
                    "The markup code is missing a closing '>' character.",
                    snippet=reference_snippet(code, start, SNIPPET_LENGTH),
                )
            nested = code.find("<", start + 1, end)
            if nested != -1:
                raise QRSyntaxError(
                    "The markup code is missing a closing '>' character.",
                    snippet=reference_snippet(code, start, SNIPPET_LENGTH),
                )

            # Empty fragments <> and </> carry no element.
            if code.startswith("<>", start):
                self.pos = start + 2
                continue
            if code.startswith("</>", start):
                self.pos = start + 3
                continue
            break

        kind = TagKind.CLOSE if code[start + 1] == "/" else TagKind.OPEN
        body_end = end
        if code[end - 1] == "/" and end - 1 > start + 1:
            kind = TagKind.SELF_CLOSING
            body_end = end - 1

        self.pos = end + 1
        return RawTag(
            kind=kind,
            tokens=normalize_tag_body(code[start + 1:body_end]),
            start=start,
            end=end + 1,
        )


def tokenize(source: str) -> List[RawTag]:
    """Convenience wrapper returning the tags of ``source``."""
    return Lexer(source).tokenize()


__all__ = ["Lexer", "RawTag", "normalize_tag_body", "tokenize", "SNIPPET_LENGTH"]
