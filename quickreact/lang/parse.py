"""Markup parser: lexer, attribute resolver and tree builder in sequence."""

from __future__ import annotations

import logging
from typing import List

from quickreact.errors import QRArgumentError
from quickreact.tree import NaryTree

from .attributes import resolve_element
from .builder import TreeBuilder
from .element import Element
from .lexer import Lexer

logger = logging.getLogger(__name__)


class MarkupParser:
    """
    Parser for one QuickReact markup document.

    Each call to ``parse`` lexes the source from the start and builds a new
    tree, so a parser instance carries no state between documents.
    """

    def __init__(self, source: str, *, path: str = "") -> None:
        if not isinstance(source, str):
            raise QRArgumentError(
                "Quick-React markup must be submitted as a string.",
                hint=f"Received a value of type {type(source).__name__}.",
            )
        self.source = source
        self.path = path

    def elements(self) -> List[Element]:
        """Lex the source and resolve every tag into an ``Element``."""
        tags = Lexer(self.source).tokenize()
        elements = [resolve_element(tag) for tag in tags]
        logger.debug("Resolved %d elements from %s", len(elements), self.path or "<string>")
        return elements

    def parse(self) -> NaryTree:
        return TreeBuilder().build(self.elements())
