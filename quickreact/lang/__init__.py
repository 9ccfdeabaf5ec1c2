"""QuickReact markup language: lexer, attribute resolver and tree builder.

Public API:
    parse_markup(source, path) -> NaryTree
    MarkupParser - The parser class
"""

from quickreact.tree import NaryTree

from .attributes import (
    GeneratedName,
    find_multiplier,
    multiplier_count,
    multiplier_groups,
    parse_multiplier,
    resolve_element,
)
from .builder import TreeBuilder
from .element import APP_TAG, CONFIG_TAG, Element, ElementCategory, TagKind
from .lexer import Lexer, RawTag, tokenize
from .parse import MarkupParser


def parse_markup(source: str, path: str = "") -> NaryTree:
    """
    Parse QuickReact markup into a component tree.

    Args:
        source: Markup text
        path: Optional file path used in log messages

    Returns:
        ``NaryTree`` whose root holds the config element and whose first
        child holds the ``App`` element

    Raises:
        QRSyntaxError: If the markup is malformed
        QRArgumentError: If source is not a string

    Example:
        >>> tree = parse_markup("<App><Header/></App>")
        >>> len(tree)
        3
    """
    return MarkupParser(source, path=path).parse()


__all__ = [
    "APP_TAG",
    "CONFIG_TAG",
    "Element",
    "ElementCategory",
    "GeneratedName",
    "Lexer",
    "MarkupParser",
    "RawTag",
    "TagKind",
    "TreeBuilder",
    "find_multiplier",
    "multiplier_count",
    "multiplier_groups",
    "parse_markup",
    "parse_multiplier",
    "resolve_element",
    "tokenize",
]
