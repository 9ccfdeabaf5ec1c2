"""Markup loading for CLI commands."""

from pathlib import Path

from ..lang import parse_markup
from ..tree import NaryTree
from .errors import CLIFileNotFoundError


def load_markup_tree(source_path: Path) -> NaryTree:
    """
    Read a markup file and parse it into a component tree.

    Markup errors propagate unchanged so the top-level handler can show
    their code and reference snippet.

    Raises:
        CLIFileNotFoundError: If the file does not exist
        QRSyntaxError: If the markup is malformed
    """
    if not source_path.is_file():
        raise CLIFileNotFoundError(
            f"Markup file not found: {source_path}",
            hint="Check the file path and try again"
        )
    source = source_path.read_text(encoding="utf-8")
    return parse_markup(source, path=str(source_path))
