"""
QuickReact: compile component markup into React module scaffolds.

Public API:
    parse_markup(source, path) -> NaryTree
    generate_artifacts(tree) -> list of Artifact
    generate_react_project(tree, output_dir) -> WriteResult
"""

__version__ = "1.0.0"

from .errors import (
    QRArgumentError,
    QRConcurrentModificationError,
    QRError,
    QRRangeError,
    QRReferenceError,
    QRSyntaxError,
)
from .tree import NaryNode, NaryTree
from .lang import Element, parse_markup
from .codegen import generate_artifacts, generate_react_project

__all__ = [
    "__version__",
    "Element",
    "NaryNode",
    "NaryTree",
    "QRArgumentError",
    "QRConcurrentModificationError",
    "QRError",
    "QRRangeError",
    "QRReferenceError",
    "QRSyntaxError",
    "generate_artifacts",
    "generate_react_project",
    "parse_markup",
]
