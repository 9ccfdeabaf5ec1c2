"""Unified error model for QuickReact."""

from __future__ import annotations

from typing import Optional


def reference_snippet(source: str, index: int, length: int = 80) -> str:
    """Return a short slice of ``source`` starting at ``index`` for diagnostics."""
    start = max(index, 0)
    return source[start:start + length]


class QRError(Exception):
    """Base class for all parser, tree and generator errors surfaced to users."""

    code: str = "QR_ERROR"
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        hint: Optional[str] = None,
        snippet: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.snippet = snippet
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def __str__(self) -> str:
        if self.snippet is not None:
            return f"{self.message} Reference: {self.snippet}"
        return self.message

    def format(self) -> str:
        components = [f"{str(self)} ({self.code})"]
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(components)


class QRSyntaxError(QRError):
    """Raised when the markup is malformed."""

    code = "SYNTAX_ERROR"


class QRArgumentError(QRError, TypeError):
    """Raised when a required argument is missing or has the wrong type."""

    code = "ARGUMENT_ERROR"


class QRReferenceError(QRError, LookupError):
    """Raised when a node or value is not present in the tree."""

    code = "REFERENCE_ERROR"


class QRConcurrentModificationError(QRReferenceError):
    """Raised when a tree is structurally modified during a traversal."""

    code = "CONCURRENT_MODIFICATION"


class QRRangeError(QRError, IndexError):
    """Raised when a positional insert falls outside the child list."""

    code = "RANGE_ERROR"


__all__ = [
    "QRError",
    "QRSyntaxError",
    "QRArgumentError",
    "QRReferenceError",
    "QRConcurrentModificationError",
    "QRRangeError",
    "reference_snippet",
]
