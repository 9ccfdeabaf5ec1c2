"""Utility functions for React module generation."""

from __future__ import annotations

from pathlib import Path


def write_file(path: Path, content: str) -> None:
    """Write content to a file, creating parent directories if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def ensure_directory(path: Path) -> bool:
    """Create ``path`` if missing; return True if it already existed."""
    if path.is_dir():
        return True
    path.mkdir(parents=True, exist_ok=True)
    return False
