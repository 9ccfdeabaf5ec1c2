"""Console output helpers for CLI commands."""

from typing import Sequence


def print_success(message: str) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("Generated 3 files")
        ✓ Generated 3 files
    """
    print(f"✓ {message}")


def print_warning(message: str) -> None:
    print(f"⚠ {message}")


def print_info(message: str) -> None:
    print(f"ℹ {message}")


def print_paths(paths: Sequence[object], *, indent: str = "  ") -> None:
    """Print one path per line below a heading."""
    for path in paths:
        print(f"{indent}{path}")
