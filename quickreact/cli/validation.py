"""Validation for CLI arguments."""

import os
from pathlib import Path
from typing import Any, Optional, Sequence

from .errors import CLIValidationError

TREE_FORMATS = ("text", "json")


def validate_path(value: Any, *, allow_none: bool = False, must_exist: bool = False) -> Optional[Path]:
    """
    Validate and convert value to Path.

    Args:
        value: Value to validate (string, PathLike, or None)
        allow_none: Whether None is acceptable
        must_exist: Whether the path must exist on the filesystem

    Raises:
        CLIValidationError: If value is not path-like, or is missing when must_exist=True
    """
    if value is None:
        if allow_none:
            return None
        raise CLIValidationError(
            "Path value cannot be None",
            hint="Provide a valid file or directory path"
        )

    if isinstance(value, (str, os.PathLike)):
        path = Path(value)
        if must_exist and not path.exists():
            raise CLIValidationError(
                f"Path does not exist: {path}",
                hint="Ensure the file or directory exists before running this command"
            )
        return path

    raise CLIValidationError(
        f"Expected path-like value, got {type(value).__name__}",
        hint="Provide a string or Path object"
    )


def validate_choice(value: Any, choices: Sequence[str], *, name: str) -> str:
    """Return ``value`` lower-cased if it is one of ``choices``."""
    text = str(value).strip().lower()
    if text not in choices:
        raise CLIValidationError(
            f"Invalid {name}: {value}",
            hint=f"Use one of: {', '.join(choices)}"
        )
    return text


def validate_output_dir(path: Path) -> Path:
    """Reject output paths that exist but are not directories."""
    if path.exists() and not path.is_dir():
        raise CLIValidationError(
            f"Output path is not a directory: {path}",
            hint="Pass --out with a directory path"
        )
    return path
