"""
Error handling for the QuickReact CLI.

CLI failures are ``CLIError`` subclasses carrying a machine-readable code,
an optional hint and a context mapping. ``handle_cli_exception`` is the
single top-level handler: it prints a formatted message and exits.
"""

import os
import sys
import traceback
from typing import Any, Dict, Optional

_CLI_TRACE_LIMIT = 4000


class CLIError(Exception):
    """
    Base exception for all CLI operations.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code
        hint: Optional suggestion for resolving the error
        context: Additional metadata about the error
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIConfigError(CLIError):
    """Workspace configuration file is invalid."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_CONFIG_ERROR')
        super().__init__(message, **kwargs)


class CLIValidationError(CLIError):
    """Invalid command arguments or options."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_VALIDATION_ERROR')
        super().__init__(message, **kwargs)


class CLIFileNotFoundError(CLIError):
    """Markup file or output directory not found."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_FILE_NOT_FOUND')
        super().__init__(message, **kwargs)


class CLIGenerateError(CLIError):
    """
    Generate command failures.

    Raised when:
    - Generated files cannot be written
    - The output path exists but is not a directory
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_GENERATE_ERROR')
        super().__init__(message, **kwargs)


def format_cli_error(
    exc: BaseException,
    *,
    verbose: bool = False,
    include_traceback: bool = False
) -> str:
    """
    Format an exception for CLI display.

    Errors that carry a ``code`` (CLI, markup, template and config errors)
    render as ``Error [CODE]: message`` followed by an optional ``Hint:``
    line; anything else renders with its class name.

    Examples:
        >>> print(format_cli_error(CLIValidationError("Invalid format", hint="Use text or json")))
        Error [CLI_VALIDATION_ERROR]: Invalid format
        Hint: Use text or json
    """
    lines = []

    code = getattr(exc, "code", None)
    if isinstance(code, str):
        lines.append(f"Error [{code}]: {exc}")
        hint = getattr(exc, "hint", None)
        if hint:
            lines.append(f"Hint: {hint}")
        context = getattr(exc, "context", None)
        if verbose and context:
            lines.append("\nContext:")
            for key, value in context.items():
                lines.append(f"  {key}: {value}")
    else:
        lines.append(f"Error: {exc.__class__.__name__}: {exc}")

    if include_traceback:
        lines.append("\nTraceback:")
        lines.append(format_traceback_excerpt())

    return "\n".join(lines)


def format_traceback_excerpt() -> str:
    """Current exception traceback, truncated to the CLI trace limit."""
    trace = traceback.format_exc().strip()
    if len(trace) <= _CLI_TRACE_LIMIT:
        return trace
    return f"{trace[:_CLI_TRACE_LIMIT - 3]}..."


def _env_flag(name: str) -> bool:
    val = os.getenv(name)
    if val is None:
        return False
    return val.strip().lower() in {"1", "true", "yes", "on"}


def cli_verbose_enabled(verbose_flag: bool = False) -> bool:
    """Verbose output via ``--verbose`` or QUICKREACT_VERBOSE/QUICKREACT_DEBUG."""
    return verbose_flag or _env_flag("QUICKREACT_VERBOSE") or _env_flag("QUICKREACT_DEBUG")


def cli_reraise_enabled() -> bool:
    """Re-raise instead of exiting when QUICKREACT_RERAISE or QUICKREACT_DEBUG is set."""
    return _env_flag("QUICKREACT_RERAISE") or _env_flag("QUICKREACT_DEBUG")


def handle_cli_exception(
    exc: BaseException,
    *,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """
    Print ``exc`` for the user and exit with ``exit_code``.

    Note:
        This function calls sys.exit() and does not return.
    """
    verbose_effective = cli_verbose_enabled(verbose)
    if cli_reraise_enabled():
        raise exc

    error_message = format_cli_error(
        exc,
        verbose=verbose_effective,
        include_traceback=verbose_effective
    )
    print(error_message, file=sys.stderr)
    sys.exit(exit_code)
