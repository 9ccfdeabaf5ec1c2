"""
Command-line interface for QuickReact.

Usage:
    quickreact generate site.qr [--out DIR] [--yes] [--dry-run]
    quickreact tree site.qr [--format text|json]
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .. import __version__
from ..config import ConfigError, load_workspace_config
from .commands import add_generate_command, add_tree_command
from .context import CLIContext
from .errors import CLIConfigError, handle_cli_exception

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


def _configure_logging(args) -> None:
    """Configure the ``quickreact`` logger from --log-level or QUICKREACT_LOG_LEVEL."""
    log_level = (
        getattr(args, 'log_level', None) or
        os.getenv('QUICKREACT_LOG_LEVEL', 'warn')
    ).lower()
    numeric_level = LOG_LEVELS.get(log_level, logging.WARNING)

    package_logger = logging.getLogger('quickreact')
    package_logger.setLevel(numeric_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="QuickReact markup compiler: generate React modules from component markup",
        prog="quickreact"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to a quickreact.toml or .quickreactrc configuration file'
    )
    parser.add_argument(
        '--workspace',
        default=None,
        help='Workspace root directory (defaults to current working directory)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set QUICKREACT_VERBOSE=1)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set QUICKREACT_LOG_LEVEL)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    add_generate_command(subparsers)
    add_tree_command(subparsers)
    return parser


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Examples:
        >>> main(['generate', 'site.qr', '--yes'])  # doctest: +SKIP
        >>> main(['tree', 'site.qr', '--format', 'json'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    args.verbose = getattr(args, "verbose", False)
    _configure_logging(args)

    workspace_root = Path(args.workspace).resolve() if args.workspace else Path.cwd()
    config_path = Path(args.config).resolve() if args.config else None
    try:
        if config_path is not None and not config_path.exists():
            raise CLIConfigError(
                f"Configuration file not found: {config_path}",
                hint="Check the --config path or remove the option"
            )
        config = load_workspace_config(workspace_root, config_path)
    except (CLIConfigError, ConfigError) as exc:
        handle_cli_exception(exc, verbose=args.verbose)
        return

    args.cli_context = CLIContext(workspace_root=workspace_root, config=config)
    args.func(args)


if __name__ == '__main__':  # pragma: no cover
    main()
