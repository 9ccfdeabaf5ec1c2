"""Tree command: print the component tree parsed from a markup file."""

import argparse
from pathlib import Path

from ..errors import handle_cli_exception
from ..loading import load_markup_tree
from ..validation import TREE_FORMATS, validate_choice, validate_path


def cmd_tree(args: argparse.Namespace) -> None:
    try:
        source_path = validate_path(Path(args.file).resolve(), must_exist=True)
        output_format = validate_choice(getattr(args, "format", "text"), TREE_FORMATS, name="format")
        tree = load_markup_tree(source_path)
        if output_format == "json":
            print(tree.to_json())
        else:
            print(tree.to_string(), end="")
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


def add_tree_command(subparsers) -> None:
    tree_parser = subparsers.add_parser(
        'tree',
        help='Parse a markup file and print its component tree'
    )
    tree_parser.add_argument('file', help='Path to the markup file')
    tree_parser.add_argument(
        '--format',
        choices=list(TREE_FORMATS),
        default='text',
        help='Output format (default: text)'
    )
    tree_parser.set_defaults(func=cmd_tree)


__all__ = ["add_tree_command", "cmd_tree"]
