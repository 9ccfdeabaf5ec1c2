"""
Generate command implementation.

Parses a markup file and writes ``index_qr.js``, ``App_qr.js`` and one
``components/<Name>/index.js`` per component into the output directory.
"""

import argparse
from pathlib import Path
from typing import List

from quickreact.codegen.react import generate_artifacts, write_artifacts

from ..context import get_cli_context
from ..errors import CLIGenerateError, handle_cli_exception
from ..loading import load_markup_tree
from ..output import print_info, print_paths, print_success, print_warning
from ..validation import validate_output_dir, validate_path


def confirm_overwrite(existing: List[Path]) -> bool:
    """Ask on stdin before overwriting ``existing`` files."""
    print_warning("Proceeding will overwrite these existing files:")
    print_paths(existing)
    try:
        answer = input("Proceed? [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def cmd_generate(args: argparse.Namespace) -> None:
    """
    Handle the 'generate' subcommand.

    The output directory is ``--out``, else ``[output] out_dir`` from the
    workspace config, else the markup file's directory. With ``--dry-run``
    only the artifact paths are printed.

    Examples:
        >>> args = argparse.Namespace(file='site.qr', out=None, yes=True, dry_run=False)
        >>> cmd_generate(args)  # doctest: +SKIP
        ✓ Generated 4 files in /work/site
    """
    try:
        ctx = get_cli_context(args)
        layout = ctx.config.layout
        source_path = validate_path(Path(args.file).resolve(), must_exist=True)

        out_override = validate_path(getattr(args, "out", None), allow_none=True)
        output_dir = out_override or layout.out_dir or source_path.parent
        if not output_dir.is_absolute():
            output_dir = (ctx.workspace_root / output_dir).resolve()
        validate_output_dir(output_dir)

        tree = load_markup_tree(source_path)
        artifacts = generate_artifacts(tree, layout=layout)

        if getattr(args, "dry_run", False):
            print_info(f"Would generate {len(artifacts)} files in {output_dir}:")
            print_paths([artifact.path for artifact in artifacts])
            return

        confirm = None if getattr(args, "yes", False) else confirm_overwrite
        try:
            result = write_artifacts(artifacts, output_dir, layout=layout, confirm=confirm)
        except OSError as exc:
            raise CLIGenerateError(
                f"Could not write generated files: {exc}",
                hint="Check that the output directory is writable",
                context={"output_dir": str(output_dir)},
            ) from exc

        if result.cancelled:
            print_warning("Generation cancelled; no files were written.")
            return
        print_success(f"Generated {len(result.written)} files in {output_dir}")

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


def add_generate_command(subparsers) -> None:
    generate_parser = subparsers.add_parser(
        'generate',
        help='Generate React modules from a QuickReact markup file'
    )
    generate_parser.add_argument('file', help='Path to the markup file')
    generate_parser.add_argument(
        '--out', '-o',
        default=None,
        help='Output directory (defaults to [output] out_dir, then the markup file directory)'
    )
    generate_parser.add_argument(
        '--yes', '-y',
        action='store_true',
        help='Overwrite existing files without asking'
    )
    generate_parser.add_argument(
        '--dry-run',
        action='store_true',
        help='List the files that would be generated without writing them'
    )
    generate_parser.set_defaults(func=cmd_generate)


__all__ = ["add_generate_command", "cmd_generate", "confirm_overwrite"]
