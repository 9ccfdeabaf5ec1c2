"""
CLI command modules.

Each module implements one subcommand and registers its parser.
"""

from .generate import add_generate_command, cmd_generate
from .tree import add_tree_command, cmd_tree

__all__ = ["add_generate_command", "add_tree_command", "cmd_generate", "cmd_tree"]
