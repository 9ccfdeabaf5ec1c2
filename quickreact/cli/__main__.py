"""
Main entry point for the QuickReact CLI when run as a module.

This allows the CLI to be executed using:
    python -m quickreact.cli
"""

from . import main

if __name__ == '__main__':
    main()
