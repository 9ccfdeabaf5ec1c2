"""Allow ``python -m quickreact``."""

from .cli import main

if __name__ == '__main__':
    main()
