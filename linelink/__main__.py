"""Entry point for ``python -m linelink``."""

import sys

from linelink.cli import main

if __name__ == "__main__":
    sys.exit(main())
