"""Allow running the roller with ``python -m roller``."""

import sys

from roller.cli import main

if __name__ == "__main__":
    sys.exit(main())
