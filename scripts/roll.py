#!/usr/bin/env python3
"""Roll dice from a source checkout without installing the package."""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from roller.cli import main


if __name__ == "__main__":
    sys.exit(main())
