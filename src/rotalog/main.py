from __future__ import annotations

"""
Main Entry Point.

Allows `python -m rotalog.main` to behave like the installed `rotalog`
console script.
"""

import sys

from rotalog.interface.cli.app import main

if __name__ == "__main__":
    sys.exit(main())
