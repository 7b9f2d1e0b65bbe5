"""Command-line Entry Point - Root Module.

Lets the loader run as `python main.py` from the repository root.
It imports from the src package.
"""

import sys

from src.main import main

__all__ = [
    "main",
]

if __name__ == "__main__":
    sys.exit(main())
