"""Command-line interface."""
import sys

from cmruler.app import main

if __name__ == "__main__":
    sys.exit(main())
