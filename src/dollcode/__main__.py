"""
dollcode package entry point.

Allows running: python -m dollcode [command] [args]
"""
import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
