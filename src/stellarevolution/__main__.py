"""Graphical entry point: python -m stellarevolution"""
import sys

from stellarevolution.app.main import main

if __name__ == "__main__":
    sys.exit(main())
