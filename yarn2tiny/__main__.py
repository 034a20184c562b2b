"""
Yarn2Tiny Module Entry Point
=============================

Allows running the converter via: python -m yarn2tiny
"""

from yarn2tiny.cli import main

if __name__ == "__main__":
    main()
