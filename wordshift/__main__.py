"""
WordShift Module Entry Point
=============================

Allows running the WordShift CLI via: python -m wordshift
"""

from wordshift.cli import main

if __name__ == "__main__":
    main()
