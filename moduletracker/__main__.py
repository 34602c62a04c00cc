"""
Package entry point.

Allows running the application via:

    python -m moduletracker

This simply forwards execution to moduletracker.cli.main().
"""

from moduletracker.cli import main

if __name__ == "__main__":
    main()
