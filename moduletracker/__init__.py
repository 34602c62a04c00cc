"""
ModuleTracker – keep track of university modules, lectures and deadlines
from the terminal.
"""

from pathlib import Path

__version__ = (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()
