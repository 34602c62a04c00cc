"""
Interactive prompt.

Reads one command line at a time, runs it and shows the feedback together
with the current module list, until the user types "exit" (or Ctrl-D).
"""

from __future__ import annotations

import logging

from rich.console import Console

from moduletracker.display import show_modules, show_result
from moduletracker.errors import CommandError, ParseError
from moduletracker.logic import Logic

log = logging.getLogger(__name__)

PROMPT = "[bold]module-tracker>[/] "


def _print_header(console: Console, logic: Logic) -> None:
    console.print("\n=== Module Tracker (interactive) ===")
    if logic.data_path is not None:
        console.print(f"Data: {logic.data_path}", markup=False)
    console.print(f"Modules: {len(logic.model.tracker)} | type 'help' for commands, 'exit' to quit")


def run_interactive(logic: Logic, console: Console) -> None:
    _print_header(console, logic)
    show_modules(console, logic.displayed_modules())

    while True:
        try:
            line = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print("\nBye.")
            return

        if not line.strip():
            continue

        try:
            result = logic.execute(line)
        except (ParseError, CommandError) as e:
            log.debug("Command failed: %s", e)
            show_result(console, str(e), error=True)
            continue

        show_result(console, result.feedback)
        if result.exit:
            return
        if not result.show_help:
            show_modules(console, logic.displayed_modules())
