"""
CLI (Command Line Interface).

    moduletracker                       interactive prompt (default)
    moduletracker interactive           same as above
    moduletracker exec add n/CS3219 ...  run a single command and exit
    moduletracker list                  print the stored modules

Global options (before or after the sub-command; with exec, before the command words):
    --data PATH    data file to use (default: from preferences.json)
    --prefs PATH   preferences file (default: data/preferences.json)
    --verbose      log INFO messages to the console
    --debug        log DEBUG messages to the console
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console

from moduletracker import __version__
from moduletracker.config import Preferences, load_preferences
from moduletracker.display import show_modules, show_result
from moduletracker.errors import CommandError, ParseError
from moduletracker.logic import Logic
from moduletracker.logsetup import setup_logging

log = logging.getLogger(__name__)


def _cmd_exec(args: argparse.Namespace, logic: Logic, console: Console) -> int:
    """
    Execute one command line given as the remaining CLI words.
    """
    line = " ".join(args.words).strip()
    if not line:
        console.print("Please provide a command, e.g. 'list' or 'add n/CS3219 ...'.")
        return 1

    try:
        result = logic.execute(line)
    except (ParseError, CommandError) as e:
        show_result(console, str(e), error=True)
        return 1

    show_result(console, result.feedback)
    if not (result.show_help or result.exit):
        show_modules(console, logic.displayed_modules())
    return 0


def _cmd_list(args: argparse.Namespace, logic: Logic, console: Console) -> int:
    show_modules(console, logic.displayed_modules())
    return 0


def _add_global_options(parser: argparse.ArgumentParser, default=None) -> None:
    flag_default = False if default is None else default
    parser.add_argument("--data", type=Path, default=default, help="Data file (JSON)")
    parser.add_argument("--prefs", type=Path, default=default, help="Preferences file (JSON)")
    parser.add_argument(
        "--verbose", "-v", action="store_true", default=flag_default, help="Show informational log messages"
    )
    parser.add_argument("--debug", action="store_true", default=flag_default, help="Show debug log messages")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.

    Global options are accepted before or after the sub-command name. After
    "exec" they must come before the command words, everything from the
    first word on is the command line.
    """
    parser = argparse.ArgumentParser(prog="moduletracker", description="Module Tracker CLI")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_global_options(parser)

    # SUPPRESS keeps sub-command defaults from overwriting options given before the sub-command
    common = argparse.ArgumentParser(add_help=False)
    _add_global_options(common, default=argparse.SUPPRESS)

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("interactive", parents=[common], help="Interactive prompt mode (default)")

    p_exec = sub.add_parser("exec", parents=[common], help="Run one command, e.g. exec delete 2")
    p_exec.add_argument("words", nargs=argparse.REMAINDER, help="Command line to execute")

    sub.add_parser("list", parents=[common], help="List stored modules")

    return parser


def _data_path(args: argparse.Namespace, prefs: Preferences) -> Path:
    if args.data is not None:
        return args.data.expanduser()
    return prefs.module_tracker_path()


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    args = build_parser().parse_args(argv)
    console = Console()

    prefs = load_preferences(args.prefs)
    data_path = _data_path(args, prefs)

    setup_logging(
        verbose=args.verbose,
        debug=args.debug,
        default_level=prefs.log_level,
        log_dir=data_path.parent / "logs",
        console=console,
    )
    log.debug("Using data file %s", data_path)

    logic = Logic.from_file(data_path)

    if args.command == "exec":
        raise SystemExit(_cmd_exec(args, logic, console))
    if args.command == "list":
        raise SystemExit(_cmd_list(args, logic, console))

    if args.command in (None, "interactive"):
        from moduletracker.interactive import run_interactive

        run_interactive(logic, console)
        raise SystemExit(0)

    raise SystemExit(2)
