"""
Logging configuration.

* rich console output for warnings (more with --verbose / --debug)
* rotating plain-text log file in the data folder

setup_logging() is the only place that configures handlers; every other
module just does ``log = logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FILE_NAME = "moduletracker.log"


def _file_handler(log_dir: Path, level: int) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        filename=log_dir / LOG_FILE_NAME,
        maxBytes=1_000_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    return handler


def console_level(verbose: bool = False, debug: bool = False, default: str = "WARNING") -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    level = logging.getLevelName(default.upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(
    *,
    verbose: bool = False,
    debug: bool = False,
    default_level: str = "WARNING",
    log_dir: Optional[Path] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        verbose: show INFO messages on the console.
        debug: show DEBUG messages and rich tracebacks with locals hidden.
        default_level: console level when neither flag is given (from preferences).
        log_dir: folder of the rotating log file; no file logging when None.
        console: rich Console to log to (the one the list view is printed on).
    """
    level = console_level(verbose, debug, default_level)

    handlers: list[logging.Handler] = [
        RichHandler(
            level=level,
            console=console,
            rich_tracebacks=debug,
            show_path=debug,
            markup=False,
        )
    ]
    if log_dir is not None:
        handlers.append(_file_handler(log_dir, logging.DEBUG if debug else logging.INFO))

    logging.basicConfig(
        level=logging.DEBUG,
        handlers=handlers,
        format="%(message)s",
        force=True,
    )
