"""
Glue between user input, the in-memory model and the data file.

    text -> parse_command() -> Command.execute(model) -> save -> CommandResult
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from moduletracker.commands import CommandResult
from moduletracker.errors import CommandError, DataLoadError, TrackerError
from moduletracker.model import Module
from moduletracker.parser import parse_command
from moduletracker.storage import load_modules, save_modules
from moduletracker.tracker import Model, ModuleTracker

log = logging.getLogger(__name__)

MESSAGE_SAVE_FAILED = "Could not save data file: {}"


def load_tracker(path: Path) -> ModuleTracker:
    """
    Build the tracker from the data file.

    Never fails: an invalid file (bad JSON, invalid values, duplicate modules)
    is logged and an empty tracker is returned instead.
    """
    try:
        return ModuleTracker(load_modules(path))
    except DataLoadError as e:
        log.warning("Data file %s is invalid (%s). Starting with an empty module tracker.", path, e)
    except TrackerError as e:
        log.warning("Data file %s contains duplicate modules (%s). Starting with an empty module tracker.", path, e)
    return ModuleTracker()


class Logic:
    def __init__(self, model: Model, data_path: Optional[Path] = None) -> None:
        self.model = model
        self.data_path = data_path

    @classmethod
    def from_file(cls, data_path: Path) -> "Logic":
        return cls(Model(load_tracker(data_path)), data_path)

    def execute(self, command_text: str) -> CommandResult:
        """
        Parse and run one command line.

        Raises ParseError or CommandError; in both cases nothing was changed.
        """
        log.info("User command: %s", command_text)
        command = parse_command(command_text)

        before = self.model.tracker.modules
        view_before = (self.model.predicate, self.model.sort_key)
        result = command.execute(self.model)

        if self.data_path is not None and self.model.tracker.modules != before:
            try:
                save_modules(self.model.tracker.modules, self.data_path)
            except OSError as e:
                log.error("Could not save %s: %s", self.data_path, e)
                self.model.reset_data(before)
                self.model.predicate, self.model.sort_key = view_before
                raise CommandError(MESSAGE_SAVE_FAILED.format(e)) from e
        return result

    def displayed_modules(self) -> tuple[Module, ...]:
        return self.model.displayed_modules()
