"""
Executable commands.

Parsers (see parser.py) turn user input into one of the command objects
below. execute() runs it against a Model and returns a CommandResult, or
raises CommandError and leaves the model unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from moduletracker.errors import CommandError
from moduletracker.model import EditModuleDescriptor, Module, NameContainsKeywordsPredicate, apply_edit
from moduletracker.tracker import SORT_KEYS, Model, show_all

log = logging.getLogger(__name__)


MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format!\n{}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_MODULE_DISPLAYED_INDEX = "The module index provided is invalid"
MESSAGE_MODULES_LISTED_OVERVIEW = "{} modules listed!"


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


@dataclass(frozen=True)
class Index:
    """
    Position in the displayed list. Stored zero-based, shown one-based.
    """

    zero_based: int

    def __post_init__(self) -> None:
        if self.zero_based < 0:
            raise IndexError("Index must not be negative")

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    show_help: bool = False
    exit: bool = False


class Command:
    COMMAND_WORD = ""
    MESSAGE_USAGE = ""

    def execute(self, model: Model) -> CommandResult:
        raise NotImplementedError


def _module_at(model: Model, index: Index) -> Module:
    shown = model.displayed_modules()
    if index.zero_based >= len(shown):
        raise CommandError(MESSAGE_INVALID_MODULE_DISPLAYED_INDEX)
    return shown[index.zero_based]


# ---------------------------------------------------------------------------
# Commands that change the tracker
# ---------------------------------------------------------------------------


@dataclass
class AddCommand(Command):
    module: Module

    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add: Adds a module to the module tracker.\n"
        "Parameters: n/NAME r/RESOURCE s/TIMESLOT v/VENUE "
        "[m/REMARK] [d/DEADLINE] [p/TEACHER] [t/TAG]...\n"
        "Example: add n/CS3219 r/https://canvas.nus.edu.sg s/300123 11:00 "
        "v/COM1-0217 d/270223 14:00 p/Prof Z t/Lecture"
    )
    MESSAGE_SUCCESS = "New module added: {}"
    MESSAGE_DUPLICATE_MODULE = "This module already exists in the module tracker"

    def execute(self, model: Model) -> CommandResult:
        if model.has_module(self.module):
            raise CommandError(self.MESSAGE_DUPLICATE_MODULE)
        model.add_module(self.module)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.module))


@dataclass
class EditCommand(Command):
    index: Index
    descriptor: EditModuleDescriptor

    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit: Edits the module identified by the index number used in the displayed module list. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [r/RESOURCE] [s/TIMESLOT] "
        "[v/VENUE] [m/REMARK] [d/DEADLINE] [p/TEACHER] [t/TAG]...\n"
        "Example: edit 1 s/300123 12:00 v/LT19"
    )
    MESSAGE_SUCCESS = "Edited Module: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_MODULE = "This module already exists in the module tracker."

    def execute(self, model: Model) -> CommandResult:
        module_to_edit = _module_at(model, self.index)
        edited = apply_edit(module_to_edit, self.descriptor)

        if not module_to_edit.is_same_module(edited) and model.has_module(edited):
            raise CommandError(self.MESSAGE_DUPLICATE_MODULE)

        model.set_module(module_to_edit, edited)
        model.update_filter(show_all)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited))


@dataclass
class DeleteCommand(Command):
    index: Index

    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the module identified by the index number used in the displayed module list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )
    MESSAGE_SUCCESS = "Deleted Module: {}"

    def execute(self, model: Model) -> CommandResult:
        module = _module_at(model, self.index)
        model.delete_module(module)
        return CommandResult(self.MESSAGE_SUCCESS.format(module))


@dataclass
class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear: Removes all modules from the module tracker."
    MESSAGE_SUCCESS = "Module tracker has been cleared!"

    def execute(self, model: Model) -> CommandResult:
        model.reset_data([])
        model.update_filter(show_all)
        return CommandResult(self.MESSAGE_SUCCESS)


# ---------------------------------------------------------------------------
# Commands that only change the view
# ---------------------------------------------------------------------------


@dataclass
class FindCommand(Command):
    predicate: NameContainsKeywordsPredicate

    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all modules whose names contain any of the specified keywords (case-insensitive) "
        "and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find CS2103T CS2101"
    )

    def execute(self, model: Model) -> CommandResult:
        model.update_filter(self.predicate)
        return CommandResult(MESSAGE_MODULES_LISTED_OVERVIEW.format(len(model.displayed_modules())))


@dataclass
class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = "list: Lists all modules."
    MESSAGE_SUCCESS = "Listed all modules"

    def execute(self, model: Model) -> CommandResult:
        model.update_filter(show_all)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass
class SortCommand(Command):
    key: str

    COMMAND_WORD = "sort"
    MESSAGE_USAGE = (
        "sort: Sorts the displayed modules.\n"
        f"Parameters: KEY (one of: {', '.join(SORT_KEYS)})\n"
        "Example: sort deadline"
    )
    MESSAGE_SUCCESS = "Sorted modules by {}"

    def execute(self, model: Model) -> CommandResult:
        model.update_sort(self.key)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.key))


@dataclass
class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows the available commands.\nExample: help"

    usages: list[str] = field(default_factory=list)

    def execute(self, model: Model) -> CommandResult:
        return CommandResult("\n\n".join(self.usages), show_help=True)


@dataclass
class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Module Tracker as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)


ALL_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    EditCommand,
    DeleteCommand,
    FindCommand,
    ListCommand,
    SortCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
)
