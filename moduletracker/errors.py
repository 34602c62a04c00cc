"""
Exception types shared across the package.

Every error carries a human readable message that is shown to the user as-is.
None of them is fatal: a failed command leaves the tracker untouched.
"""

from __future__ import annotations


class ConstraintError(ValueError):
    """
    Raised when a raw field value does not satisfy the rule of its field kind.
    """


class ParseError(Exception):
    """
    Raised when user input cannot be turned into a command.
    """


class CommandError(Exception):
    """
    Raised when a parsed command cannot be executed against the tracker.
    """


class TrackerError(Exception):
    """Base class for violations of the tracker's invariants."""


class DuplicateModuleError(TrackerError):
    def __init__(self) -> None:
        super().__init__("Operation would result in duplicate modules")


class MissingModuleError(TrackerError):
    def __init__(self) -> None:
        super().__init__("Module not found in the module tracker")


class DataLoadError(Exception):
    """
    Raised when the JSON data file is unreadable or contains invalid records.
    """
