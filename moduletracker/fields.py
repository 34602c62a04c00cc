"""
Field value types of a Module.

Every field of a module (name, venue, time slot, ...) is a small immutable
wrapper around a trimmed string. Instead of one hand-written validator per
field, each field kind is bound to a declarative rule:

- PatternRule   : the whole value must match a regular expression
- MinLengthRule : non-blank text with a minimum length
- NonBlankRule  : a single line of text that does not start with whitespace
- DateTimeRule  : a date/time in a fixed format that must exist in the calendar

FIELD_RULES maps each field kind to its rule (and thereby to its fixed
error message). validate() receives that mapping explicitly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Mapping, Optional, Union

from moduletracker.errors import ConstraintError


# Format shared by time slots and deadlines, e.g. "230223 18:00"
DATE_TIME_FORMAT = "%d%m%y %H:%M"
DATE_TIME_SHAPE = r"\d{6} \d{2}:\d{2}"
DISPLAY_FORMAT = "%d %b %Y, %H:%M"


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PatternRule:
    pattern: str
    message: str
    optional: bool = False

    def accepts(self, raw: str) -> bool:
        if raw == "":
            return self.optional
        return re.fullmatch(self.pattern, raw) is not None


@dataclass(frozen=True)
class MinLengthRule:
    min_length: int
    message: str
    optional: bool = False

    def accepts(self, raw: str) -> bool:
        if raw == "":
            return self.optional
        return not raw[0].isspace() and len(raw.strip()) >= self.min_length


@dataclass(frozen=True)
class NonBlankRule:
    message: str
    optional: bool = False

    def accepts(self, raw: str) -> bool:
        if raw == "":
            return self.optional
        return not raw[0].isspace() and "\n" not in raw and "\r" not in raw


@dataclass(frozen=True)
class DateTimeRule:
    shape: str
    fmt: str
    message: str
    optional: bool = False

    def accepts(self, raw: str) -> bool:
        if raw == "":
            return self.optional
        if re.fullmatch(self.shape, raw) is None:
            return False
        # the shape alone lets through dates like 310223
        try:
            datetime.strptime(raw, self.fmt)
        except ValueError:
            return False
        return True


Rule = Union[PatternRule, MinLengthRule, NonBlankRule, DateTimeRule]


FIELD_RULES: dict[str, Rule] = {
    "name": PatternRule(
        r"[A-Za-z0-9][A-Za-z0-9 ]*",
        "Names should only contain alphanumeric characters and spaces, and it should not be blank",
    ),
    "resource": MinLengthRule(
        3,
        "Resources should be at least 3 characters long, and it should not start with a whitespace",
    ),
    "time_slot": DateTimeRule(
        DATE_TIME_SHAPE,
        DATE_TIME_FORMAT,
        "Time slots should be in the format DDMMYY HH:MM (e.g. 230223 18:00) and be a valid date and time",
    ),
    "venue": NonBlankRule("Venues can take any values on a single line, and it should not be blank"),
    "remark": PatternRule(r"[^\r\n]*", "Remarks should fit on a single line", optional=True),
    "deadline": DateTimeRule(
        DATE_TIME_SHAPE,
        DATE_TIME_FORMAT,
        "Deadlines should be in the format DDMMYY HH:MM (e.g. 270223 14:00) and be a valid date and time",
        optional=True,
    ),
    "teacher": PatternRule(
        r"[A-Za-z][A-Za-z .'-]*",
        "Teachers should start with a letter and only contain letters, spaces, full stops, apostrophes or hyphens",
        optional=True,
    ),
    "tag": PatternRule(r"[A-Za-z0-9]+", "Tags names should be alphanumeric"),
}


def validate(kind: str, raw: str, rules: Mapping[str, Rule]) -> str:
    """
    Trim raw and check it against the rule registered for kind.

    Returns the trimmed value. Raises ConstraintError with the rule's message.
    """
    if not isinstance(raw, str):
        raise TypeError(f"{kind} must be a string, got {type(raw).__name__}")
    value = raw.strip()
    rule = rules[kind]
    if not rule.accepts(value):
        raise ConstraintError(rule.message)
    return value


# ---------------------------------------------------------------------------
# Field value types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Field:
    """
    Immutable, validated field value. Subclasses only pick their kind.
    """

    value: str

    kind: ClassVar[str] = ""
    rules: ClassVar[Mapping[str, Rule]] = FIELD_RULES

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", validate(self.kind, self.value, self.rules))

    @classmethod
    def is_valid(cls, raw: str) -> bool:
        return cls.rules[cls.kind].accepts(raw)

    @classmethod
    def constraint_message(cls) -> str:
        return cls.rules[cls.kind].message

    def __str__(self) -> str:
        return self.value


class Name(Field):
    kind = "name"


class Resource(Field):
    kind = "resource"


class TimeSlot(Field):
    kind = "time_slot"

    @property
    def moment(self) -> datetime:
        return datetime.strptime(self.value, DATE_TIME_FORMAT)


class Venue(Field):
    kind = "venue"


class Remark(Field):
    kind = "remark"


class Deadline(Field):
    kind = "deadline"

    @property
    def moment(self) -> Optional[datetime]:
        if not self.value:
            return None
        return datetime.strptime(self.value, DATE_TIME_FORMAT)

    def display(self) -> str:
        """
        Human friendly form for the list view, "-" when no deadline is set.
        """
        moment = self.moment
        return moment.strftime(DISPLAY_FORMAT) if moment else "-"


class Teacher(Field):
    kind = "teacher"


class Tag(Field):
    kind = "tag"

    @property
    def tag_name(self) -> str:
        return self.value
