"""
Parsing (user input -> Command).

A command line looks like

    edit 2 s/300123 11:00 t/Lecture

The first word selects a parser, the rest is tokenized (see tokenizer.py)
and every field value is validated by its field type before a Command is
built. All failures raise ParseError:

- structural problems (missing prefix, bad index, unexpected preamble)
  carry the command's usage text
- invalid field values carry the field's constraint message
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, TypeVar

from moduletracker.commands import (
    ALL_COMMANDS,
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    Index,
    ListCommand,
    SortCommand,
    MESSAGE_UNKNOWN_COMMAND,
    invalid_format,
)
from moduletracker.errors import ConstraintError, ParseError
from moduletracker.fields import Deadline, Field, Name, Remark, Resource, Tag, Teacher, TimeSlot, Venue
from moduletracker.model import EditModuleDescriptor, Module, NameContainsKeywordsPredicate
from moduletracker.tokenizer import (
    ALL_PREFIXES,
    PREFIX_DEADLINE,
    PREFIX_NAME,
    PREFIX_REMARK,
    PREFIX_RESOURCE,
    PREFIX_TAG,
    PREFIX_TEACHER,
    PREFIX_TIMESLOT,
    PREFIX_VENUE,
    ArgumentMultimap,
    Prefix,
    tokenize,
)
from moduletracker.tracker import SORT_KEYS

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

F = TypeVar("F", bound=Field)


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def parse_index(one_based_index: str) -> Index:
    """
    Parse a positive one-based index. Leading and trailing whitespace is ignored.
    """
    trimmed = one_based_index.strip()
    if not trimmed.isdigit() or not trimmed.isascii() or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    # same upper bound as a signed 32 bit int, larger numbers are typos
    if int(trimmed) > 2**31 - 1:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(trimmed))


def _parse_field(field_type: type[F], raw: str) -> F:
    if raw is None:
        raise TypeError(f"{field_type.__name__} input must not be None")
    try:
        return field_type(raw)
    except ConstraintError as e:
        raise ParseError(str(e)) from e


def parse_name(raw: str) -> Name:
    return _parse_field(Name, raw)


def parse_resource(raw: str) -> Resource:
    return _parse_field(Resource, raw)


def parse_time_slot(raw: str) -> TimeSlot:
    return _parse_field(TimeSlot, raw)


def parse_venue(raw: str) -> Venue:
    return _parse_field(Venue, raw)


def parse_remark(raw: str) -> Remark:
    return _parse_field(Remark, raw)


def parse_deadline(raw: str) -> Deadline:
    return _parse_field(Deadline, raw)


def parse_teacher(raw: str) -> Teacher:
    return _parse_field(Teacher, raw)


def parse_tag(raw: str) -> Tag:
    return _parse_field(Tag, raw)


def parse_tags(raws: Iterable[str]) -> frozenset[Tag]:
    if raws is None:
        raise TypeError("tags must not be None")
    return frozenset(parse_tag(t) for t in raws)


def _are_prefixes_present(multimap: ArgumentMultimap, *prefixes: Prefix) -> bool:
    return all(multimap.get_value(p) is not None for p in prefixes)


# ---------------------------------------------------------------------------
# Per-command parsers
# ---------------------------------------------------------------------------


class AddCommandParser:
    REQUIRED = (PREFIX_NAME, PREFIX_RESOURCE, PREFIX_TIMESLOT, PREFIX_VENUE)

    def parse(self, args: str) -> AddCommand:
        mm = tokenize(args, *ALL_PREFIXES)

        if not _are_prefixes_present(mm, *self.REQUIRED) or mm.preamble:
            raise ParseError(invalid_format(AddCommand.MESSAGE_USAGE))

        # fixed order: the first invalid field in this order is reported
        name = parse_name(mm.get_value(PREFIX_NAME))
        resource = parse_resource(mm.get_value(PREFIX_RESOURCE))
        time_slot = parse_time_slot(mm.get_value(PREFIX_TIMESLOT))
        venue = parse_venue(mm.get_value(PREFIX_VENUE))
        tags = parse_tags(mm.get_all_values(PREFIX_TAG))
        remark = parse_remark(mm.get_value(PREFIX_REMARK) or "")
        deadline = parse_deadline(mm.get_value(PREFIX_DEADLINE) or "")
        teacher = parse_teacher(mm.get_value(PREFIX_TEACHER) or "")

        module = Module(
            name=name,
            resource=resource,
            time_slot=time_slot,
            venue=venue,
            tags=tags,
            remark=remark,
            deadline=deadline,
            teacher=teacher,
        )
        return AddCommand(module)


class EditCommandParser:
    # (prefix, descriptor attribute, field parser), checked before the tags
    FIELDS_BEFORE_TAGS: tuple[tuple[Prefix, str, Callable[[str], Field]], ...] = (
        (PREFIX_NAME, "name", parse_name),
        (PREFIX_RESOURCE, "resource", parse_resource),
        (PREFIX_TIMESLOT, "time_slot", parse_time_slot),
        (PREFIX_VENUE, "venue", parse_venue),
    )
    # checked after the tags
    FIELDS_AFTER_TAGS: tuple[tuple[Prefix, str, Callable[[str], Field]], ...] = (
        (PREFIX_REMARK, "remark", parse_remark),
        (PREFIX_DEADLINE, "deadline", parse_deadline),
        (PREFIX_TEACHER, "teacher", parse_teacher),
    )

    def parse(self, args: str) -> EditCommand:
        if args is None:
            raise TypeError("args must not be None")
        mm = tokenize(args, *ALL_PREFIXES)

        try:
            index = parse_index(mm.preamble)
        except ParseError as e:
            raise ParseError(invalid_format(EditCommand.MESSAGE_USAGE)) from e

        descriptor = EditModuleDescriptor()
        self._set_fields(descriptor, mm, self.FIELDS_BEFORE_TAGS)

        tag_values = mm.get_all_values(PREFIX_TAG)
        if tag_values:
            descriptor.set_tags(self._parse_tags_for_edit(tag_values))

        self._set_fields(descriptor, mm, self.FIELDS_AFTER_TAGS)

        if not descriptor.is_any_field_edited():
            raise ParseError(EditCommand.MESSAGE_NOT_EDITED)
        return EditCommand(index, descriptor)

    @staticmethod
    def _set_fields(descriptor: EditModuleDescriptor, mm: ArgumentMultimap, fields) -> None:
        for prefix, attr, parse_fn in fields:
            raw = mm.get_value(prefix)
            if raw is not None:
                setattr(descriptor, attr, parse_fn(raw))

    @staticmethod
    def _parse_tags_for_edit(tag_values: list[str]) -> frozenset[Tag]:
        """
        A single empty t/ clears all tags; anything else replaces them.
        """
        if tag_values == [""]:
            return frozenset()
        return parse_tags(tag_values)


class DeleteCommandParser:
    def parse(self, args: str) -> DeleteCommand:
        try:
            return DeleteCommand(parse_index(args))
        except ParseError as e:
            raise ParseError(invalid_format(DeleteCommand.MESSAGE_USAGE)) from e


class FindCommandParser:
    def parse(self, args: str) -> FindCommand:
        keywords = args.split()
        if not keywords:
            raise ParseError(invalid_format(FindCommand.MESSAGE_USAGE))
        return FindCommand(NameContainsKeywordsPredicate(tuple(keywords)))


class SortCommandParser:
    def parse(self, args: str) -> SortCommand:
        key = args.strip().lower()
        if key not in SORT_KEYS:
            raise ParseError(invalid_format(SortCommand.MESSAGE_USAGE))
        return SortCommand(key)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_COMMAND_FORMAT = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)


def help_command() -> HelpCommand:
    return HelpCommand([c.MESSAGE_USAGE for c in ALL_COMMANDS])


_PARSERS: dict[str, Callable[[str], Command]] = {
    AddCommand.COMMAND_WORD: AddCommandParser().parse,
    EditCommand.COMMAND_WORD: EditCommandParser().parse,
    DeleteCommand.COMMAND_WORD: DeleteCommandParser().parse,
    FindCommand.COMMAND_WORD: FindCommandParser().parse,
    SortCommand.COMMAND_WORD: SortCommandParser().parse,
    ListCommand.COMMAND_WORD: lambda args: ListCommand(),
    ClearCommand.COMMAND_WORD: lambda args: ClearCommand(),
    HelpCommand.COMMAND_WORD: lambda args: help_command(),
    ExitCommand.COMMAND_WORD: lambda args: ExitCommand(),
}


def parse_command(user_input: str) -> Command:
    """
    Select a parser by the leading command word and parse the remainder.
    """
    match = _COMMAND_FORMAT.fullmatch(user_input.strip())
    if match is None:
        raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))

    word = match.group("word")
    parser = _PARSERS.get(word)
    if parser is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    return parser(match.group("arguments"))
