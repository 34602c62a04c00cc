"""
Shared sample data for the tests.

build_module() creates a valid Module where every field can be overridden
with a raw string, so tests only spell out what they care about.
"""

from __future__ import annotations

from typing import Iterable

from moduletracker.fields import Deadline, Name, Remark, Resource, Tag, Teacher, TimeSlot, Venue
from moduletracker.model import Module
from moduletracker.tracker import ModuleTracker

VALID_NAME_CS3230 = "CS3230"
VALID_NAME_CS3219 = "CS3219"
VALID_RESOURCE_CS3230 = "11111111"
VALID_RESOURCE_CS3219 = "22222222"
VALID_TIMESLOT_CS3230 = "230223 18:00"
VALID_TIMESLOT_CS3219 = "300123 11:00"
VALID_VENUE_CS3230 = "Block 312, Amy Street 1"
VALID_VENUE_CS3219 = "Block 123, Bobby Street 3"
VALID_TAG_LECTURE = "Lecture"
VALID_TAG_TUTORIAL = "Tutorial"
VALID_DEADLINE_CS3219 = "270223 14:00"
VALID_DEADLINE_CS3230 = "300523 12:00"
VALID_REMARK_CS3219 = "Hybrid"
VALID_REMARK_CS3230 = "Zoom"
VALID_TEACHER_CS3219 = "Prof. Z"
VALID_TEACHER_CS3230 = "Prof. X"

NAME_DESC_CS3230 = " n/" + VALID_NAME_CS3230
NAME_DESC_CS3219 = " n/" + VALID_NAME_CS3219
RESOURCE_DESC_CS3230 = " r/" + VALID_RESOURCE_CS3230
RESOURCE_DESC_CS3219 = " r/" + VALID_RESOURCE_CS3219
TIMESLOT_DESC_CS3230 = " s/" + VALID_TIMESLOT_CS3230
TIMESLOT_DESC_CS3219 = " s/" + VALID_TIMESLOT_CS3219
VENUE_DESC_CS3230 = " v/" + VALID_VENUE_CS3230
VENUE_DESC_CS3219 = " v/" + VALID_VENUE_CS3219
TAG_DESC_TUTORIAL = " t/" + VALID_TAG_TUTORIAL
TAG_DESC_LECTURE = " t/" + VALID_TAG_LECTURE
DEADLINE_DESC_CS3219 = " d/" + VALID_DEADLINE_CS3219
DEADLINE_DESC_CS3230 = " d/" + VALID_DEADLINE_CS3230
REMARK_DESC_CS3219 = " m/" + VALID_REMARK_CS3219
REMARK_DESC_CS3230 = " m/" + VALID_REMARK_CS3230
TEACHER_DESC_CS3219 = " p/" + VALID_TEACHER_CS3219
TEACHER_DESC_CS3230 = " p/" + VALID_TEACHER_CS3230

INVALID_NAME_DESC = " n/James&"  # '&' not allowed in names
INVALID_RESOURCE_DESC = " r/ab"  # too short
INVALID_TIMESLOT_DESC = " s/bob!yahoo"  # not a date
INVALID_VENUE_DESC = " v/"  # empty string not allowed for venues
INVALID_TAG_DESC = " t/hubby*"  # '*' not allowed in tags

ADD_LINE_CS3219 = (
    "add"
    + NAME_DESC_CS3219
    + RESOURCE_DESC_CS3219
    + TIMESLOT_DESC_CS3219
    + VENUE_DESC_CS3219
    + TAG_DESC_LECTURE
    + REMARK_DESC_CS3219
    + DEADLINE_DESC_CS3219
    + TEACHER_DESC_CS3219
)

PREAMBLE_WHITESPACE = "\t  \r  \n"
PREAMBLE_NON_EMPTY = "NonEmptyPreamble"


def build_module(
    name: str = "CS2103T",
    resource: str = "https://nus-cs2103-ay2223s2.github.io/website",
    time_slot: str = "290323 12:00",
    venue: str = "I3-Aud",
    tags: Iterable[str] = (),
    remark: str = "",
    deadline: str = "",
    teacher: str = "",
) -> Module:
    return Module(
        name=Name(name),
        resource=Resource(resource),
        time_slot=TimeSlot(time_slot),
        venue=Venue(venue),
        tags=frozenset(Tag(t) for t in tags),
        remark=Remark(remark),
        deadline=Deadline(deadline),
        teacher=Teacher(teacher),
    )


CS2106_TUT = build_module(name="CS2106", venue="COM1-0217", time_slot="290323 12:00", tags=["Tutorial"])
CS2103T_LEC = build_module(name="CS2103T", venue="I3-Aud", time_slot="290323 12:00", tags=["Lecture"])
CS2101_OP = build_module(name="CS2101", venue="COM1-0210", time_slot="040423 10:00", tags=["Presentation"])
CS1231S_TUT = build_module(name="CS1231S", venue="COM3", time_slot="280323 09:00", tags=["Tutorial"])
CS1101S_LEC = build_module(name="CS1101S", venue="Hybrid", time_slot="310323 16:00", tags=["Lecture"])

CS3230 = build_module(
    name=VALID_NAME_CS3230,
    resource=VALID_RESOURCE_CS3230,
    time_slot=VALID_TIMESLOT_CS3230,
    venue=VALID_VENUE_CS3230,
    tags=[VALID_TAG_TUTORIAL],
    remark=VALID_REMARK_CS3230,
    deadline=VALID_DEADLINE_CS3230,
    teacher=VALID_TEACHER_CS3230,
)
CS3219 = build_module(
    name=VALID_NAME_CS3219,
    resource=VALID_RESOURCE_CS3219,
    time_slot=VALID_TIMESLOT_CS3219,
    venue=VALID_VENUE_CS3219,
    tags=[VALID_TAG_LECTURE],
    remark=VALID_REMARK_CS3219,
    deadline=VALID_DEADLINE_CS3219,
    teacher=VALID_TEACHER_CS3219,
)


def typical_modules() -> list[Module]:
    return [CS2106_TUT, CS2103T_LEC, CS2101_OP, CS1231S_TUT, CS1101S_LEC]


def typical_tracker() -> ModuleTracker:
    return ModuleTracker(typical_modules())
