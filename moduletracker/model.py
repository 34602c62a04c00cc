"""
Central data model: the Module record and partial updates to it.

A Module is immutable. Editing never changes a module in place; it builds a
new Module from the old one plus an EditModuleDescriptor.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import FrozenSet, Iterable, Optional

from moduletracker.fields import Deadline, Name, Remark, Resource, Tag, Teacher, TimeSlot, Venue


@dataclass(frozen=True)
class Module:
    """
    Represents one module / lecture entry of the tracker.

    Identity (see is_same_module) is the name only; == compares every field.
    """

    name: Name
    resource: Resource
    time_slot: TimeSlot
    venue: Venue
    tags: FrozenSet[Tag] = frozenset()
    remark: Remark = Remark("")
    deadline: Deadline = Deadline("")
    teacher: Teacher = Teacher("")

    def __post_init__(self) -> None:
        # accept any iterable of tags, store a frozenset
        object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_module(self, other: Optional["Module"]) -> bool:
        if other is self:
            return True
        return other is not None and other.name == self.name

    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags, key=lambda t: t.tag_name)

    def __str__(self) -> str:
        parts = [
            self.name.value,
            f"Resource: {self.resource}",
            f"Time slot: {self.time_slot}",
            f"Venue: {self.venue}",
        ]
        if self.remark.value:
            parts.append(f"Remark: {self.remark}")
        if self.deadline.value:
            parts.append(f"Deadline: {self.deadline}")
        if self.teacher.value:
            parts.append(f"Teacher: {self.teacher}")
        if self.tags:
            parts.append("Tags: " + ", ".join(f"[{t.tag_name}]" for t in self.sorted_tags()))
        return "; ".join(parts)


@dataclass
class EditModuleDescriptor:
    """
    Carries the fields a user chose to change. None means "leave as is".

    tags=frozenset() is an explicit request to remove all tags, which is
    different from tags=None.
    """

    name: Optional[Name] = None
    resource: Optional[Resource] = None
    time_slot: Optional[TimeSlot] = None
    venue: Optional[Venue] = None
    tags: Optional[FrozenSet[Tag]] = None
    remark: Optional[Remark] = None
    deadline: Optional[Deadline] = None
    teacher: Optional[Teacher] = None

    def set_tags(self, tags: Optional[Iterable[Tag]]) -> None:
        self.tags = frozenset(tags) if tags is not None else None

    def overrides(self) -> dict[str, object]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def is_any_field_edited(self) -> bool:
        return bool(self.overrides())


def apply_edit(module: Module, descriptor: EditModuleDescriptor) -> Module:
    """
    Return a new Module with every override of descriptor applied to module.
    """
    overrides = descriptor.overrides()
    if not overrides:
        raise ValueError("EditModuleDescriptor has no fields to apply")
    return replace(module, **overrides)


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """
    Matches modules whose name contains any keyword as a whole word (case-insensitive).
    """

    keywords: tuple[str, ...]

    def __call__(self, module: Module) -> bool:
        words = {w.lower() for w in module.name.value.split()}
        return any(k.lower() in words for k in self.keywords)
