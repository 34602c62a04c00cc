"""
Persistent storage of the module tracker.

File format (UTF-8 JSON):

    {
      "modules": [
        {
          "name": "CS3219",
          "resource": "https://canvas.nus.edu.sg",
          "time_slot": "300123 11:00",
          "venue": "COM1-0217",
          "tags": ["Lecture"],
          "remark": "",
          "deadline": "270223 14:00",
          "teacher": "Prof Z"
        }
      ]
    }

Every record is validated again on load, using the same field types as
the command parsers. Records are written in tracker order with tags sorted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from moduletracker.errors import ConstraintError, DataLoadError
from moduletracker.fields import Deadline, Name, Remark, Resource, Tag, Teacher, TimeSlot, Venue
from moduletracker.model import Module

log = logging.getLogger(__name__)

MISSING_FIELD_MESSAGE_FORMAT = "Module's {} field is missing!"

# (json key, field type, required)
_FIELDS = (
    ("name", Name, True),
    ("resource", Resource, True),
    ("time_slot", TimeSlot, True),
    ("venue", Venue, True),
    ("remark", Remark, False),
    ("deadline", Deadline, False),
    ("teacher", Teacher, False),
)


def module_to_dict(module: Module) -> dict[str, Any]:
    return {
        "name": module.name.value,
        "resource": module.resource.value,
        "time_slot": module.time_slot.value,
        "venue": module.venue.value,
        "tags": [t.tag_name for t in module.sorted_tags()],
        "remark": module.remark.value,
        "deadline": module.deadline.value,
        "teacher": module.teacher.value,
    }


def module_from_dict(data: dict[str, Any]) -> Module:
    """
    Convert one stored record back into a Module.

    Raises DataLoadError when a required field is missing or any value is invalid.
    """
    if not isinstance(data, dict):
        raise DataLoadError("Module record must be a JSON object")

    tags: list[Tag] = []
    raw_tags = data.get("tags") or []
    if not isinstance(raw_tags, list):
        raise DataLoadError("Module's tags field must be a list")
    for raw in raw_tags:
        if not isinstance(raw, str) or not Tag.is_valid(raw):
            raise DataLoadError(Tag.constraint_message())
        tags.append(Tag(raw))

    values: dict[str, Any] = {}
    for key, field_type, required in _FIELDS:
        raw = data.get(key)
        if raw is None:
            if required:
                raise DataLoadError(MISSING_FIELD_MESSAGE_FORMAT.format(field_type.__name__))
            raw = ""
        if not isinstance(raw, str):
            raise DataLoadError(field_type.constraint_message())
        try:
            values[key] = field_type(raw)
        except ConstraintError as e:
            raise DataLoadError(str(e)) from e

    return Module(tags=frozenset(tags), **values)


def load_modules(path: str | Path) -> list[Module]:
    """
    Load all modules from path.

    Returns an empty list if the file does not exist yet (first run).
    Raises DataLoadError if the file cannot be read or contains invalid data.
    """
    data_path = Path(path)
    if not data_path.exists():
        log.info("Data file %s not found, starting with an empty tracker", data_path)
        return []

    try:
        data = json.loads(data_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DataLoadError(f"Could not read {data_path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("modules", []), list):
        raise DataLoadError(f"{data_path} is not a module tracker file")

    modules = [module_from_dict(record) for record in data.get("modules", [])]
    log.info("Loaded %d modules from %s", len(modules), data_path)
    return modules


def save_modules(modules: Iterable[Module], path: str | Path) -> None:
    """
    Write modules to path. Creates parent directories if needed.
    """
    data_path = Path(path)
    data_path.parent.mkdir(parents=True, exist_ok=True)

    payload = {"modules": [module_to_dict(m) for m in modules]}
    data_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    log.debug("Saved %d modules to %s", len(payload["modules"]), data_path)
