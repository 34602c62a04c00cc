"""
Argument tokenizer.

Splits the argument part of a command line, e.g.

    1 n/CS3219 t/Lecture t/Hybrid

into a preamble ("1") and the values that follow each known prefix
({"n/": ["CS3219"], "t/": ["Lecture", "Hybrid"]}).

A prefix only counts when it starts the string or follows whitespace, so
"http://x" inside a value is never mistaken for a prefix.
"""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Prefix:
    prefix: str

    def __str__(self) -> str:
        return self.prefix


# ---------------------------------------------------------------------------
# Prefix vocabulary (fixed)
# ---------------------------------------------------------------------------

PREFIX_NAME = Prefix("n/")
PREFIX_RESOURCE = Prefix("r/")
PREFIX_TIMESLOT = Prefix("s/")
PREFIX_VENUE = Prefix("v/")
PREFIX_TAG = Prefix("t/")
PREFIX_REMARK = Prefix("m/")
PREFIX_DEADLINE = Prefix("d/")
PREFIX_TEACHER = Prefix("p/")

ALL_PREFIXES = (
    PREFIX_NAME,
    PREFIX_RESOURCE,
    PREFIX_TIMESLOT,
    PREFIX_VENUE,
    PREFIX_TAG,
    PREFIX_REMARK,
    PREFIX_DEADLINE,
    PREFIX_TEACHER,
)


class ArgumentMultimap:
    """
    Prefix -> list of values, in order of appearance, plus the preamble.
    """

    def __init__(self, preamble: str = "") -> None:
        self._preamble = preamble
        self._values: dict[Prefix, list[str]] = defaultdict(list)

    def put(self, prefix: Prefix, value: str) -> None:
        self._values[prefix].append(value)

    def get_value(self, prefix: Prefix) -> Optional[str]:
        """
        Return the last value of prefix, or None if the prefix is absent.
        """
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def has(self, prefix: Prefix) -> bool:
        return bool(self._values.get(prefix))

    @property
    def preamble(self) -> str:
        return self._preamble

    def as_dict(self) -> dict[str, list[str]]:
        return {p.prefix: list(v) for p, v in self._values.items()}


def _find_prefix_positions(args: str, prefixes: tuple[Prefix, ...]) -> list[tuple[int, Prefix]]:
    positions: list[tuple[int, Prefix]] = []
    for prefix in prefixes:
        pattern = r"(?:^|(?<=\s))" + re.escape(prefix.prefix)
        for match in re.finditer(pattern, args):
            positions.append((match.start(), prefix))
    positions.sort(key=lambda p: p[0])
    return positions


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """
    Tokenize args into an ArgumentMultimap using the given prefixes.

    The text between one prefix and the next recognised one is that prefix's
    value, trimmed at both ends. A prefix with nothing after it gets "".
    """
    positions = _find_prefix_positions(args, prefixes)

    first = positions[0][0] if positions else len(args)
    multimap = ArgumentMultimap(preamble=args[:first].strip())

    for i, (start, prefix) in enumerate(positions):
        end = positions[i + 1][0] if i + 1 < len(positions) else len(args)
        value = args[start + len(prefix.prefix):end].strip()
        multimap.put(prefix, value)

    return multimap
