"""
In-memory state of the application.

ModuleTracker holds the modules and guarantees that no two of them share an
identity (same name). Model wraps one tracker together with what the user
currently sees: an optional filter and a sort order.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

from moduletracker.errors import DuplicateModuleError, MissingModuleError
from moduletracker.model import Module

log = logging.getLogger(__name__)


class ModuleTracker:
    def __init__(self, modules: Iterable[Module] = ()) -> None:
        self._modules: list[Module] = []
        self.reset_data(modules)

    @property
    def modules(self) -> tuple[Module, ...]:
        """
        Read-only snapshot of the modules in insertion order.
        """
        return tuple(self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self):
        return iter(tuple(self._modules))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModuleTracker):
            return NotImplemented
        return self._modules == other._modules

    def __repr__(self) -> str:
        return f"ModuleTracker({len(self._modules)} modules)"

    def has_module(self, module: Module) -> bool:
        if module is None:
            raise TypeError("module must not be None")
        return any(m.is_same_module(module) for m in self._modules)

    def add_module(self, module: Module) -> None:
        if self.has_module(module):
            raise DuplicateModuleError()
        self._modules.append(module)

    def set_module(self, target: Module, replacement: Module) -> None:
        """
        Replace target with replacement, keeping its position in the list.
        """
        try:
            idx = self._modules.index(target)
        except ValueError:
            raise MissingModuleError() from None

        if not target.is_same_module(replacement) and self.has_module(replacement):
            raise DuplicateModuleError()

        self._modules[idx] = replacement

    def remove_module(self, module: Module) -> None:
        try:
            self._modules.remove(module)
        except ValueError:
            raise MissingModuleError() from None

    def reset_data(self, modules: Iterable[Module]) -> None:
        """
        Replace all modules. Leaves the tracker unchanged if modules contains duplicates.
        """
        if modules is None:
            raise TypeError("modules must not be None")
        new_modules = list(modules)
        for i, m in enumerate(new_modules):
            for other in new_modules[i + 1:]:
                if m.is_same_module(other):
                    raise DuplicateModuleError()
        self._modules = new_modules


# ---------------------------------------------------------------------------
# Displayed view
# ---------------------------------------------------------------------------

SORT_KEYS: dict[str, Callable[[Module], object]] = {
    "name": lambda m: m.name.value.lower(),
    "time": lambda m: m.time_slot.moment,
    # modules without deadline go last
    "deadline": lambda m: (m.deadline.moment is None, m.deadline.moment or datetime.min),
}

ModulePredicate = Callable[[Module], bool]


def show_all(module: Module) -> bool:
    return True


class Model:
    """
    The tracker plus the current filter and sort order of the list view.
    """

    def __init__(self, tracker: Optional[ModuleTracker] = None) -> None:
        self.tracker = tracker if tracker is not None else ModuleTracker()
        self.predicate: ModulePredicate = show_all
        self.sort_key: Optional[str] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (
            self.tracker == other.tracker
            and self.predicate == other.predicate
            and self.sort_key == other.sort_key
        )

    def has_module(self, module: Module) -> bool:
        return self.tracker.has_module(module)

    def add_module(self, module: Module) -> None:
        self.tracker.add_module(module)
        self.predicate = show_all
        log.debug("Added module %s", module.name)

    def set_module(self, target: Module, replacement: Module) -> None:
        self.tracker.set_module(target, replacement)
        log.debug("Replaced module %s with %s", target.name, replacement.name)

    def delete_module(self, module: Module) -> None:
        self.tracker.remove_module(module)
        log.debug("Deleted module %s", module.name)

    def reset_data(self, modules: Iterable[Module]) -> None:
        self.tracker.reset_data(modules)

    def update_filter(self, predicate: ModulePredicate) -> None:
        self.predicate = predicate

    def update_sort(self, key: Optional[str]) -> None:
        if key is not None and key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {key!r}")
        self.sort_key = key

    def displayed_modules(self) -> tuple[Module, ...]:
        shown = [m for m in self.tracker.modules if self.predicate(m)]
        if self.sort_key is not None:
            shown.sort(key=SORT_KEYS[self.sort_key])
        return tuple(shown)
