"""
Terminal rendering of the module list (rich).
"""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from moduletracker.model import Module


def module_table(modules: Sequence[Module], title: str = "Modules") -> Table:
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Name", style="bold cyan")
    table.add_column("Resource")
    table.add_column("Time slot")
    table.add_column("Venue")
    table.add_column("Deadline", style="yellow")
    table.add_column("Teacher", style="magenta")
    table.add_column("Remark")
    table.add_column("Tags", style="green")

    for i, m in enumerate(modules, start=1):
        table.add_row(
            str(i),
            m.name.value,
            m.resource.value,
            m.time_slot.moment.strftime("%a %d %b %Y, %H:%M"),
            m.venue.value,
            m.deadline.display(),
            m.teacher.value or "-",
            m.remark.value,
            " ".join(t.tag_name for t in m.sorted_tags()),
        )
    return table


def show_modules(console: Console, modules: Sequence[Module]) -> None:
    if not modules:
        console.print("No modules to show.")
        return
    console.print(module_table(modules))


def show_result(console: Console, feedback: str, error: bool = False) -> None:
    # markup=False: user input may contain "[...]"
    console.print(feedback, style="bold red" if error else None, markup=False, highlight=False)
