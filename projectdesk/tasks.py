"""Tasks belonging to a project, and helpers for lists of tasks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, MutableSequence


@dataclass
class Task:
    """A single unit of work.

    ``created_date`` is expected in ``YYYY-MM-DD`` form so that plain string
    comparison orders tasks chronologically.  ``status`` is 0 (pending),
    1 (in progress) or 2 (completed).
    """

    name: str
    created_date: str
    created_by: str
    status: int = 0

    def describe(self) -> str:
        """Return the indented one-line listing of this task."""
        return (
            f"    - {self.name} | {self.created_date} | "
            f"{self.created_by} | {self.status}"
        )


def find_task(tasks: Iterable[Task], name: str) -> Task | None:
    """Return the first task called ``name``, or ``None`` if there is none."""
    return next((task for task in tasks if task.name == name), None)


def remove_task(tasks: MutableSequence[Task], name: str) -> Task:
    """Remove the first task called ``name`` from ``tasks`` and return it.

    Raises ``KeyError`` if no task has that name.
    """
    for position, task in enumerate(tasks):
        if task.name == name:
            del tasks[position]
            return task
    raise KeyError(name)


def sort_by_date(tasks: list[Task]) -> None:
    """Sort ``tasks`` in place by creation date, keeping ties in their order."""
    tasks.sort(key=lambda task: task.created_date)