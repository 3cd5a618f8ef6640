"""Projects, their tasks, and the ordered collection of projects."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterator, TextIO

from projectdesk.tasks import Task, find_task, remove_task, sort_by_date


@dataclass
class Project:
    """A named project holding an ordered list of tasks.

    ``status`` is 0 (pending), 1 (in progress) or 2 (completed).
    """

    name: str
    created_date: str
    created_by: str
    status: int = 0
    tasks: list[Task] = field(default_factory=list)

    def describe(self) -> str:
        """Return the one-line listing of this project."""
        return (
            f"Proyecto: {self.name} | {self.created_date} | "
            f"{self.created_by} | {self.status}"
        )

    def add_task(self, name: str, created_date: str, created_by: str,
                 status: int = 0) -> Task:
        """Create a task, append it to this project and return it."""
        task = Task(name, created_date, created_by, status)
        self.tasks.append(task)
        return task

    def remove_task(self, name: str) -> Task:
        """Remove and return the first task called ``name``.

        Raises ``KeyError`` if the project has no such task.
        """
        return remove_task(self.tasks, name)

    def find_task(self, name: str) -> Task | None:
        """Return the first task called ``name``, or ``None``."""
        return find_task(self.tasks, name)

    def sort_tasks_by_date(self) -> None:
        """Order this project's tasks by creation date, stably."""
        sort_by_date(self.tasks)


class ProjectRegistry:
    """Projects kept in the order they were added."""

    def __init__(self) -> None:
        self._projects: list[Project] = []

    def add(self, project: Project) -> None:
        """Append ``project`` at the end."""
        self._projects.append(project)

    def find(self, name: str) -> Project | None:
        """Return the first project called ``name``, or ``None``."""
        return next((p for p in self._projects if p.name == name), None)

    def delete(self, name: str) -> Project:
        """Remove and return the first project called ``name``.

        Raises ``KeyError`` if there is no such project.
        """
        for position, project in enumerate(self._projects):
            if project.name == name:
                del self._projects[position]
                return project
        raise KeyError(name)

    def __contains__(self, name: object) -> bool:
        return any(p.name == name for p in self._projects)

    def __iter__(self) -> Iterator[Project]:
        return iter(self._projects)

    def __len__(self) -> int:
        return len(self._projects)

    def show_all(self, stream: TextIO | None = None) -> None:
        """Write every project followed by its tasks, one per line."""
        out = sys.stdout if stream is None else stream
        for project in self._projects:
            print(project.describe(), file=out)
            for task in project.tasks:
                print(task.describe(), file=out)