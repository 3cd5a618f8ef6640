"""Human-readable listings of projects, to the console or to a text file."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, TextIO

from projectdesk.projects import Project

_STATUS_LABELS = {
    0: "pendiente",
    1: "en progreso",
    2: "completada",
}
_UNKNOWN_STATUS = "desconocido"
_NO_PROJECTS = "(no hay proyectos)"


def status_label(status: int) -> str:
    """Return the display text for a numeric status code."""
    return _STATUS_LABELS.get(status, _UNKNOWN_STATUS)


def _project_lines(projects: Iterable[Project]) -> Iterable[str]:
    for project in projects:
        yield (
            f"Proyecto: {project.name} | {project.created_date} | "
            f"{project.created_by} | {status_label(project.status)}"
        )
        for task in project.tasks:
            yield (
                f"    - {task.name} | {task.created_date} | "
                f"{task.created_by} | {status_label(task.status)}"
            )


def format_projects(projects: Iterable[Project]) -> str:
    """Render projects and their tasks, one per line, with status labels."""
    return "".join(f"{line}\n" for line in _project_lines(projects))


def save_projects(projects: Iterable[Project], filename: str | Path) -> None:
    """Write the listing of ``projects`` to ``filename``.

    Raises ``ValueError`` when there are no projects to save, and lets the
    ``OSError`` from opening the file propagate.
    """
    project_list = list(projects)
    if not project_list:
        raise ValueError("no projects to save")
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(format_projects(project_list))


def list_projects(projects: Iterable[Project], stream: TextIO | None = None) -> None:
    """Print the listing of ``projects``, or a notice when there are none."""
    out = sys.stdout if stream is None else stream
    project_list = list(projects)
    if not project_list:
        print(_NO_PROJECTS, file=out)
        return
    out.write(format_projects(project_list))