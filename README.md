# projectdesk

A small interactive project manager for the terminal. It keeps a list of
projects. Each project has a name, a creation date, an owner and a numeric
status, and holds its own ordered list of tasks. The whole list can be
written to a plain-text report.

## Installation

```
pip install .
```

## Running

```
projectdesk
```

This opens a numbered menu, written in Spanish, on standard input and output:

| Option | Action |
|--------|--------|
| 1 | Create a project (name, date `YYYY-MM-DD`, user, status) |
| 2 | List projects and tasks with numeric status codes |
| 3 | Delete a project |
| 4 | Add a task to a project |
| 5 | Delete a task from a project |
| 6 | Sort a project's tasks by date |
| 7 | Find a task by its exact name |
| 8 | Save every project to `proyectos.txt` in the current directory |
| 9 | List projects and tasks with status labels |
| 0 | Quit |

The menu also ends when the option typed is not a number or the input ends.
A status that cannot be read as a number is taken as 0. If the input ends
while a name, date or user is being asked for, the program reports
`input: unexpected end of input` on standard error and exits with status 1.

Saving with option 8 fails, and says `Error guardando en archivo.`, when
there are no projects or the file cannot be opened.

The status codes are:

| Code | Meaning |
|------|---------|
| 0 | pending (`pendiente`) |
| 1 | in progress (`en progreso`) |
| 2 | completed (`completada`) |

Any other code is shown as `desconocido` in the labelled listings.

## Use as a library

```python
import sys

from projectdesk.projects import Project, ProjectRegistry
from projectdesk.report import format_projects, save_projects

registry = ProjectRegistry()
web = Project("web", "2024-03-01", "ana", 1)
web.add_task("deploy", "2024-03-10", "luis", 0)
web.add_task("design", "2024-03-02", "ana", 2)
web.sort_tasks_by_date()
registry.add(web)

print(format_projects(registry))
save_projects(registry, "proyectos.txt")
registry.show_all(sys.stdout)
```

- `projectdesk.tasks`: the `Task` dataclass and the list helpers
  `find_task`, `remove_task` and `sort_by_date`.
- `projectdesk.projects`: the `Project` dataclass (`add_task`, `remove_task`,
  `find_task`, `sort_tasks_by_date`, `describe`) and `ProjectRegistry`, which
  keeps projects in the order they were added (`add`, `find`, `delete`,
  `show_all`, plus `in`, iteration and `len`).
- `projectdesk.report`: `status_label`, `format_projects`, `save_projects`
  and `list_projects`.
- `projectdesk.cli`: `main`, the interactive menu.

Names are matched exactly. When a name appears more than once, the first
match wins. `remove_task` and `ProjectRegistry.delete` raise `KeyError` when
nothing has that name; `find_task` and `ProjectRegistry.find` return `None`.
`save_projects` raises `ValueError` when given no projects.

Tasks are sorted by date as plain `YYYY-MM-DD` strings. The sort is stable,
so tasks with the same date keep their order.

The report has one line per project, followed by one indented line for each
of its tasks:

```
Proyecto: web | 2024-03-01 | ana | en progreso
    - design | 2024-03-02 | ana | completada
    - deploy | 2024-03-10 | luis | pendiente
```

`list_projects` prints the same text, or `(no hay proyectos)` when there are
no projects.

## What it does not do

Projects live only in memory while the program runs. The report file is
written but never read back: option 9 lists the projects held in memory,
not the contents of `proyectos.txt`, and nothing is restored when the
program starts again. Dates are stored as typed and are not checked.

## Tests

```
pip install .[test]
pytest
```