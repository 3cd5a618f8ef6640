"""Interactive menu for managing projects and their tasks."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, TextIO

from projectdesk.projects import Project, ProjectRegistry
from projectdesk.report import list_projects, save_projects

SAVE_FILE = "proyectos.txt"

_MENU = (
    "\n--- Project Manager ---",
    "1) Crear proyecto",
    "2) Listar proyectos",
    "3) Borrar proyecto",
    "4) Añadir tarea a proyecto",
    "5) Borrar tarea de proyecto",
    "6) Ordenar tareas de un proyecto",
    "7) Buscar tarea por nombre",
    "8) Guardar proyectos en archivo",
    "9) Listar proyectos desde archivo",
    "0) Salir",
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _InputClosed(Exception):
    """Raised when the input ends while a text answer is expected."""


def _parse_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


class _Session:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.projects = ProjectRegistry()
        self.actions: dict[int, Callable[[], None]] = {
            1: self.create_project,
            2: self.show_projects,
            3: self.delete_project,
            4: self.add_task,
            5: self.remove_task,
            6: self.sort_tasks,
            7: self.find_task,
            8: self.save,
            9: self.list_labelled,
        }

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _prompt(self, prompt: str) -> str | None:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\n")

    def text(self, prompt: str) -> str:
        answer = self._prompt(prompt)
        if answer is None:
            raise _InputClosed
        return answer

    def number(self, prompt: str) -> int | None:
        """Read an integer, skipping blank lines; ``None`` if unreadable."""
        line = self._prompt(prompt)
        while line is not None and not line.strip():
            line = self.stdin.readline()
            line = line.rstrip("\n") if line else None
        return None if line is None else _parse_int(line)

    def status(self, prompt: str) -> int:
        value = self.number(prompt)
        return 0 if value is None else value

    def project_named(self, prompt: str) -> Project | None:
        project = self.projects.find(self.text(prompt))
        if project is None:
            self.say("Proyecto no existe.")
        return project

    def create_project(self) -> None:
        name = self.text("Nombre del proyecto: ")
        date = self.text("Fecha (YYYY-MM-DD): ")
        user = self.text("Usuario: ")
        status = self.status("Estado (0=pend,1=en proc,2=comp): ")
        self.projects.add(Project(name, date, user, status))

    def show_projects(self) -> None:
        self.projects.show_all(self.stdout)

    def delete_project(self) -> None:
        try:
            self.projects.delete(self.text("¿Qué proyecto borro? "))
        except KeyError:
            self.say("Proyecto no encontrado.")

    def add_task(self) -> None:
        project = self.project_named("Proyecto destino: ")
        if project is None:
            return
        name = self.text("Nombre tarea: ")
        date = self.text("Fecha tarea: ")
        user = self.text("Usuario tarea: ")
        status = self.status("Estado tarea (0/1/2): ")
        project.add_task(name, date, user, status)

    def remove_task(self) -> None:
        project = self.project_named("Proyecto: ")
        if project is None:
            return
        try:
            project.remove_task(self.text("Tarea a borrar: "))
        except KeyError:
            self.say("Tarea no encontrada.")

    def sort_tasks(self) -> None:
        project = self.project_named("Proyecto para ordenar tareas: ")
        if project is None:
            return
        project.sort_tasks_by_date()
        self.say("Tareas ordenadas por fecha.")

    def find_task(self) -> None:
        project = self.project_named(
            "Ingresar el nombre del Proyecto donde quiere buscar la tarea: "
        )
        if project is None:
            return
        task = project.find_task(self.text("Nombre exacto de la tarea: "))
        if task is None:
            self.say("Tarea no encontrada.")
            return
        self.say("Encontrada:")
        self.say(f"  - Nombre : {task.name}")
        self.say(f"  - Fecha  : {task.created_date}")
        self.say(f"  - Usuario: {task.created_by}")
        self.say(f"  - Estado : {task.status}")

    def save(self) -> None:
        try:
            save_projects(self.projects, SAVE_FILE)
        except OSError as exc:
            print(f"open: {exc}", file=sys.stderr)
            self.say("Error guardando en archivo.")
        except ValueError:
            self.say("Error guardando en archivo.")
        else:
            self.say(f"Guardado en '{SAVE_FILE}' OK.")

    def list_labelled(self) -> None:
        list_projects(self.projects, self.stdout)

    def run(self) -> None:
        while True:
            for line in _MENU:
                self.say(line)
            option = self.number("Opción: ")
            if option is None or option == 0:
                return
            action = self.actions.get(option)
            if action is None:
                self.say("Opción inválida.")
            else:
                action()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive project manager on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="projectdesk",
        description="Interactive manager for projects and their tasks.",
    )
    parser.parse_args(argv)
    session = _Session(sys.stdin, sys.stdout)
    try:
        session.run()
    except _InputClosed:
        print("input: unexpected end of input", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())