import io

import pytest

from projectdesk.projects import Project, ProjectRegistry
from projectdesk.tasks import Task


@pytest.fixture
def registry():
    reg = ProjectRegistry()
    reg.add(Project("alpha", "2024-01-01", "ana", 0))
    reg.add(Project("beta", "2024-02-01", "luis", 1))
    reg.add(Project("gamma", "2024-03-01", "ana", 2))
    return reg


def test_project_describe():
    project = Project("alpha", "2024-01-01", "ana", 2)
    assert project.describe() == "Proyecto: alpha | 2024-01-01 | ana | 2"


def test_new_project_has_no_tasks():
    assert Project("p", "2024-01-01", "ana").tasks == []


def test_add_task_appends_in_order():
    project = Project("p", "2024-01-01", "ana")
    first = project.add_task("one", "2024-01-02", "ana", 0)
    second = project.add_task("two", "2024-01-01", "luis", 1)
    assert project.tasks == [first, second]
    assert second == Task("two", "2024-01-01", "luis", 1)


def test_projects_do_not_share_task_lists():
    a = Project("a", "2024-01-01", "x")
    b = Project("b", "2024-01-01", "x")
    a.add_task("t", "2024-01-01", "x", 0)
    assert b.tasks == []


def test_find_and_remove_task():
    project = Project("p", "2024-01-01", "ana")
    project.add_task("one", "2024-01-02", "ana", 0)
    project.add_task("two", "2024-01-03", "ana", 0)
    assert project.find_task("two").created_date == "2024-01-03"
    removed = project.remove_task("one")
    assert removed.name == "one"
    assert project.find_task("one") is None
    assert [t.name for t in project.tasks] == ["two"]


def test_remove_missing_task_raises():
    project = Project("p", "2024-01-01", "ana")
    with pytest.raises(KeyError):
        project.remove_task("ghost")


def test_sort_tasks_by_date():
    project = Project("p", "2024-01-01", "ana")
    project.add_task("late", "2024-09-09", "ana", 0)
    project.add_task("early", "2024-01-01", "ana", 0)
    project.add_task("mid", "2024-05-05", "ana", 0)
    project.sort_tasks_by_date()
    assert [t.name for t in project.tasks] == ["early", "mid", "late"]


def test_registry_keeps_insertion_order(registry):
    assert [p.name for p in registry] == ["alpha", "beta", "gamma"]
    assert len(registry) == 3


def test_registry_contains(registry):
    assert "beta" in registry
    assert "delta" not in registry


def test_registry_find(registry):
    assert registry.find("gamma").created_by == "ana"
    assert registry.find("delta") is None


def test_registry_find_first_duplicate():
    reg = ProjectRegistry()
    first = Project("dup", "2024-01-01", "a")
    reg.add(first)
    reg.add(Project("dup", "2024-01-02", "b"))
    assert reg.find("dup") is first


def test_registry_delete(registry):
    removed = registry.delete("beta")
    assert removed.name == "beta"
    assert [p.name for p in registry] == ["alpha", "gamma"]
    assert "beta" not in registry


def test_registry_delete_missing_raises(registry):
    with pytest.raises(KeyError):
        registry.delete("delta")
    assert len(registry) == 3


def test_empty_registry():
    reg = ProjectRegistry()
    assert len(reg) == 0
    assert list(reg) == []
    assert reg.find("x") is None


def test_show_all_writes_projects_and_tasks(registry):
    registry.find("alpha").add_task("t1", "2024-01-05", "luis", 1)
    stream = io.StringIO()
    registry.show_all(stream)
    lines = stream.getvalue().splitlines()
    assert lines[0] == registry.find("alpha").describe()
    assert lines[1] == registry.find("alpha").tasks[0].describe()
    assert lines[2] == registry.find("beta").describe()
    assert len(lines) == 4


def test_show_all_empty_writes_nothing():
    stream = io.StringIO()
    ProjectRegistry().show_all(stream)
    assert stream.getvalue() == ""