[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "projectdesk"
version = "0.1.0"
description = "Keep a list of projects and their tasks from an interactive console menu and save it to a text report."
requires-python = ">=3.10"
dependencies = []
keywords = ["projects", "tasks", "todo", "console", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
projectdesk = "projectdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["projectdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
