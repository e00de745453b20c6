[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskmgr"
version = "1.0.0"
description = "A small task manager with simple and timed tasks, a plain-text file format and an interactive console menu."
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "task manager", "console", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
taskmgr = "taskmgr.console:main"

[tool.hatch.build.targets.wheel]
packages = ["taskmgr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
