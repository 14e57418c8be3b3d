[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blcli"
version = "0.5.0"
description = "Command handlers for issues, comments, notifications, projects, teams and spaces of an issue tracker"
requires-python = ">=3.10"
dependencies = []
keywords = ["issue-tracker", "project-management", "notifications", "command-handlers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Bug Tracking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
