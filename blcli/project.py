"""Projects: listing all projects and showing one."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from typing import Any, Mapping, Protocol


class ProjectApi(Protocol):
    def get_projects(self) -> list[Mapping[str, Any]]: ...

    def get_project(self, key: str) -> Mapping[str, Any]: ...


def _color_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: str, *codes: str) -> str:
    if not codes or not _color_enabled():
        return text
    return f"\033[{';'.join(codes)}m{text}\033[0m"


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class ProjectListArgs:
    json: bool = False


@dataclass(frozen=True)
class ProjectShowArgs:
    key: str
    json: bool = False


def format_project_row(project: Mapping[str, Any]) -> str:
    """One-line summary of a project."""
    archived = f" {_paint('[archived]', '33')}" if project.get("archived") else ""
    return f"[{_paint(project['projectKey'], '36', '1')}] {project['name']}{archived}"


def list_projects(args: ProjectListArgs, api: ProjectApi) -> None:
    """Print all projects."""
    projects = api.get_projects()
    if args.json:
        print(_dump(projects))
    else:
        for project in projects:
            print(format_project_row(project))


def format_project_detail(project: Mapping[str, Any]) -> str:
    """Detailed description of a project."""
    archived = "true" if project.get("archived") else "false"
    return (
        f"ID:         {project['id']}\n"
        f"Key:        {project['projectKey']}\n"
        f"Name:       {project['name']}\n"
        f"Formatting: {project['textFormattingRule']}\n"
        f"Archived:   {archived}"
    )


def show_project(args: ProjectShowArgs, api: ProjectApi) -> None:
    """Fetch one project and print it."""
    project = api.get_project(args.key)
    if args.json:
        print(_dump(project))
    else:
        print(format_project_detail(project))