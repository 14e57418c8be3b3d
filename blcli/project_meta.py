"""Project metadata: categories, issue types, statuses, users and versions."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Protocol


class ProjectMetaApi(Protocol):
    def get_project_categories(self, key: str) -> list[Mapping[str, Any]]: ...

    def get_project_issue_types(self, key: str) -> list[Mapping[str, Any]]: ...

    def get_project_statuses(self, key: str) -> list[Mapping[str, Any]]: ...

    def get_project_users(self, key: str) -> list[Mapping[str, Any]]: ...

    def get_project_versions(self, key: str) -> list[Mapping[str, Any]]: ...


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _print_all(items, formatter, as_json: bool) -> None:
    if as_json:
        print(_dump(items))
    else:
        for item in items:
            print(formatter(item))


@dataclass(frozen=True)
class ProjectCategoryListArgs:
    key: str
    json: bool = False


@dataclass(frozen=True)
class ProjectIssueTypeListArgs:
    key: str
    json: bool = False


@dataclass(frozen=True)
class ProjectStatusListArgs:
    key: str
    json: bool = False


@dataclass(frozen=True)
class ProjectUserListArgs:
    key: str
    json: bool = False


@dataclass(frozen=True)
class ProjectVersionListArgs:
    key: str
    json: bool = False


def format_category_row(category: Mapping[str, Any]) -> str:
    """One-line summary of a category."""
    return f"[{category['id']}] {category['name']}"


def list_categories(args: ProjectCategoryListArgs, api: ProjectMetaApi) -> None:
    """Print the categories of a project."""
    _print_all(api.get_project_categories(args.key), format_category_row, args.json)


def format_issue_type_row(issue_type: Mapping[str, Any]) -> str:
    """One-line summary of an issue type."""
    return f"[{issue_type['id']}] {issue_type['name']}"


def list_issue_types(args: ProjectIssueTypeListArgs, api: ProjectMetaApi) -> None:
    """Print the issue types of a project."""
    _print_all(api.get_project_issue_types(args.key), format_issue_type_row, args.json)


def format_status_row(status: Mapping[str, Any]) -> str:
    """One-line summary of a status."""
    return f"[{status['id']}] {status['name']}"


def list_statuses(args: ProjectStatusListArgs, api: ProjectMetaApi) -> None:
    """Print the statuses of a project."""
    _print_all(api.get_project_statuses(args.key), format_status_row, args.json)


def format_user_row(user: Mapping[str, Any]) -> str:
    """One-line summary of a project member, by login id when it has one."""
    user_id = user.get("userId")
    label = user_id if user_id else user["id"]
    return f"[{label}] {user['name']}"


def list_users(args: ProjectUserListArgs, api: ProjectMetaApi) -> None:
    """Print the members of a project."""
    _print_all(api.get_project_users(args.key), format_user_row, args.json)


def format_version_row(version: Mapping[str, Any]) -> str:
    """One-line summary of a version with its dates."""
    start = version.get("startDate")
    end = version.get("releaseDueDate")
    if start is not None and end is not None:
        dates = f" ({start} → {end})"
    elif start is not None:
        dates = f" (from {start})"
    elif end is not None:
        dates = f" (until {end})"
    else:
        dates = ""
    archived = " [archived]" if version.get("archived") else ""
    return f"[{version['id']}] {version['name']}{dates}{archived}"


def list_versions(args: ProjectVersionListArgs, api: ProjectMetaApi) -> None:
    """Print the versions (milestones) of a project."""
    _print_all(api.get_project_versions(args.key), format_version_row, args.json)