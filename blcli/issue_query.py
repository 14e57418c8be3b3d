"""Issue queries: counting, listing and showing issues."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Protocol

Params = list[tuple[str, str]]

_BOLD = "1"
_YELLOW = "33"
_CYAN = "36"


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


class IssueQueryApi(Protocol):
    def count_issues(self, params: Params) -> Mapping[str, Any]: ...

    def get_issues(self, params: Params) -> list[Mapping[str, Any]]: ...

    def get_issue(self, key: str) -> Mapping[str, Any]: ...


class ParentChild(Enum):
    """Parent-child relationship filter for issue list and count."""

    ALL = 0
    NOT_CHILD = 1
    CHILD = 2
    STANDALONE = 3
    PARENT = 4

    @property
    def api_value(self) -> str:
        return str(self.value)


def _filter_params(
    project_ids: Iterable[int],
    status_ids: Iterable[int],
    assignee_ids: Iterable[int],
    issue_type_ids: Iterable[int],
    category_ids: Iterable[int],
    milestone_ids: Iterable[int],
    parent_child: Optional[ParentChild],
    keyword: Optional[str],
) -> Params:
    params: Params = []
    for name, ids in (
        ("projectId[]", project_ids),
        ("statusId[]", status_ids),
        ("assigneeId[]", assignee_ids),
        ("issueTypeId[]", issue_type_ids),
        ("categoryId[]", category_ids),
        ("milestoneId[]", milestone_ids),
    ):
        params.extend((name, str(i)) for i in ids)
    if parent_child is not None:
        params.append(("parentChild", parent_child.api_value))
    if keyword is not None:
        params.append(("keyword", keyword))
    return params


@dataclass(frozen=True)
class IssueCountArgs:
    project_ids: tuple[int, ...] = ()
    status_ids: tuple[int, ...] = ()
    assignee_ids: tuple[int, ...] = ()
    issue_type_ids: tuple[int, ...] = ()
    category_ids: tuple[int, ...] = ()
    milestone_ids: tuple[int, ...] = ()
    parent_child: Optional[ParentChild] = None
    keyword: Optional[str] = None
    json: bool = False


@dataclass(frozen=True)
class IssueListArgs:
    project_ids: tuple[int, ...] = ()
    status_ids: tuple[int, ...] = ()
    assignee_ids: tuple[int, ...] = ()
    issue_type_ids: tuple[int, ...] = ()
    category_ids: tuple[int, ...] = ()
    milestone_ids: tuple[int, ...] = ()
    parent_child: Optional[ParentChild] = None
    keyword: Optional[str] = None
    count: int = 20
    offset: int = 0
    json: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.count <= 100:
            raise ValueError("--count must be between 1 and 100")


@dataclass(frozen=True)
class IssueShowArgs:
    key: str
    json: bool = False


def build_count_params(args: IssueCountArgs) -> Params:
    """Query parameters for the issue count endpoint."""
    return _filter_params(
        args.project_ids,
        args.status_ids,
        args.assignee_ids,
        args.issue_type_ids,
        args.category_ids,
        args.milestone_ids,
        args.parent_child,
        args.keyword,
    )


def count_issues(args: IssueCountArgs, api: IssueQueryApi) -> None:
    """Print the number of issues matching the filters."""
    result = api.count_issues(build_count_params(args))
    if args.json:
        print(_dump(result))
    else:
        print(result["count"])


def build_list_params(args: IssueListArgs) -> Params:
    """Query parameters for the issue list endpoint."""
    params = _filter_params(
        args.project_ids,
        args.status_ids,
        args.assignee_ids,
        args.issue_type_ids,
        args.category_ids,
        args.milestone_ids,
        args.parent_child,
        args.keyword,
    )
    params.append(("count", str(args.count)))
    params.append(("offset", str(args.offset)))
    return params


def _assignee_name(issue: Mapping[str, Any]) -> str:
    assignee = issue.get("assignee")
    return assignee["name"] if assignee else "-"


def format_issue_row(issue: Mapping[str, Any]) -> str:
    """One-line summary of an issue."""
    return "[{}] {} ({}, {}, {})".format(
        _paint(issue["issueKey"], _CYAN, _BOLD),
        issue["summary"],
        _paint(issue["status"]["name"], _YELLOW),
        issue["priority"]["name"],
        _assignee_name(issue),
    )


def list_issues(args: IssueListArgs, api: IssueQueryApi) -> None:
    """Print the issues matching the filters."""
    issues = api.get_issues(build_list_params(args))
    if args.json:
        print(_dump(issues))
    else:
        for issue in issues:
            print(format_issue_row(issue))


def print_issue(issue: Mapping[str, Any]) -> None:
    """Print the details of one issue."""
    print(f"{_paint(issue['issueKey'], _CYAN, _BOLD)} {_paint(issue['summary'], _BOLD)}")
    print(f"  Status:     {_paint(issue['status']['name'], _YELLOW)}")
    print(f"  Priority:   {issue['priority']['name']}")
    print(f"  Type:       {issue['issueType']['name']}")
    print(f"  Assignee:   {_assignee_name(issue)}")
    due = issue.get("dueDate")
    if due is not None:
        print(f"  Due:        {due}")
    description = issue.get("description")
    if description:
        print(f"  Description:\n{description}")
    print(f"  Created:    {issue['created']}")
    print(f"  Updated:    {issue['updated']}")


def show_issue(args: IssueShowArgs, api: IssueQueryApi) -> None:
    """Fetch one issue and print it."""
    issue = api.get_issue(args.key)
    if args.json:
        print(_dump(issue))
    else:
        print_issue(issue)