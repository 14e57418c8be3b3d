"""Creating, deleting and updating issues."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol

from blcli.issue_query import print_issue

Params = list[tuple[str, str]]


class IssueEditApi(Protocol):
    def create_issue(self, params: Params) -> Mapping[str, Any]: ...

    def delete_issue(self, key: str) -> Mapping[str, Any]: ...

    def update_issue(self, key: str, params: Params) -> Mapping[str, Any]: ...


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class IssueCreateArgs:
    project_id: int
    summary: str
    issue_type_id: int
    priority_id: int
    description: Optional[str] = None
    assignee_id: Optional[int] = None
    due_date: Optional[str] = None
    json: bool = False


@dataclass(frozen=True)
class IssueDeleteArgs:
    key: str
    json: bool = False


@dataclass(frozen=True)
class IssueUpdateArgs:
    key: str
    summary: Optional[str] = None
    description: Optional[str] = None
    status_id: Optional[int] = None
    priority_id: Optional[int] = None
    assignee_id: Optional[int] = None
    due_date: Optional[str] = None
    comment: Optional[str] = None
    json: bool = False

    def __post_init__(self) -> None:
        fields = (
            self.summary,
            self.description,
            self.status_id,
            self.priority_id,
            self.assignee_id,
            self.due_date,
            self.comment,
        )
        if all(value is None for value in fields):
            raise ValueError("At least one field must be specified for update")


def _optional(pairs: Params, name: str, value: Any) -> None:
    if value is not None:
        pairs.append((name, str(value)))


def build_create_params(args: IssueCreateArgs) -> Params:
    """Form parameters for creating an issue."""
    params: Params = [
        ("projectId", str(args.project_id)),
        ("summary", args.summary),
        ("issueTypeId", str(args.issue_type_id)),
        ("priorityId", str(args.priority_id)),
    ]
    _optional(params, "description", args.description)
    _optional(params, "assigneeId", args.assignee_id)
    _optional(params, "dueDate", args.due_date)
    return params


def create_issue(args: IssueCreateArgs, api: IssueEditApi) -> None:
    """Create an issue and print it."""
    issue = api.create_issue(build_create_params(args))
    if args.json:
        print(_dump(issue))
    else:
        print_issue(issue)


def delete_issue(args: IssueDeleteArgs, api: IssueEditApi) -> None:
    """Delete an issue and report its key."""
    issue = api.delete_issue(args.key)
    if args.json:
        print(_dump(issue))
    else:
        print(f"Deleted: {issue['issueKey']}")


def build_update_params(args: IssueUpdateArgs) -> Params:
    """Form parameters for updating an issue."""
    params: Params = []
    _optional(params, "summary", args.summary)
    _optional(params, "description", args.description)
    _optional(params, "statusId", args.status_id)
    _optional(params, "priorityId", args.priority_id)
    _optional(params, "assigneeId", args.assignee_id)
    _optional(params, "dueDate", args.due_date)
    _optional(params, "comment", args.comment)
    return params


def update_issue(args: IssueUpdateArgs, api: IssueEditApi) -> None:
    """Update an issue and print the result."""
    issue = api.update_issue(args.key, build_update_params(args))
    if args.json:
        print(_dump(issue))
    else:
        print_issue(issue)