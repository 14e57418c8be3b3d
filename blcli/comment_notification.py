"""Notifications attached to issue comments: listing and adding."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Protocol

Params = list[tuple[str, str]]


class CommentNotificationApi(Protocol):
    def get_issue_comment_notifications(
        self, key: str, comment_id: int
    ) -> list[Mapping[str, Any]]: ...

    def add_issue_comment_notifications(
        self, key: str, comment_id: int, params: Params
    ) -> list[Mapping[str, Any]]: ...


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class IssueCommentNotificationAddArgs:
    key: str
    comment_id: int
    notified_user_ids: tuple[int, ...]
    json: bool = False

    def __post_init__(self) -> None:
        ids: Iterable[int] = self.notified_user_ids
        object.__setattr__(self, "notified_user_ids", tuple(ids))
        if not self.notified_user_ids:
            raise ValueError("at least one --notified-user-id is required")


@dataclass(frozen=True)
class IssueCommentNotificationListArgs:
    key: str
    comment_id: int
    json: bool = False


def format_notification_row(notification: Mapping[str, Any]) -> str:
    """One-line summary of a comment notification."""
    return f"[{notification['id']}] {notification['user']['name']}"


def _print_all(notifications: list[Mapping[str, Any]], as_json: bool) -> None:
    if as_json:
        print(_dump(notifications))
    else:
        for notification in notifications:
            print(format_notification_row(notification))


def build_add_params(args: IssueCommentNotificationAddArgs) -> Params:
    """Form parameters naming the users to notify."""
    return [("notifiedUserId[]", str(user_id)) for user_id in args.notified_user_ids]


def add_notifications(
    args: IssueCommentNotificationAddArgs, api: CommentNotificationApi
) -> None:
    """Notify users about a comment and print the resulting notifications."""
    notifications = api.add_issue_comment_notifications(
        args.key, args.comment_id, build_add_params(args)
    )
    _print_all(notifications, args.json)


def list_notifications(
    args: IssueCommentNotificationListArgs, api: CommentNotificationApi
) -> None:
    """Print the notifications of a comment."""
    notifications = api.get_issue_comment_notifications(args.key, args.comment_id)
    _print_all(notifications, args.json)