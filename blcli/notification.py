"""User notifications: counting, listing, marking read and resetting."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol

Params = list[tuple[str, str]]


class NotificationApi(Protocol):
    def count_notifications(self) -> Mapping[str, Any]: ...

    def get_notifications(self, params: Params) -> list[Mapping[str, Any]]: ...

    def read_notification(self, notification_id: int) -> None: ...

    def reset_unread_notifications(self) -> Mapping[str, Any]: ...


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class NotificationCountArgs:
    json: bool = False


@dataclass(frozen=True)
class NotificationListArgs:
    json: bool = False
    min_id: Optional[int] = None
    max_id: Optional[int] = None
    count: int = 20
    order: Optional[str] = None
    sender_id: Optional[int] = None
    unread: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.count <= 100:
            raise ValueError("count must be between 1 and 100")
        if self.min_id is not None and self.max_id is not None and self.min_id > self.max_id:
            raise ValueError("min-id must be less than or equal to max-id")


@dataclass(frozen=True)
class NotificationReadArgs:
    id: int


def count_notifications(args: NotificationCountArgs, api: NotificationApi) -> None:
    """Print the number of notifications."""
    result = api.count_notifications()
    if args.json:
        print(_dump(result))
    else:
        print(result["count"])


def build_list_params(args: NotificationListArgs) -> Params:
    """Query parameters for the notification list endpoint."""
    params: Params = []
    if args.min_id is not None:
        params.append(("minId", str(args.min_id)))
    if args.max_id is not None:
        params.append(("maxId", str(args.max_id)))
    params.append(("count", str(args.count)))
    if args.order is not None:
        params.append(("order", args.order))
    if args.sender_id is not None:
        params.append(("senderId", str(args.sender_id)))
    return params


def format_notification(notification: Mapping[str, Any]) -> str:
    """One-line summary of a notification."""
    issue = notification.get("issue")
    issue_key = issue["issueKey"] if issue else "-"
    read = "true" if notification["alreadyRead"] else "false"
    return "[{}] reason={} project={} issue={} read={} created={}".format(
        notification["id"],
        notification["reason"],
        notification["project"]["projectKey"],
        issue_key,
        read,
        notification["created"],
    )


def list_notifications(args: NotificationListArgs, api: NotificationApi) -> None:
    """Print notifications, optionally only the unread ones."""
    notifications = api.get_notifications(build_list_params(args))
    if args.unread:
        notifications = [n for n in notifications if not n["alreadyRead"]]
    if args.json:
        print(_dump(notifications))
    else:
        for notification in notifications:
            print(format_notification(notification))


def read_notification(args: NotificationReadArgs, api: NotificationApi) -> None:
    """Mark one notification as read."""
    api.read_notification(args.id)


def reset_unread(api: NotificationApi) -> None:
    """Reset the unread notification count."""
    api.reset_unread_notifications()
    print("Unread count reset.")