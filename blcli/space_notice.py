"""Showing and updating the space notification."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Protocol


class SpaceNoticeApi(Protocol):
    def get_space_notification(self) -> Mapping[str, Any]: ...

    def put_space_notification(self, content: str) -> Mapping[str, Any]: ...


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class SpaceNotificationArgs:
    json: bool = False


@dataclass(frozen=True)
class SpaceUpdateNotificationArgs:
    content: str
    json: bool = False


def format_notification_text(notification: Mapping[str, Any]) -> str:
    """Human-readable form of the space notification."""
    updated = notification.get("updated")
    if updated is None:
        updated = "(not set)"
    content = notification.get("content") or ""
    if not content.strip():
        content = "(no notification set)"
    return f"Updated: {updated}\n\n{content}"


def _print(notification: Mapping[str, Any], as_json: bool) -> None:
    if as_json:
        print(_dump(notification))
    else:
        print(format_notification_text(notification))


def show_notification(args: SpaceNotificationArgs, api: SpaceNoticeApi) -> None:
    """Fetch the space notification and print it."""
    _print(api.get_space_notification(), args.json)


def update_notification(args: SpaceUpdateNotificationArgs, api: SpaceNoticeApi) -> None:
    """Replace the space notification and print the result."""
    _print(api.put_space_notification(args.content), args.json)