"""Listing the attachments of an issue."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from typing import Any, Mapping, Protocol


class AttachmentApi(Protocol):
    def get_issue_attachments(self, key: str) -> list[Mapping[str, Any]]: ...


def _color_enabled() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: str, *codes: str) -> str:
    if not codes or not _color_enabled():
        return text
    return f"\033[{';'.join(codes)}m{text}\033[0m"


@dataclass(frozen=True)
class IssueAttachmentListArgs:
    key: str
    json: bool = False


def format_attachment_row(attachment: Mapping[str, Any]) -> str:
    """One-line summary of an attachment."""
    return "[{}] {} ({} bytes)".format(
        _paint(str(attachment["id"]), "36", "1"),
        attachment["name"],
        attachment["size"],
    )


def list_attachments(args: IssueAttachmentListArgs, api: AttachmentApi) -> None:
    """Print the attachments of an issue."""
    attachments = api.get_issue_attachments(args.key)
    if args.json:
        print(json.dumps(attachments, indent=2, ensure_ascii=False))
    else:
        for attachment in attachments:
            print(format_attachment_row(attachment))