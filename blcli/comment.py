"""Issue comments: adding, counting, deleting, listing, showing and updating."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from typing import Any, Mapping, Protocol

Params = list[tuple[str, str]]


class CommentApi(Protocol):
    def add_issue_comment(self, key: str, params: Params) -> Mapping[str, Any]: ...

    def count_issue_comments(self, key: str) -> Mapping[str, Any]: ...

    def delete_issue_comment(self, key: str, comment_id: int) -> Mapping[str, Any]: ...

    def get_issue_comments(self, key: str) -> list[Mapping[str, Any]]: ...

    def get_issue_comment(self, key: str, comment_id: int) -> Mapping[str, Any]: ...

    def update_issue_comment(
        self, key: str, comment_id: int, params: Params
    ) -> Mapping[str, Any]: ...


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
class IssueCommentAddArgs:
    key: str
    content: str
    json: bool = False


@dataclass(frozen=True)
class IssueCommentCountArgs:
    key: str
    json: bool = False


@dataclass(frozen=True)
class IssueCommentDeleteArgs:
    key: str
    comment_id: int
    json: bool = False


@dataclass(frozen=True)
class IssueCommentListArgs:
    key: str
    json: bool = False


@dataclass(frozen=True)
class IssueCommentShowArgs:
    key: str
    comment_id: int
    json: bool = False


@dataclass(frozen=True)
class IssueCommentUpdateArgs:
    key: str
    comment_id: int
    content: str
    json: bool = False


def format_comment_row(comment: Mapping[str, Any]) -> str:
    """One-line summary of a comment."""
    content = comment.get("content")
    if content is None:
        content = "(no content)"
    return "[{}] {} ({}): {}".format(
        _paint(str(comment["id"]), "36", "1"),
        comment["createdUser"]["name"],
        comment["created"],
        content,
    )


def _print_comment(comment: Mapping[str, Any], as_json: bool) -> None:
    if as_json:
        print(_dump(comment))
    else:
        print(format_comment_row(comment))


def add_comment(args: IssueCommentAddArgs, api: CommentApi) -> None:
    """Add a comment to an issue and print it."""
    comment = api.add_issue_comment(args.key, [("content", args.content)])
    _print_comment(comment, args.json)


def count_comments(args: IssueCommentCountArgs, api: CommentApi) -> None:
    """Print the number of comments on an issue."""
    result = api.count_issue_comments(args.key)
    if args.json:
        print(_dump(result))
    else:
        print(result["count"])


def delete_comment(args: IssueCommentDeleteArgs, api: CommentApi) -> None:
    """Delete a comment from an issue and report it."""
    comment = api.delete_issue_comment(args.key, args.comment_id)
    if args.json:
        print(_dump(comment))
    else:
        print(f"Deleted comment {comment['id']} from {args.key}")


def list_comments(args: IssueCommentListArgs, api: CommentApi) -> None:
    """Print the comments of an issue."""
    comments = api.get_issue_comments(args.key)
    if args.json:
        print(_dump(comments))
    else:
        for comment in comments:
            print(format_comment_row(comment))


def show_comment(args: IssueCommentShowArgs, api: CommentApi) -> None:
    """Fetch one comment and print it."""
    comment = api.get_issue_comment(args.key, args.comment_id)
    _print_comment(comment, args.json)


def update_comment(args: IssueCommentUpdateArgs, api: CommentApi) -> None:
    """Change the content of a comment and print the result."""
    comment = api.update_issue_comment(
        args.key, args.comment_id, [("content", args.content)]
    )
    _print_comment(comment, args.json)