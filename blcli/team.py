"""Teams: listing and showing teams with their members."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol

Params = list[tuple[str, str]]


class TeamApi(Protocol):
    def get_teams(self, params: Params) -> list[Mapping[str, Any]]: ...

    def get_team(self, team_id: int) -> Mapping[str, Any]: ...


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
class TeamListArgs:
    json: bool = False
    count: int = 20
    order: Optional[str] = None
    offset: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.count <= 100:
            raise ValueError("count must be between 1 and 100")


@dataclass(frozen=True)
class TeamShowArgs:
    id: int
    json: bool = False


def build_list_params(args: TeamListArgs) -> Params:
    """Query parameters for the team list endpoint."""
    params: Params = [("count", str(args.count)), ("offset", str(args.offset))]
    if args.order is not None:
        params.append(("order", args.order))
    return params


def format_team_row(team: Mapping[str, Any]) -> str:
    """One-line summary of a team."""
    members = team.get("members") or []
    return f"[{team['id']}] {team['name']} ({len(members)} members)"


def list_teams(args: TeamListArgs, api: TeamApi) -> None:
    """Print the teams of the space."""
    teams = api.get_teams(build_list_params(args))
    if args.json:
        print(_dump(teams))
    else:
        for team in teams:
            print(format_team_row(team))


def format_team_text(team: Mapping[str, Any]) -> str:
    """Detailed description of a team and its members."""
    members = "\n".join(
        f"    [{member['id']}] {member['name']}" for member in team.get("members") or []
    )
    members_section = members or "    (none)"
    return (
        f"ID:      {_paint(str(team['id']), '1')}\n"
        f"Name:    {team['name']}\n"
        f"Created: {team['created']}\n"
        f"Updated: {team['updated']}\n"
        f"Members:\n{members_section}"
    )


def show_team(args: TeamShowArgs, api: TeamApi) -> None:
    """Fetch one team and print it."""
    team = api.get_team(args.id)
    if args.json:
        print(_dump(team))
    else:
        print(format_team_text(team))