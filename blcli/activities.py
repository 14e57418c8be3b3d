"""Recent activities of a project or of the whole space."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Protocol, Union

Params = list[tuple[str, str]]


class ActivityApi(Protocol):
    def get_project_activities(
        self, key: str, params: Params
    ) -> list[Mapping[str, Any]]: ...

    def get_space_activities(self, params: Params) -> list[Mapping[str, Any]]: ...


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _validate(count: int, min_id: Optional[int], max_id: Optional[int]) -> None:
    if not 1 <= count <= 100:
        raise ValueError("count must be between 1 and 100")
    if min_id is not None and max_id is not None and min_id > max_id:
        raise ValueError("min-id must be less than or equal to max-id")


@dataclass(frozen=True)
class ProjectActivitiesArgs:
    key: str
    json: bool = False
    activity_type_ids: tuple[int, ...] = ()
    min_id: Optional[int] = None
    max_id: Optional[int] = None
    count: int = 20
    order: Optional[str] = None

    def __post_init__(self) -> None:
        ids: Iterable[int] = self.activity_type_ids
        object.__setattr__(self, "activity_type_ids", tuple(ids))
        _validate(self.count, self.min_id, self.max_id)


@dataclass(frozen=True)
class SpaceActivitiesArgs:
    json: bool = False
    activity_type_ids: tuple[int, ...] = ()
    min_id: Optional[int] = None
    max_id: Optional[int] = None
    count: int = 20
    order: Optional[str] = None

    def __post_init__(self) -> None:
        ids: Iterable[int] = self.activity_type_ids
        object.__setattr__(self, "activity_type_ids", tuple(ids))
        _validate(self.count, self.min_id, self.max_id)


def build_activity_params(args: Union[ProjectActivitiesArgs, SpaceActivitiesArgs]) -> Params:
    """Query parameters for an activity endpoint."""
    params: Params = [("activityTypeId[]", str(i)) for i in args.activity_type_ids]
    if args.min_id is not None:
        params.append(("minId", str(args.min_id)))
    if args.max_id is not None:
        params.append(("maxId", str(args.max_id)))
    params.append(("count", str(args.count)))
    if args.order is not None:
        params.append(("order", args.order))
    return params


def format_activity_text(activity: Mapping[str, Any]) -> str:
    """One-line summary of an activity."""
    project = activity.get("project")
    project_key = project["projectKey"] if project else "-"
    return "[{}] type={} project={} user={} created={}".format(
        activity["id"],
        activity["type"],
        project_key,
        activity["createdUser"]["name"],
        activity["created"],
    )


def _print_all(activities: list[Mapping[str, Any]], as_json: bool) -> None:
    if as_json:
        print(_dump(activities))
    else:
        for activity in activities:
            print(format_activity_text(activity))


def project_activities(args: ProjectActivitiesArgs, api: ActivityApi) -> None:
    """Print the recent activities of a project."""
    activities = api.get_project_activities(args.key, build_activity_params(args))
    _print_all(activities, args.json)


def space_activities(args: SpaceActivitiesArgs, api: ActivityApi) -> None:
    """Print the recent activities of the space."""
    activities = api.get_space_activities(build_activity_params(args))
    _print_all(activities, args.json)