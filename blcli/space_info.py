"""Space information: the space itself and its licence."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Protocol


class SpaceInfoApi(Protocol):
    def get_space(self) -> Mapping[str, Any]: ...

    def get_space_licence(self) -> Mapping[str, Any]: ...


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class SpaceLicenceArgs:
    json: bool = False


@dataclass(frozen=True)
class SpaceShowArgs:
    json: bool = False


def format_licence_text(licence: Mapping[str, Any]) -> str:
    """Human-readable form of the space licence."""
    contract = licence.get("contractType")
    if contract is None:
        contract = "(not set)"
    return (
        f"Contract:  {contract}\n"
        f"Storage:   {licence['storageUsage']} / {licence['storageLimit']} bytes\n"
        f"Start:     {licence['startDate']}"
    )


def show_licence(args: SpaceLicenceArgs, api: SpaceInfoApi) -> None:
    """Fetch the space licence and print it."""
    try:
        licence = api.get_space_licence()
    except Exception as exc:
        raise RuntimeError("Failed to fetch space licence") from exc
    if args.json:
        print(_dump(licence))
    else:
        print(format_licence_text(licence))


def format_space_text(space: Mapping[str, Any]) -> str:
    """Human-readable form of the space."""
    return (
        f"Space key:  {space['spaceKey']}\n"
        f"Name:       {space['name']}\n"
        f"Language:   {space['lang']}\n"
        f"Timezone:   {space['timezone']}\n"
        f"Formatting: {space['textFormattingRule']}\n"
        f"Created:    {space['created']}\n"
        f"Updated:    {space['updated']}"
    )


def show_space(args: SpaceShowArgs, api: SpaceInfoApi) -> None:
    """Fetch the space and print it."""
    space = api.get_space()
    if args.json:
        print(_dump(space))
    else:
        print(format_space_text(space))