"""Disk usage of the space and of single projects."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Protocol


class DiskUsageApi(Protocol):
    def get_space_disk_usage(self) -> Mapping[str, Any]: ...

    def get_project_disk_usage(self, key: str) -> Mapping[str, Any]: ...


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class SpaceDiskUsageArgs:
    json: bool = False


@dataclass(frozen=True)
class ProjectDiskUsageArgs:
    key: str
    json: bool = False


def format_space_disk_usage(usage: Mapping[str, Any]) -> str:
    """Human-readable summary of the space disk usage."""
    details = usage.get("details") or []
    return (
        f"Capacity:   {usage['capacity']} bytes\n"
        f"Issue:      {usage['issue']} bytes\n"
        f"Wiki:       {usage['wiki']} bytes\n"
        f"File:       {usage['file']} bytes\n"
        f"Subversion: {usage['subversion']} bytes\n"
        f"Git:        {usage['git']} bytes\n"
        f"Git LFS:    {usage['gitLFS']} bytes\n"
        f"Details:    {len(details)} project(s) — use --json for breakdown"
    )


def format_project_disk_usage(usage: Mapping[str, Any]) -> str:
    """Human-readable summary of a project's disk usage."""
    return (
        f"Issue:      {usage['issue']} bytes\n"
        f"Wiki:       {usage['wiki']} bytes\n"
        f"Document:   {usage['document']} bytes\n"
        f"File:       {usage['file']} bytes\n"
        f"Subversion: {usage['subversion']} bytes\n"
        f"Git:        {usage['git']} bytes\n"
        f"Git LFS:    {usage['gitLFS']} bytes"
    )


def space_disk_usage(args: SpaceDiskUsageArgs, api: DiskUsageApi) -> None:
    """Fetch the space disk usage and print it."""
    usage = api.get_space_disk_usage()
    if args.json:
        print(_dump(usage))
    else:
        print(format_space_disk_usage(usage))


def project_disk_usage(args: ProjectDiskUsageArgs, api: DiskUsageApi) -> None:
    """Fetch a project's disk usage and print it."""
    usage = api.get_project_disk_usage(args.key)
    if args.json:
        print(_dump(usage))
    else:
        print(format_project_disk_usage(usage))