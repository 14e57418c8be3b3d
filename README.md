# blcli

Command handlers for an issue-tracker client: issues, issue comments and
their notifications, issue attachments, the user's notifications, projects
and their metadata, teams, and space information.

Each command is an arguments object (a frozen dataclass) and a function
that takes those arguments and an API object. The API object is anything
that provides the methods the command calls, such as `get_issues`,
`count_issues`, `get_issue` or `get_project`. Each module declares the
methods it needs as a `typing.Protocol` (for example
`blcli.issue_query.IssueQueryApi`). The API methods take query or form
parameters as a list of `(name, value)` string pairs and return mappings
that use the service's JSON field names (`issueKey`, `createdUser`,
`projectKey`, and so on).

Results are printed to standard output, either as text or, when the
arguments' `json` flag is set, as JSON indented by two spaces. Some text
output is coloured with ANSI codes. This only happens when standard output
is a terminal and `NO_COLOR` is not set.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `blcli.issue_query`: `ParentChild`, `IssueCountArgs`, `IssueListArgs`,
  `IssueShowArgs`, `build_count_params`, `count_issues`,
  `build_list_params`, `list_issues`, `format_issue_row`, `print_issue`,
  `show_issue`.
- `blcli.issue_edit`: `IssueCreateArgs`, `IssueDeleteArgs`,
  `IssueUpdateArgs`, `build_create_params`, `create_issue`,
  `delete_issue`, `build_update_params`, `update_issue`.
- `blcli.issue_attachment`: `IssueAttachmentListArgs`,
  `format_attachment_row`, `list_attachments`.
- `blcli.comment`: argument classes and handlers for adding, counting,
  deleting, listing, showing and updating issue comments
  (`add_comment`, `count_comments`, `delete_comment`, `list_comments`,
  `show_comment`, `update_comment`), plus `format_comment_row`.
- `blcli.comment_notification`: `IssueCommentNotificationAddArgs`,
  `IssueCommentNotificationListArgs`, `build_add_params`,
  `add_notifications`, `list_notifications`, `format_notification_row`.
- `blcli.notification`: `NotificationCountArgs`, `NotificationListArgs`,
  `NotificationReadArgs`, `count_notifications`, `build_list_params`,
  `list_notifications` (with an `unread` filter), `format_notification`,
  `read_notification`, `reset_unread`.
- `blcli.activities`: `ProjectActivitiesArgs`, `SpaceActivitiesArgs`,
  `build_activity_params`, `format_activity_text`, `project_activities`,
  `space_activities`.
- `blcli.project`: `ProjectListArgs`, `ProjectShowArgs`,
  `format_project_row`, `list_projects`, `format_project_detail`,
  `show_project`.
- `blcli.project_meta`: list handlers and row formatters for a project's
  categories, issue types, statuses, users and versions.
- `blcli.team`: `TeamListArgs`, `TeamShowArgs`, `build_list_params`,
  `list_teams`, `format_team_row`, `format_team_text`, `show_team`.
- `blcli.space_info`: `SpaceShowArgs`, `SpaceLicenceArgs`,
  `format_space_text`, `show_space`, `format_licence_text`,
  `show_licence`.
- `blcli.space_notice`: `SpaceNotificationArgs`,
  `SpaceUpdateNotificationArgs`, `format_notification_text`,
  `show_notification`, `update_notification`.
- `blcli.disk_usage`: `SpaceDiskUsageArgs`, `ProjectDiskUsageArgs`,
  `format_space_disk_usage`, `format_project_disk_usage`,
  `space_disk_usage`, `project_disk_usage`.

## Example

```python
from blcli.issue_query import IssueListArgs, ParentChild, build_list_params, list_issues

args = IssueListArgs(project_ids=(1,), parent_child=ParentChild.NOT_CHILD,
                     keyword="login", count=20)
build_list_params(args)
# [('projectId[]', '1'), ('parentChild', '1'), ('keyword', 'login'),
#  ('count', '20'), ('offset', '0')]

list_issues(args, api)   # api provides get_issues(params)
```

## Errors

Arguments are checked when they are built. Each of these raises
`ValueError`:

- a `count` outside 1–100 in `IssueListArgs`, `NotificationListArgs`,
  `ProjectActivitiesArgs`, `SpaceActivitiesArgs` or `TeamListArgs`;
- a `min_id` greater than `max_id` in `NotificationListArgs` or the
  activity arguments;
- an `IssueUpdateArgs` with no field to change;
- an `IssueCommentNotificationAddArgs` with no user ids.

Exceptions raised by the API object pass through unchanged, with one
exception. `show_licence` wraps them in a `RuntimeError` with the message
"Failed to fetch space licence".

## What this package does not do

The package contains only the command handlers. It does not include:

- an HTTP client for the service;
- a command-line entry point or argument parser;
- configuration or credential storage.

You supply the API object yourself and call the handlers from your own code.