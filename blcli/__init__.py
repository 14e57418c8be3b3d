"""Command handlers for an issue-tracker client: issues, comments, notifications, projects, teams and spaces."""

__version__ = "0.5.0"