import json

import pytest

from blcli.issue_query import (
    IssueCountArgs,
    IssueListArgs,
    IssueShowArgs,
    ParentChild,
    build_count_params,
    build_list_params,
    count_issues,
    format_issue_row,
    list_issues,
    print_issue,
    show_issue,
)


def sample_user(name="John Doe", user_id="john", ident=1):
    return {
        "id": ident,
        "userId": user_id,
        "name": name,
        "roleType": 1,
        "lang": None,
        "mailAddress": None,
    }


def sample_issue():
    return {
        "id": 1,
        "projectId": 1,
        "issueKey": "TEST-1",
        "keyId": 1,
        "issueType": {
            "id": 1,
            "projectId": 1,
            "name": "Bug",
            "color": "#e30000",
            "displayOrder": 0,
        },
        "summary": "Fix login",
        "description": None,
        "resolution": None,
        "priority": {"id": 2, "name": "Normal"},
        "status": {
            "id": 1,
            "projectId": 1,
            "name": "Open",
            "color": "#ed8077",
            "displayOrder": 1000,
        },
        "assignee": None,
        "startDate": None,
        "dueDate": None,
        "estimatedHours": None,
        "actualHours": None,
        "parentIssueId": None,
        "createdUser": sample_user(),
        "created": "2024-01-01T00:00:00Z",
        "updatedUser": sample_user(),
        "updated": "2024-01-01T00:00:00Z",
    }


class MockApi:
    def __init__(self, count=None, issues=None, issue=None):
        self.count = count
        self.issues = issues
        self.issue = issue
        self.params = None
        self.key = None

    def count_issues(self, params):
        self.params = params
        if self.count is None:
            raise RuntimeError("no count")
        return {"count": self.count}

    def get_issues(self, params):
        self.params = params
        if self.issues is None:
            raise RuntimeError("no issues")
        return self.issues

    def get_issue(self, key):
        self.key = key
        if self.issue is None:
            raise RuntimeError("no issue")
        return self.issue


# count


def test_count_with_text_output(capsys):
    count_issues(IssueCountArgs(), MockApi(count=42))
    assert capsys.readouterr().out == "42\n"


def test_count_with_json_output(capsys):
    count_issues(IssueCountArgs(json=True), MockApi(count=0))
    assert json.loads(capsys.readouterr().out) == {"count": 0}


def test_count_propagates_api_error():
    with pytest.raises(RuntimeError, match="no count"):
        count_issues(IssueCountArgs(), MockApi())


def test_count_params_have_no_paging():
    args = IssueCountArgs(project_ids=(1,), keyword="bug", parent_child=ParentChild.CHILD)
    assert build_count_params(args) == [
        ("projectId[]", "1"),
        ("parentChild", "2"),
        ("keyword", "bug"),
    ]


def test_count_passes_params_to_api():
    api = MockApi(count=3)
    count_issues(IssueCountArgs(status_ids=(4, 5)), api)
    assert api.params == [("statusId[]", "4"), ("statusId[]", "5")]


# parent child


@pytest.mark.parametrize(
    "value, expected",
    [
        (ParentChild.ALL, "0"),
        (ParentChild.NOT_CHILD, "1"),
        (ParentChild.CHILD, "2"),
        (ParentChild.STANDALONE, "3"),
        (ParentChild.PARENT, "4"),
    ],
)
def test_parent_child_api_value(value, expected):
    assert value.api_value == expected


# list


def test_list_with_text_output(capsys):
    list_issues(IssueListArgs(), MockApi(issues=[sample_issue()]))
    assert capsys.readouterr().out == "[TEST-1] Fix login (Open, Normal, -)\n"


def test_list_with_json_output(capsys):
    list_issues(IssueListArgs(json=True), MockApi(issues=[sample_issue()]))
    assert json.loads(capsys.readouterr().out) == [sample_issue()]


def test_list_propagates_api_error():
    with pytest.raises(RuntimeError, match="no issues"):
        list_issues(IssueListArgs(), MockApi())


def test_list_rejects_count_zero():
    with pytest.raises(ValueError, match="--count must be between 1 and 100"):
        IssueListArgs(count=0)


def test_list_rejects_count_over_100():
    with pytest.raises(ValueError, match="--count must be between 1 and 100"):
        IssueListArgs(count=101)


def test_format_issue_row_no_assignee():
    row = format_issue_row(sample_issue())
    assert "TEST-1" in row
    assert "Fix login" in row
    assert "Open" in row
    assert "Normal" in row
    assert row.endswith("-)")


def test_format_issue_row_with_assignee():
    issue = sample_issue()
    issue["assignee"] = sample_user(name="Jane Smith", user_id="jane", ident=2)
    row = format_issue_row(issue)
    assert "Jane Smith" in row
    assert row.endswith("Jane Smith)")


def test_build_params_includes_all_fields():
    args = IssueListArgs(
        project_ids=(1, 2),
        status_ids=(3,),
        assignee_ids=(4,),
        issue_type_ids=(5,),
        category_ids=(6,),
        milestone_ids=(7,),
        parent_child=ParentChild.NOT_CHILD,
        keyword="login",
        count=50,
        offset=10,
    )
    assert build_list_params(args) == [
        ("projectId[]", "1"),
        ("projectId[]", "2"),
        ("statusId[]", "3"),
        ("assigneeId[]", "4"),
        ("issueTypeId[]", "5"),
        ("categoryId[]", "6"),
        ("milestoneId[]", "7"),
        ("parentChild", "1"),
        ("keyword", "login"),
        ("count", "50"),
        ("offset", "10"),
    ]


def test_build_params_defaults():
    assert build_list_params(IssueListArgs()) == [("count", "20"), ("offset", "0")]


# show


def test_show_with_text_output(capsys):
    api = MockApi(issue=sample_issue())
    show_issue(IssueShowArgs("TEST-1"), api)
    assert api.key == "TEST-1"
    assert capsys.readouterr().out.startswith("TEST-1 Fix login\n")


def test_show_with_json_output(capsys):
    show_issue(IssueShowArgs("TEST-1", json=True), MockApi(issue=sample_issue()))
    assert json.loads(capsys.readouterr().out)["issueKey"] == "TEST-1"


def test_show_propagates_api_error():
    with pytest.raises(RuntimeError, match="no issue"):
        show_issue(IssueShowArgs("TEST-999"), MockApi())


def test_print_issue_minimal(capsys):
    print_issue(sample_issue())
    assert capsys.readouterr().out == (
        "TEST-1 Fix login\n"
        "  Status:     Open\n"
        "  Priority:   Normal\n"
        "  Type:       Bug\n"
        "  Assignee:   -\n"
        "  Created:    2024-01-01T00:00:00Z\n"
        "  Updated:    2024-01-01T00:00:00Z\n"
    )


def test_print_issue_with_due_and_description(capsys):
    issue = sample_issue()
    issue["dueDate"] = "2024-02-01T00:00:00Z"
    issue["description"] = "Steps to reproduce"
    print_issue(issue)
    out = capsys.readouterr().out
    assert "  Due:        2024-02-01T00:00:00Z\n" in out
    assert "  Description:\nSteps to reproduce\n" in out


def test_print_issue_skips_empty_description(capsys):
    issue = sample_issue()
    issue["description"] = ""
    print_issue(issue)
    assert "Description" not in capsys.readouterr().out