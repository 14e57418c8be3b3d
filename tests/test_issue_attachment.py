import json

import pytest

from blcli.issue_attachment import (
    IssueAttachmentListArgs,
    format_attachment_row,
    list_attachments,
)


def sample_attachment():
    return {
        "id": 1,
        "name": "file.txt",
        "size": 1024,
        "createdUser": {
            "id": 1,
            "userId": "john",
            "name": "John Doe",
            "roleType": 1,
            "lang": None,
            "mailAddress": None,
        },
        "created": "2024-01-01T00:00:00Z",
    }


class MockApi:
    def __init__(self, attachments=None):
        self.attachments = attachments
        self.key = None

    def get_issue_attachments(self, key):
        self.key = key
        if self.attachments is None:
            raise RuntimeError("no attachments")
        return self.attachments


def test_list_with_text_output(capsys):
    api = MockApi([sample_attachment()])
    list_attachments(IssueAttachmentListArgs("TEST-1"), api)
    assert api.key == "TEST-1"
    assert capsys.readouterr().out == "[1] file.txt (1024 bytes)\n"


def test_list_with_json_output(capsys):
    list_attachments(IssueAttachmentListArgs("TEST-1", json=True), MockApi([sample_attachment()]))
    assert json.loads(capsys.readouterr().out) == [sample_attachment()]


def test_list_propagates_api_error():
    with pytest.raises(RuntimeError, match="no attachments"):
        list_attachments(IssueAttachmentListArgs("TEST-1"), MockApi())


def test_format_attachment_row():
    assert format_attachment_row(sample_attachment()) == "[1] file.txt (1024 bytes)"


def test_list_empty_prints_nothing(capsys):
    list_attachments(IssueAttachmentListArgs("TEST-1"), MockApi([]))
    assert capsys.readouterr().out == ""