import json

import pytest

from blcli.space_info import (
    SpaceLicenceArgs,
    SpaceShowArgs,
    format_licence_text,
    format_space_text,
    show_licence,
    show_space,
)


def sample_licence():
    return {
        "startDate": "2020-01-01",
        "contractType": "premium",
        "storageLimit": 1073741824,
        "storageUsage": 5242880,
    }


def sample_space():
    return {
        "spaceKey": "mycompany",
        "name": "My Company",
        "ownerId": 1,
        "lang": "ja",
        "timezone": "Asia/Tokyo",
        "textFormattingRule": "markdown",
        "created": "2020-01-01T00:00:00Z",
        "updated": "2024-06-01T00:00:00Z",
    }


class MockApi:
    def __init__(self, licence=None, space=None):
        self.licence = licence
        self.space = space

    def get_space_licence(self):
        if self.licence is None:
            raise RuntimeError("no licence")
        return self.licence

    def get_space(self):
        if self.space is None:
            raise RuntimeError("no space")
        return self.space


def test_licence_text_output(capsys):
    show_licence(SpaceLicenceArgs(), MockApi(licence=sample_licence()))
    out = capsys.readouterr().out
    assert "Contract:  premium" in out
    assert "Storage:   5242880 / 1073741824 bytes" in out


def test_licence_json_output(capsys):
    show_licence(SpaceLicenceArgs(json=True), MockApi(licence=sample_licence()))
    assert json.loads(capsys.readouterr().out) == sample_licence()


def test_licence_propagates_api_error():
    with pytest.raises(RuntimeError, match="Failed to fetch space licence") as info:
        show_licence(SpaceLicenceArgs(), MockApi())
    assert str(info.value.__cause__) == "no licence"


def test_format_licence_text_contains_fields():
    text = format_licence_text(sample_licence())
    assert "premium" in text
    assert "5242880" in text
    assert "1073741824" in text
    assert "2020-01-01" in text


def test_format_licence_text_with_null_contract_type():
    licence = sample_licence()
    licence["contractType"] = None
    licence["storageUsage"] = 0
    assert "(not set)" in format_licence_text(licence)


def test_show_text_output(capsys):
    show_space(SpaceShowArgs(), MockApi(space=sample_space()))
    assert "Space key:  mycompany" in capsys.readouterr().out


def test_show_json_output(capsys):
    show_space(SpaceShowArgs(json=True), MockApi(space=sample_space()))
    assert json.loads(capsys.readouterr().out) == sample_space()


def test_show_propagates_api_error():
    with pytest.raises(RuntimeError, match="no space"):
        show_space(SpaceShowArgs(), MockApi())


def test_format_space_text_contains_all_fields():
    text = format_space_text(sample_space())
    for expected in (
        "mycompany",
        "My Company",
        "ja",
        "Asia/Tokyo",
        "markdown",
        "2020-01-01T00:00:00Z",
        "2024-06-01T00:00:00Z",
    ):
        assert expected in text


def test_format_space_text_label_alignment():
    text = format_space_text(sample_space())
    assert "Space key:  mycompany" in text
    assert "Name:       My Company" in text