"""Tests for format selection in empdir.parsers."""

from __future__ import annotations

import pytest

from empdir.core.exceptions import ParseError
from empdir.core.protocols import IRecordParser
from empdir.parsers import PARSERS, format_from_filename, parse_payload


@pytest.mark.parametrize("filename,expected", [
    ("staff.csv", "csv"),
    ("STAFF.CSV", "csv"),
    ("export.2024.json", "json"),
])
def test_format_from_filename(filename, expected):
    assert format_from_filename(filename) == expected


@pytest.mark.parametrize("filename", ["staff.xlsx", "staff", "staff.csv.bak"])
def test_unsupported_extension(filename):
    with pytest.raises(ParseError, match="Unsupported file format"):
        format_from_filename(filename)


def test_parse_payload_dispatches_by_format():
    assert parse_payload("A, a@x.com, 1, 2022-01-01", "csv")[0].name == "A"
    assert parse_payload('[{"name": "B"}]', " JSON ")[0].name == "B"


def test_parse_payload_rejects_unknown_format():
    with pytest.raises(ParseError, match="Unsupported format: xml"):
        parse_payload("<a/>", "xml")


def test_registered_parsers_satisfy_protocol():
    assert all(isinstance(p, IRecordParser) for p in PARSERS.values())
