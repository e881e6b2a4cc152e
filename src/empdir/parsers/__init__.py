"""Upload payload parsers, selected by format name or file extension."""

from __future__ import annotations

from pathlib import PurePath

from empdir.core.exceptions import ParseError
from empdir.core.protocols import IRecordParser
from empdir.models.employee import Employee
from empdir.parsers.csv_parser import parse_csv
from empdir.parsers.json_parser import parse_json

PARSERS: dict[str, IRecordParser] = {
    "csv": parse_csv,
    "json": parse_json,
}


def format_from_filename(filename: str) -> str:
    """Map a ``.csv`` / ``.json`` file name to its payload format."""
    extension = PurePath(filename).suffix.lower()
    fmt = extension.lstrip(".")
    if fmt not in PARSERS:
        raise ParseError(f"Unsupported file format: {extension or '(none)'}. Use .csv or .json")
    return fmt


def parse_payload(content: str, fmt: str = "csv") -> list[Employee]:
    """Parse ``content`` with the parser registered for ``fmt``."""
    parser = PARSERS.get(fmt.strip().lower())
    if parser is None:
        raise ParseError(f"Unsupported format: {fmt}. Use 'csv' or 'json'")
    return parser(content)


__all__ = ["PARSERS", "format_from_filename", "parse_csv", "parse_json", "parse_payload"]
