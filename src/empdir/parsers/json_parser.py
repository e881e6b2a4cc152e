"""JSON upload parser.

Payload is an array of objects with optional keys ``name``, ``email``,
``tel``, ``joined`` and ``birthDate``; keys match case-insensitively.
"""

from __future__ import annotations

import json
from typing import Any

from empdir.core.exceptions import ParseError
from empdir.models.employee import Employee
from empdir.parsers.dates import JSON_DATE_FORMATS, parse_date


def _text(item: dict[str, Any], key: str, index: int) -> str:
    value = item.get(key)
    if value is None:
        return ""
    if isinstance(value, (bool, dict, list)):
        raise ParseError(f"Item {index + 1}: field '{key}' must be a string")
    return str(value)


def parse_json(content: str) -> list[Employee]:
    """Parse a JSON array into candidate records.

    Raises:
        ParseError: malformed JSON, or a top level / element of the wrong shape.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, list):
        raise ParseError("JSON payload must be an array of employee objects")

    employees: list[Employee] = []
    for index, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise ParseError(f"Item {index + 1}: expected an object")
        item = {str(k).casefold(): v for k, v in raw.items()}
        employees.append(
            Employee(
                name=_text(item, "name", index),
                email=_text(item, "email", index),
                telephone=_text(item, "tel", index),
                joined_date=parse_date(_text(item, "joined", index), JSON_DATE_FORMATS),
                birth_date=parse_date(_text(item, "birthdate", index), JSON_DATE_FORMATS),
            )
        )
    return employees
