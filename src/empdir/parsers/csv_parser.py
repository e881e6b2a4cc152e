"""CSV upload parser.

Expected columns: name, email, telephone, joined date and an optional birth
date. A leading header row is recognised by its first column being ``name``.
"""

from __future__ import annotations

import csv
import logging

from empdir.models.employee import Employee
from empdir.parsers.dates import CSV_DATE_FORMATS, parse_date

logger = logging.getLogger(__name__)

MIN_FIELDS = 4


def _is_header(fields: list[str]) -> bool:
    return fields[0].casefold() == "name"


def parse_csv(content: str) -> list[Employee]:
    """Parse CSV text into candidate records.

    Each line is read on its own, so an unbalanced quote only spoils its own
    row. Rows with fewer than four fields are skipped. Unparseable dates are
    left unset so the validator can report them.
    """
    employees: list[Employee] = []
    seen_first_row = False
    skipped = 0

    for line in content.splitlines():
        row = next(csv.reader([line], skipinitialspace=True), [])
        fields = [f.strip() for f in row]
        if not any(fields):
            continue

        if not seen_first_row:
            seen_first_row = True
            if _is_header(fields):
                continue

        if len(fields) < MIN_FIELDS:
            skipped += 1
            continue

        name, email, telephone, joined = fields[:4]
        birth = fields[4] if len(fields) > 4 else None
        employees.append(
            Employee(
                name=name,
                email=email,
                telephone=telephone,
                joined_date=parse_date(joined, CSV_DATE_FORMATS, iso_fallback=True),
                birth_date=parse_date(birth, CSV_DATE_FORMATS, iso_fallback=True),
            )
        )

    if skipped:
        logger.debug("Skipped %d malformed CSV row(s)", skipped)
    return employees
