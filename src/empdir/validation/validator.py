"""Field-level validation of candidate employee records."""

from __future__ import annotations

import re
from typing import Sequence

from empdir.core.types import RowIndex
from empdir.models.employee import Employee
from empdir.models.results import FieldError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", re.IGNORECASE)

JOINED_DATE_REQUIRED = (
    "Joined date is required and must be a valid date (yyyy.MM.dd or yyyy-MM-dd)."
)


def validate(employee: Employee) -> list[FieldError]:
    """Return every rule the record breaks; empty means valid.

    Rules are independent, so a record can fail several at once.
    """
    errors: list[FieldError] = []

    if not employee.name.strip():
        errors.append(FieldError(field="name", message="Name is required."))

    if not employee.email.strip():
        errors.append(FieldError(field="email", message="Email is required."))
    elif not EMAIL_PATTERN.match(employee.email):
        errors.append(
            FieldError(field="email", message=f"Invalid email format: '{employee.email}'.")
        )

    if employee.joined_date is None:
        errors.append(FieldError(field="joinedDate", message=JOINED_DATE_REQUIRED))

    return errors


def validate_batch(employees: Sequence[Employee]) -> dict[RowIndex, list[FieldError]]:
    """Validate a batch; only indices with at least one error are present."""
    failures: dict[RowIndex, list[FieldError]] = {}
    for index, employee in enumerate(employees):
        errors = validate(employee)
        if errors:
            failures[index] = errors
    return failures
