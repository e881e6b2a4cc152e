"""Employee directory exception hierarchy."""

from __future__ import annotations


class EmpDirError(Exception):
    """Base exception for all employee directory errors."""


class BatchRejectedError(EmpDirError):
    """An import batch was rejected as a whole; nothing was written."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class RecordValidationError(BatchRejectedError):
    """One or more records failed field-level validation."""


class DuplicateRecordError(BatchRejectedError):
    """A record duplicates another in the batch or an existing employee."""


class ParseError(EmpDirError):
    """Upload payload could not be parsed or has an unsupported format."""


class StoreError(EmpDirError):
    """Record store I/O or connectivity failure."""


class ConfigurationError(EmpDirError):
    """Invalid application configuration."""
