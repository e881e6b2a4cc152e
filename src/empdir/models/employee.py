"""Employee contact record — the single entity the directory stores.

Every upload format and every storage backend converts to and from this
model. Name is the identity and is compared case-insensitively.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


def name_key(name: str) -> str:
    """Case-insensitive lookup key for an employee name."""
    return name.lower()


class Employee(BaseModel):
    """Single employee contact record.

    ``None`` in a date field means "not provided or unparseable".
    """

    name: str = ""
    email: str = ""
    telephone: str = ""
    joined_date: Optional[date] = Field(default=None, alias="joinedDate")
    birth_date: Optional[date] = Field(default=None, alias="birthDate")

    model_config = {"str_strip_whitespace": True, "populate_by_name": True}

    @property
    def key(self) -> str:
        """Case-insensitive name key."""
        return name_key(self.name)

    @property
    def identity_key(self) -> str:
        """Case-insensitive name|email|telephone triple for exact-duplicate checks."""
        return f"{self.name}|{self.email}|{self.telephone}".lower()

    def renamed(self, new_name: str) -> Employee:
        """Return a copy carrying ``new_name`` and otherwise identical data."""
        return self.model_copy(update={"name": new_name})

    def to_json_dict(self) -> dict:
        """camelCase dict with ISO dates, as stored on disk and sent over HTTP."""
        return self.model_dump(mode="json", by_alias=True)
