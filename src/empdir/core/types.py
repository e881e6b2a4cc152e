"""Type aliases used across the employee directory."""

from __future__ import annotations

EmployeeName = str
IdentityKey = str
RowIndex = int  # 0-based position within a batch
RowNumber = int  # 1-based, as shown to users
PayloadFormat = str  # "csv" or "json"
