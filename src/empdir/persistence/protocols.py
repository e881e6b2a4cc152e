"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from empdir.core.protocols import IEmployeeStore

__all__ = ["IEmployeeStore"]
