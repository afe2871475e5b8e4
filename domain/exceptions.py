"""Exception hierarchy for key deletion."""
from __future__ import annotations

from typing import Optional


class KvDelError(Exception):
    pass


class BadArgumentError(KvDelError):
    """Invalid positional arguments or conflicting flags; raised before any I/O."""


class StoreError(KvDelError):
    """A range or delete call against the store failed."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
