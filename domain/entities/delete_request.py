"""Resolved delete operation."""
from dataclasses import dataclass
from typing import Optional

from ..enums import RangeKind


@dataclass(frozen=True)
class DeleteRequest:
    """One concrete delete against the store.

    ``range_end`` is exclusive; ``None`` (or empty) targets ``key`` alone.
    """

    key: bytes
    range_end: Optional[bytes] = None
    include_prev_kv: bool = False
    kind: RangeKind = RangeKind.SINGLE

    @classmethod
    def exact(cls, key: bytes) -> "DeleteRequest":
        return cls(key=key)

    def describe(self) -> str:
        end = self.range_end if self.range_end else b""
        return f"kind={self.kind.value} key={self.key!r} range_end={end!r} prev_kv={self.include_prev_kv}"
