"""Domain enums."""
from .range_kind import RangeKind

__all__ = [
    'RangeKind',
]
