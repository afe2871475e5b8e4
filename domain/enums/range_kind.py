"""Range kind enumeration for resolved delete requests."""
from enum import Enum


class RangeKind(Enum):
    """How the range of a delete request was derived.

    - SINGLE: exactly one key
    - RANGE: explicit [key, range_end) from the second argument
    - PREFIX: every key beginning with key
    - FROM_KEY: every key >= key, unbounded above
    """

    SINGLE = "single"
    RANGE = "range"
    PREFIX = "prefix"
    FROM_KEY = "from-key"
