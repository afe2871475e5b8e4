"""Match produced by a key-contains scan."""
from dataclasses import dataclass
from typing import Optional

from .key_value import KeyValue
from .delete_result import DeleteResult


@dataclass
class ContainsMatch:
    """A scanned key containing the requested substring.

    ``result`` is None when the match was only reported (dry run).
    """

    kv: KeyValue
    result: Optional[DeleteResult] = None

    @property
    def skipped(self) -> bool:
        return self.result is None
