"""Delete response entities."""
from dataclasses import dataclass, field
from typing import List

from .key_value import KeyValue


@dataclass(frozen=True)
class ResponseHeader:
    """Cluster metadata echoed by the store on every response."""

    cluster_id: int = 0
    member_id: int = 0
    revision: int = 0
    raft_term: int = 0


@dataclass
class DeleteResult:
    """Outcome of a single delete call."""

    deleted: int
    prev_kvs: List[KeyValue] = field(default_factory=list)
    header: ResponseHeader = field(default_factory=ResponseHeader)
