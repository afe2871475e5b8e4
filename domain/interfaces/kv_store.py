"""Store interface used by the delete services."""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import KeyValue, DeleteRequest, DeleteResult


class IKeyValueStore(ABC):
    """Interface for a sorted key-value store."""

    @abstractmethod
    async def get(self, key: bytes, range_end: Optional[bytes] = None) -> List[KeyValue]:
        """Return the key-values in [key, range_end), or key alone if no range end."""
        pass

    @abstractmethod
    async def delete(self, request: DeleteRequest) -> DeleteResult:
        """Delete the keys described by the request."""
        pass
