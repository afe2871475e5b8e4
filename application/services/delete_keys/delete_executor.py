from __future__ import annotations

from core.logging.logger import get_logger, traceable
from domain.entities import DeleteRequest, DeleteResult
from domain.interfaces import IKeyValueStore


class DeleteExecutor:
    """Issues a single delete call; store errors propagate unchanged."""

    def __init__(self, store: IKeyValueStore) -> None:
        self._store = store
        self._log = get_logger(__name__, service="executor")

    @traceable
    async def execute(self, request: DeleteRequest) -> DeleteResult:
        result = await self._store.delete(request)
        self._log.success(lambda: f"deleted count={result.deleted} {request.describe()}")
        return result
