from __future__ import annotations

from typing import AsyncIterator, Callable, Optional

from core.logging.logger import get_logger
from domain.entities import ContainsMatch, DeleteRequest, KeyValue
from domain.interfaces import IKeyValueStore
from domain.keys import ZERO_BYTE
from .delete_executor import DeleteExecutor

MatchCallback = Callable[[KeyValue], None]


class ContainsScanner:
    """Delete keys containing a substring, filtered on the client side.

    The store is scanned once from the smallest key without an upper bound,
    so the cost grows with the size of the keyspace rather than the number
    of matches. ``match_callback`` fires for every match and
    ``delete_callback`` right before each delete.
    """

    def __init__(
        self,
        store: IKeyValueStore,
        executor: Optional[DeleteExecutor] = None,
        *,
        match_callback: Optional[MatchCallback] = None,
        delete_callback: Optional[MatchCallback] = None,
    ) -> None:
        self._store = store
        self._executor = executor or DeleteExecutor(store)
        self._match_cb = match_callback
        self._delete_cb = delete_callback
        self._log = get_logger(__name__, service="contains-scan")

    async def scan(self, substring: str, execute: bool = False) -> AsyncIterator[ContainsMatch]:
        """Yield one ContainsMatch per matching key, in scan order.

        With ``execute`` each match is deleted by exact key before it is
        yielded. A failed delete raises and ends the iteration. Each call
        starts a fresh scan.
        """
        needle = substring.encode("utf-8")
        kvs = await self._store.get(ZERO_BYTE, ZERO_BYTE)
        self._log.info(lambda: f"scanned keys={len(kvs)} contains={substring!r} execute={execute}")

        matched = 0
        for kv in kvs:
            if needle not in kv.key:
                continue
            matched += 1
            if self._match_cb:
                self._match_cb(kv)
            if not execute:
                yield ContainsMatch(kv=kv)
                continue
            if self._delete_cb:
                self._delete_cb(kv)
            result = await self._executor.execute(DeleteRequest.exact(kv.key))
            yield ContainsMatch(kv=kv, result=result)

        self._log.info(lambda: f"scan-complete matched={matched}")
