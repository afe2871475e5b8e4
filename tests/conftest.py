"""Shared fixtures: an in-memory store and a recording reporter."""
from __future__ import annotations

import asyncio
from typing import Dict, List, Optional, Tuple

import pytest

from domain.entities import DeleteRequest, DeleteResult, KeyValue
from domain.exceptions import StoreError
from domain.interfaces import IKeyValueStore
from domain.keys import ZERO_BYTE


def _in_range(k: bytes, key: bytes, range_end: Optional[bytes]) -> bool:
    if not range_end:
        return k == key
    if range_end == ZERO_BYTE:
        return k >= key
    return key <= k < range_end


class FakeStore(IKeyValueStore):
    """Sorted in-memory store that records every call."""

    def __init__(
        self,
        data: Optional[Dict[bytes, bytes]] = None,
        *,
        fail_on_delete: Optional[int] = None,
        fail_on_get: bool = False,
        delay: float = 0.0,
    ) -> None:
        self.data: Dict[bytes, bytes] = dict(data or {})
        self.calls: List[Tuple[str, object]] = []
        self._fail_on_delete = fail_on_delete
        self._fail_on_get = fail_on_get
        self._delay = delay

    @property
    def delete_calls(self) -> List[DeleteRequest]:
        return [arg for name, arg in self.calls if name == "delete"]

    @property
    def get_calls(self) -> List[Tuple[bytes, Optional[bytes]]]:
        return [arg for name, arg in self.calls if name == "get"]

    async def get(self, key: bytes, range_end: Optional[bytes] = None) -> List[KeyValue]:
        self.calls.append(("get", (key, range_end)))
        if self._fail_on_get:
            raise StoreError("etcdserver: request timed out", status_code=503, code=14)
        return [KeyValue(k, v) for k, v in sorted(self.data.items()) if _in_range(k, key, range_end)]

    async def delete(self, request: DeleteRequest) -> DeleteResult:
        self.calls.append(("delete", request))
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._fail_on_delete is not None and len(self.delete_calls) == self._fail_on_delete:
            raise StoreError("etcdserver: permission denied", status_code=403, code=7)
        doomed = [k for k in sorted(self.data) if _in_range(k, request.key, request.range_end)]
        prev = [KeyValue(k, self.data[k]) for k in doomed] if request.include_prev_kv else []
        for k in doomed:
            del self.data[k]
        return DeleteResult(deleted=len(doomed), prev_kvs=prev)


class RecordingReporter:
    def __init__(self) -> None:
        self.events: List[Tuple[str, object]] = []

    def deleted(self, result: DeleteResult) -> None:
        self.events.append(("deleted", result))

    def match_found(self, kv: KeyValue) -> None:
        self.events.append(("match", kv.key))

    def deleting(self, kv: KeyValue) -> None:
        self.events.append(("deleting", kv.key))

    @property
    def kinds(self) -> List[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def store() -> FakeStore:
    return FakeStore(
        {
            b"abc-1": b"one",
            b"alpha": b"a",
            b"foo": b"f",
            b"foo/bar": b"fb",
            b"fop": b"x",
            b"omega": b"o",
            b"x-abc": b"two",
        }
    )


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
