"""Key-value repository implementation."""
import base64
import logging
from typing import Any, Dict, List, Optional

from domain.entities import KeyValue, DeleteRequest, DeleteResult, ResponseHeader
from domain.exceptions import StoreError
from domain.interfaces import IKeyValueStore
from infrastructure.api import EtcdGatewayClient

logger = logging.getLogger(__name__)


def _bytes(data: Dict[str, Any], field: str) -> bytes:
    raw = data.get(field)
    if not raw:
        return b""
    try:
        return base64.b64decode(raw)
    except (ValueError, TypeError) as exc:
        raise StoreError(f"malformed base64 in '{field}'") from exc


def _int(data: Dict[str, Any], field: str) -> int:
    # int64 fields arrive as JSON strings and are omitted when zero
    try:
        return int(data.get(field) or 0)
    except (ValueError, TypeError) as exc:
        raise StoreError(f"malformed integer in '{field}'") from exc


class EtcdKeyValueStore(IKeyValueStore):
    """Repository for keys stored in etcd, via the JSON gateway."""

    def __init__(self, api_client: EtcdGatewayClient):
        """
        Initialize the repository.

        Args:
            api_client: Open gateway client
        """
        self.api_client = api_client

    async def get(self, key: bytes, range_end: Optional[bytes] = None) -> List[KeyValue]:
        """
        Fetch key-values in [key, range_end).

        Args:
            key: First key (inclusive)
            range_end: Exclusive end; None for key alone, b"\\x00" for unbounded

        Returns:
            Key-values in key order
        """
        payload = await self.api_client.range(key, range_end)
        kvs = [self._to_key_value(kv) for kv in payload.get("kvs") or []]
        logger.debug(f"range returned {len(kvs)} keys")
        return kvs

    async def delete(self, request: DeleteRequest) -> DeleteResult:
        """
        Delete the keys described by a resolved request.

        Args:
            request: Resolved delete request

        Returns:
            Deleted count, previous key-values if requested, response header
        """
        payload = await self.api_client.delete_range(
            request.key,
            request.range_end,
            prev_kv=request.include_prev_kv,
        )
        return DeleteResult(
            deleted=_int(payload, "deleted"),
            prev_kvs=[self._to_key_value(kv) for kv in payload.get("prev_kvs") or []],
            header=self._to_header(payload.get("header") or {}),
        )

    @staticmethod
    def _to_key_value(data: Dict[str, Any]) -> KeyValue:
        return KeyValue(
            key=_bytes(data, "key"),
            value=_bytes(data, "value"),
            create_revision=_int(data, "create_revision"),
            mod_revision=_int(data, "mod_revision"),
            version=_int(data, "version"),
            lease=_int(data, "lease"),
        )

    @staticmethod
    def _to_header(data: Dict[str, Any]) -> ResponseHeader:
        return ResponseHeader(
            cluster_id=_int(data, "cluster_id"),
            member_id=_int(data, "member_id"),
            revision=_int(data, "revision"),
            raft_term=_int(data, "raft_term"),
        )
