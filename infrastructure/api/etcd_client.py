"""etcd v3 JSON gateway client."""
import base64
import logging
from typing import Optional, Dict, Any
import httpx

from config import settings
from domain.exceptions import StoreError

logger = logging.getLogger(__name__)


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


class EtcdGatewayClient:
    """Asynchronous client for the KV endpoints of the etcd gRPC gateway.

    Every call is a single POST; failures raise ``StoreError`` and are never
    retried here.
    """

    RANGE_PATH  = "/v3/kv/range"
    DELETE_PATH = "/v3/kv/deleterange"

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
        dial_timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = (endpoint or settings.ENDPOINT).rstrip("/")
        self.timeout = httpx.Timeout(
            timeout or settings.COMMAND_TIMEOUT,
            connect=dial_timeout or settings.DIAL_TIMEOUT,
        )
        self.session: Optional[httpx.AsyncClient] = None
        self.last_status_code: Optional[int] = None
        self._transport = transport

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            base_url=self.endpoint,
            timeout=self.timeout,
            headers={"Content-Type": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _post(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        if self.session is None:
            raise RuntimeError("EtcdGatewayClient must be used as an async context manager")

        url = f"{self.endpoint}{path}"
        logger.debug(f"POST {url} {sorted(body)}")
        try:
            response = await self.session.post(path, json=body)
        except httpx.TimeoutException as exc:
            raise StoreError(f"context deadline exceeded: {url}") from exc
        except httpx.HTTPError as exc:
            raise StoreError(f"request to {url} failed: {exc}") from exc

        self.last_status_code = response.status_code
        if response.status_code == 200:
            try:
                return response.json()
            except ValueError as exc:
                raise StoreError(f"invalid JSON from {url}", status_code=200) from exc

        detail, code = self._error_detail(response)
        logger.warning(f"HTTP {response.status_code} for {url}: {detail}")
        raise StoreError(detail, status_code=response.status_code, code=code)

    @staticmethod
    def _error_detail(response: httpx.Response) -> tuple:
        # gateway errors look like {"error": "...", "code": 3, "message": "..."}
        try:
            payload = response.json()
        except ValueError:
            return (response.text.strip() or f"HTTP {response.status_code}"), None
        if not isinstance(payload, dict):
            return f"HTTP {response.status_code}", None
        message = payload.get("message") or payload.get("error") or f"HTTP {response.status_code}"
        return message, payload.get("code")

    # ── KV API ─────────────────────────────────────────────────────────

    async def range(self, key: bytes, range_end: Optional[bytes] = None) -> Dict[str, Any]:
        body: Dict[str, Any] = {"key": b64(key)}
        if range_end:
            body["range_end"] = b64(range_end)
        return await self._post(self.RANGE_PATH, body)

    async def delete_range(
        self,
        key: bytes,
        range_end: Optional[bytes] = None,
        prev_kv: bool = False,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"key": b64(key)}
        if range_end:
            body["range_end"] = b64(range_end)
        if prev_kv:
            body["prev_kv"] = True
        return await self._post(self.DELETE_PATH, body)
