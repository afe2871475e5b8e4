from __future__ import annotations

import base64
import json
import sys
from typing import Any, Dict, TextIO

from domain.entities import DeleteResult, KeyValue


def _kv_payload(kv: KeyValue) -> Dict[str, Any]:
    return {
        "key": base64.b64encode(kv.key).decode("ascii"),
        "create_revision": kv.create_revision,
        "mod_revision": kv.mod_revision,
        "version": kv.version,
        "value": base64.b64encode(kv.value).decode("ascii"),
        "lease": kv.lease,
    }


class DeleteReporter:
    """Writes delete summaries and key-contains match lines.

    ``simple`` prints the deleted count followed by each previous key and
    value on its own line; ``json`` prints one object per response with
    base64 keys and values.
    """

    def __init__(self, write_out: str = "simple", stream: TextIO | None = None) -> None:
        self.write_out = write_out
        self.stream = stream or sys.stdout

    def _print(self, line: str) -> None:
        print(line, file=self.stream, flush=True)

    def deleted(self, result: DeleteResult) -> None:
        if self.write_out == "json":
            payload = {
                "header": {
                    "cluster_id": result.header.cluster_id,
                    "member_id": result.header.member_id,
                    "revision": result.header.revision,
                    "raft_term": result.header.raft_term,
                },
                "deleted": result.deleted,
                "prev_kvs": [_kv_payload(kv) for kv in result.prev_kvs],
            }
            self._print(json.dumps(payload, separators=(",", ":")))
            return
        self._print(str(result.deleted))
        for kv in result.prev_kvs:
            self._print(kv.readable_key)
            self._print(kv.value.decode("utf-8", errors="replace"))

    def match_found(self, kv: KeyValue) -> None:
        self._print(f"Found Key {kv.readable_key}. Binary is: {kv.hex_key}")

    def deleting(self, kv: KeyValue) -> None:
        self._print("deleting key...")
