"""Key-value entity returned by store scans."""
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyValue:
    """A single key-value pair as held by the store."""

    key: bytes
    value: bytes = b""

    # Store metadata
    create_revision: int = 0
    mod_revision: int = 0
    version: int = 0
    lease: int = 0

    @property
    def readable_key(self) -> str:
        """Key decoded for display; undecodable bytes are replaced."""
        return self.key.decode("utf-8", errors="replace")

    @property
    def hex_key(self) -> str:
        """Key bytes as space-separated lowercase hex pairs."""
        return " ".join(f"{b:02x}" for b in self.key)
