"""Domain interfaces."""
from .kv_store import IKeyValueStore

__all__ = [
    'IKeyValueStore',
]
