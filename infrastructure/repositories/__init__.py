"""Infrastructure repositories."""
from .kv_repository import EtcdKeyValueStore

__all__ = [
    'EtcdKeyValueStore',
]
