"""Infrastructure layer - Store client and repositories."""
from .api import EtcdGatewayClient
from .repositories import EtcdKeyValueStore

__all__ = [
    'EtcdGatewayClient',
    'EtcdKeyValueStore',
]
