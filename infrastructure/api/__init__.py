"""Infrastructure API module."""
from .etcd_client import EtcdGatewayClient

__all__ = [
    'EtcdGatewayClient',
]
