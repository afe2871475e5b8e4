"""Domain layer - Entities, enums, errors and interfaces."""
from .entities import KeyValue, DeleteFlags, DeleteRequest, DeleteResult, ResponseHeader, ContainsMatch
from .enums import RangeKind
from .exceptions import KvDelError, BadArgumentError, StoreError
from .interfaces import IKeyValueStore
from .keys import ZERO_BYTE, prefix_range_end

__all__ = [
    # Entities
    'KeyValue',
    'DeleteFlags',
    'DeleteRequest',
    'DeleteResult',
    'ResponseHeader',
    'ContainsMatch',
    # Enums
    'RangeKind',
    # Errors
    'KvDelError',
    'BadArgumentError',
    'StoreError',
    # Interfaces
    'IKeyValueStore',
    # Keys
    'ZERO_BYTE',
    'prefix_range_end',
]
