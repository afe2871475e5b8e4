"""Domain entities."""
from .key_value import KeyValue
from .delete_flags import DeleteFlags
from .delete_request import DeleteRequest
from .delete_result import DeleteResult, ResponseHeader
from .contains_match import ContainsMatch

__all__ = [
    'KeyValue',
    'DeleteFlags',
    'DeleteRequest',
    'DeleteResult',
    'ResponseHeader',
    'ContainsMatch',
]
