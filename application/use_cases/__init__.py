"""Application use cases."""
from .delete_keys import DeleteKeysUseCase

__all__ = [
    'DeleteKeysUseCase',
]
