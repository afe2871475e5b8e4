"""Application layer - Services and use cases."""
from .services import ContainsScanner, DeleteExecutor, resolve_delete_op
from .use_cases import DeleteKeysUseCase

__all__ = [
    'ContainsScanner',
    'DeleteExecutor',
    'resolve_delete_op',
    'DeleteKeysUseCase',
]
